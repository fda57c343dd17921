import random

import pytest

from sortvis.algorithm import NumberStore
from sortvis.settings import Settings
from sortvis.sorts_exchange import (
    BitonicSort,
    BogoSort,
    BubbleSort,
    CocktailSort,
    CombSort,
    GnomeSort,
    PancakeSort,
    StalinSort,
)

GENERAL = [BubbleSort, CocktailSort, CombSort, GnomeSort, PancakeSort]


def _run(cls, values):
    settings = Settings(plot_do_aftercheck=False)
    algorithm = cls(settings, NumberStore(values))
    algorithm.delay_ms = 0
    algorithm.run()
    return algorithm


def _random_values(seed, count):
    rng = random.Random(seed)
    return [rng.randint(0, Settings.SHUFFLE_MAX_VALUE) for _ in range(count)]


@pytest.mark.parametrize("cls", GENERAL)
@pytest.mark.parametrize("seed", [1, 2, 3])
def test_sorts_random_input(cls, seed):
    values = _random_values(seed, 60)
    algorithm = _run(cls, list(values))
    assert algorithm.store.values == sorted(values)
    assert algorithm.finished


@pytest.mark.parametrize("cls", GENERAL + [BitonicSort, BogoSort, StalinSort])
@pytest.mark.parametrize("values", [[], [7]])
def test_trivial_inputs(cls, values):
    algorithm = _run(cls, list(values))
    assert algorithm.store.values == values
    assert algorithm.finished


@pytest.mark.parametrize("cls", GENERAL)
def test_duplicates_and_reversed(cls):
    values = [5, 5, 1, 9, 1, 3, 3, 0] + list(range(20, 0, -1))
    algorithm = _run(cls, list(values))
    assert algorithm.store.values == sorted(values)


@pytest.mark.parametrize("size", [2, 16, 64])
def test_bitonic_power_of_two(size):
    values = _random_values(size, size)
    algorithm = _run(BitonicSort, list(values))
    assert algorithm.store.values == sorted(values)


def test_bogo_sorts_small_list():
    values = [4, 1, 3, 2, 2]
    algorithm = _run(BogoSort, list(values))
    assert algorithm.store.values == sorted(values)
    assert algorithm.stats.writes % 3 == 0


@pytest.mark.parametrize("cls", [BubbleSort, CocktailSort, CombSort, GnomeSort, BitonicSort])
def test_swap_based_read_invariant(cls):
    values = _random_values(11, 32)
    stats = _run(cls, values).stats
    assert stats.reads == 2 * stats.comparisons + stats.writes


def test_bubble_comparison_count_on_sorted_input():
    n = 25
    stats = _run(BubbleSort, list(range(n))).stats
    assert stats.comparisons == n * (n - 1) // 2


def test_stalin_drops_out_of_order_elements():
    algorithm = _run(StalinSort, [1, 3, 2, 4, 4, 5])
    assert algorithm.store.values == [1, 3, 4, 5]


def test_stalin_result_is_increasing_subsequence():
    values = _random_values(5, 80)
    result = _run(StalinSort, list(values)).store.values
    assert result[0] == values[0]
    assert all(a < b for a, b in zip(result, result[1:]))
    remaining = iter(values)
    assert all(any(v == w for w in remaining) for v in result)


def test_stalin_updates_cursor_width():
    settings = Settings(plot_do_aftercheck=False, cursor_line_width=99.0)
    algorithm = StalinSort(settings, NumberStore([3, 2, 1]))
    algorithm.delay_ms = 0
    algorithm.run()
    assert algorithm.store.values == [3]
    assert settings.cursor_line_width < 1.0


def test_pancake_counts_flips_as_assignments():
    stats = _run(PancakeSort, [2, 1]).stats
    assert stats.comparisons == 2
    assert stats.writes == 3 * 1 + 1 * 0 + 3 * 1 - 3


def test_threaded_bubble_sort():
    values = _random_values(9, 40)
    algorithm = BubbleSort(Settings(plot_do_aftercheck=False), NumberStore(list(values)))
    algorithm.delay_ms = 0
    algorithm.start()
    assert algorithm.wait(10)
    assert algorithm.finished
    assert algorithm.store.values == sorted(values)