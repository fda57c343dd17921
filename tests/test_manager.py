import pytest

from sortvis.algorithm import NumberStore
from sortvis.manager import (
    ALGORITHM_NAMES,
    ALGORITHMS,
    Manager,
    create_algorithm,
)
from sortvis.settings import Settings
from sortvis.sorts_divide import QuickSort
from sortvis.sorts_exchange import CocktailSort


def _settings(**overrides):
    options = dict(
        plot_shuffle_animated=False,
        plot_do_aftercheck=False,
        shuffle_current_count=Settings.SHUFFLE_MIN_COUNT,
    )
    options.update(overrides)
    return Settings(**options)


def _run(index, values):
    store = NumberStore(list(values))
    algorithm = create_algorithm(index, _settings(), store)
    algorithm.delay_ms = 0
    try:
        algorithm.start()
        assert algorithm.wait(10)
    finally:
        algorithm.stop()
    return store.values


@pytest.fixture
def manager():
    m = Manager(_settings())
    yield m
    m.stop()
    m.stop_shuffling()


def test_algorithm_table_order():
    assert ALGORITHM_NAMES[0] == "BitonicSort"
    assert ALGORITHM_NAMES[-1] == "StalinSort"
    assert [name for name, _ in ALGORITHMS] == list(ALGORITHM_NAMES)
    assert _run(0, [5, 3, 9, 1, 7, 2, 8, 0]) == [0, 1, 2, 3, 5, 7, 8, 9]
    assert _run(15, [3, 1, 4, 1, 5, 9, 2, 6]) == [3, 4, 5, 9]


def test_create_algorithm_by_index():
    values = [5, 3, 9, 1, 7, 2, 8, 0]
    store = NumberStore(list(values))
    algorithm = create_algorithm(10, _settings(), store)
    assert isinstance(algorithm, QuickSort)
    assert algorithm.store is store
    algorithm.delay_ms = 0
    try:
        algorithm.start()
        assert algorithm.wait(10)
    finally:
        algorithm.stop()
    assert store.values == sorted(values)


@pytest.mark.parametrize("index", [-1, len(ALGORITHMS)])
def test_create_algorithm_rejects_bad_index(index):
    with pytest.raises(IndexError):
        create_algorithm(index, _settings())


def test_initial_state(manager):
    assert isinstance(manager.sorter, CocktailSort)
    assert manager.algorithm_name == "CocktailSort"
    assert len(manager.store) == manager.settings.shuffle_current_count
    assert all(0 <= v <= Settings.SHUFFLE_MAX_VALUE for v in manager.store.values)
    assert not manager.is_running()
    assert not manager.is_shuffling()


def test_run_to_completion(manager):
    manager.delay_ms = 0
    original = list(manager.store.values)
    manager.start()
    assert manager.is_running()
    assert manager.sorter.wait(10)
    manager.update()
    assert not manager.is_running()
    assert manager.store.values == sorted(original)
    assert manager.visual_time >= 0


def test_pause_and_stop(manager):
    manager.delay_ms = 200
    manager.start()
    manager.pause()
    assert manager.is_paused()
    assert manager.is_running()
    assert manager.step() is False
    manager.stop()
    assert not manager.is_running()
    assert not manager.is_paused()
    assert not manager.sorter.finished


def test_select_same_algorithm_keeps_sorter(manager):
    sorter = manager.sorter
    manager.select_algorithm(manager.selected)
    assert manager.sorter is sorter


def test_select_algorithm_switches_and_reshuffles(manager):
    manager.delay_ms = 0
    manager.select_algorithm(10)
    assert isinstance(manager.sorter, QuickSort)
    assert manager.selected == 10
    assert manager.sorter.delay_ms == 0
    assert manager.sorter.store is manager.store
    assert len(manager.store) == manager.settings.shuffle_current_count


def test_select_algorithm_rejects_bad_index(manager):
    with pytest.raises(IndexError):
        manager.select_algorithm(len(ALGORITHMS))
    assert isinstance(manager.sorter, CocktailSort)


def test_new_sorter_runs_after_switch(manager):
    manager.delay_ms = 0
    manager.select_algorithm(8)
    original = list(manager.store.values)
    manager.start()
    assert manager.sorter.wait(10)
    assert manager.store.values == sorted(original)


def test_animated_shuffle_can_be_stopped():
    m = Manager(_settings(plot_shuffle_animated=True))
    try:
        assert m.is_shuffling()
        m.stop_shuffling()
        assert not m.is_shuffling()
        assert not m.sorter.shuffling
    finally:
        m.stop_shuffling()