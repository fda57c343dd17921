"""Selection and control of the active sorting algorithm."""

from __future__ import annotations

import time

from .algorithm import NumberStore, SortingAlgorithm
from .settings import Settings
from .sorts_divide import (
    HeapSort,
    InsertionSort,
    MergeSort,
    QuickSort,
    RadixSortLSD,
    RadixSortMSD,
    SelectionSort,
    ShellSort,
)
from .sorts_exchange import (
    BitonicSort,
    BogoSort,
    BubbleSort,
    CocktailSort,
    CombSort,
    GnomeSort,
    PancakeSort,
    StalinSort,
)

ALGORITHMS: tuple[tuple[str, type[SortingAlgorithm]], ...] = (
    ("BitonicSort", BitonicSort),
    ("BogoSort", BogoSort),
    ("BubbleSort", BubbleSort),
    ("CocktailSort", CocktailSort),
    ("CombSort", CombSort),
    ("GnomeSort", GnomeSort),
    ("HeapSort", HeapSort),
    ("InsertionSort", InsertionSort),
    ("MergeSort", MergeSort),
    ("PancakeSort", PancakeSort),
    ("QuickSort", QuickSort),
    ("RadixSort (LSD)", RadixSortLSD),
    ("RadixSort (MSD)", RadixSortMSD),
    ("SelectionSort", SelectionSort),
    ("ShellSort", ShellSort),
    ("StalinSort", StalinSort),
)

ALGORITHM_NAMES: tuple[str, ...] = tuple(name for name, _ in ALGORITHMS)

DEFAULT_ALGORITHM = 3


def create_algorithm(
    index: int, settings: Settings, store: NumberStore | None = None
) -> SortingAlgorithm:
    """Build the algorithm at position ``index`` of :data:`ALGORITHMS`."""
    if not 0 <= index < len(ALGORITHMS):
        raise IndexError(f"no algorithm at index {index}")
    return ALGORITHMS[index][1](settings, store)


class Manager:
    """Owns the current algorithm and the run, pause and shuffle state."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self.store = NumberStore()
        self.selected = DEFAULT_ALGORITHM
        self.sorter = create_algorithm(self.selected, settings, self.store)
        self._delay_ms = self.sorter.delay_ms

        self._running = False
        self._paused = False
        self._shuffling = False

        self.visual_time = 0.0
        self._clock = time.perf_counter()

        self.shuffle()

    @property
    def delay_ms(self) -> float:
        return self._delay_ms

    @delay_ms.setter
    def delay_ms(self, value: float) -> None:
        self._delay_ms = value
        self.sorter.delay_ms = value

    @property
    def algorithm_name(self) -> str:
        return ALGORITHM_NAMES[self.selected]

    def _restart_clock(self) -> float:
        now = time.perf_counter()
        elapsed = now - self._clock
        self._clock = now
        return elapsed

    def update(self) -> None:
        """Refresh the run state and advance the visual clock."""
        if self.sorter.finished:
            self._running = self._paused = False
        if self._running and not self._paused:
            self.visual_time += self._restart_clock()
        self._restart_clock()

    def is_running(self) -> bool:
        return self._running

    def is_paused(self) -> bool:
        return self._paused

    def is_shuffling(self) -> bool:
        if self._shuffling:
            self._shuffling = self.sorter.shuffling
        return self._shuffling

    def start(self) -> None:
        """Start a new run, or resume a paused one."""
        if not self._paused:
            self.visual_time = 0.0
        self.sorter.start()
        self._running = True
        self._paused = False
        self._restart_clock()

    def step(self) -> bool:
        """Advance a paused run by one move; report whether it has finished."""
        self._restart_clock()
        finished = self.sorter.do_step()
        self.visual_time += self._restart_clock()
        return finished

    def stop(self) -> None:
        self.visual_time += self._restart_clock()
        self._running = self._paused = False
        self.sorter.stop()

    def pause(self) -> None:
        self.visual_time += self._restart_clock()
        self.sorter.pause()
        self._paused = True

    def shuffle(self) -> None:
        self.stop_shuffling()
        self.visual_time = 0.0
        self._shuffling = True
        self.sorter.shuffle()

    def stop_shuffling(self) -> None:
        if not self._shuffling:
            return
        self.sorter.stop_shuffling()
        self._shuffling = False

    def select_algorithm(self, index: int) -> None:
        """Switch to another algorithm, stopping whatever is in progress."""
        if not 0 <= index < len(ALGORITHMS):
            raise IndexError(f"no algorithm at index {index}")
        if index == self.selected:
            return

        self.stop_shuffling()
        self.stop()
        self.sorter = create_algorithm(index, self.settings, self.store)
        self.sorter.delay_ms = self._delay_ms

        if self.settings.plot_shuffle_on_algo_change:
            self.shuffle()

        self.selected = index