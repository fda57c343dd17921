"""Threaded, steppable base for the visualised sorting algorithms."""

from __future__ import annotations

import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from enum import Enum

from .settings import Settings
from .statistics import SortingStatistics
from .utilities import random_between


class StepState(Enum):
    NONE = 0
    PAUSED = 1
    EXITED = 2
    STEP = 3


class _Exited(Exception):
    """Raised inside a sorter to unwind when the run is stopped."""


class _ShuffleStopped(Exception):
    """Raised inside the animated shuffle when it is cancelled."""


class NumberStore:
    """The list of numbers being sorted, shared between algorithms."""

    def __init__(self, values: Iterable[int] | None = None) -> None:
        self.values: list[int] = list(values) if values is not None else []
        self._lock = threading.Lock()

    @contextmanager
    def locked(self) -> Iterator[list[int]]:
        """Hold the lock while the list changes size or is read as a whole."""
        with self._lock:
            yield self.values

    def __len__(self) -> int:
        return len(self.values)


class SortingAlgorithm(ABC):
    """A sorting algorithm that runs on its own thread and can be paused or stepped."""

    description: str = ""

    def __init__(self, settings: Settings, store: NumberStore | None = None) -> None:
        self.settings = settings
        self.store = store if store is not None else NumberStore()
        self.stats = SortingStatistics()
        self.delay_ms = 10.0

        self._thread: threading.Thread | None = None
        self._clock = time.perf_counter()
        self._pause = threading.Event()
        self._exit = threading.Event()
        self._finished = threading.Event()
        self._do_step = threading.Event()
        self._shuffling = threading.Event()
        self._stop_shuffling = threading.Event()

    @abstractmethod
    def _sort(self, numbers: list[int]) -> None:
        """Sort ``numbers`` in place, calling ``_step`` between visible moves."""

    @property
    def numbers(self) -> list[int]:
        return self.store.values

    @property
    def statistics(self) -> SortingStatistics:
        return self.stats

    @property
    def finished(self) -> bool:
        return self._finished.is_set()

    @property
    def shuffling(self) -> bool:
        return self._shuffling.is_set()

    @property
    def paused(self) -> bool:
        return self._pause.is_set()

    def _reset(self) -> None:
        self.stats.reset()
        self._pause.clear()
        self._exit.clear()
        self._finished.clear()
        self._do_step.clear()
        self._clock = time.perf_counter()

    def _check_exit(self) -> None:
        if self._exit.is_set():
            raise _Exited

    def _check_step(self) -> StepState:
        if self._exit.is_set():
            return StepState.EXITED
        if self._do_step.is_set():
            self._pause.set()
        elif self._pause.is_set():
            time.sleep(self.settings.PAUSE_SLEEP_MS / 1000)
            self._clock = time.perf_counter()
            return StepState.PAUSED

        self.stats.add_time((time.perf_counter() - self._clock) * 1000)
        if self.delay_ms > 0:
            self._exit.wait(self.delay_ms / 1000)
        self._clock = time.perf_counter()

        if self._do_step.is_set():
            self._do_step.clear()
            return StepState.STEP
        return StepState.NONE

    def _step(self) -> None:
        """Wait out the delay, block while paused, unwind when stopped."""
        while True:
            state = self._check_step()
            if state is StepState.EXITED:
                raise _Exited
            if state in (StepState.NONE, StepState.STEP):
                return

    def _finisher_loop(self) -> None:
        if not self.settings.plot_do_aftercheck:
            return
        count = len(self.store.values)
        if count == 0:
            return
        delay = (self.settings.PLOT_SINGULAR_LOOP_TIME_US // count) / 1_000_000
        for i in range(count):
            self.stats.put_cursor_at(i)
            if self._exit.wait(delay):
                return

    def run(self) -> None:
        """Sort the shared numbers on the calling thread."""
        self._reset()
        try:
            self._sort(self.store.values)
        except _Exited:
            return
        if self._exit.is_set():
            return
        self._finisher_loop()
        self._finished.set()

    def _join(self) -> None:
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join()

    def start(self) -> None:
        """Begin sorting on a new thread, or resume a paused run."""
        if self._pause.is_set():
            self.resume()
            return
        self.stop()
        self._thread = threading.Thread(target=self.run, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._exit.set()
        self._pause.clear()
        self._join()

    def pause(self) -> None:
        self._pause.set()

    def resume(self) -> None:
        self._pause.clear()
        self._exit.clear()

    def do_step(self) -> bool:
        """Let a paused run make one more move; report whether it has finished."""
        self._do_step.set()
        return self.finished

    def wait(self, timeout: float | None = None) -> bool:
        """Wait for the worker thread; return True if it is no longer running."""
        thread = self._thread
        if thread is None:
            return True
        thread.join(timeout)
        return not thread.is_alive()

    def _random_value(self) -> int:
        return random_between(0, self.settings.SHUFFLE_MAX_VALUE)

    def _shuffle_tick(self, position: int, delay: float) -> None:
        if self._stop_shuffling.is_set():
            raise _ShuffleStopped
        self.settings.update_cursor_line_width_dynamically(position)
        self.stats.put_cursor_at(position)
        if self._stop_shuffling.wait(delay):
            raise _ShuffleStopped

    def _animated_shuffle(self) -> None:
        numbers = self.store.values
        target = self.settings.shuffle_current_count
        old_size = len(numbers)
        loop_us = self.settings.PLOT_SINGULAR_LOOP_TIME_US
        delay = (loop_us // max(target, 1)) / 1_000_000

        try:
            if old_size > target:
                delay = (loop_us // old_size) / 1_000_000
                for i in range(old_size, target, -1):
                    with self.store.locked():
                        numbers.pop()
                    self._shuffle_tick(i - 1, delay)

                self.settings.update_cursor_line_width()
                for i in range(target, 0, -1):
                    numbers[i - 1] = self._random_value()
                    self._shuffle_tick(i - 1, delay)
            elif old_size < target:
                for i in range(old_size):
                    numbers[i] = self._random_value()
                    self._shuffle_tick(i, delay)
                for i in range(old_size, target):
                    with self.store.locked():
                        numbers.append(self._random_value())
                    self._shuffle_tick(i + 1, delay)
            else:
                for i in range(target):
                    numbers[i] = self._random_value()
                    self._shuffle_tick(i, delay)
        except _ShuffleStopped:
            return
        self._shuffling.clear()

    def shuffle(self) -> None:
        """Refill the numbers with random values, animated if the settings ask."""
        self._reset()
        self.stop_shuffling()
        self._shuffling.set()

        if self.settings.plot_shuffle_animated:
            self._thread = threading.Thread(target=self._animated_shuffle, daemon=True)
            self._thread.start()
            return

        count = self.settings.shuffle_current_count
        with self.store.locked() as numbers:
            numbers[:] = [self._random_value() for _ in range(count)]
        self.settings.update_cursor_line_width_dynamically(count)
        self.stats.put_cursor_at(count)
        self._shuffling.clear()

    def stop_shuffling(self) -> None:
        self._stop_shuffling.set()
        self._join()
        self._stop_shuffling.clear()
        self._shuffling.clear()