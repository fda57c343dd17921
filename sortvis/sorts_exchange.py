"""Sorting algorithms that work by comparing and exchanging elements."""

from __future__ import annotations

from .algorithm import SortingAlgorithm
from .utilities import random_between


class BitonicSort(SortingAlgorithm):
    description = (
        "Bitonic sort is a comparison-based sorting algorithm that can be run in "
        "parallel. It focuses on converting a random sequence of numbers into a "
        "bitonic sequence, one that monotonically increases, then decreases.\n"
        "Note: the number of elements to sort must be a 2^n number."
    )

    def _merge(self, numbers: list[int], low: int, count: int, ascending: bool) -> None:
        self._check_exit()
        if count <= 1:
            return
        k = count // 2
        for i in range(low, low + k):
            self.stats.add_comparisons()
            if ascending == (numbers[i] > numbers[i + k]):
                self.stats.add_swaps()
                numbers[i], numbers[i + k] = numbers[i + k], numbers[i]
                self.stats.put_cursor_at(i + k)
            else:
                self.stats.put_cursor_at(i)
            self._step()
        self._merge(numbers, low, k, ascending)
        self._merge(numbers, low + k, k, ascending)

    def _bitonic(self, numbers: list[int], low: int, count: int, ascending: bool) -> None:
        if count <= 1:
            return
        k = count // 2
        self._bitonic(numbers, low, k, True)
        self._bitonic(numbers, low + k, k, False)
        self._merge(numbers, low, count, ascending)

    def _sort(self, numbers: list[int]) -> None:
        self._bitonic(numbers, 0, len(numbers), True)


class BogoSort(SortingAlgorithm):
    description = (
        "Randomly generates permutations (possibly one already generated) of its "
        "input until it finds one that is sorted."
    )

    def _sort(self, numbers: list[int]) -> None:
        n = len(numbers)
        if n == 0:
            return
        while True:
            for i in range(n):
                j = random_between(0, n - 1)
                numbers[i], numbers[j] = numbers[j], numbers[i]
            self.stats.add_swaps(n)

            is_sorted = True
            for i in range(n - 1):
                if numbers[i] > numbers[i + 1]:
                    is_sorted = False
                    self.stats.add_comparisons(i)
                    break

            self.stats.put_cursor_at(random_between(0, n - 1))
            self._step()
            if is_sorted:
                return


class BubbleSort(SortingAlgorithm):
    description = (
        "Compares two adjacent elements and swaps them until they are not in the "
        "intended order. Be careful, don't pop the bubble."
    )

    def _sort(self, numbers: list[int]) -> None:
        n = len(numbers)
        for i in range(n - 1):
            for j in range(n - i - 1):
                self.stats.put_cursor_at(j + 1, -1)
                self.stats.add_comparisons()
                if numbers[j] > numbers[j + 1]:
                    numbers[j], numbers[j + 1] = numbers[j + 1], numbers[j]
                    self.stats.add_swaps()
                self._step()


class CocktailSort(SortingAlgorithm):
    description = (
        "Traverses elements from left to right until they are placed in the last "
        "viable position."
    )

    def _compare_swap(self, numbers: list[int], i: int) -> bool:
        self.stats.add_comparisons()
        if numbers[i] > numbers[i + 1]:
            numbers[i], numbers[i + 1] = numbers[i + 1], numbers[i]
            self.stats.add_swaps()
            return True
        return False

    def _sort(self, numbers: list[int]) -> None:
        start, end = 0, len(numbers) - 1
        swapped = True
        while swapped:
            self._step()
            swapped = False
            for i in range(start, end):
                self.stats.put_cursor_at(i + 1, -1)
                swapped |= self._compare_swap(numbers, i)
                self._step()
            if not swapped:
                break

            swapped = False
            end -= 1
            for i in range(end - 1, start - 1, -1):
                self.stats.put_cursor_at(i, +1)
                swapped |= self._compare_swap(numbers, i)
                self._step()
            start += 1


class CombSort(SortingAlgorithm):
    description = (
        "Comb sort improves the bubble sort by using a gap of size more than 1. "
        "The gap in the comb sort starts with the larger value and then shrinks by "
        "a factor of 1.3. It means that after the completion of each phase, the gap "
        "is divided by the shrink factor 1.3. The iteration continues until the gap "
        "is 1."
    )

    def _sort(self, numbers: list[int]) -> None:
        n = len(numbers)
        gap = n
        swapped = True
        while gap != 1 or swapped:
            gap = max((gap * 10) // 13, 1)
            swapped = False
            for i in range(n - gap):
                self.stats.add_comparisons()
                if numbers[i] > numbers[i + gap]:
                    self.stats.add_swaps()
                    numbers[i], numbers[i + gap] = numbers[i + gap], numbers[i]
                    swapped = True
                    self.stats.put_cursor_at(i)
                else:
                    self.stats.put_cursor_at(i + 1, -1)
                self._step()


class GnomeSort(SortingAlgorithm):
    description = (
        "Gnome sort works by building a sorted list one element at a time, getting "
        "each item to the proper place in a series of swaps."
    )

    def _sort(self, numbers: list[int]) -> None:
        n = len(numbers)
        index = 0
        while index < n:
            self.stats.put_cursor_at(index)
            if index == 0:
                index = 1
            if index < n:
                self.stats.add_comparisons()
                if numbers[index] >= numbers[index - 1]:
                    index += 1
                else:
                    self.stats.add_swaps()
                    numbers[index], numbers[index - 1] = numbers[index - 1], numbers[index]
                    index -= 1
            self._step()


class StalinSort(SortingAlgorithm):
    description = (
        "Stalin sort is a nonsensical 'sorting' algorithm in which each element "
        "that is not in the correct order is simply eliminated from the list."
    )

    def _sort(self, numbers: list[int]) -> None:
        i = 0
        while i < len(numbers) - 1:
            self.stats.put_cursor_at(i)
            self.stats.add_comparisons()
            if numbers[i] < numbers[i + 1]:
                i += 1
            else:
                with self.store.locked():
                    del numbers[i + 1]
                self.stats.add_reads()
                self.settings.update_cursor_line_width_dynamically(len(numbers))
            self._step()


class PancakeSort(SortingAlgorithm):
    description = "The only allowed operation is flipping the array between two points."

    def _flip(self, numbers: list[int], end: int) -> None:
        self._check_exit()
        start = 0
        while start < end:
            numbers[start], numbers[end] = numbers[end], numbers[start]
            self.stats.add_assignments(3)
            self.stats.put_cursor_at(start)
            self._step()
            start += 1
            end -= 1

    def _sort(self, numbers: list[int]) -> None:
        for size in range(len(numbers), 1, -1):
            largest = 0
            for i in range(size):
                if numbers[i] > numbers[largest]:
                    self.stats.add_assignments()
                    largest = i
            self.stats.add_comparisons(size)
            self._check_exit()

            if largest != size - 1:
                self._flip(numbers, largest)
                self._flip(numbers, size - 1)