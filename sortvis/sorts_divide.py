"""Sorting algorithms built on heaps, insertion, partitioning, merging and digits."""

from __future__ import annotations

from .algorithm import SortingAlgorithm
from .utilities import int_pow

_RADIX = 256


class HeapSort(SortingAlgorithm):
    description = (
        "It is similar to selection sort where we first find the minimum element "
        "and place the minimum element at the beginning. We repeat the same process "
        "for the remaining elements."
    )

    def _heapify(self, numbers: list[int], n: int, i: int) -> None:
        while True:
            self._check_exit()
            largest = i
            left, right = 2 * i + 1, 2 * i + 2
            if left < n and numbers[left] > numbers[largest]:
                largest = left
            if right < n and numbers[right] > numbers[largest]:
                largest = right
            self.stats.add_comparisons(2)

            if largest == i:
                return
            self.stats.add_swaps()
            numbers[i], numbers[largest] = numbers[largest], numbers[i]
            self.stats.put_cursor_at(i)
            self._step()
            i = largest

    def _sort(self, numbers: list[int]) -> None:
        n = len(numbers)
        for i in range(n // 2 - 1, -1, -1):
            self._heapify(numbers, n, i)

        for i in range(n - 1, 0, -1):
            self.stats.add_swaps()
            numbers[0], numbers[i] = numbers[i], numbers[0]
            self.stats.put_cursor_at(i)
            self._step()
            self._heapify(numbers, i, 0)


class InsertionSort(SortingAlgorithm):
    description = (
        "The array is virtually split into a sorted and an unsorted part. Values "
        "from the unsorted part are picked and placed at the correct position in "
        "the sorted part."
    )

    def _sort(self, numbers: list[int]) -> None:
        for i in range(1, len(numbers)):
            key = numbers[i]
            self.stats.add_assignments()
            j = i - 1

            self.stats.add_comparisons()
            while j >= 0 and numbers[j] > key:
                self.stats.add_assignments()
                numbers[j + 1] = numbers[j]
                self.stats.put_cursor_at(j + 1)
                self._step()
                j -= 1
            self.stats.add_assignments()
            numbers[j + 1] = key
            self._step()


class MergeSort(SortingAlgorithm):
    description = (
        "It divides the input array into two halves, calls itself for the two "
        "halves, and then it merges the two sorted halves."
    )

    def _write(self, numbers: list[int], k: int, value: int) -> None:
        numbers[k] = value
        self.stats.add_assignments()
        self.stats.put_cursor_at(k)
        self._step()

    def _merge(self, numbers: list[int], low: int, mid: int, high: int) -> None:
        self._check_exit()
        left = numbers[low:mid + 1]
        right = numbers[mid + 1:high + 1]
        self.stats.add_assignments(len(left) + len(right))

        i = j = 0
        k = low
        while i < len(left) and j < len(right):
            self.stats.add_comparisons()
            if left[i] <= right[j]:
                value = left[i]
                i += 1
            else:
                value = right[j]
                j += 1
            self._write(numbers, k, value)
            k += 1

        for value in (*left[i:], *right[j:]):
            self._write(numbers, k, value)
            k += 1

    def _merge_sort(self, numbers: list[int], low: int, high: int) -> None:
        if low < high:
            mid = low + (high - low) // 2
            self._merge_sort(numbers, low, mid)
            self._merge_sort(numbers, mid + 1, high)
            self._merge(numbers, low, mid, high)

    def _sort(self, numbers: list[int]) -> None:
        self._merge_sort(numbers, 0, len(numbers) - 1)


class QuickSort(SortingAlgorithm):
    description = (
        "Picks an element as pivot and partitions the given array around the "
        "picked pivot."
    )

    def _sort(self, numbers: list[int]) -> None:
        if not numbers:
            return
        stack = [(0, len(numbers) - 1)]
        while stack:
            low, high = stack.pop()

            self.stats.put_cursor_at(high)
            pivot = numbers[high]
            self.stats.add_assignments()
            i = low - 1

            for j in range(low, high):
                self.stats.add_comparisons()
                if numbers[j] <= pivot:
                    i += 1
                    numbers[i], numbers[j] = numbers[j], numbers[i]
                    self.stats.add_swaps()
                self.stats.put_cursor_at(j)
                self._step()

            numbers[i + 1], numbers[high] = numbers[high], numbers[i + 1]
            self.stats.add_swaps()

            p = i + 1
            if p - 1 > low:
                stack.append((low, p - 1))
            if p + 1 < high:
                stack.append((p + 1, high))


class RadixSortLSD(SortingAlgorithm):
    description = (
        "Radix sort LSD does digit by digit sort starting from least significant "
        "digit to most significant digit. Radix sort uses counting sort as a "
        "subroutine to sort."
    )

    def _digit_count(self) -> int:
        digits = 0
        value = self.settings.SHUFFLE_MAX_VALUE
        while value:
            digits += 1
            value //= 10
        return digits

    def _sort(self, numbers: list[int]) -> None:
        for digit in range(self._digit_count()):
            modulus = int_pow(10, digit + 1)
            place = modulus // 10
            pockets: list[list[int]] = [[] for _ in range(10)]

            for j, value in enumerate(numbers):
                self.stats.put_cursor_at(j)
                pockets[(value % modulus) // place].append(value)
                self.stats.add_assignments(2)
                self._step()

            position = 0
            for pocket in pockets:
                for value in pocket:
                    numbers[position] = value
                    self.stats.add_assignments()
                    self.stats.put_cursor_at(position)
                    position += 1
                    self._step()


def _byte_at(value: int, index: int) -> int:
    """Return byte ``index`` of a 32-bit value, most significant first, or -1."""
    if index < 4:
        return (value >> ((3 - index) * 8)) & 0xFF
    return -1


class RadixSortMSD(SortingAlgorithm):
    description = (
        "Radix sort MSD does digit by digit sort starting from most significant "
        "digit to least significant digit. Radix sort uses counting sort as a "
        "subroutine to sort."
    )

    def _msd(
        self, numbers: list[int], aux: list[int], low: int, high: int, digit: int
    ) -> None:
        self._check_exit()
        span = high - low
        counter = [0] * (_RADIX + 2)

        for i in range(low, high):
            counter[_byte_at(numbers[i], digit) + 2] += 1
            self.stats.put_cursor_at(i)
        if span > 0:
            self.stats.add_reads(span)
            self.stats.add_assignments(span)

        for r in range(_RADIX + 1):
            counter[r + 1] += counter[r]
        self.stats.add_reads(_RADIX)
        self.stats.add_assignments()

        for i in range(low, high):
            bucket = _byte_at(numbers[i], digit) + 1
            aux[counter[bucket]] = numbers[i]
            counter[bucket] += 1
            self.stats.put_cursor_at(i)
        if span > 0:
            self.stats.add_reads(span * 2)
            self.stats.add_assignments(span)

        for i in range(low, high):
            numbers[i] = aux[i - low]
            self.stats.add_assignments()
            self.stats.put_cursor_at(i)
            self._step()

        for r in range(_RADIX + 1):
            if counter[r] < counter[r + 1]:
                self.stats.add_reads(2)
                self._msd(numbers, aux, low + counter[r], low + counter[r + 1], digit + 1)

        self._step()

    def _sort(self, numbers: list[int]) -> None:
        aux = [0] * len(numbers)
        self._msd(numbers, aux, 0, len(numbers), 0)


class SelectionSort(SortingAlgorithm):
    description = (
        "The selection sort algorithm sorts an array by repeatedly finding the "
        "minimum element (considering ascending order) from unsorted part and "
        "putting it at the beginning."
    )

    def _sort(self, numbers: list[int]) -> None:
        n = len(numbers)
        for i in range(n - 1):
            smallest = i
            for j in range(i + 1, n):
                self.stats.add_comparisons()
                if numbers[j] < numbers[smallest]:
                    smallest = j
                    self.stats.put_cursor_at(j)

            self.stats.add_swaps()
            numbers[smallest], numbers[i] = numbers[i], numbers[smallest]
            self.stats.put_cursor_at(smallest)
            self._step()


class ShellSort(SortingAlgorithm):
    description = (
        "First sorts elements that are far apart from each other and successively "
        "reduces the interval between the elements to be sorted. The interval "
        "between the elements is reduced based on the sequence used."
    )

    def _sort(self, numbers: list[int]) -> None:
        n = len(numbers)
        gap = n // 2
        while gap > 0:
            for i in range(gap, n):
                held = numbers[i]
                self.stats.add_assignments()

                j = i
                while j >= gap and numbers[j - gap] > held:
                    self.stats.add_comparisons()
                    self.stats.add_assignments()
                    numbers[j] = numbers[j - gap]
                    self.stats.put_cursor_at(j)
                    self._step()
                    j -= gap

                numbers[j] = held
                self.stats.add_assignments()
            gap //= 2