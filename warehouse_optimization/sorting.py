"""Comparison sorts over inventory items.

Both sorters share one contract: ``sort(items, key)`` returns a new list and a
``PerformanceReport`` carrying comparison and swap counts. The caller's list is
never reordered.

- ``MergeSort``: stable, O(n log n) in all cases, O(n) auxiliary space.
- ``QuickSort``: Lomuto partition with the last element as pivot, not stable,
  O(n^2) on already-sorted input.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Sequence

from .fields import FieldSelector, ItemField
from .models import Item
from .performance import OperationCounter, PerformanceReport, Stopwatch

logger = logging.getLogger(__name__)

KeyFn = Callable[[Item], object]


@dataclass(frozen=True)
class SortResult:
    sorted_items: List[Item]
    performance: PerformanceReport


class MergeSort:
    algorithm = "Merge Sort"

    def sort(self, items: Sequence[Item], key: FieldSelector) -> SortResult:
        field = ItemField.parse(key)
        watch = Stopwatch()
        counter = OperationCounter()

        sorted_items = self._merge_sort(list(items), field.sort_key, counter)

        report = PerformanceReport(
            algorithm=self.algorithm,
            operation=f"Sort by {field.value}",
            data_size=len(items),
            execution_time=watch.elapsed_ms(),
            comparisons=counter.comparisons,
            swaps=counter.swaps,
        )
        logger.debug("%s n=%d comparisons=%d swaps=%d", self.algorithm, len(items), counter.comparisons, counter.swaps)
        return SortResult(sorted_items, report)

    def _merge_sort(self, arr: List[Item], key: KeyFn, counter: OperationCounter) -> List[Item]:
        if len(arr) <= 1:
            return arr
        mid = len(arr) // 2
        left = self._merge_sort(arr[:mid], key, counter)
        right = self._merge_sort(arr[mid:], key, counter)
        return self._merge(left, right, key, counter)

    @staticmethod
    def _merge(left: List[Item], right: List[Item], key: KeyFn, counter: OperationCounter) -> List[Item]:
        result: List[Item] = []
        li = ri = 0
        while li < len(left) and ri < len(right):
            counter.comparisons += 1
            # <= keeps equal keys in their original order
            if key(left[li]) <= key(right[ri]):
                result.append(left[li])
                li += 1
            else:
                result.append(right[ri])
                ri += 1
                counter.swaps += 1
        result.extend(left[li:])
        result.extend(right[ri:])
        return result


class QuickSort:
    algorithm = "Quick Sort"

    def sort(self, items: Sequence[Item], key: FieldSelector) -> SortResult:
        field = ItemField.parse(key)
        watch = Stopwatch()
        counter = OperationCounter()

        arr = list(items)
        self._quick_sort(arr, 0, len(arr) - 1, field.sort_key, counter)

        report = PerformanceReport(
            algorithm=self.algorithm,
            operation=f"Sort by {field.value}",
            data_size=len(items),
            execution_time=watch.elapsed_ms(),
            comparisons=counter.comparisons,
            swaps=counter.swaps,
        )
        logger.debug("%s n=%d comparisons=%d swaps=%d", self.algorithm, len(items), counter.comparisons, counter.swaps)
        return SortResult(arr, report)

    def _quick_sort(self, arr: List[Item], low: int, high: int, key: KeyFn, counter: OperationCounter) -> None:
        # recurse into the smaller side, loop on the larger: stack depth stays O(log n)
        while low < high:
            p = self._partition(arr, low, high, key, counter)
            if p - low < high - p:
                self._quick_sort(arr, low, p - 1, key, counter)
                low = p + 1
            else:
                self._quick_sort(arr, p + 1, high, key, counter)
                high = p - 1

    @staticmethod
    def _partition(arr: List[Item], low: int, high: int, key: KeyFn, counter: OperationCounter) -> int:
        pivot = key(arr[high])
        i = low - 1
        for j in range(low, high):
            counter.comparisons += 1
            if key(arr[j]) <= pivot:
                i += 1
                if i != j:
                    arr[i], arr[j] = arr[j], arr[i]
                    counter.swaps += 1
        if i + 1 != high:
            arr[i + 1], arr[high] = arr[high], arr[i + 1]
            counter.swaps += 1
        return i + 1
