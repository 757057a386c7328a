"""0/1 knapsack value optimisation.

Weights are rounded up to whole units before indexing the table, so an item
weighing 0.15 consumes one full unit of capacity. Table construction is
vectorised per item row with NumPy; time and memory are O(n * capacity), so
callers must keep ``capacity`` bounded.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from .models import Item
from .performance import PerformanceReport, Stopwatch

logger = logging.getLogger(__name__)


def rounded_weight(item: Item) -> int:
    return int(math.ceil(item.weight))


def check_capacity(capacity) -> int:
    if isinstance(capacity, bool) or not isinstance(capacity, (int, np.integer)):
        raise ValueError(f"capacity must be an integer number of weight units, got {capacity!r}")
    if capacity < 0:
        raise ValueError(f"capacity must be >= 0, got {capacity}")
    return int(capacity)


@dataclass(frozen=True)
class KnapsackResult:
    selected_items: List[Item]
    total_value: float
    total_weight: float
    performance: PerformanceReport


class KnapsackOptimizer:
    algorithm = "0/1 Knapsack"

    def optimize_value(self, items: Sequence[Item], capacity: int) -> KnapsackResult:
        """Pick the subset of ``items`` with maximal total value within ``capacity``.

        Args:
            items: candidate items; order determines tie-breaking in backtracking
            capacity: integer capacity in weight units (0 admits only weightless items)

        Returns:
            KnapsackResult with the selected items in their original relative
            order, total value, true (unrounded) total weight and metrics.
        """
        capacity = check_capacity(capacity)
        watch = Stopwatch()
        comparisons = 0

        n = len(items)
        weights = [rounded_weight(it) for it in items]
        dp = np.zeros((n + 1, capacity + 1), dtype=np.float64)

        for i in range(1, n + 1):
            wt = weights[i - 1]
            value = float(items[i - 1].value)
            prev = dp[i - 1]
            row = dp[i]
            row[:] = prev
            if wt <= capacity:
                row[wt:] = np.maximum(value + prev[:capacity + 1 - wt], prev[wt:])
            comparisons += capacity

        selected: List[Item] = []
        total_weight = 0.0
        w = capacity
        i = n
        # zero-weight items can still be taken once the capacity is used up
        last_free = max((k + 1 for k, wt in enumerate(weights) if wt == 0), default=0)
        while i > 0 and (w > 0 or i <= last_free):
            comparisons += 1
            if dp[i, w] != dp[i - 1, w]:
                item = items[i - 1]
                selected.append(item)
                w -= weights[i - 1]
                total_weight += item.weight
            i -= 1
        selected.reverse()

        total_value = float(dp[n, capacity])
        report = PerformanceReport(
            algorithm=self.algorithm,
            operation="Value Optimization",
            data_size=n,
            execution_time=watch.elapsed_ms(),
            comparisons=comparisons,
        )
        logger.debug(
            "%s n=%d capacity=%d selected=%d value=%.2f", self.algorithm, n, capacity, len(selected), total_value
        )
        return KnapsackResult(selected, total_value, total_weight, report)
