from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .models import Allocation, Item, SpaceUnit
from .performance import PerformanceReport, Stopwatch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AllocationResult:
    allocations: List[Allocation]
    unallocated: List[Item]
    performance: PerformanceReport


class GreedyBestFit:
    """Single-pass best-fit placement of items into space units.

    Items are served in descending value density (stable for ties); each goes
    to the candidate space leaving the least leftover capacity, first space
    winning ties. The heuristic does not maximise packed value: dense items
    are served first and can starve bulky ones.

    Side effect: the chosen ``SpaceUnit`` objects are mutated in place
    (``occupied``, ``available``, ``item_id``). Callers sharing space units
    across concurrent calls must pass private copies or serialize the calls.
    """

    algorithm = "Greedy Best-Fit"

    def allocate_space(self, items: Sequence[Item], spaces: Sequence[SpaceUnit]) -> AllocationResult:
        watch = Stopwatch()
        comparisons = 0

        allocations: List[Allocation] = []
        unallocated: List[Item] = []
        candidates = [s for s in spaces if s.available > 0]

        ranked = sorted(items, key=lambda it: it.value_density, reverse=True)

        for item in ranked:
            best: Optional[SpaceUnit] = None
            best_leftover = None
            for space in candidates:
                comparisons += 1
                if space.available >= item.quantity:
                    leftover = space.available - item.quantity
                    if best_leftover is None or leftover < best_leftover:
                        best_leftover = leftover
                        best = space

            if best is None:
                unallocated.append(item)
                continue

            efficiency = (item.quantity / best.capacity) * 100
            best.store(item)
            allocations.append(Allocation(item=item, space=best, efficiency=efficiency))
            if best.available == 0:
                candidates = [s for s in candidates if s is not best]

        report = PerformanceReport(
            algorithm=self.algorithm,
            operation="Space Allocation",
            data_size=len(items),
            execution_time=watch.elapsed_ms(),
            comparisons=comparisons,
        )
        if unallocated:
            logger.warning(
                "%d of %d items could not be placed: %s",
                len(unallocated), len(items), ", ".join(i.item_id for i in unallocated),
            )
        logger.debug("%s placed=%d comparisons=%d", self.algorithm, len(allocations), comparisons)
        return AllocationResult(allocations, unallocated, report)
