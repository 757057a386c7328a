from __future__ import annotations

from itertools import combinations
from typing import List, Sequence, Tuple

import numpy as np
from scipy.sparse.csgraph import floyd_warshall

from ..knapsack import check_capacity, rounded_weight
from ..models import Item
from ..routing import DistanceGraph


def brute_force_knapsack(items: Sequence[Item], capacity: int) -> Tuple[List[Item], float]:
    """Enumerate every subset and return the most valuable one that fits.

    Weights are rounded up to whole units, as the DP optimizer does.
    Use for n_items <= 15 (32768 subsets max).

    Returns:
        Tuple of (best_subset, best_value)
    """
    capacity = check_capacity(capacity)
    if len(items) > 15:
        raise ValueError(f"Brute force only supports up to 15 items (got {len(items)})")

    best_value = 0.0
    best_subset: List[Item] = []
    for k in range(1, len(items) + 1):
        for subset in combinations(items, k):
            if sum(rounded_weight(it) for it in subset) > capacity:
                continue
            value = sum(it.value for it in subset)
            if value > best_value:
                best_value = value
                best_subset = list(subset)
    return best_subset, best_value


def all_pairs_distances(graph: DistanceGraph) -> np.ndarray:
    """Floyd-Warshall shortest distances between every pair of graph nodes."""
    if len(graph) == 0:
        return np.zeros((0, 0), dtype=float)
    return floyd_warshall(np.array(graph.matrix), directed=False)
