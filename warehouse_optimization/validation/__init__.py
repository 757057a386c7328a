"""Reference solvers used to cross-check the engines on small inputs."""

from .ground_truth import (
    all_pairs_distances,
    brute_force_knapsack,
)

__all__ = [
    "all_pairs_distances",
    "brute_force_knapsack",
]
