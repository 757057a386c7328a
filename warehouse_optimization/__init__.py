"""warehouse_optimization package

Algorithmic engines over warehouse inventory records: `MergeSort` and
`QuickSort`, the `SortedScanSearch` and `PrefixHashIndex` search strategies,
`GreedyBestFit` space allocation, `KnapsackOptimizer` value selection and the
`RoutePlanner` for picking routes. Every engine call returns its result
together with a `PerformanceReport`.

"""

__all__ = [
    "models",
    "fields",
    "config",
    "errors",
    "performance",
    "sorting",
    "searching",
    "space_allocation",
    "knapsack",
    "routing",
    "inventory",
    "stats",
    "generator",
]
