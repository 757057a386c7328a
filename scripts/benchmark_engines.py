"""Micro-benchmark for the inventory engines.

Runs each engine several times on a synthetic inventory, computes summary
statistics (mean, std, min, median) and writes a Markdown report to
`docs/benchmark_engines.md`.
"""

import copy
import logging
import statistics
import sys
from pathlib import Path

# Ensure project root is on sys.path so local package can be imported
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from warehouse_optimization.config import EngineConfig
from warehouse_optimization.generator import DataGenerator
from warehouse_optimization.knapsack import KnapsackOptimizer
from warehouse_optimization.performance import PerformanceLog
from warehouse_optimization.routing import RoutePlanner
from warehouse_optimization.searching import PrefixHashIndex, SortedScanSearch
from warehouse_optimization.sorting import MergeSort, QuickSort
from warehouse_optimization.space_allocation import GreedyBestFit


def run_benchmark(reps=10, n_items=2000, capacity=500, n_stops=10, config=None):
    config = config or EngineConfig()
    inv, spaces = DataGenerator().generate_samples(
        n_items=n_items, n_aisles=8, shelves_per_aisle=5, positions_per_shelf=6, seed=42
    )[0]
    items = inv.items()
    log = PerformanceLog()

    index = PrefixHashIndex(fields=config.indexed_fields)
    index.build(items)
    planner = RoutePlanner(weights=config.distance_weights)
    planner.initialize_graph(inv.unique_locations())
    start = planner.graph.location_at(0)
    stops = [it.location for it in items[:n_stops]]

    calls = {
        "merge_sort": lambda: MergeSort().sort(items, "name").performance,
        "quick_sort": lambda: QuickSort().sort(items, "value").performance,
        "scan_search": lambda: SortedScanSearch().search(items, "wire", "name").performance,
        "hash_search": lambda: index.search("wire", "name").performance,
        # allocator mutates its spaces: hand it a private copy per rep
        "best_fit": lambda: GreedyBestFit().allocate_space(items, copy.deepcopy(spaces.spaces())).performance,
        "knapsack": lambda: KnapsackOptimizer().optimize_value(items[:200], capacity).performance,
        "picking_route": lambda: planner.find_optimal_picking_path(start, stops).performance,
    }

    for _ in range(reps):
        for fn in calls.values():
            log.record(fn())
    return log


def write_report(log, n_items, out_path="docs/benchmark_engines.md"):
    Path(out_path).parent.mkdir(parents=True, exist_ok=True)
    df = log.to_df()
    lines = []
    lines.append("# Engine Micro-benchmark\n")
    lines.append(f"**Problem size:** {n_items} items\n")

    lines.append("## Summary\n")
    lines.append("| Algorithm | operation | mean (ms) | stdev (ms) | min (ms) | median (ms) | comparisons | reps |\n")
    lines.append("|---|---|---:|---:|---:|---:|---:|---:|\n")
    for (algorithm, operation), group in df.group_by(["algorithm", "operation"], maintain_order=True):
        times = group.get_column("execution_time").to_list()
        comparisons = group.get_column("comparisons").to_list()[0]
        lines.append(
            f"| {algorithm} | {operation} | {statistics.mean(times):.3f} | "
            f"{statistics.stdev(times) if len(times) > 1 else 0.0:.3f} | {min(times):.3f} | "
            f"{statistics.median(times):.3f} | {comparisons} | {len(times)} |\n"
        )

    with open(out_path, "w", encoding="utf-8") as fh:
        fh.writelines(lines)

    print(f"Wrote benchmark report to {out_path}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    log = run_benchmark(reps=5)
    write_report(log, n_items=2000)
    print(log.summary())
    print("Done")
