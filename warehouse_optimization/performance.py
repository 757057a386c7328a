from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

import polars as pl


@dataclass(frozen=True)
class PerformanceReport:
    """Metrics for a single engine call.

    Fields:
        algorithm: display name of the algorithm
        operation: what the call did, e.g. "Sort by quantity"
        data_size: number of input records the call worked over
        execution_time: elapsed wall time in milliseconds
        comparisons: comparison count, when the engine tracks one
        swaps: swap count, when the engine tracks one
    """

    algorithm: str
    operation: str
    data_size: int
    execution_time: float
    comparisons: Optional[int] = None
    swaps: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class OperationCounter:
    """Per-call tally passed by reference through recursive helpers."""

    comparisons: int = 0
    swaps: int = 0


class Stopwatch:
    """Millisecond timer started on construction."""

    def __init__(self):
        self._t0 = time.perf_counter()

    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self._t0) * 1000.0


class PerformanceLog:
    """Collects reports across engine calls for later comparison."""

    def __init__(self):
        self.history: List[PerformanceReport] = []

    def record(self, report: PerformanceReport) -> PerformanceReport:
        self.history.append(report)
        return report

    def get_history(self) -> List[PerformanceReport]:
        return self.history.copy()

    def to_df(self) -> pl.DataFrame:
        if not self.history:
            return pl.DataFrame(
                {
                    "algorithm": pl.Series(dtype=pl.Utf8),
                    "operation": pl.Series(dtype=pl.Utf8),
                    "data_size": pl.Series(dtype=pl.Int64),
                    "execution_time": pl.Series(dtype=pl.Float64),
                    "comparisons": pl.Series(dtype=pl.Int64),
                    "swaps": pl.Series(dtype=pl.Int64),
                }
            )
        return pl.DataFrame(
            [r.to_dict() for r in self.history],
            schema={
                "algorithm": pl.Utf8,
                "operation": pl.Utf8,
                "data_size": pl.Int64,
                "execution_time": pl.Float64,
                "comparisons": pl.Int64,
                "swaps": pl.Int64,
            },
        )

    def summary(self) -> pl.DataFrame:
        """Per-algorithm call count, mean time and total comparisons."""
        return (
            self.to_df()
            .group_by("algorithm")
            .agg(
                pl.len().alias("calls"),
                pl.col("execution_time").mean().alias("mean_time_ms"),
                pl.col("comparisons").sum().alias("total_comparisons"),
            )
            .sort("algorithm")
        )

    def __len__(self) -> int:
        return len(self.history)

    def __repr__(self) -> str:
        return f"PerformanceLog(n_reports={len(self)})"
