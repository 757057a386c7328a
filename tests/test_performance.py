import dataclasses

import polars as pl
import pytest

from warehouse_optimization.config import DistanceWeights, EngineConfig
from warehouse_optimization.fields import ItemField
from warehouse_optimization.models import Item, Location
from warehouse_optimization.performance import PerformanceLog, PerformanceReport
from warehouse_optimization.sorting import MergeSort, QuickSort


def make_items(n):
    return [
        Item(item_id=f"i{k}", name=f"item {k}", category="misc", quantity=(k * 7) % 11,
             weight=1.0, value=1.0, location=Location("A", 1, 1))
        for k in range(n)
    ]


def test_report_is_immutable():
    report = PerformanceReport(algorithm="Merge Sort", operation="Sort by name", data_size=3, execution_time=0.1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        report.comparisons = 5
    assert report.to_dict()["swaps"] is None


def test_execution_time_is_recorded():
    res = MergeSort().sort(make_items(50), "quantity")
    assert res.performance.execution_time >= 0.0


def test_performance_log_frames():
    log = PerformanceLog()
    items = make_items(20)
    log.record(MergeSort().sort(items, "quantity").performance)
    log.record(QuickSort().sort(items, "quantity").performance)
    log.record(MergeSort().sort(items, "name").performance)

    df = log.to_df()
    assert df.height == 3
    assert df.schema["comparisons"] == pl.Int64

    summary = log.summary()
    assert summary.get_column("algorithm").to_list() == ["Merge Sort", "Quick Sort"]
    assert summary.get_column("calls").to_list() == [2, 1]
    assert len(log.get_history()) == 3


def test_performance_log_empty_frame():
    df = PerformanceLog().to_df()
    assert df.height == 0
    assert "execution_time" in df.columns


def test_engine_config_from_dict():
    cfg = EngineConfig.from_dict(
        {"distance_weights": {"aisle": 4, "shelf": 2, "position": 1}, "indexed_fields": ["name", "supplier"]}
    )
    assert cfg.distance_weights == DistanceWeights(aisle=4, shelf=2, position=1)
    assert cfg.indexed_fields == (ItemField.NAME, ItemField.SUPPLIER)
    assert cfg.low_stock_inclusive is True


def test_engine_config_rejects_bad_values():
    with pytest.raises(ValueError, match="must be >= 0"):
        EngineConfig.from_dict({"distance_weights": {"aisle": -1}})
    with pytest.raises(ValueError, match="Unknown item field"):
        EngineConfig.from_dict({"indexed_fields": ["colour"]})
    with pytest.raises(ValueError, match="at least one field"):
        EngineConfig.from_dict({"indexed_fields": []})
