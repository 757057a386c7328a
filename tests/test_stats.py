from datetime import date
from pathlib import Path

import pytest

from warehouse_optimization.inventory import Inventory, SpaceUnits
from warehouse_optimization.stats import compute_dashboard_stats


DATA_DIR = (Path(__file__).parent / ".." / "warehouse_optimization" / "data").resolve()


@pytest.fixture
def sample():
    inv = Inventory.load_csv(str(DATA_DIR / "sample_inventory.csv"))
    spaces = SpaceUnits.load_csv(str(DATA_DIR / "sample_spaces.csv"))
    return inv, spaces


def test_dashboard_stats_on_sample(sample):
    inv, spaces = sample
    stats = compute_dashboard_stats(inv, spaces, today=date(2024, 1, 15))

    assert stats.total_items == 148
    assert stats.total_value == pytest.approx(12712.52)
    # Gaming Mouse, LED Monitor, USB Cable
    assert stats.low_stock_items == 3
    assert stats.space_utilization == pytest.approx(148 / 1160 * 100)
    assert stats.average_age == pytest.approx(4.5)


def test_low_stock_strict_mode(sample):
    inv, spaces = sample
    stats = compute_dashboard_stats(inv, spaces, today=date(2024, 1, 15), low_stock_inclusive=False)
    assert stats.low_stock_items == 3


def test_dashboard_stats_empty():
    stats = compute_dashboard_stats(Inventory(), SpaceUnits())
    assert stats.total_items == 0
    assert stats.total_value == 0.0
    assert stats.low_stock_items == 0
    assert stats.space_utilization == 0.0
    assert stats.average_age == 0.0
