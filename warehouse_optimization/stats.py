from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

import polars as pl

from .inventory import Inventory, SpaceUnits


@dataclass(frozen=True)
class DashboardStats:
    total_items: int
    total_value: float
    low_stock_items: int
    space_utilization: float
    average_age: float


def compute_dashboard_stats(
    inventory: Inventory,
    spaces: SpaceUnits,
    today: Optional[date] = None,
    low_stock_inclusive: bool = True,
) -> DashboardStats:
    """Headline figures for an inventory snapshot.

    Args:
        inventory: items to summarise
        spaces: space units used for the utilisation figure
        today: reference date for item ages (defaults to ``date.today()``)
        low_stock_inclusive: count ``quantity == min_stock`` as low stock

    Returns:
        DashboardStats; empty inputs produce zeros.
    """
    today = today or date.today()
    items_df = inventory.to_df()

    if items_df.height == 0:
        total_items, total_value, low_stock, average_age = 0, 0.0, 0, 0.0
    else:
        low_expr = (
            pl.col("quantity") <= pl.col("min_stock")
            if low_stock_inclusive
            else pl.col("quantity") < pl.col("min_stock")
        )
        ages = (
            items_df.select(pl.col("date_added").str.to_date("%Y-%m-%d", strict=False).alias("added"))
            .filter(pl.col("added").is_not_null())
            .select((pl.lit(today) - pl.col("added")).dt.total_days().alias("age"))
        )
        agg = items_df.select(
            pl.col("quantity").sum().alias("total_items"),
            pl.col("value").sum().alias("total_value"),
            low_expr.sum().alias("low_stock"),
        ).row(0, named=True)
        total_items = int(agg["total_items"])
        total_value = float(agg["total_value"])
        low_stock = int(agg["low_stock"])
        average_age = float(ages.get_column("age").mean()) if ages.height else 0.0

    spaces_df = spaces.to_df()
    total_capacity = int(spaces_df.get_column("capacity").sum()) if spaces_df.height else 0
    total_occupied = int(spaces_df.get_column("occupied").sum()) if spaces_df.height else 0
    utilization = (total_occupied / total_capacity) * 100 if total_capacity > 0 else 0.0

    return DashboardStats(
        total_items=total_items,
        total_value=total_value,
        low_stock_items=low_stock,
        space_utilization=utilization,
        average_age=average_age,
    )
