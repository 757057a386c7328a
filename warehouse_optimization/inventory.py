from __future__ import annotations

from typing import Any, Dict, Iterable, Iterator, List, Optional

import polars as pl

from .models import Item, Location, SpaceUnit


ITEM_SCHEMA = {
    "item_id": pl.Utf8,
    "name": pl.Utf8,
    "category": pl.Utf8,
    "quantity": pl.Int64,
    "weight": pl.Float64,
    "value": pl.Float64,
    "aisle": pl.Utf8,
    "shelf": pl.Int64,
    "position": pl.Int64,
    "supplier": pl.Utf8,
    "unit_price": pl.Float64,
    "min_stock": pl.Int64,
    "max_stock": pl.Int64,
    "date_added": pl.Utf8,
    "last_updated": pl.Utf8,
}

SPACE_SCHEMA = {
    "space_id": pl.Utf8,
    "aisle": pl.Utf8,
    "shelf": pl.Int64,
    "position": pl.Int64,
    "capacity": pl.Int64,
    "occupied": pl.Int64,
    "available": pl.Int64,
    "item_id": pl.Utf8,
}


class Inventory:
    """Ordered, id-unique collection of items with CSV and DataFrame views."""

    def __init__(self, items: Optional[Iterable[Item]] = None):
        self._items: List[Item] = []
        self._by_id: Dict[str, Item] = {}
        for item in items or []:
            self.add(item)

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "Inventory":
        return cls(Item.from_dict(r) for r in records)

    @classmethod
    def load_csv(cls, path: str) -> "Inventory":
        df = pl.read_csv(path, infer_schema_length=0)
        missing = {"item_id", "name", "quantity", "weight", "value", "aisle", "shelf", "position"} - set(df.columns)
        if missing:
            raise ValueError(f"CSV is missing required columns: {sorted(missing)}")
        return cls.from_records(df.to_dicts())

    def save_csv(self, path: str) -> None:
        self.to_df().write_csv(path)

    def add(self, item: Item) -> None:
        if item.item_id in self._by_id:
            raise ValueError(f"Duplicate item id '{item.item_id}'")
        self._items.append(item)
        self._by_id[item.item_id] = item

    def get(self, item_id: str) -> Optional[Item]:
        return self._by_id.get(str(item_id))

    def items(self) -> List[Item]:
        return list(self._items)

    def unique_locations(self) -> List[Location]:
        """Distinct item locations, first occurrence order."""
        return list(dict.fromkeys(item.location for item in self._items))

    def to_df(self) -> pl.DataFrame:
        if not self._items:
            return pl.DataFrame({k: pl.Series(dtype=v) for k, v in ITEM_SCHEMA.items()})
        return pl.DataFrame([it.to_dict() for it in self._items], schema=ITEM_SCHEMA)

    def __iter__(self) -> Iterator[Item]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"Inventory(n_items={len(self)})"


class SpaceUnits:
    """Caller-owned space units; the objects handed out are the live records."""

    def __init__(self, spaces: Optional[Iterable[SpaceUnit]] = None):
        self._spaces: List[SpaceUnit] = list(spaces or [])
        ids = [s.space_id for s in self._spaces]
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate space ids")

    @classmethod
    def from_records(cls, records: Iterable[Dict[str, Any]]) -> "SpaceUnits":
        return cls(SpaceUnit.from_dict(r) for r in records)

    @classmethod
    def load_csv(cls, path: str) -> "SpaceUnits":
        df = pl.read_csv(path, infer_schema_length=0)
        missing = {"space_id", "aisle", "shelf", "position", "capacity"} - set(df.columns)
        if missing:
            raise ValueError(f"CSV is missing required columns: {sorted(missing)}")
        return cls.from_records(df.to_dicts())

    def save_csv(self, path: str) -> None:
        self.to_df().write_csv(path)

    def spaces(self) -> List[SpaceUnit]:
        return self._spaces

    def to_df(self) -> pl.DataFrame:
        if not self._spaces:
            return pl.DataFrame({k: pl.Series(dtype=v) for k, v in SPACE_SCHEMA.items()})
        return pl.DataFrame([s.to_dict() for s in self._spaces], schema=SPACE_SCHEMA)

    def __iter__(self) -> Iterator[SpaceUnit]:
        return iter(self._spaces)

    def __len__(self) -> int:
        return len(self._spaces)

    def __repr__(self) -> str:
        return f"SpaceUnits(n_spaces={len(self)})"
