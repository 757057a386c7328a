from __future__ import annotations

import math
import string
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Location:
    """A pick face in the warehouse grid: aisle letter, shelf and position.

    Equality and hashing are structural, so a Location can be used directly as
    a graph-node key.
    """

    aisle: str
    shelf: int
    position: int

    def __post_init__(self):
        if not isinstance(self.aisle, str) or len(self.aisle) != 1 or self.aisle not in string.ascii_letters:
            raise ValueError(f"Location aisle must be a single letter A-Z, got {self.aisle!r}")

    @property
    def aisle_index(self) -> int:
        """1-based alphabetic index of the aisle letter (A=1, B=2, ...)."""
        return ord(self.aisle[0].upper()) - 64

    @property
    def code(self) -> str:
        return f"{self.aisle}-{self.shelf}-{self.position}"

    @classmethod
    def parse(cls, code: str) -> "Location":
        """Parse an ``"A-1-2"`` style code."""
        parts = str(code).split("-")
        if len(parts) != 3:
            raise ValueError(f"Location code must look like 'A-1-2', got '{code}'")
        aisle, shelf, position = parts
        return cls(aisle=aisle, shelf=int(shelf), position=int(position))

    def to_dict(self) -> Dict[str, Any]:
        return {"aisle": self.aisle, "shelf": self.shelf, "position": self.position}

    def __str__(self) -> str:
        return self.code


def _parse_date(value: Any) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    raise TypeError("Unsupported date type")


@dataclass(frozen=True)
class Item:
    """An inventory record as supplied by the caller.

    Engines read items but never mutate or persist them.
    """

    item_id: str
    name: str
    category: str
    quantity: int
    weight: float
    value: float
    location: Location
    supplier: str = ""
    unit_price: float = 0.0
    min_stock: int = 0
    max_stock: int = 0
    date_added: Optional[date] = None
    last_updated: Optional[date] = None

    def __post_init__(self):
        if self.quantity < 0:
            raise ValueError(f"Item '{self.item_id}': quantity must be >= 0, got {self.quantity}")
        for name in ("weight", "value"):
            v = getattr(self, name)
            if not math.isfinite(v):
                raise ValueError(f"Item '{self.item_id}': {name} must be finite, got {v}")
        if self.weight < 0:
            raise ValueError(f"Item '{self.item_id}': weight must be >= 0, got {self.weight}")

    @property
    def value_density(self) -> float:
        """Value per unit of weight.

        Zero-weight items rank ahead of everything else when they carry value
        (``inf``) and behind everything when they carry none (``0.0``).
        """
        if self.weight == 0:
            return math.inf if self.value > 0 else 0.0
        return self.value / self.weight

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> "Item":
        """Build from a flat record (``aisle``/``shelf``/``position`` columns) or
        a nested ``location`` mapping/code."""
        loc = obj.get("location")
        if isinstance(loc, Location):
            location = loc
        elif isinstance(loc, dict):
            location = Location(str(loc["aisle"]), int(loc["shelf"]), int(loc["position"]))
        elif isinstance(loc, str):
            location = Location.parse(loc)
        else:
            location = Location(str(obj["aisle"]), int(obj["shelf"]), int(obj["position"]))
        return cls(
            item_id=str(obj["item_id"]),
            name=str(obj["name"]),
            category=str(obj.get("category", "")),
            quantity=int(obj["quantity"]),
            weight=float(obj["weight"]),
            value=float(obj["value"]),
            location=location,
            supplier=str(obj.get("supplier") or ""),
            unit_price=float(obj.get("unit_price") or 0.0),
            min_stock=int(obj.get("min_stock") or 0),
            max_stock=int(obj.get("max_stock") or 0),
            date_added=_parse_date(obj.get("date_added")),
            last_updated=_parse_date(obj.get("last_updated")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "item_id": self.item_id,
            "name": self.name,
            "category": self.category,
            "quantity": self.quantity,
            "weight": self.weight,
            "value": self.value,
            "aisle": self.location.aisle,
            "shelf": self.location.shelf,
            "position": self.location.position,
            "supplier": self.supplier,
            "unit_price": self.unit_price,
            "min_stock": self.min_stock,
            "max_stock": self.max_stock,
            "date_added": self.date_added.isoformat() if self.date_added else None,
            "last_updated": self.last_updated.isoformat() if self.last_updated else None,
        }


@dataclass
class SpaceUnit:
    """A storage slot with bounded capacity.

    Long-lived and owned by the caller. ``GreedyBestFit`` mutates ``occupied``,
    ``available`` and ``item_id`` in place; ``available == capacity - occupied``
    holds after every mutation made through :meth:`store`.
    """

    space_id: str
    location: Location
    capacity: int
    occupied: int = 0
    available: int = field(default=-1)
    item_id: Optional[str] = None

    def __post_init__(self):
        if self.capacity < 0:
            raise ValueError(f"Space '{self.space_id}': capacity must be >= 0")
        if self.available == -1:
            self.available = self.capacity - self.occupied
        if self.occupied < 0 or self.available < 0 or self.occupied + self.available != self.capacity:
            raise ValueError(
                f"Space '{self.space_id}': occupied ({self.occupied}) + available "
                f"({self.available}) must equal capacity ({self.capacity})"
            )

    def store(self, item: Item) -> None:
        if item.quantity > self.available:
            raise ValueError(
                f"Space '{self.space_id}' has {self.available} available, cannot store {item.quantity}"
            )
        self.available -= item.quantity
        self.occupied += item.quantity
        self.item_id = item.item_id

    @property
    def utilization(self) -> float:
        return (self.occupied / self.capacity) * 100 if self.capacity else 0.0

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> "SpaceUnit":
        capacity = int(obj["capacity"])
        occupied = int(obj.get("occupied") or 0)
        available = obj.get("available")
        item_id = obj.get("item_id")
        return cls(
            space_id=str(obj["space_id"]),
            location=Location(str(obj["aisle"]), int(obj["shelf"]), int(obj["position"])),
            capacity=capacity,
            occupied=occupied,
            available=int(available) if available is not None else capacity - occupied,
            item_id=str(item_id) if item_id else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "space_id": self.space_id,
            "aisle": self.location.aisle,
            "shelf": self.location.shelf,
            "position": self.location.position,
            "capacity": self.capacity,
            "occupied": self.occupied,
            "available": self.available,
            "item_id": self.item_id,
        }


@dataclass(frozen=True)
class Allocation:
    """An item placed into a space; efficiency is the item's share of capacity."""

    item: Item
    space: SpaceUnit
    efficiency: float
