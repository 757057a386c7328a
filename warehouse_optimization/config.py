from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from .fields import ItemField


DEFAULT_INDEXED_FIELDS: Tuple[ItemField, ...] = (
    ItemField.ITEM_ID,
    ItemField.NAME,
    ItemField.CATEGORY,
    ItemField.SUPPLIER,
)


@dataclass(frozen=True)
class DistanceWeights:
    """Travel cost per unit step along each grid axis.

    Defaults: 10 between aisles, 5 between shelves, 2 between positions.
    """

    aisle: float = 10.0
    shelf: float = 5.0
    position: float = 2.0

    def validate(self) -> None:
        for name in ("aisle", "shelf", "position"):
            if getattr(self, name) < 0:
                raise ValueError(f"distance weight '{name}' must be >= 0")


@dataclass
class EngineConfig:
    """Tunables shared by the engines and the dashboard statistics."""

    distance_weights: DistanceWeights = field(default_factory=DistanceWeights)
    indexed_fields: Tuple[ItemField, ...] = DEFAULT_INDEXED_FIELDS
    low_stock_inclusive: bool = True  # quantity == min_stock counts as low

    def validate(self) -> None:
        self.distance_weights.validate()
        if not self.indexed_fields:
            raise ValueError("indexed_fields must name at least one field")

    @classmethod
    def from_dict(cls, obj: Dict[str, Any]) -> "EngineConfig":
        weights = DistanceWeights(**obj.get("distance_weights", {}))
        fields = tuple(ItemField.parse(f) for f in obj.get("indexed_fields", DEFAULT_INDEXED_FIELDS))
        cfg = cls(
            distance_weights=weights,
            indexed_fields=fields,
            low_stock_inclusive=bool(obj.get("low_stock_inclusive", True)),
        )
        cfg.validate()
        return cfg
