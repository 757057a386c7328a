from __future__ import annotations

from enum import Enum
from typing import Any, Union

from .models import Item


class ItemField(str, Enum):
    """Item attributes that engines can order or search by."""

    ITEM_ID = "item_id"
    NAME = "name"
    CATEGORY = "category"
    SUPPLIER = "supplier"
    QUANTITY = "quantity"
    WEIGHT = "weight"
    VALUE = "value"
    UNIT_PRICE = "unit_price"
    MIN_STOCK = "min_stock"
    MAX_STOCK = "max_stock"
    LOCATION = "location"

    @classmethod
    def parse(cls, field: Union["ItemField", str]) -> "ItemField":
        if isinstance(field, ItemField):
            return field
        try:
            return cls(str(field))
        except ValueError:
            valid = ", ".join(f.value for f in cls)
            raise ValueError(f"Unknown item field '{field}'; expected one of: {valid}") from None

    def raw(self, item: Item) -> Any:
        if self is ItemField.LOCATION:
            return item.location.code
        return getattr(item, self.value)

    def sort_key(self, item: Item) -> Any:
        """Comparison key: strings lowercased, numbers untouched."""
        v = self.raw(item)
        if isinstance(v, str):
            return v.lower()
        return v

    def text(self, item: Item) -> str:
        """Display form used by substring scans; whole floats drop the ``.0``."""
        v = self.raw(item)
        if isinstance(v, str):
            return v
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        return str(v)


FieldSelector = Union[ItemField, str]
