from __future__ import annotations

import random
import string
from datetime import date, timedelta
from typing import List, Tuple

from .inventory import Inventory, SpaceUnits
from .models import Item, Location, SpaceUnit


CATEGORIES = ["Electronics", "Furniture", "Accessories", "Office Supplies", "Storage"]
NOUNS = ["Cable", "Chair", "Lamp", "Monitor", "Mouse", "Keyboard", "Stand", "Headset", "Shelf", "Box"]
ADJECTIVES = ["Wireless", "Gaming", "Compact", "Ergonomic", "Heavy", "LED", "Portable", "USB"]


class DataGenerator:
    """Generates synthetic inventories and space layouts.

    API:
        generate_samples(n_items, n_aisles, shelves_per_aisle, positions_per_shelf,
                         n_samples=1, seed=None)

    Parameters:
        n_items: Number of items to generate (>= 0)
        n_aisles: Number of aisles, lettered from 'A' (1..26)
        shelves_per_aisle: Shelves per aisle
        positions_per_shelf: Positions per shelf
        n_samples: Number of independent samples to generate
        seed: Random seed for reproducibility

    Every grid cell becomes one space unit; items are placed on random cells.
    Returns a list of tuples: (Inventory, SpaceUnits)
    """

    def generate_samples(
        self,
        n_items: int,
        n_aisles: int,
        shelves_per_aisle: int,
        positions_per_shelf: int,
        n_samples: int = 1,
        seed: int | None = None,
    ) -> List[Tuple[Inventory, SpaceUnits]]:
        if n_items < 0:
            raise ValueError(f"n_items must be >= 0, got {n_items}")
        if not 1 <= n_aisles <= 26:
            raise ValueError(f"n_aisles must be in [1, 26], got {n_aisles}")
        if shelves_per_aisle < 1 or positions_per_shelf < 1:
            raise ValueError("shelves_per_aisle and positions_per_shelf must be >= 1")

        rng = random.Random(seed)
        grid = [
            Location(aisle, shelf, pos)
            for aisle in string.ascii_uppercase[:n_aisles]
            for shelf in range(1, shelves_per_aisle + 1)
            for pos in range(1, positions_per_shelf + 1)
        ]

        samples: List[Tuple[Inventory, SpaceUnits]] = []
        for _ in range(n_samples):
            items = [self._make_item(k, rng.choice(grid), rng) for k in range(n_items)]
            spaces = [
                SpaceUnit(space_id=loc.code, location=loc, capacity=rng.choice([30, 50, 100]))
                for loc in grid
            ]
            samples.append((Inventory(items), SpaceUnits(spaces)))
        return samples

    def _make_item(self, k: int, location: Location, rng: random.Random) -> Item:
        quantity = rng.randint(1, 60)
        unit_price = round(rng.uniform(5.0, 300.0), 2)
        min_stock = rng.randint(5, 25)
        added = date(2024, 1, 1) + timedelta(days=rng.randint(0, 60))
        return Item(
            item_id=f"INV{k:05d}",
            name=f"{rng.choice(ADJECTIVES)} {rng.choice(NOUNS)}",
            category=rng.choice(CATEGORIES),
            quantity=quantity,
            weight=round(rng.uniform(0.1, 20.0), 2),
            value=round(quantity * unit_price, 2),
            location=location,
            supplier=f"Supplier{rng.randint(1, 12)}",
            unit_price=unit_price,
            min_stock=min_stock,
            max_stock=min_stock + rng.randint(10, 80),
            date_added=added,
            last_updated=added + timedelta(days=rng.randint(0, 10)),
        )
