import random
from pathlib import Path

import pytest

from warehouse_optimization.inventory import Inventory, SpaceUnits
from warehouse_optimization.models import Item, Location, SpaceUnit
from warehouse_optimization.space_allocation import GreedyBestFit


DATA_DIR = (Path(__file__).parent / ".." / "warehouse_optimization" / "data").resolve()


def make_item(item_id, quantity, value, weight=1.0):
    return Item(
        item_id=item_id,
        name=item_id,
        category="misc",
        quantity=quantity,
        weight=weight,
        value=value,
        location=Location("A", 1, 1),
    )


def make_space(space_id, capacity, occupied=0):
    return SpaceUnit(space_id=space_id, location=Location("A", 1, 1), capacity=capacity, occupied=occupied)


def test_best_fit_prefers_tightest_space_and_ranks_by_density():
    s1, s2, full = make_space("S1", 10), make_space("S2", 5), make_space("S3", 8, occupied=8)
    a = make_item("a", quantity=5, value=100)
    b = make_item("b", quantity=4, value=50)
    c = make_item("c", quantity=7, value=10)

    res = GreedyBestFit().allocate_space([c, b, a], [s1, s2, full])

    assert [(al.item.item_id, al.space.space_id) for al in res.allocations] == [("a", "S2"), ("b", "S1")]
    assert [al.efficiency for al in res.allocations] == [pytest.approx(100.0), pytest.approx(40.0)]
    # c alone would have fit S1; density ordering starved it
    assert res.unallocated == [c]
    # a scans S1,S2; S2 then drops out; b and c scan S1 only
    assert res.performance.comparisons == 4
    assert res.performance.algorithm == "Greedy Best-Fit"
    assert res.performance.operation == "Space Allocation"


def test_allocation_mutates_spaces_in_place():
    s1 = make_space("S1", 10, occupied=2)
    GreedyBestFit().allocate_space([make_item("a", 3, 10.0)], [s1])
    assert (s1.occupied, s1.available, s1.item_id) == (5, 5, "a")


def test_ties_keep_original_order():
    s1, s2 = make_space("S1", 4), make_space("S2", 4)
    items = [make_item("x", 4, 10.0), make_item("y", 4, 10.0), make_item("z", 4, 10.0)]
    res = GreedyBestFit().allocate_space(items, [s1, s2])
    assert [(al.item.item_id, al.space.space_id) for al in res.allocations] == [("x", "S1"), ("y", "S2")]
    assert [it.item_id for it in res.unallocated] == ["z"]


def test_zero_weight_item_is_served_first():
    s1 = make_space("S1", 5)
    light = make_item("free", 5, value=1.0, weight=0.0)
    heavy = make_item("dense", 5, value=1000.0, weight=0.01)
    res = GreedyBestFit().allocate_space([heavy, light], [s1])
    assert [al.item.item_id for al in res.allocations] == ["free"]
    assert res.unallocated == [heavy]


def test_identical_spaces_are_tracked_by_identity():
    s1, s2 = make_space("S", 3), make_space("S", 3)
    res = GreedyBestFit().allocate_space([make_item("a", 3, 9.0), make_item("b", 3, 3.0)], [s1, s2])
    assert res.allocations[0].space is s1
    assert res.allocations[1].space is s2
    assert res.unallocated == []


def test_empty_inputs():
    res = GreedyBestFit().allocate_space([], [make_space("S1", 5)])
    assert res.allocations == [] and res.unallocated == []
    item = make_item("a", 1, 1.0)
    res = GreedyBestFit().allocate_space([item], [])
    assert res.allocations == [] and res.unallocated == [item]


def test_capacity_invariants_hold_on_random_inputs():
    rng = random.Random(11)
    for _ in range(25):
        spaces = [make_space(f"S{k}", rng.randint(1, 30), 0) for k in range(rng.randint(0, 8))]
        items = [
            make_item(f"i{k}", rng.randint(0, 20), rng.uniform(1, 100), rng.uniform(0.1, 5))
            for k in range(rng.randint(0, 15))
        ]
        res = GreedyBestFit().allocate_space(items, spaces)
        for s in spaces:
            assert s.available >= 0
            assert s.occupied + s.available == s.capacity
        assert len(res.allocations) + len(res.unallocated) == len(items)


def test_sample_data_allocation():
    inv = Inventory.load_csv(str(DATA_DIR / "sample_inventory.csv"))
    spaces = SpaceUnits.load_csv(str(DATA_DIR / "sample_spaces.csv"))
    res = GreedyBestFit().allocate_space(inv.items(), spaces.spaces())

    # highest density first: Wireless Headphones (3599.55 / 0.3)
    assert res.allocations[0].item.item_id == "INV001"
    for s in spaces:
        assert s.occupied + s.available == s.capacity
