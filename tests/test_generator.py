import pytest

from warehouse_optimization.generator import DataGenerator
from warehouse_optimization.inventory import Inventory, SpaceUnits
from warehouse_optimization.knapsack import KnapsackOptimizer
from warehouse_optimization.routing import RoutePlanner
from warehouse_optimization.sorting import MergeSort, QuickSort
from warehouse_optimization.space_allocation import GreedyBestFit


def test_generate_shapes_and_types():
    gen = DataGenerator()
    samples = gen.generate_samples(n_items=30, n_aisles=3, shelves_per_aisle=2, positions_per_shelf=4, n_samples=2, seed=7)
    assert len(samples) == 2
    for inv, spaces in samples:
        assert isinstance(inv, Inventory)
        assert isinstance(spaces, SpaceUnits)
        assert len(inv) == 30
        assert len(spaces) == 3 * 2 * 4

        space_codes = {s.space_id for s in spaces}
        for item in inv:
            assert item.location.code in space_codes
            assert item.weight > 0
            assert item.min_stock < item.max_stock
            assert item.last_updated >= item.date_added
        for s in spaces:
            assert s.occupied == 0
            assert s.available == s.capacity


def test_seed_reproducibility():
    gen = DataGenerator()
    a = gen.generate_samples(20, 2, 2, 2, seed=123)[0]
    b = gen.generate_samples(20, 2, 2, 2, seed=123)[0]
    assert a[0].to_df().equals(b[0].to_df())
    assert a[1].to_df().equals(b[1].to_df())


def test_invalid_arguments():
    gen = DataGenerator()
    with pytest.raises(ValueError, match="n_items"):
        gen.generate_samples(-1, 2, 2, 2)
    with pytest.raises(ValueError, match="n_aisles"):
        gen.generate_samples(5, 27, 2, 2)
    with pytest.raises(ValueError, match="must be >= 1"):
        gen.generate_samples(5, 2, 0, 2)


def test_engines_on_generated_data():
    inv, spaces = DataGenerator().generate_samples(300, 4, 3, 5, seed=42)[0]
    items = inv.items()

    merged = MergeSort().sort(items, "value").sorted_items
    quick = QuickSort().sort(items, "value").sorted_items
    assert [it.value for it in merged] == [it.value for it in quick]

    alloc = GreedyBestFit().allocate_space(items, spaces.spaces())
    assert len(alloc.allocations) + len(alloc.unallocated) == len(items)
    for s in spaces:
        assert 0 <= s.occupied <= s.capacity

    knap = KnapsackOptimizer().optimize_value(items[:40], 100)
    assert knap.total_weight <= 100

    planner = RoutePlanner()
    planner.initialize_graph(inv.unique_locations())
    stops = [it.location for it in items[:8]]
    route = planner.find_optimal_picking_path(stops[0], stops[1:])
    assert set(route.route) == set(stops)
