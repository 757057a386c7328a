from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence

import numpy as np

from .config import DistanceWeights
from .errors import UnknownLocationError
from .models import Location
from .performance import PerformanceReport, Stopwatch

logger = logging.getLogger(__name__)


class DistanceGraph:
    """Complete, symmetric distance matrix over a fixed list of locations.

    Locations are deduplicated on construction (first occurrence keeps its
    index). Distances follow a weighted Manhattan metric on (aisle index,
    shelf, position); the diagonal is zero. The matrix is read-only once built.
    """

    def __init__(self, locations: Optional[Iterable[Location]] = None, weights: Optional[DistanceWeights] = None):
        self.weights = weights or DistanceWeights()
        self._locations: List[Location] = []
        self._index: Dict[Location, int] = {}
        for loc in locations or []:
            if loc not in self._index:
                self._index[loc] = len(self._locations)
                self._locations.append(loc)
        self._matrix = self._build_matrix()

    def _build_matrix(self) -> np.ndarray:
        n = len(self._locations)
        if n == 0:
            mat = np.zeros((0, 0), dtype=float)
        else:
            aisle = np.array([loc.aisle_index for loc in self._locations], dtype=float)
            shelf = np.array([loc.shelf for loc in self._locations], dtype=float)
            pos = np.array([loc.position for loc in self._locations], dtype=float)
            mat = (
                self.weights.aisle * np.abs(aisle[:, None] - aisle[None, :])
                + self.weights.shelf * np.abs(shelf[:, None] - shelf[None, :])
                + self.weights.position * np.abs(pos[:, None] - pos[None, :])
            )
            np.fill_diagonal(mat, 0)
        mat.flags.writeable = False
        return mat

    @property
    def matrix(self) -> np.ndarray:
        return self._matrix

    def locations(self) -> List[Location]:
        return list(self._locations)

    def index_of(self, location: Location) -> Optional[int]:
        return self._index.get(location)

    def location_at(self, index: int) -> Location:
        return self._locations[index]

    def location_exists(self, location: Location) -> bool:
        return location in self._index

    def get_distance(self, a: Location, b: Location) -> Optional[float]:
        i, j = self._index.get(a), self._index.get(b)
        if i is None or j is None:
            return None
        return float(self._matrix[i, j])

    def __len__(self) -> int:
        return len(self._locations)

    def __repr__(self) -> str:
        return f"DistanceGraph(n_locations={len(self)})"


@dataclass(frozen=True)
class ShortestPath:
    path: List[int]
    distance: float
    visited_nodes: List[int]


@dataclass(frozen=True)
class PathResult:
    """Outcome of a multi-stop route query.

    ``path`` and ``visited_nodes`` hold graph indices; ``route`` holds the
    corresponding locations in travel order.
    """

    path: List[int]
    total_distance: float
    visited_nodes: List[int]
    performance: PerformanceReport
    route: List[Location] = field(default_factory=list)


class RoutePlanner:
    """Shortest-path and picking-route queries over a ``DistanceGraph``.

    Call :meth:`initialize_graph` before querying; re-initialising replaces
    the graph wholesale and must not overlap an in-flight query. Queries only
    read the graph and may share it.
    """

    algorithm = "Dijkstra's Algorithm"

    def __init__(self, weights: Optional[DistanceWeights] = None):
        self.weights = weights or DistanceWeights()
        self.graph = DistanceGraph(weights=self.weights)

    def initialize_graph(self, locations: Iterable[Location]) -> DistanceGraph:
        self.graph = DistanceGraph(locations, weights=self.weights)
        logger.info("route graph initialized with %d locations", len(self.graph))
        return self.graph

    def shortest_path(self, source: int, target: int) -> ShortestPath:
        """Dense O(V^2) Dijkstra between two node indices.

        Each round picks the unvisited node with the smallest tentative
        distance (lowest index on ties) and stops once ``target`` is visited.
        """
        mat = self.graph.matrix
        n = mat.shape[0]
        dist = np.full(n, np.inf)
        prev = np.full(n, -1, dtype=np.int64)
        visited = np.zeros(n, dtype=bool)
        visited_nodes: List[int] = []
        dist[source] = 0.0

        for _ in range(n):
            tentative = np.where(visited, np.inf, dist)
            current = int(np.argmin(tentative))
            if not np.isfinite(tentative[current]):
                break
            visited[current] = True
            visited_nodes.append(current)
            if current == target:
                break
            row = mat[current]
            candidate = dist[current] + row
            better = (~visited) & np.isfinite(row) & (candidate < dist)
            dist[better] = candidate[better]
            prev[better] = current

        path: List[int] = []
        node = target
        while node != -1:
            path.append(int(node))
            node = int(prev[node])
        path.reverse()
        return ShortestPath(path=path, distance=float(dist[target]), visited_nodes=visited_nodes)

    def find_optimal_picking_path(self, start: Location, destinations: Sequence[Location]) -> PathResult:
        """Nearest-neighbour tour from ``start`` through every destination.

        Raises:
            UnknownLocationError: if ``start`` or any destination is not in the graph.
        """
        watch = Stopwatch()
        comparisons = 0

        start_idx = self._require(start)
        dest_indices = [self._require(d) for d in destinations]

        path = [start_idx]
        visited = {start_idx}
        visited_nodes = [start_idx]
        total = 0.0
        current = start_idx

        while len(visited) <= len(dest_indices):
            nearest: Optional[ShortestPath] = None
            nearest_idx = -1
            nearest_distance = np.inf
            for d in dest_indices:
                comparisons += 1
                if d in visited:
                    continue
                leg = self.shortest_path(current, d)
                if leg.distance < nearest_distance:
                    nearest, nearest_idx, nearest_distance = leg, d, leg.distance
            if nearest is None:
                break
            path.extend(nearest.path[1:])
            visited_nodes.extend(nearest.visited_nodes)
            total += nearest.distance
            visited.add(nearest_idx)
            current = nearest_idx

        report = PerformanceReport(
            algorithm=self.algorithm,
            operation="Shortest Path Finding",
            data_size=len(self.graph),
            execution_time=watch.elapsed_ms(),
            comparisons=comparisons,
        )
        logger.debug("route %s -> %d stops: distance=%.1f", start, len(dest_indices), total)
        return PathResult(
            path=path,
            total_distance=total,
            visited_nodes=visited_nodes,
            performance=report,
            route=[self.graph.location_at(i) for i in path],
        )

    def _require(self, location: Location) -> int:
        idx = self.graph.index_of(location)
        if idx is None:
            raise UnknownLocationError(location)
        return idx
