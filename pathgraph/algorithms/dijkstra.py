"""Single-source shortest paths with explicit path tracking."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from pathgraph.algorithms.distance import INFINITY, ZERO, Distance
from pathgraph.graph.types import Graph, Vertex, successors
from pathgraph.logging import get_logger

_logger = get_logger(__name__)


@dataclass(frozen=True)
class PathResult:
    """Shortest distance and one witnessing path from a fixed origin.

    Attributes:
        distance: Total weight of `path`, or None when the target is unreachable.
        path: Vertices from origin to target inclusive; empty when unreachable.
    """

    distance: Optional[int]
    path: Tuple[Vertex, ...] = ()

    @property
    def reachable(self) -> bool:
        return self.distance is not None


#: Table entry for vertices with no path from the origin.
UNREACHABLE = PathResult(distance=None, path=())


class ShortestPathTable(Mapping[Vertex, PathResult]):
    """Read-only mapping of every vertex to its `PathResult` from `origin`."""

    __slots__ = ("_origin", "_entries")

    def __init__(self, origin: Vertex, entries: Mapping[Vertex, PathResult]) -> None:
        self._origin = origin
        self._entries: Mapping[Vertex, PathResult] = MappingProxyType(dict(entries))

    @property
    def origin(self) -> Vertex:
        return self._origin

    def __getitem__(self, vertex: Vertex) -> PathResult:
        return self._entries[vertex]

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"ShortestPathTable(origin={self._origin!r}, "
            f"entries={dict(self._entries)!r})"
        )

    def reachable(self) -> Iterator[Tuple[Vertex, PathResult]]:
        """Yield ``(vertex, result)`` for every reachable vertex, origin included."""
        for vertex, result in self._entries.items():
            if result.reachable:
                yield vertex, result

    def distances(self) -> Dict[Vertex, int]:
        """Finite distances keyed by vertex; unreachable vertices are omitted."""
        return {vertex: result.distance for vertex, result in self.reachable()}


def _check_edges(graph: Graph) -> None:
    """Reject dangling successors and weights Dijkstra cannot handle."""
    for u in graph:
        for v, weight in successors(graph, u):
            if v not in graph:
                raise ValueError(
                    f"Successor {v!r} of vertex {u!r} is not a vertex of the graph."
                )
            if isinstance(weight, bool) or not isinstance(weight, int) or weight < 0:
                raise ValueError(
                    f"Edge {u!r} -> {v!r} has weight {weight!r}; "
                    "weights must be non-negative integers"
                )


def compute(graph: Graph, origin: Vertex) -> ShortestPathTable:
    """Run Dijkstra's algorithm from `origin`.

    The next vertex to finalize is found with a linear scan over the
    unvisited set, so a run costs O(V^2). A candidate distance replaces the
    current one only when strictly smaller, which keeps the first discovered
    path among equal-cost alternatives. Among unvisited vertices at the same
    distance the one earliest in graph order is finalized first.

    Args:
        graph: Weighted or unweighted graph value. Unweighted edges weigh 1.
        origin: Source vertex.

    Returns:
        Table with an entry for every vertex of `graph`; vertices with no
        path from `origin` map to `UNREACHABLE`.

    Raises:
        KeyError: If `origin` is not a vertex of `graph`.
        ValueError: If a successor is not a vertex of `graph`, or an edge
            weight is negative or not an integer.
    """
    if origin not in graph:
        raise KeyError(f"Origin vertex '{origin}' is not in the graph.")
    _check_edges(graph)

    dist: Dict[Vertex, Distance] = {vertex: INFINITY for vertex in graph}
    paths: Dict[Vertex, List[Vertex]] = {vertex: [] for vertex in graph}
    dist[origin] = ZERO
    paths[origin] = [origin]

    # dict as an insertion-ordered set
    unvisited: Dict[Vertex, None] = dict.fromkeys(graph)
    del unvisited[origin]
    current = origin

    while unvisited:
        for node, weight in successors(graph, current):
            if node not in unvisited:
                continue
            candidate = dist[current] + weight
            if candidate < dist[node]:
                dist[node] = candidate
                paths[node] = paths[current] + [node]

        current = min(unvisited, key=dist.__getitem__)
        if not dist[current].is_finite:
            _logger.debug(
                "Dijkstra from %r: %d vertices unreachable", origin, len(unvisited)
            )
            break
        del unvisited[current]

    entries: Dict[Vertex, PathResult] = {}
    for vertex, distance in dist.items():
        if distance.is_finite:
            entries[vertex] = PathResult(distance.value, tuple(paths[vertex]))
        else:
            entries[vertex] = UNREACHABLE
    return ShortestPathTable(origin, entries)
