"""Path queries and distance metrics built on `compute`.

Nothing here is cached: each call runs Dijkstra again, once per origin, so
`radius` and `diameter` cost O(V^3) on the linear-scan implementation.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from pathgraph.algorithms.dijkstra import PathResult, compute
from pathgraph.graph.types import Graph, Vertex


def _lookup(graph: Graph, origin: Vertex, destination: Vertex) -> PathResult:
    if destination not in graph:
        raise KeyError(f"Destination vertex '{destination}' is not in the graph.")
    return compute(graph, origin)[destination]


def shortest_path(
    graph: Graph, origin: Vertex, destination: Vertex
) -> Optional[Tuple[Vertex, ...]]:
    """Return one shortest path from `origin` to `destination`.

    Returns:
        Vertices from origin to destination inclusive, or None if no path
        exists.

    Raises:
        KeyError: If `origin` or `destination` is not in the graph.
    """
    result = _lookup(graph, origin, destination)
    return result.path if result.reachable else None


def shortest_path_length(
    graph: Graph, origin: Vertex, destination: Vertex
) -> Optional[int]:
    """Shortest distance from `origin` to `destination`, or None if unreachable."""
    return _lookup(graph, origin, destination).distance


def eccentricity(graph: Graph, origin: Vertex) -> int:
    """Largest finite distance from `origin`; unreachable vertices are skipped."""
    # origin is always reachable at distance 0
    return max(compute(graph, origin).distances().values())


def eccentricities(graph: Graph) -> Dict[Vertex, int]:
    return {vertex: eccentricity(graph, vertex) for vertex in graph}


def _require_vertices(graph: Graph, metric: str) -> None:
    if not graph:
        raise ValueError(f"{metric} is undefined for an empty graph.")


def radius(graph: Graph) -> int:
    """Minimum eccentricity over all vertices.

    Raises:
        ValueError: If the graph has no vertices.
    """
    _require_vertices(graph, "Radius")
    return min(eccentricity(graph, vertex) for vertex in graph)


def diameter(graph: Graph) -> int:
    """Maximum eccentricity over all vertices.

    Raises:
        ValueError: If the graph has no vertices.
    """
    _require_vertices(graph, "Diameter")
    return max(eccentricity(graph, vertex) for vertex in graph)


def center(graph: Graph) -> List[Vertex]:
    """Vertices whose eccentricity equals the radius, in graph order."""
    _require_vertices(graph, "Center")
    ecc = eccentricities(graph)
    smallest = min(ecc.values())
    return [vertex for vertex, value in ecc.items() if value == smallest]


def periphery(graph: Graph) -> List[Vertex]:
    """Vertices whose eccentricity equals the diameter, in graph order."""
    _require_vertices(graph, "Periphery")
    ecc = eccentricities(graph)
    largest = max(ecc.values())
    return [vertex for vertex, value in ecc.items() if value == largest]
