"""Shortest-path engine: Dijkstra tables and derived distance metrics."""

from pathgraph.algorithms.dijkstra import (
    UNREACHABLE,
    PathResult,
    ShortestPathTable,
    compute,
)
from pathgraph.algorithms.distance import INFINITY, Distance
from pathgraph.algorithms.metrics import (
    center,
    diameter,
    eccentricities,
    eccentricity,
    periphery,
    radius,
    shortest_path,
    shortest_path_length,
)

__all__ = [
    "compute",
    "PathResult",
    "ShortestPathTable",
    "UNREACHABLE",
    "Distance",
    "INFINITY",
    "shortest_path",
    "shortest_path_length",
    "eccentricity",
    "eccentricities",
    "radius",
    "diameter",
    "center",
    "periphery",
]
