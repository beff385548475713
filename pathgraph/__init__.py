"""pathgraph: random connected digraphs and shortest-path metrics.

Primary API:
    generate() - Random weakly connected graph with n vertices and s edges
    compute() - Dijkstra shortest-path table from one origin
    shortest_path(), eccentricity(), radius(), diameter() - Derived queries
    validate_graph() - Schema check for graph values
    to_digraph() / from_digraph() - NetworkX interoperability

Example:
    import random
    from pathgraph import GeneratorConfig, compute, diameter, generate

    graph = generate(6, 10, GeneratorConfig(max_weight=10), rng=random.Random(7))
    table = compute(graph, 0)
    print(table[3].distance, table[3].path)
    print(diameter(graph))
"""

from __future__ import annotations

from pathgraph import logging
from pathgraph._version import __version__
from pathgraph.algorithms import (
    UNREACHABLE,
    PathResult,
    ShortestPathTable,
    center,
    compute,
    diameter,
    eccentricities,
    eccentricity,
    periphery,
    radius,
    shortest_path,
    shortest_path_length,
)
from pathgraph.config import GeneratorConfig
from pathgraph.generate import generate
from pathgraph.graph.convert import from_digraph, is_weakly_connected, to_digraph
from pathgraph.graph.validate import validate_graph

__all__ = [
    # Version
    "__version__",
    # Generation
    "generate",
    "GeneratorConfig",
    # Shortest paths
    "compute",
    "PathResult",
    "ShortestPathTable",
    "UNREACHABLE",
    "shortest_path",
    "shortest_path_length",
    # Metrics
    "eccentricity",
    "eccentricities",
    "radius",
    "diameter",
    "center",
    "periphery",
    # Graph values
    "validate_graph",
    "to_digraph",
    "from_digraph",
    "is_weakly_connected",
    # Utilities
    "logging",
]
