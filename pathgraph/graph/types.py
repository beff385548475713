"""Graph value types and read-only helpers.

A graph is a plain mapping from vertex to its outgoing adjacency. Two
representations are supported:

    unweighted: {"A": ["B", "C"], "B": ["C"], "C": []}
    weighted:   {"A": {"B": 1, "C": 4}, "B": {"C": 1}, "C": {}}

Every successor must also be a top-level key. Unweighted edges count as
weight 1 when distances are computed.
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterator, List, Mapping, Sequence, Tuple, Union

Vertex = Hashable
Weight = int

WeightedAdjacency = Mapping[Vertex, Weight]
UnweightedAdjacency = Sequence[Vertex]
Adjacency = Union[WeightedAdjacency, UnweightedAdjacency]

Graph = Mapping[Vertex, Adjacency]

#: Directed edge as (source, target).
Edge = Tuple[Vertex, Vertex]

#: Mutable forms produced by the generator.
WeightedGraphDict = Dict[Vertex, Dict[Vertex, Weight]]
UnweightedGraphDict = Dict[Vertex, List[Vertex]]

#: Weight assigned to every edge of an unweighted graph.
UNIT_WEIGHT: Weight = 1


def successors(graph: Graph, vertex: Vertex) -> Iterator[Tuple[Vertex, Weight]]:
    """Yield ``(successor, weight)`` pairs for `vertex` in adjacency order.

    Raises:
        KeyError: If `vertex` is not in the graph.
    """
    adjacency = graph[vertex]
    if isinstance(adjacency, Mapping):
        yield from adjacency.items()
    else:
        for succ in adjacency:
            yield succ, UNIT_WEIGHT


def edges(graph: Graph) -> Iterator[Edge]:
    """Yield every directed edge ``(u, v)`` in graph order."""
    for u, adjacency in graph.items():
        for v in adjacency:
            yield u, v


def edge_count(graph: Graph) -> int:
    return sum(len(adjacency) for adjacency in graph.values())


def is_weighted(graph: Graph) -> bool:
    """True if adjacencies are mappings. An empty graph counts as weighted."""
    return all(isinstance(adjacency, Mapping) for adjacency in graph.values())
