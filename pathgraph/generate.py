"""Random weakly connected graph generation.

The generator first grows a random directed spanning structure so every
vertex is attached to the component built so far, and only then samples
extra edges from the remaining candidates. Connectivity therefore never
depends on the random excess edges.
"""

from __future__ import annotations

import random
from typing import List, Optional, Sequence, Tuple, Union

from pathgraph.config import DEFAULT_GENERATOR_CONFIG, GeneratorConfig
from pathgraph.graph.types import (
    Edge,
    UnweightedGraphDict,
    Vertex,
    WeightedGraphDict,
)
from pathgraph.logging import get_logger

_logger = get_logger(__name__)


def _check_counts(n: int, s: int) -> None:
    for name, value in (("n", n), ("s", s)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"{name} must be an int, got {type(value).__name__}")
    if n < 0:
        raise ValueError(f"Vertex count must be non-negative, got n={n}")
    min_edges = max(n - 1, 0)
    max_edges = n * (n - 1)
    if not min_edges <= s <= max_edges:
        raise ValueError(
            f"Edge count s={s} out of range for n={n}: "
            f"expected {min_edges} <= s <= {max_edges}"
        )


def _split_edges(
    order: Sequence[Vertex], rng: random.Random
) -> Tuple[List[Edge], List[Edge]]:
    """Partition all directed edges over `order` into spanning and excess edges.

    Vertices are attached in `order`. Each new vertex picks one edge to or
    from the already connected vertices at random; that edge is spanning and
    the other candidates of the round are excess.

    Returns:
        ``(spanning, excess)`` where ``spanning`` has ``len(order) - 1`` edges
        and together they cover every ordered pair of distinct vertices.
    """
    first, second = order[0], order[1]
    spanning: List[Edge] = [(first, second)]
    excess: List[Edge] = [(second, first)]
    connected: List[Vertex] = [first, second]

    for vertex in order[2:]:
        candidates: List[Edge] = [(vertex, u) for u in connected]
        candidates.extend((u, vertex) for u in connected)
        spanning.append(candidates.pop(rng.randrange(len(candidates))))
        excess.extend(candidates)
        connected.append(vertex)

    return spanning, excess


def generate(
    n: int,
    s: int,
    config: Optional[GeneratorConfig] = None,
    *,
    rng: Optional[random.Random] = None,
    labels: Optional[Sequence[Vertex]] = None,
) -> Union[WeightedGraphDict, UnweightedGraphDict]:
    """Build a random weakly connected simple digraph.

    Args:
        n: Number of vertices.
        s: Number of directed edges, ``max(n - 1, 0) <= s <= n * (n - 1)``.
        config: Generator options; `DEFAULT_GENERATOR_CONFIG` when omitted.
        rng: Random source. A fresh unseeded ``random.Random`` when omitted.
        labels: ``n`` distinct vertex labels; ``range(n)`` when omitted.

    Returns:
        ``{vertex: {successor: weight}}`` if ``config.weighted``, else
        ``{vertex: [successor, ...]}``. Keys follow label order.

    Raises:
        TypeError: If `n` or `s` is not an int.
        ValueError: If `n`, `s` or `labels` are out of range.
    """
    _check_counts(n, s)
    config = config or DEFAULT_GENERATOR_CONFIG
    rng = rng or random.Random()

    vertices: List[Vertex] = list(range(n)) if labels is None else list(labels)
    if len(vertices) != n:
        raise ValueError(f"Expected {n} labels, got {len(vertices)}")
    if len(set(vertices)) != n:
        raise ValueError("Vertex labels must be distinct")

    selected: List[Edge] = []
    if n >= 2:
        order = vertices[:]
        rng.shuffle(order)
        spanning, excess = _split_edges(order, rng)
        rng.shuffle(excess)
        selected = spanning + excess[: s - len(spanning)]

    if config.weighted:
        weighted_graph: WeightedGraphDict = {v: {} for v in vertices}
        for u, v in selected:
            weighted_graph[u][v] = config.draw_weight(rng)
        graph: Union[WeightedGraphDict, UnweightedGraphDict] = weighted_graph
    else:
        unweighted_graph: UnweightedGraphDict = {v: [] for v in vertices}
        for u, v in selected:
            unweighted_graph[u].append(v)
        graph = unweighted_graph

    _logger.debug(
        "Generated %s graph: %d vertices, %d edges (%d spanning)",
        "weighted" if config.weighted else "unweighted",
        n,
        len(selected),
        max(n - 1, 0),
    )
    return graph
