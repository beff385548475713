"""Conversion between graph values and NetworkX graphs."""

from typing import Union

import networkx as nx

from pathgraph.graph.types import (
    Graph,
    UnweightedGraphDict,
    WeightedGraphDict,
    successors,
)


def to_digraph(graph: Graph, weight_attr: str = "weight") -> nx.DiGraph:
    """Convert a graph value to a NetworkX DiGraph.

    Nodes are added in graph order. Edge weights are stored under
    `weight_attr`; unweighted edges get weight 1.

    Args:
        graph: Weighted or unweighted graph value.
        weight_attr: Edge attribute name for the weight.

    Returns:
        A new NetworkX DiGraph.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph)
    for u in graph:
        for v, weight in successors(graph, u):
            nx_graph.add_edge(u, v, **{weight_attr: weight})
    return nx_graph


def from_digraph(
    nx_graph: nx.DiGraph,
    weight_attr: str = "weight",
    weighted: bool = True,
) -> Union[WeightedGraphDict, UnweightedGraphDict]:
    """Convert a NetworkX DiGraph to a graph value.

    Args:
        nx_graph: Source DiGraph. Edges lacking `weight_attr` get weight 1.
        weight_attr: Edge attribute holding the weight.
        weighted: Build ``{u: {v: w}}`` when True, ``{u: [v, ...]}`` otherwise.

    Returns:
        A new graph dict with every NetworkX node as a key.

    Raises:
        ValueError: If the DiGraph contains a self-loop.
    """
    if nx.number_of_selfloops(nx_graph):
        raise ValueError("Self-loops cannot be represented in a graph value.")

    if weighted:
        weighted_graph: WeightedGraphDict = {node: {} for node in nx_graph.nodes}
        for u, v, data in nx_graph.edges(data=True):
            weighted_graph[u][v] = data.get(weight_attr, 1)
        return weighted_graph

    unweighted_graph: UnweightedGraphDict = {node: [] for node in nx_graph.nodes}
    for u, v in nx_graph.edges():
        unweighted_graph[u].append(v)
    return unweighted_graph


def is_weakly_connected(graph: Graph) -> bool:
    """Return True if every vertex reaches every other ignoring direction.

    The empty graph is considered connected.
    """
    if not graph:
        return True
    return nx.is_weakly_connected(to_digraph(graph))
