import networkx as nx
import pytest

from pathgraph.graph.convert import from_digraph, is_weakly_connected, to_digraph


def build_sample_graph():
    return {"A": {"B": 1, "C": 4}, "B": {"C": 1}, "C": {}, "D": {}}


def test_to_digraph_basic():
    nxg = to_digraph(build_sample_graph())

    assert isinstance(nxg, nx.DiGraph)
    assert list(nxg.nodes) == ["A", "B", "C", "D"]
    assert nxg.edges["A", "C"]["weight"] == 4
    assert nxg.number_of_edges() == 3
    assert not nxg.has_edge("C", "A")


def test_to_digraph_custom_attr_and_unweighted():
    nxg = to_digraph({"A": ["B"], "B": []}, weight_attr="cost")
    assert nxg.edges["A", "B"] == {"cost": 1}


def test_from_digraph_roundtrip():
    graph = build_sample_graph()
    assert from_digraph(to_digraph(graph)) == graph


def test_from_digraph_unweighted():
    nxg = nx.DiGraph()
    nxg.add_edge(1, 2, weight=7)
    nxg.add_edge(2, 3)
    nxg.add_node(4)
    assert from_digraph(nxg, weighted=False) == {1: [2], 2: [3], 3: [], 4: []}
    assert from_digraph(nxg) == {1: {2: 7}, 2: {3: 1}, 3: {}, 4: {}}


def test_from_digraph_rejects_self_loops():
    nxg = nx.DiGraph()
    nxg.add_edge("A", "A")
    with pytest.raises(ValueError, match="Self-loops"):
        from_digraph(nxg)


def test_is_weakly_connected():
    assert is_weakly_connected({})
    assert is_weakly_connected({"A": {}})
    assert is_weakly_connected({"A": {"B": 1}, "B": {}})
    # direction ignored
    assert is_weakly_connected({"A": [], "B": ["A"], "C": ["A"]})
    assert not is_weakly_connected(build_sample_graph())
