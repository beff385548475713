import pytest

from pathgraph.graph.types import edge_count, edges, is_weighted, successors


def test_successors_weighted():
    graph = {"A": {"B": 3, "C": 0}, "B": {}, "C": {}}
    assert list(successors(graph, "A")) == [("B", 3), ("C", 0)]
    assert list(successors(graph, "B")) == []


def test_successors_unweighted_unit_weight():
    graph = {"A": ["C", "B"], "B": [], "C": []}
    assert list(successors(graph, "A")) == [("C", 1), ("B", 1)]


def test_successors_unknown_vertex():
    with pytest.raises(KeyError):
        list(successors({"A": []}, "Z"))


def test_edges_and_count():
    graph = {"A": {"B": 1}, "B": {"A": 2, "C": 3}, "C": {}}
    assert list(edges(graph)) == [("A", "B"), ("B", "A"), ("B", "C")]
    assert edge_count(graph) == 3
    assert edge_count({}) == 0


def test_is_weighted():
    assert is_weighted({"A": {"B": 1}, "B": {}})
    assert not is_weighted({"A": ["B"], "B": []})
    assert is_weighted({})
