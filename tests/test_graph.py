"""
Unit tests for Graph.
"""

import copy
import io
import math

import pytest

from weightgraph.defaults import sample_graph
from weightgraph.graph import Graph, VertexNotFound


def test_empty_graph():
    g = Graph()

    assert g.num_vertices() == 0
    assert g.num_edges() == 0
    assert g.vertices() == []
    assert len(g) == 0
    assert repr(g) == "Graph(V=0, E=0)"


def test_add_vertex_is_idempotent():
    g = Graph()

    assert g.add_vertex("A")
    assert g.has_vertex("A")
    assert "A" in g
    assert not g.add_vertex("A")
    assert g.num_vertices() == 1


def test_none_is_never_a_vertex():
    g = Graph()

    assert not g.has_vertex(None)
    assert None not in g
    with pytest.raises(ValueError):
        g.add_vertex(None)
    with pytest.raises(ValueError):
        g.add_edge("A", None, 1.0)
    with pytest.raises(ValueError):
        g.add_edge(None, "B", 1.0)

    assert g.vertices() == []


def test_add_edge_with_bad_weight_changes_nothing():
    g = Graph()
    g.add_vertex("X")

    with pytest.raises(ValueError):
        g.add_edge("X", "Y", "heavy")

    assert g.vertices() == ["X"]
    assert g.num_edges() == 0


def test_add_edge_creates_endpoints():
    g = Graph()

    assert g.add_edge("A", "B", 2.5)

    assert g.vertices() == ["A", "B"]
    assert g.has_edge("A", "B")
    assert not g.has_edge("B", "A")
    assert g.weight_edge("A", "B") == 2.5


def test_add_edge_does_not_update_weight():
    g = Graph()
    g.add_edge("A", "B", 1.0)

    assert not g.add_edge("A", "B", 9.0)

    assert g.weight_edge("A", "B") == 1.0
    assert g.num_edges() == 1


def test_self_loop():
    g = Graph()

    assert g.add_edge("A", "A", 4.0)

    assert g.has_edge("A", "A")
    assert g.in_degree("A") == 1
    assert g.out_degree("A") == 1
    assert g.adjacent_to("A") == ["A"]
    assert g.remove_vertex("A")
    assert g.num_edges() == 0


def test_sample_graph_queries():
    g = sample_graph()

    assert g.in_degree("A") == 1
    assert g.in_degree("B") == 2
    assert g.in_degree("D") == 0
    assert g.out_degree("B") == 0
    assert g.out_degree("C") == 1
    assert g.out_degree("D") == 2
    assert g.has_edge("A", "B")
    assert not g.has_edge("B", "A")
    assert g.weight_edge("A", "C") == 10.0
    assert g.weight_edge("C", "D") == 0.0
    assert g.num_vertices() == 4
    assert g.num_edges() == 5
    assert g.vertices() == ["A", "B", "C", "D"]
    assert g.adjacent_to("A") == ["B", "C"]
    assert g.adjacent_to("B") == []


def test_degree_of_missing_vertex_raises():
    g = sample_graph()

    with pytest.raises(VertexNotFound) as info:
        g.in_degree("Z")
    assert info.value.vertex == "Z"
    with pytest.raises(KeyError):
        g.out_degree("Z")


def test_missing_lookups_return_sentinels():
    g = sample_graph()

    assert not g.has_edge("A", "Z")
    assert not g.has_edge("Z", "A")
    assert g.weight_edge("Z", "A") == 0.0
    assert g.find_weight("Z", "A") is None
    assert g.adjacent_to("Z") == []
    assert not g.remove_vertex("Z")
    assert not g.remove_edge("A", "Z")
    assert not g.remove_edge("B", "A")


def test_find_weight_distinguishes_zero_weight():
    g = Graph()
    g.add_edge("A", "B", 0.0)

    assert g.find_weight("A", "B") == 0.0
    assert g.find_weight("B", "A") is None


def test_degree_properties():
    g = sample_graph()

    for v in g.vertices():
        assert g.out_degree(v) == len(g.adjacent_to(v))
        assert g.in_degree(v) == sum(1 for u in g.vertices() if g.has_edge(u, v))


def test_remove_edge():
    g = sample_graph()

    assert g.remove_edge("A", "B")

    assert not g.has_edge("A", "B")
    assert g.weight_edge("A", "B") == 0.0
    assert g.has_vertex("B")
    assert g.num_edges() == 4


def test_remove_vertex_drops_incident_edges():
    g = sample_graph()
    g.remove_edge("A", "B")
    before = g.num_edges()
    expected = before - g.in_degree("C") - g.out_degree("C")

    assert g.remove_vertex("C")

    assert g.num_vertices() == 3
    assert g.num_edges() == expected == 1
    assert not g.has_vertex("C")
    assert g.edges() == [("D", "A", 3.0)]

    assert g.remove_vertex("A")
    assert g.vertices() == ["B", "D"]
    assert g.num_edges() == 0


def test_copy_is_deep():
    g = sample_graph()
    other = g.copy()

    other.add_edge("B", "A", 1.0)
    other.remove_edge("A", "C")
    other.add_vertex("E")

    assert g == sample_graph()
    assert not g.has_edge("B", "A")
    assert g.has_edge("A", "C")
    assert other != g


def test_copy_module_uses_deep_copy():
    g = sample_graph()
    other = copy.copy(g)

    other.remove_edge("D", "A")

    assert g.has_edge("D", "A")


def test_adjacency_snapshot():
    g = Graph.from_edges([("B", "A", 1.0), ("A", "C", 2.0), ("A", "B", 3.0)])

    adj = g.adjacency
    assert list(adj) == ["A", "B", "C"]
    assert list(adj["A"].items()) == [("B", 3.0), ("C", 2.0)]

    adj["A"].clear()
    assert g.out_degree("A") == 2


def test_set_adjacency():
    g = sample_graph()
    source = {"X": {"Y": 1, "Z": 2}}

    g.set_adjacency(source)

    assert g.vertices() == ["X", "Y", "Z"]
    assert g.weight_edge("X", "Z") == 2.0
    assert isinstance(g.weight_edge("X", "Y"), float)
    source["X"]["W"] = 5
    assert not g.has_vertex("W")


def test_iteration_is_sorted():
    g = Graph.from_edges([(3, 1, 1.0), (2, 3, 1.0)])

    assert list(g) == [1, 2, 3]


def test_special_weights_are_stored():
    g = Graph()
    g.add_edge("A", "B", float("inf"))
    g.add_edge("B", "C", float("nan"))
    g.add_edge("C", "A", -4)

    assert math.isinf(g.weight_edge("A", "B"))
    assert math.isnan(g.weight_edge("B", "C"))
    assert g.weight_edge("C", "A") == -4.0


def test_dump():
    out = io.StringIO()

    sample_graph().dump(out)

    assert out.getvalue().splitlines() == [
        "A -> B (5.0), C (10.0)",
        "B ->",
        "C -> B (7.0)",
        "D -> A (3.0), C (8.0)",
    ]
