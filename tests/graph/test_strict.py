import pickle

import pytest

from spforest.graph.strict import StrictMultiDiGraph, StrictMultiGraph
from spforest.graph.view import GraphView, NodeAttributeView


@pytest.fixture(params=[StrictMultiDiGraph, StrictMultiGraph])
def graph_cls(request):
    return request.param


def test_init_empty_graph(graph_cls):
    """A new graph has no nodes or edges."""
    g = graph_cls()
    assert len(g) == 0
    assert g.get_edges() == {}
    assert list(g.node_set()) == []


def test_implements_graph_view(graph_cls):
    assert isinstance(graph_cls(), GraphView)
    assert isinstance(graph_cls(), NodeAttributeView)


def test_add_node_duplicate(graph_cls):
    g = graph_cls()
    g.add_node("A")
    with pytest.raises(ValueError, match="already exists"):
        g.add_node("A")


def test_add_edge_requires_nodes(graph_cls):
    g = graph_cls()
    g.add_node("A")
    with pytest.raises(ValueError, match="Target node 'B' does not exist"):
        g.add_edge("A", "B")
    with pytest.raises(ValueError, match="Source node 'B' does not exist"):
        g.add_edge("B", "A")
    assert "B" not in g


def test_auto_keys_are_graph_unique(graph_cls):
    g = graph_cls()
    for node in ("A", "B", "C"):
        g.add_node(node)
    assert g.add_edge("A", "B") == 0
    assert g.add_edge("B", "C") == 1
    assert g.add_edge("A", "B") == 2
    assert sorted(g.get_edges()) == [0, 1, 2]


def test_explicit_int_key_advances_counter(graph_cls):
    g = graph_cls()
    g.add_node("A")
    g.add_node("B")
    assert g.add_edge("A", "B", key=10) == 10
    assert g.add_edge("A", "B") == 11


def test_duplicate_key_rejected_across_node_pairs(graph_cls):
    g = graph_cls()
    for node in ("A", "B", "C"):
        g.add_node(node)
    g.add_edge("A", "B", key="e1")
    with pytest.raises(ValueError, match="already exists"):
        g.add_edge("B", "C", key="e1")


def test_removed_keys_not_reused(graph_cls):
    g = graph_cls()
    g.add_node("A")
    g.add_node("B")
    first = g.add_edge("A", "B")
    g.remove_edge_by_id(first)
    assert g.add_edge("A", "B") == first + 1


def test_remove_node_drops_incident_edges(graph_cls):
    g = graph_cls()
    for node in ("A", "B", "C"):
        g.add_node(node)
    g.add_edge("A", "B", key="AB")
    g.add_edge("B", "C", key="BC")
    g.remove_node("B")
    assert g.get_edges() == {}
    with pytest.raises(ValueError, match="does not exist"):
        g.remove_node("B")


def test_remove_edge_errors(graph_cls):
    g = graph_cls()
    for node in ("A", "B", "C"):
        g.add_node(node)
    g.add_edge("A", "B", key="AB")
    with pytest.raises(ValueError, match="No edge with id='XX'"):
        g.remove_edge("A", "B", key="XX")
    with pytest.raises(ValueError, match="actually from A to B"):
        g.remove_edge("A", "C", key="AB")
    with pytest.raises(ValueError, match="No edges from 'B' to 'C'"):
        g.remove_edge("B", "C")
    with pytest.raises(ValueError, match="not found"):
        g.remove_edge_by_id("XX")


def test_remove_all_edges_between(graph_cls):
    g = graph_cls()
    g.add_node("A")
    g.add_node("B")
    g.add_edge("A", "B")
    g.add_edge("A", "B")
    g.remove_edge("A", "B")
    assert g.get_edges() == {}
    assert g.edges_between("A", "B") == []


def test_directed_remove_edge_is_oriented():
    g = StrictMultiDiGraph()
    g.add_node("A")
    g.add_node("B")
    g.add_edge("A", "B", key="AB")
    with pytest.raises(ValueError, match="actually from A to B"):
        g.remove_edge("B", "A", key="AB")


def test_undirected_remove_edge_either_orientation():
    g = StrictMultiGraph()
    g.add_node("A")
    g.add_node("B")
    g.add_edge("A", "B", key="AB")
    g.remove_edge("B", "A", key="AB")
    assert not g.has_edge_by_id("AB")
    assert g.number_of_edges() == 0


def test_edge_attr_shared_with_networkx(graph_cls):
    g = graph_cls()
    g.add_node("A")
    g.add_node("B")
    key = g.add_edge("A", "B", cost=3)
    g.update_edge_attr(key, cost=4, label="x")
    assert g.get_edge_attr(key) == {"cost": 4, "label": "x"}
    assert g["A"]["B"][key]["cost"] == 4
    with pytest.raises(ValueError, match="not found"):
        g.update_edge_attr("missing", cost=1)
    with pytest.raises(ValueError, match="not found"):
        g.get_edge_attr("missing")


def test_copy_is_deep(graph_cls):
    g = graph_cls()
    g.add_node("A")
    g.add_node("B")
    key = g.add_edge("A", "B", cost=1)
    clone = g.copy()
    clone.update_edge_attr(key, cost=9)
    assert g.get_edge_attr(key)["cost"] == 1
    assert clone.add_edge("A", "B") == key + 1
    assert type(pickle.loads(pickle.dumps(g))) is graph_cls


def test_outgoing_edges_directed():
    g = StrictMultiDiGraph()
    for node in ("A", "B", "C"):
        g.add_node(node)
    g.add_edge("A", "B", key="AB")
    g.add_edge("C", "A", key="CA")
    g.add_edge("A", "C", key="AC")
    g.add_edge("A", "B", key="AB2")
    assert list(g.outgoing_edges("A")) == ["AB", "AB2", "AC"]
    assert list(g.outgoing_edges("B")) == []
    with pytest.raises(ValueError, match="does not exist"):
        list(g.outgoing_edges("Z"))


def test_outgoing_edges_undirected():
    g = StrictMultiGraph()
    for node in ("A", "B", "C"):
        g.add_node(node)
    g.add_edge("A", "B", key="AB")
    g.add_edge("C", "A", key="CA")
    g.add_edge("B", "B", key="loop")
    assert list(g.outgoing_edges("A")) == ["AB", "CA"]
    assert sorted(g.outgoing_edges("B")) == ["AB", "loop"]
    assert list(g.outgoing_edges("C")) == ["CA"]


def test_opposite(graph_cls):
    g = graph_cls()
    for node in ("A", "B", "C"):
        g.add_node(node)
    g.add_edge("A", "B", key="AB")
    g.add_edge("C", "C", key="loop")
    assert g.opposite("AB", "A") == "B"
    assert g.opposite("AB", "B") == "A"
    assert g.opposite("loop", "C") == "C"
    with pytest.raises(ValueError, match="not an endpoint"):
        g.opposite("AB", "C")
    with pytest.raises(ValueError, match="not found"):
        g.opposite("XX", "A")


def test_get_attribute(graph_cls):
    g = graph_cls()
    g.add_node("A", delay=3)
    g.add_node("B")
    g.add_edge("A", "B", key="AB", cost=7)
    assert g.get_attribute("AB", "cost") == 7
    assert g.get_attribute("AB", "delay") is None
    assert g.get_attribute("A", "delay") == 3
    assert g.get_attribute("B", "delay") is None
    with pytest.raises(ValueError, match="No edge or node 'Z'"):
        g.get_attribute("Z", "delay")


def test_get_node_attribute_when_ids_collide(graph_cls):
    """Integer nodes share values with auto-assigned edge keys."""
    g = graph_cls()
    g.add_node(0, delay=5)
    g.add_node(1, delay=2)
    g.add_edge(0, 1, cost=9)
    assert g.get_attribute(0, "cost") == 9
    assert g.get_node_attribute(0, "delay") == 5
    assert g.get_node_attribute(0, "cost") is None
    with pytest.raises(ValueError, match="does not exist"):
        g.get_node_attribute(7, "delay")


def test_node_set_insertion_order(graph_cls):
    g = graph_cls()
    for node in ("C", "A", "B"):
        g.add_node(node)
    assert list(g.node_set()) == ["C", "A", "B"]
    assert g.get_nodes() == {"C": {}, "A": {}, "B": {}}
