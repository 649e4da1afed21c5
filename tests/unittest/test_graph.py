import networkx as nx
import pytest

from pta.graph import ProductGraph


def test_add_node_is_idempotent():
    g = ProductGraph()
    g.add_node("A")
    g.add_node("A")
    assert g.node_count() == 1
    assert list(g.nodes()) == ["A"]


def test_add_edge_is_idempotent_per_ordered_pair():
    g = ProductGraph()
    assert g.add_edge("A", "B") is True
    assert g.add_edge("A", "B") is False
    assert g.add_edge("B", "A") is True
    assert g.edge_count() == 2
    assert g.contains_edge("A", "B") and g.contains_edge("B", "A")


def test_out_neighbors_and_degree():
    g = ProductGraph([("A", "B"), ("A", "C"), ("C", "A")])
    assert sorted(g.out_neighbors("A")) == ["B", "C"]
    assert list(g.out_neighbors("B")) == []
    assert g.out_degree("A") == 2
    assert g.out_degree("missing") == 0
    assert list(g.out_neighbors("missing")) == []


def test_nodes_listed_once():
    g = ProductGraph([("A", "B"), ("B", "C"), ("C", "A"), ("A", "C")])
    labels = list(g.nodes())
    assert sorted(labels) == ["A", "B", "C"]
    assert len(labels) == len(set(labels))


def test_strongly_connected_components():
    g = ProductGraph([("A", "B"), ("B", "A"), ("B", "C"), ("C", "D"), ("D", "C")])
    components = sorted(g.strongly_connected_components(), key=lambda c: min(c))
    assert components == [{"A", "B"}, {"C", "D"}]


def test_singletons_are_their_own_component():
    g = ProductGraph([("A", "B")])
    assert sorted(g.strongly_connected_components(), key=lambda c: min(c)) == [{"A"}, {"B"}]


def test_empty_graph_has_no_components():
    assert ProductGraph().strongly_connected_components() == []


def test_frozen_graph_rejects_mutation():
    g = ProductGraph([("A", "B")]).freeze()
    assert g.is_frozen
    with pytest.raises(nx.NetworkXError):
        g.add_edge("B", "C")
    with pytest.raises(nx.NetworkXError):
        g.add_node("Z")
    # re-adding what already exists does not touch the graph
    g.add_node("A")
    assert g.add_edge("A", "B") is False
    assert g.edge_count() == 1
