"""Tests for graph_explorer.model — Graph construction, queries and the networkx view."""

import math

import pytest

from graph_explorer.model import EDGE_BASE_COLOR, NODE_BASE_COLOR, Edge, Graph, Node
from graph_explorer.parsers import parse

SAMPLE = "0\n1\n2\n3\n4\n0 1\n1 2\n2 3\n3 0\n1 4\n2 2\n"


def _make_graph(nodes: list[int], edges: list[tuple[int, int]], directed: bool = False) -> Graph:
    g = Graph(directed=directed)
    for n in nodes:
        g.add_node(Node(id=n))
    for a, b in edges:
        g.add_edge(Edge(from_id=a, to_id=b))
    return g


class TestConstruction:
    def test_empty_graph(self):
        g = Graph()
        assert g.node_count() == 0
        assert g.edge_count() == 0

    def test_add_edge_requires_known_nodes(self):
        g = _make_graph([0], [])
        with pytest.raises(KeyError):
            g.add_edge(Edge(from_id=0, to_id=1))
        assert g.edge_count() == 0

    def test_redeclared_node_replaces_and_moves_last(self):
        g = _make_graph([0, 1], [])
        g.add_node(Node(id=0, label="again"))
        assert g.node_ids() == [1, 0]
        assert g.node(0).label == "again"

    def test_remove_node_drops_incident_edges(self):
        g = parse(SAMPLE)
        removed = g.remove_node(1)
        assert removed is not None and removed.id == 1
        assert [e.endpoints for e in g.edges] == [(2, 3), (3, 0), (2, 2)]

    def test_remove_unknown_node(self):
        g = _make_graph([0], [])
        assert g.remove_node(5) is None


class TestEdge:
    def test_self_loop_follows_endpoints(self):
        e = Edge(from_id=3, to_id=3)
        assert e.is_self_loop
        e.to_id = 4
        assert not e.is_self_loop

    def test_other_endpoint(self):
        e = Edge(from_id=1, to_id=2)
        assert e.other(1) == 2
        assert e.other(2) == 1

    def test_touches(self):
        e = Edge(from_id=1, to_id=2)
        assert e.touches(1) and e.touches(2)
        assert not e.touches(3)


class TestQueries:
    def test_self_loops(self):
        g = parse(SAMPLE)
        assert [e.endpoints for e in g.self_loops()] == [(2, 2)]

    def test_matching_edges_undirected_matches_both_orientations(self):
        g = parse("0\n1\n0 1\n1 0\n0 1\n")
        assert len(list(g.matching_edges(1, 0))) == 3

    def test_matching_edges_directed_is_exact(self):
        g = parse("0\n1\n0 1\n1 0\n0 1\n", directed=True)
        assert len(list(g.matching_edges(0, 1))) == 2
        assert len(list(g.matching_edges(1, 0))) == 1

    def test_degree_counts_self_loop_twice(self):
        g = parse(SAMPLE)
        assert g.degree(2) == 4
        assert g.degree(4) == 1
        assert g.degree(99) == 0

    def test_labels(self):
        g = _make_graph([0, 1], [])
        g.node(1).label = "B"
        assert g.labels() == {0: "", 1: "B"}


class TestNetworkxView:
    def test_multigraph_keeps_parallel_edges(self):
        g = parse("0\n1\n0 1\n0 1 4\n")
        nxg = g.to_networkx()
        assert nxg.is_multigraph()
        assert not nxg.is_directed()
        assert nxg.number_of_edges(0, 1) == 2
        weights = sorted(d["weight"] for _, _, d in nxg.edges(data=True))
        assert weights == [1, 4]

    def test_directed_view(self):
        g = parse("0\n1\n0 1\n", directed=True)
        nxg = g.to_networkx()
        assert nxg.is_directed()
        assert nxg.has_edge(0, 1)
        assert not nxg.has_edge(1, 0)

    def test_node_data_attached(self):
        g = parse("3\n")
        assert g.to_networkx().nodes[3]["data"] is g.node(3)


class TestAcyclic:
    def test_tree_is_acyclic(self):
        assert parse("0\n1\n2\n0 1\n1 2\n").is_acyclic()

    def test_empty_is_acyclic(self):
        assert Graph().is_acyclic()

    def test_cycle_is_not_acyclic(self):
        assert not parse(SAMPLE).is_acyclic()

    def test_self_loop_is_not_acyclic(self):
        assert not parse("0\n0 0\n").is_acyclic()

    def test_parallel_edges_are_not_acyclic(self):
        assert not parse("0\n1\n0 1\n1 0\n").is_acyclic()

    def test_directed_back_and_forth_is_cycle(self):
        assert not parse("0\n1\n0 1\n1 0\n", directed=True).is_acyclic()

    def test_directed_dag(self):
        assert parse("0\n1\n2\n0 1\n0 2\n1 2\n", directed=True).is_acyclic()


def test_reset_highlights_restores_baseline():
    g = parse(SAMPLE)
    g.node(0).color = "#000000"
    g.node(0).distance = 2
    g.node(0).parent = 1
    g.edges[0].color = "#000000"
    g.edges[0].highlighted = True
    g.reset_highlights()
    assert g.node(0).color == NODE_BASE_COLOR
    assert math.isinf(g.node(0).distance)
    assert g.node(0).parent is None
    assert g.edges[0].color == EDGE_BASE_COLOR
    assert not g.edges[0].highlighted
