"""Tests for graph_explorer.parsers — the edge-list description format."""

import pytest

from graph_explorer.errors import GraphParseError
from graph_explorer.parsers import EdgeListParser, get_parser, parse
from graph_explorer.parsers.edgelist import split_lines

SAMPLE = "0\n1\n2\n3\n4\n0 1\n1 2\n2 3\n3 0\n1 4\n2 2\n"


def test_parse_nodes_and_edges():
    graph = parse(SAMPLE)
    assert graph.node_ids() == [0, 1, 2, 3, 4]
    assert [e.endpoints for e in graph.edges] == [(0, 1), (1, 2), (2, 3), (3, 0), (1, 4), (2, 2)]
    assert not graph.directed


def test_parse_directed_flag():
    graph = parse(SAMPLE, directed=True)
    assert graph.directed


def test_weight_defaults_to_one():
    graph = parse("0\n1\n0 1\n1 0 7\n")
    assert graph.edges[0].weight == 1
    assert graph.edges[1].weight == 7


def test_self_loop_is_derived():
    graph = parse("5\n5 5 3\n")
    loop = graph.edges[0]
    assert loop.is_self_loop
    assert loop.weight == 3


def test_lines_are_trimmed_and_blank_lines_skipped():
    graph = parse("   0  \n\n\t1\n  0    1  \n\n")
    assert graph.node_ids() == [0, 1]
    assert graph.edge_count() == 1


def test_unrecognised_lines_ignored():
    graph = parse("0\n1\nhello\n0 1 2 3\n-1\n0 x\n1.5\n0 1\n")
    assert graph.node_ids() == [0, 1]
    assert [e.endpoints for e in graph.edges] == [(0, 1)]


def test_non_ascii_digits_ignored():
    graph = parse("0\n١\n")
    assert graph.node_ids() == [0]


def test_node_order_is_declaration_order():
    graph = parse("7\n3\n10\n")
    assert graph.node_ids() == [7, 3, 10]


def test_duplicate_node_last_wins():
    graph = parse("1\n2\n1\n")
    assert graph.node_ids() == [2, 1]


def test_parallel_and_reverse_edges_kept():
    graph = parse("0\n1\n0 1\n0 1\n1 0\n")
    assert [e.endpoints for e in graph.edges] == [(0, 1), (0, 1), (1, 0)]


def test_edge_before_node_declaration_is_kept():
    graph = parse("0 1\n0\n1\n")
    assert graph.edge_count() == 1


def test_dangling_edge_dropped(caplog):
    with caplog.at_level("WARNING", logger="graph_explorer.parsers.edgelist"):
        graph = parse("0\n1\n0 1\n1 9\n9 9\n")
    assert [e.endpoints for e in graph.edges] == [(0, 1)]
    assert "undeclared node 9" in caplog.text


def test_strict_rejects_dangling_edge():
    with pytest.raises(GraphParseError) as info:
        parse("0\n1\n0 1\n1 9\n", strict=True)
    assert info.value.line_no == 4
    assert "undeclared node 9" in str(info.value)


def test_strict_rejects_unknown_line():
    with pytest.raises(GraphParseError) as info:
        parse("0\nnot a node\n", strict=True)
    assert info.value.line_no == 2
    assert isinstance(info.value, ValueError)


def test_strict_accepts_valid_input():
    graph = parse(SAMPLE, strict=True)
    assert graph.edge_count() == 6


def test_parse_is_deterministic():
    a = parse(SAMPLE)
    b = parse(SAMPLE)
    assert a == b


def test_empty_input():
    graph = parse("")
    assert graph.node_count() == 0
    assert graph.edge_count() == 0


def test_split_lines_numbers_are_one_based():
    assert split_lines("a\n\n  b \r\nc") == [(1, "a"), (3, "b"), (4, "c")]


def test_get_parser_unknown_format():
    with pytest.raises(ValueError, match="Unsupported"):
        get_parser("dot")


def test_get_parser_strict():
    parser = get_parser(strict=True)
    assert isinstance(parser, EdgeListParser)
    assert parser.strict
