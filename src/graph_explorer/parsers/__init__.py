"""Parser registry — dispatch a description to the right parser."""

from __future__ import annotations

from graph_explorer.model.graph import Graph
from graph_explorer.parsers.base import Parser
from graph_explorer.parsers.edgelist import EdgeListParser

_PARSERS: dict[str, type[EdgeListParser]] = {
    "edgelist": EdgeListParser,
}


def get_parser(fmt: str = "edgelist", strict: bool = False) -> Parser:
    parser_cls = _PARSERS.get(fmt)
    if parser_cls is None:
        raise ValueError(f"Unsupported description format: {fmt}")
    return parser_cls(strict=strict)


def parse(src: str, directed: bool = False, strict: bool = False) -> Graph:
    """Parse a graph description.

    Args:
        src: Description text, one node id or edge per line.
        directed: Graph-wide edge direction flag.
        strict: Reject the whole input on unknown lines or dangling edges.

    Returns:
        A new Graph. Identical text always yields an identical Graph.

    Raises:
        GraphParseError: Only in strict mode.
    """
    return get_parser(strict=strict).parse(src, directed=directed)


__all__ = ["EdgeListParser", "Parser", "get_parser", "parse"]
