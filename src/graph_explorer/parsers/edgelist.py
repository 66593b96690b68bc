"""Edge-list parser — one node id or one edge per line.

    0            declares node 0
    0 1          edge 0 -> 1, weight 1
    2 2 5        self-loop on 2, weight 5

Lines are trimmed; blank lines and lines matching neither form are dropped.
Tokens are ASCII digits only: no signs, comments or escapes.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from graph_explorer.errors import GraphParseError
from graph_explorer.model.graph import Edge, Graph, Node

logger = logging.getLogger(__name__)

_NODE_RE = re.compile(r"^\d+$", re.ASCII)
_EDGE_RE = re.compile(r"^(\d+)\s+(\d+)(?:\s+(\d+))?$", re.ASCII)
_NEWLINE_RE = re.compile(r"\r\n|\n|\r")


@dataclass
class _EdgeLine:
    line_no: int
    text: str
    from_id: int
    to_id: int
    weight: int


def split_lines(src: str) -> list[tuple[int, str]]:
    """Return (1-based line number, trimmed text) for every non-blank line."""
    result: list[tuple[int, str]] = []
    for i, raw in enumerate(_NEWLINE_RE.split(src), start=1):
        line = raw.strip()
        if line:
            result.append((i, line))
    return result


class EdgeListParser:
    """Line-oriented graph description parser.

    Edges naming an undeclared node are dropped with a warning. With
    ``strict=True`` they reject the whole description instead, as do lines
    that match neither the node nor the edge form.
    """

    def __init__(self, strict: bool = False) -> None:
        self.strict = strict

    def parse(self, src: str, directed: bool = False) -> Graph:
        graph = Graph(directed=directed)
        edge_lines: list[_EdgeLine] = []

        for line_no, line in split_lines(src):
            if _NODE_RE.match(line):
                graph.add_node(Node(id=int(line)))
                continue
            m = _EDGE_RE.match(line)
            if m:
                weight = int(m.group(3)) if m.group(3) is not None else 1
                edge_lines.append(_EdgeLine(line_no, line, int(m.group(1)), int(m.group(2)), weight))
                continue
            if self.strict:
                raise GraphParseError(line_no, line, "not a node or edge declaration")
            logger.debug("line %d ignored: %r", line_no, line)

        for el in edge_lines:
            missing = [n for n in (el.from_id, el.to_id) if not graph.has_node(n)]
            if missing:
                reason = f"edge references undeclared node {missing[0]}"
                if self.strict:
                    raise GraphParseError(el.line_no, el.text, reason)
                logger.warning("line %d dropped: %s", el.line_no, reason)
                continue
            graph.add_edge(Edge(from_id=el.from_id, to_id=el.to_id, weight=el.weight))

        logger.debug("parsed %d nodes, %d edges", graph.node_count(), graph.edge_count())
        return graph
