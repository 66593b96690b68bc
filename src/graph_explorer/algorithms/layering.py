"""Breadth-first tree layering from a root node."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field

from graph_explorer.algorithms.neighbors import adjacency
from graph_explorer.model.graph import Graph

logger = logging.getLogger(__name__)


@dataclass
class Layering:
    """Level of every node reachable from ``root``; unreachable nodes are absent.

    ``members[L]`` lists the nodes of level L in BFS discovery order and
    ``parents`` records the node each one was first reached from.
    """

    root: int
    levels: dict[int, int] = field(default_factory=dict)
    parents: dict[int, int | None] = field(default_factory=dict)
    members: list[list[int]] = field(default_factory=list)

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.levels

    def level_of(self, node_id: int) -> int | None:
        return self.levels.get(node_id)

    @property
    def depth(self) -> int:
        return len(self.members)

    def tree_edges(self) -> list[tuple[int, int]]:
        return [(p, n) for n, p in self.parents.items() if p is not None]


def compute_layering(graph: Graph, root: int) -> Layering | None:
    """BFS from root, expanding neighbors in edge order.

    Directed graphs follow edges forward; undirected graphs treat every edge
    as two-way. Returns None when root is not a node of the graph.
    """
    if not graph.has_node(root):
        logger.info("layering skipped: root %s not in graph", root)
        return None

    adj = adjacency(graph)
    result = Layering(root=root)
    queue: deque[tuple[int, int, int | None]] = deque([(root, 0, None)])

    while queue:
        node_id, level, parent = queue.popleft()
        if node_id in result.levels:
            continue
        result.levels[node_id] = level
        result.parents[node_id] = parent
        if level == len(result.members):
            result.members.append([])
        result.members[level].append(node_id)

        for child in adj[node_id]:
            if child not in result.levels:
                queue.append((child, level + 1, node_id))

    return result
