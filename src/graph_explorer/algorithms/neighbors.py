"""Traversal primitives shared by every algorithm.

Neighbor order follows edge order. That order decides the enumeration order
of cycles and paths, so callers must not sort or dedupe it.
"""

from __future__ import annotations

from graph_explorer.model.graph import Graph


def neighbors(graph: Graph, node_id: int) -> list[int]:
    """Nodes reachable from node_id over one non-self-loop edge.

    Directed graphs follow edges forward only; undirected graphs take the
    other endpoint of every edge touching node_id. Parallel edges repeat
    their neighbor.
    """
    if graph.directed:
        return [e.to_id for e in graph.edges if e.from_id == node_id and not e.is_self_loop]
    return [e.other(node_id) for e in graph.edges if e.touches(node_id) and not e.is_self_loop]


def adjacency(graph: Graph) -> dict[int, list[int]]:
    """neighbors() for every node, built in one pass over the edge list."""
    adj: dict[int, list[int]] = {node_id: [] for node_id in graph.nodes}
    for e in graph.edges:
        if e.is_self_loop:
            continue
        adj[e.from_id].append(e.to_id)
        if not graph.directed:
            adj[e.to_id].append(e.from_id)
    return adj
