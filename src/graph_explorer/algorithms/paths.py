"""All simple paths between two nodes by exhaustive backtracking.

No pruning beyond excluding nodes already on the path, so the cost is
exponential on dense graphs. Parallel edges are separate routes and yield
separate (equal) node sequences.
"""

from __future__ import annotations

from collections.abc import Iterator

from graph_explorer.algorithms.neighbors import adjacency
from graph_explorer.model.graph import Graph
from graph_explorer.trace.events import Completed, Found, Highlight, Pause, TraceEvent
from graph_explorer.trace.palette import path_color
from graph_explorer.types import AlgorithmKind

PATH_PAUSE = 1 / 3
PATH_PAUSE_MIN_MS = 150


def iter_simple_paths(graph: Graph, source: int, target: int) -> Iterator[list[int]]:
    """Yield every simple path from source to target in neighbor order.

    A path needs two distinct endpoints that both exist in the graph;
    otherwise nothing is yielded.
    """
    if source == target or not graph.has_node(source) or not graph.has_node(target):
        return
    adj = adjacency(graph)
    path: list[int] = []
    on_path: set[int] = set()

    def walk(current: int) -> Iterator[list[int]]:
        on_path.add(current)
        path.append(current)
        if current == target:
            yield list(path)
        else:
            for nb in adj[current]:
                if nb not in on_path:
                    yield from walk(nb)
        path.pop()
        on_path.discard(current)

    yield from walk(source)


def find_paths(graph: Graph, source: int, target: int) -> list[list[int]]:
    return list(iter_simple_paths(graph, source, target))


def path_steps(graph: Graph, source: int, target: int) -> Iterator[TraceEvent]:
    """Enumerate the paths, then reveal them one by one, each in its own color."""
    paths = find_paths(graph, source, target)
    for index, path in enumerate(paths):
        color = path_color(index)
        for a, b in zip(path, path[1:]):
            yield Highlight.edge(a, b, color)
        for node_id in path:
            yield Highlight.node(node_id, color)
        yield Found(AlgorithmKind.PathSearch, tuple(path), index)
        yield Pause(PATH_PAUSE, PATH_PAUSE_MIN_MS)
    yield Completed(AlgorithmKind.PathSearch, paths)
