"""Cycle enumeration.

Self-loops are reported first, one single-node cycle per self-loop edge in
edge order. The remaining structure is searched depth-first from every
unvisited node in declaration order:

  * undirected: an edge back to a node on the current path (other than the
    parent just arrived from) closes the cycle path[ancestor:] + [node];
  * directed: an edge to a node still on the recursion stack closes the
    cycle stack[target:]; every node is expanded at most once overall.

Candidates equal to an already reported cycle are dropped. Cycles are open
sequences: the closing node is not repeated.
"""

from __future__ import annotations

from collections.abc import Iterator

from graph_explorer.algorithms.neighbors import adjacency
from graph_explorer.model.graph import NODE_BASE_COLOR, Graph
from graph_explorer.trace.events import Completed, Found, Highlight, Pause, TraceEvent
from graph_explorer.trace.palette import ACYCLIC_COLOR, FINISH_COLOR, VISIT_COLOR, cycle_color
from graph_explorer.types import AlgorithmKind, CycleEquality

# Pacing, as fractions of the step delay.
SELF_LOOP_PAUSE = 1.0
CYCLE_PAUSE = 1.0
UNDIRECTED_VISIT_PAUSE = 1 / 2
DIRECTED_VISIT_PAUSE = 1 / 3
ACYCLIC_FLASH_MS = 1000


def cycle_key(cycle: list[int], equality: CycleEquality, directed: bool) -> tuple[int, ...]:
    """Canonical form under which two cycles count as the same cycle."""
    if equality is CycleEquality.VertexSet:
        return tuple(sorted(cycle))
    return _min_rotation(cycle, reflect=not directed)


def _min_rotation(cycle: list[int], reflect: bool) -> tuple[int, ...]:
    candidates = [cycle, list(reversed(cycle))] if reflect else [cycle]
    best: tuple[int, ...] | None = None
    for seq in candidates:
        for i in range(len(seq)):
            rotated = tuple(seq[i:] + seq[:i])
            if best is None or rotated < best:
                best = rotated
    return best or ()


class _CycleCollector:
    """Accepted cycles plus the keys used to reject repeats."""

    def __init__(self, equality: CycleEquality, directed: bool) -> None:
        self.equality = equality
        self.directed = directed
        self.cycles: list[list[int]] = []
        self._keys: set[tuple[int, ...]] = set()

    def add_self_loop(self, node_id: int) -> int:
        self.cycles.append([node_id])
        self._keys.add(cycle_key([node_id], self.equality, self.directed))
        return len(self.cycles) - 1

    def offer(self, cycle: list[int]) -> int | None:
        key = cycle_key(cycle, self.equality, self.directed)
        if key in self._keys:
            return None
        self._keys.add(key)
        self.cycles.append(cycle)
        return len(self.cycles) - 1


def _confirm(cycle: list[int], index: int) -> Iterator[TraceEvent]:
    color = cycle_color(index)
    for i, node_id in enumerate(cycle):
        yield Highlight.edge(node_id, cycle[(i + 1) % len(cycle)], color)
        yield Highlight.node(node_id, color)
    yield Found(AlgorithmKind.CycleSearch, tuple(cycle), index)
    yield Pause(CYCLE_PAUSE)


def cycle_steps(graph: Graph, equality: CycleEquality = CycleEquality.VertexSet) -> Iterator[TraceEvent]:
    """Run the cycle search as a stream of trace events ending in Completed."""
    found = _CycleCollector(equality, graph.directed)
    adj = adjacency(graph)

    for loop in graph.self_loops():
        index = found.add_self_loop(loop.from_id)
        color = cycle_color(index)
        yield Highlight.edge(loop.from_id, loop.to_id, color)
        yield Highlight.node(loop.from_id, color)
        yield Found(AlgorithmKind.CycleSearch, (loop.from_id,), index)
        yield Pause(SELF_LOOP_PAUSE)

    if graph.directed:
        yield from _directed_search(graph, adj, found)
    else:
        yield from _undirected_search(graph, adj, found)

    if not found.cycles:
        for node_id in graph.nodes:
            yield Highlight.node(node_id, ACYCLIC_COLOR)
        yield Pause(0.0, ACYCLIC_FLASH_MS)
        for node_id in graph.nodes:
            yield Highlight.node(node_id, NODE_BASE_COLOR, highlighted=False)

    yield Completed(AlgorithmKind.CycleSearch, [list(c) for c in found.cycles])


def _undirected_search(graph: Graph, adj: dict[int, list[int]], found: _CycleCollector) -> Iterator[TraceEvent]:
    visited: set[int] = set()

    def dfs(node_id: int, parent: int | None, path: list[int]) -> Iterator[TraceEvent]:
        visited.add(node_id)
        yield Highlight.node(node_id, VISIT_COLOR)
        yield Pause(UNDIRECTED_VISIT_PAUSE)

        for nb in adj[node_id]:
            if nb == parent:
                continue
            if nb in path:
                cycle = path[path.index(nb) :] + [node_id]
                index = found.offer(cycle)
                if index is not None:
                    yield from _confirm(cycle, index)
            elif nb not in visited:
                yield from dfs(nb, node_id, path + [node_id])

    for node_id in graph.nodes:
        if node_id not in visited:
            yield from dfs(node_id, None, [])


def _directed_search(graph: Graph, adj: dict[int, list[int]], found: _CycleCollector) -> Iterator[TraceEvent]:
    visited: set[int] = set()
    stack: list[int] = []
    on_stack: set[int] = set()

    def dfs(node_id: int) -> Iterator[TraceEvent]:
        stack.append(node_id)
        on_stack.add(node_id)
        visited.add(node_id)
        yield Highlight.node(node_id, VISIT_COLOR)
        yield Pause(DIRECTED_VISIT_PAUSE)

        for nb in adj[node_id]:
            if nb not in visited:
                yield from dfs(nb)
            elif nb in on_stack:
                cycle = stack[stack.index(nb) :]
                index = found.offer(cycle)
                if index is not None:
                    yield from _confirm(cycle, index)

        stack.pop()
        on_stack.discard(node_id)
        yield Highlight.node(node_id, FINISH_COLOR)

    for node_id in graph.nodes:
        if node_id not in visited:
            yield from dfs(node_id)


def find_cycles(graph: Graph, equality: CycleEquality = CycleEquality.VertexSet) -> list[list[int]]:
    """All distinct elementary cycles, self-loops first, then in discovery order."""
    for event in cycle_steps(graph, equality):
        if isinstance(event, Completed):
            return event.results
    return []
