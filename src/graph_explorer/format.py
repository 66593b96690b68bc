"""Plain-text formatting of results and trace events."""

from __future__ import annotations

from graph_explorer.algorithms.layering import Layering
from graph_explorer.model.graph import Graph
from graph_explorer.trace.events import Completed, Found, Highlight, Pause, TraceEvent
from graph_explorer.types import AlgorithmKind, TargetKind


def _arrow(unicode: bool) -> str:
    return " → " if unicode else " -> "


def format_sequence(nodes: list[int] | tuple[int, ...], closed: bool = False, unicode: bool = True) -> str:
    seq = list(nodes)
    if closed and seq:
        seq.append(seq[0])
    return _arrow(unicode).join(str(n) for n in seq)


def _plural(n: int, word: str) -> str:
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


def format_cycles(cycles: list[list[int]], unicode: bool = True) -> str:
    if not cycles:
        return "No cycles found\n"
    lines = [f"Found {_plural(len(cycles), 'cycle')}:"]
    for i, cycle in enumerate(cycles, start=1):
        lines.append(f"  {i}. {format_sequence(cycle, closed=True, unicode=unicode)}")
    return "\n".join(lines) + "\n"


def format_paths(paths: list[list[int]], source: int, target: int, unicode: bool = True) -> str:
    header = f"{_plural(len(paths), 'path')} from {source} to {target}"
    if not paths:
        return header + "\n"
    lines = [header + ":"]
    for i, path in enumerate(paths, start=1):
        lines.append(f"  {i}. {format_sequence(path, unicode=unicode)}")
    return "\n".join(lines) + "\n"


def format_layering(layering: Layering) -> str:
    lines = [f"Tree from {layering.root} ({_plural(layering.depth, 'level')}):"]
    for level, members in enumerate(layering.members):
        lines.append(f"  {level}: {' '.join(str(n) for n in members)}")
    return "\n".join(lines) + "\n"


def format_summary(graph: Graph) -> str:
    kind = "directed" if graph.directed else "undirected"
    lines = [
        f"{kind} graph: {_plural(graph.node_count(), 'node')}, {_plural(graph.edge_count(), 'edge')}",
        f"self-loops: {len(graph.self_loops())}",
        f"acyclic: {'yes' if graph.is_acyclic() else 'no'}",
    ]
    for node_id, node in graph.nodes.items():
        label = f" {node.label}" if node.label else ""
        lines.append(f"  {node_id}{label} (degree {graph.degree(node_id)})")
    return "\n".join(lines) + "\n"


def format_event(event: TraceEvent, unicode: bool = True) -> str:
    if isinstance(event, Highlight):
        if event.target is TargetKind.Node:
            where = f"node {event.ref}"
        else:
            a, b = event.ref  # type: ignore[misc]
            where = f"edge {a}-{b}"
        state = "" if event.highlighted else " (cleared)"
        return f"{where} {event.color}{state}"
    if isinstance(event, Pause):
        return f"pause x{event.fraction:g}" + (f" (min {event.minimum_ms}ms)" if event.minimum_ms else "")
    if isinstance(event, Found):
        what = "cycle" if event.kind is AlgorithmKind.CycleSearch else "path"
        closed = event.kind is AlgorithmKind.CycleSearch
        return f"{what} {event.index + 1}: {format_sequence(event.nodes, closed=closed, unicode=unicode)}"
    if isinstance(event, Completed):
        return f"done: {_plural(len(event.results), 'result')}"
    return repr(event)
