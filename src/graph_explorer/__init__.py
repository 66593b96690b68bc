"""graph-explorer: cycle, simple-path and tree-layering exploration of small graphs."""

from graph_explorer.algorithms import Layering, compute_layering, find_cycles, find_paths, neighbors
from graph_explorer.config import CanvasConfig, SessionConfig
from graph_explorer.errors import GraphExplorerError, GraphParseError, LabelValidationError
from graph_explorer.labels import LabelTable
from graph_explorer.model import Edge, Graph, Node
from graph_explorer.parsers import parse
from graph_explorer.session import Session
from graph_explorer.trace import Completed, Found, Highlight, Pause, TraceRun, play
from graph_explorer.types import AlgorithmKind, CycleEquality, TargetKind

__all__ = [
    "AlgorithmKind",
    "CanvasConfig",
    "Completed",
    "CycleEquality",
    "Edge",
    "Found",
    "Graph",
    "GraphExplorerError",
    "GraphParseError",
    "Highlight",
    "LabelTable",
    "LabelValidationError",
    "Layering",
    "Node",
    "Pause",
    "Session",
    "SessionConfig",
    "TargetKind",
    "TraceRun",
    "all_paths",
    "compute_layering",
    "detect_cycles",
    "find_cycles",
    "find_paths",
    "neighbors",
    "parse",
    "play",
    "tree_levels",
]


def detect_cycles(
    src: str,
    directed: bool = False,
    equality: CycleEquality = CycleEquality.VertexSet,
) -> list[list[int]]:
    """Parse a graph description and list its distinct cycles.

    Args:
        src: Description text, one node id or ``from to [weight]`` edge per line.
        directed: Interpret edges as directed.
        equality: Rule deciding when two discovered cycles are the same cycle.

    Returns:
        Self-loop cycles first (edge order), then the others in discovery order.
    """
    return find_cycles(parse(src, directed=directed), equality)


def all_paths(src: str, source: int, target: int, directed: bool = False) -> list[list[int]]:
    """Parse a graph description and list every simple path from source to target.

    Returns an empty list when source equals target or either is not a node.
    """
    return find_paths(parse(src, directed=directed), source, target)


def tree_levels(src: str, root: int, directed: bool = False) -> dict[int, int]:
    """Parse a graph description and return the BFS level of every node reachable from root."""
    layering = compute_layering(parse(src, directed=directed), root)
    return dict(layering.levels) if layering is not None else {}
