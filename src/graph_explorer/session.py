"""Session — the caller-owned state an algorithm run works against.

A session holds the current graph, its configuration, the node selection,
the results of the last run and the single active TraceRun. Parsing a new
description is the only operation that replaces the graph; it also clears
every piece of transient state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from graph_explorer.algorithms.cycles import cycle_steps
from graph_explorer.algorithms.layering import Layering, compute_layering
from graph_explorer.algorithms.paths import path_steps
from graph_explorer.config import CanvasConfig, SessionConfig
from graph_explorer.layout import circular_positions, tree_positions
from graph_explorer.model.graph import Graph, Node
from graph_explorer.parsers import parse
from graph_explorer.trace.events import Completed, Highlight, TraceEvent
from graph_explorer.trace.pacing import play
from graph_explorer.trace.runner import TraceRun
from graph_explorer.types import AlgorithmKind, TargetKind

logger = logging.getLogger(__name__)


class Session:
    def __init__(self, config: SessionConfig | None = None, canvas: CanvasConfig | None = None) -> None:
        self.config = config or SessionConfig()
        self.canvas = canvas or CanvasConfig()
        self.graph = Graph(directed=self.config.directed)
        self.selection: list[int] = []
        self.cycles: list[list[int]] = []
        self.paths: list[list[int]] = []
        self.layering: Layering | None = None
        self._active: TraceRun | None = None

    @property
    def is_running(self) -> bool:
        return self._active is not None

    # ─── Graph lifecycle ────────────────────────────────────────────────────

    def load(self, src: str, strict: bool = False) -> Graph | None:
        """Parse src into a fresh graph and lay it out on a circle.

        Refused (returns None) while a run is active. Raises GraphParseError
        only in strict mode, leaving the current graph in place.
        """
        if self.is_running:
            logger.warning("load refused: a %s run is in progress", self._active.kind.name)  # type: ignore[union-attr]
            return None
        graph = parse(src, directed=self.config.directed, strict=strict)
        for node_id, (x, y) in circular_positions(graph.node_ids(), self.canvas).items():
            graph.nodes[node_id].x = x
            graph.nodes[node_id].y = y
        self.graph = graph
        self._clear_results()
        logger.info("loaded graph: %d nodes, %d edges", graph.node_count(), graph.edge_count())
        return graph

    def reset(self) -> bool:
        """Restore baseline colors and drop selection and results."""
        if self.is_running:
            return False
        self._clear_results()
        return True

    def set_directed(self, directed: bool) -> bool:
        if self.is_running:
            return False
        self.config.directed = directed
        self.graph.directed = directed
        self._clear_results()
        return True

    def set_step_delay(self, ms: int) -> None:
        self.config = self.config.with_delay(ms)

    def _clear_results(self) -> None:
        self.graph.reset_highlights()
        self.selection = []
        self.cycles = []
        self.paths = []
        self.layering = None

    # ─── Nodes and labels ───────────────────────────────────────────────────

    def add_node(self, node_id: int, label: str = "") -> Node | None:
        """Insert a new node at the canvas centre; an existing id is refused."""
        if self.is_running or self.graph.has_node(node_id):
            return None
        node = Node(id=node_id, label=label, x=self.canvas.width / 2, y=self.canvas.height / 2)
        self.graph.add_node(node)
        return node

    def remove_node(self, node_id: int) -> Node | None:
        if self.is_running:
            return None
        node = self.graph.remove_node(node_id)
        if node_id in self.selection:
            self.selection.remove(node_id)
        return node

    def set_label(self, node_id: int, label: str) -> bool:
        if self.is_running or not self.graph.has_node(node_id):
            return False
        self.graph.nodes[node_id].label = label
        return True

    # ─── Selection ──────────────────────────────────────────────────────────

    def select(self, node_id: int) -> bool:
        """Add node_id to the selection; at most two distinct nodes are kept."""
        if self.is_running or not self.graph.has_node(node_id):
            return False
        if node_id in self.selection or len(self.selection) >= 2:
            return False
        self.selection.append(node_id)
        return True

    def select_root(self, node_id: int) -> bool:
        if self.is_running or not self.graph.has_node(node_id):
            return False
        self.selection = [node_id]
        return True

    def clear_selection(self) -> None:
        self.selection = []

    # ─── Running algorithms ─────────────────────────────────────────────────

    def start(self, kind: AlgorithmKind) -> TraceRun | None:
        """Begin a traced run of kind, or return None if it cannot start.

        Tree layering is never traced (see hang_tree). Otherwise a run cannot
        start while another is active, and a path search needs exactly two
        selected nodes (source first).
        """
        if not kind.traced:
            logger.warning("%s does not run through a trace; use hang_tree", kind.name)
            return None
        if self.is_running:
            logger.warning("%s run rejected: a %s run is in progress", kind.name, self._active.kind.name)  # type: ignore[union-attr]
            return None

        steps: Iterator[TraceEvent]
        if kind is AlgorithmKind.CycleSearch:
            steps = cycle_steps(self.graph, self.config.cycle_equality)
        else:
            if len(self.selection) != 2:
                logger.info("path search skipped: %d node(s) selected", len(self.selection))
                return None
            source, target = self.selection
            steps = path_steps(self.graph, source, target)

        self.graph.reset_highlights()
        if kind is AlgorithmKind.CycleSearch:
            self.cycles = []
        else:
            self.paths = []
        self._active = TraceRun(kind, steps, apply=self.apply, on_finish=self._on_finish)
        logger.info("%s run started", kind.name)
        return self._active

    def execute(self, kind: AlgorithmKind) -> list[list[int]] | Layering | None:
        """Run kind to completion without pacing and return its result.

        Path and cycle searches return their (possibly empty) result lists;
        tree layering returns the Layering, or None without a root.
        """
        if kind is AlgorithmKind.TreeLayering:
            return self.hang_tree()
        run = self.start(kind)
        if run is None:
            return []
        completed = run.complete()
        return completed.results if completed is not None else []

    def play(
        self,
        kind: AlgorithmKind,
        on_event: Callable[[TraceEvent], None] | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> Completed | None:
        """Start kind and replay it at the configured step delay."""
        run = self.start(kind)
        if run is None:
            return None
        if sleep is None:
            return play(run, self.config.step_delay_ms, on_event)
        return play(run, self.config.step_delay_ms, on_event, sleep)

    def hang_tree(self, root: int | None = None) -> Layering | None:
        """Lay the nodes reachable from root out as a tree; others keep their position.

        Uses the first selected node when root is not given.
        """
        if self.is_running:
            return None
        if root is None:
            if not self.selection:
                return None
            root = self.selection[0]
        layering = compute_layering(self.graph, root)
        if layering is None:
            return None
        for node_id, (x, y) in tree_positions(layering, self.canvas).items():
            node = self.graph.nodes[node_id]
            node.x, node.y = x, y
            node.distance = layering.levels[node_id]
            node.parent = layering.parents[node_id]
        self.layering = layering
        return layering

    def apply(self, event: TraceEvent) -> None:
        """Write a highlight event into the graph's color fields."""
        if not isinstance(event, Highlight):
            return
        if event.target is TargetKind.Node:
            node = self.graph.nodes.get(event.ref)  # type: ignore[arg-type]
            if node is not None:
                node.color = event.color
            return
        from_id, to_id = event.ref  # type: ignore[misc]
        for edge in self.graph.matching_edges(from_id, to_id):
            edge.color = event.color
            edge.highlighted = event.highlighted

    def _on_finish(self, run: TraceRun) -> None:
        results = run.results
        if run.kind is AlgorithmKind.CycleSearch:
            self.cycles = results
        else:
            self.paths = results
        self._active = None
        logger.info("%s run completed: %d result(s)", run.kind.name, len(results))
