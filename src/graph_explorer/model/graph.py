"""Graph model — nodes, edges and the graph-wide directed flag.

A Graph is built once per parsed description and owned by a session. The
algorithms only read its structure; highlight fields are written by the
session while it applies trace events, and positions belong to the renderer.
"""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass, field

import networkx as nx

NODE_BASE_COLOR = "#4f46e5"
EDGE_BASE_COLOR = "#6b7280"


@dataclass
class Node:
    id: int
    label: str = ""
    x: float = 0.0
    y: float = 0.0
    color: str = NODE_BASE_COLOR
    distance: float = math.inf
    parent: int | None = None

    def reset(self) -> None:
        self.color = NODE_BASE_COLOR
        self.distance = math.inf
        self.parent = None


@dataclass
class Edge:
    from_id: int
    to_id: int
    weight: int = 1
    color: str = EDGE_BASE_COLOR
    highlighted: bool = False

    @property
    def is_self_loop(self) -> bool:
        return self.from_id == self.to_id

    @property
    def endpoints(self) -> tuple[int, int]:
        return (self.from_id, self.to_id)

    def touches(self, node_id: int) -> bool:
        return self.from_id == node_id or self.to_id == node_id

    def other(self, node_id: int) -> int:
        """The endpoint opposite node_id (node_id itself for a self-loop)."""
        return self.to_id if self.from_id == node_id else self.from_id

    def reset(self) -> None:
        self.color = EDGE_BASE_COLOR
        self.highlighted = False


@dataclass
class Graph:
    """Nodes in declaration order, edges in description order.

    Edges are not unique: parallel edges and reverse edges are separate
    records. Every edge endpoint refers to a node in ``nodes``.
    """

    nodes: dict[int, Node] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)
    directed: bool = False

    # ─── Construction ───────────────────────────────────────────────────────

    def add_node(self, node: Node) -> None:
        """Insert node; a redeclared id replaces the old node and takes the new position."""
        self.nodes.pop(node.id, None)
        self.nodes[node.id] = node

    def add_edge(self, edge: Edge) -> None:
        if edge.from_id not in self.nodes or edge.to_id not in self.nodes:
            raise KeyError(f"edge {edge.from_id}->{edge.to_id} references an unknown node")
        self.edges.append(edge)

    def remove_node(self, node_id: int) -> Node | None:
        """Remove a node and every edge incident to it."""
        node = self.nodes.pop(node_id, None)
        if node is not None:
            self.edges = [e for e in self.edges if not e.touches(node_id)]
        return node

    # ─── Queries ────────────────────────────────────────────────────────────

    def node_ids(self) -> list[int]:
        return list(self.nodes)

    def has_node(self, node_id: int) -> bool:
        return node_id in self.nodes

    def node(self, node_id: int) -> Node:
        return self.nodes[node_id]

    def node_count(self) -> int:
        return len(self.nodes)

    def edge_count(self) -> int:
        return len(self.edges)

    def self_loops(self) -> list[Edge]:
        return [e for e in self.edges if e.is_self_loop]

    def matching_edges(self, from_id: int, to_id: int) -> Iterator[Edge]:
        """Edges drawn between from_id and to_id; either orientation when undirected."""
        for e in self.edges:
            if e.from_id == from_id and e.to_id == to_id:
                yield e
            elif not self.directed and e.from_id == to_id and e.to_id == from_id:
                yield e

    def degree(self, node_id: int) -> int:
        if node_id not in self.nodes:
            return 0
        return self.to_networkx().degree(node_id)

    def is_acyclic(self) -> bool:
        """True when the graph has no cycle, self-loops included."""
        g = self.to_networkx()
        if self.directed:
            return nx.is_directed_acyclic_graph(g)
        if g.number_of_nodes() == 0:
            return True
        simple = nx.Graph(g)
        # parallel edges and self-loops both close a cycle
        if simple.number_of_edges() != g.number_of_edges() or nx.number_of_selfloops(simple):
            return False
        return nx.is_forest(simple)

    def to_networkx(self) -> nx.MultiDiGraph | nx.MultiGraph:
        """A networkx view of the structure; parallel edges are kept as separate keys."""
        g: nx.MultiDiGraph | nx.MultiGraph = nx.MultiDiGraph() if self.directed else nx.MultiGraph()
        for node_id, node in self.nodes.items():
            g.add_node(node_id, data=node)
        for edge in self.edges:
            g.add_edge(edge.from_id, edge.to_id, weight=edge.weight, data=edge)
        return g

    # ─── Transient state ────────────────────────────────────────────────────

    def reset_highlights(self) -> None:
        for node in self.nodes.values():
            node.reset()
        for edge in self.edges:
            edge.reset()

    def labels(self) -> dict[int, str]:
        return {node_id: node.label for node_id, node in self.nodes.items()}
