"""Graph model: nodes, edges and the graph container."""

from graph_explorer.model.graph import EDGE_BASE_COLOR, NODE_BASE_COLOR, Edge, Graph, Node

__all__ = [
    "EDGE_BASE_COLOR",
    "NODE_BASE_COLOR",
    "Edge",
    "Graph",
    "Node",
]
