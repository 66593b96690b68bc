"""Graph algorithms: traversal primitives, cycles, simple paths and layering."""

from graph_explorer.algorithms.cycles import cycle_key, cycle_steps, find_cycles
from graph_explorer.algorithms.layering import Layering, compute_layering
from graph_explorer.algorithms.neighbors import adjacency, neighbors
from graph_explorer.algorithms.paths import find_paths, iter_simple_paths, path_steps

__all__ = [
    "Layering",
    "adjacency",
    "compute_layering",
    "cycle_key",
    "cycle_steps",
    "find_cycles",
    "find_paths",
    "iter_simple_paths",
    "neighbors",
    "path_steps",
]
