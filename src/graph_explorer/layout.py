"""Node positions for the renderer: circular default layout and tree hanging."""

from __future__ import annotations

import math

from graph_explorer.algorithms.layering import Layering
from graph_explorer.config import CanvasConfig


def circular_positions(node_ids: list[int], canvas: CanvasConfig) -> dict[int, tuple[float, float]]:
    """Place node i of n at angle 2*pi*i/n on a circle centred on the canvas."""
    radius = min(canvas.width, canvas.height) * canvas.radius_ratio
    cx = canvas.width / 2
    cy = canvas.height / 2
    n = len(node_ids)
    positions: dict[int, tuple[float, float]] = {}
    for i, node_id in enumerate(node_ids):
        angle = 2 * math.pi * i / n
        positions[node_id] = (cx + radius * math.cos(angle), cy + radius * math.sin(angle))
    return positions


def tree_positions(layering: Layering, canvas: CanvasConfig) -> dict[int, tuple[float, float]]:
    """One row per level, nodes spaced node_gap apart around the canvas centre line."""
    positions: dict[int, tuple[float, float]] = {}
    for level, members in enumerate(layering.members):
        total_width = (len(members) - 1) * canvas.node_gap
        y = canvas.base_y + level * canvas.level_gap
        for i, node_id in enumerate(members):
            x = canvas.width / 2 - total_width / 2 + i * canvas.node_gap
            positions[node_id] = (x, y)
    return positions
