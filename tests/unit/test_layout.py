"""Tests for layout.py — circular placement and tree hanging."""

from __future__ import annotations

import math

import pytest

from graph_explorer.algorithms.layering import Layering
from graph_explorer.config import CanvasConfig
from graph_explorer.layout import circular_positions, tree_positions

CANVAS = CanvasConfig()


def test_circular_empty():
    assert circular_positions([], CANVAS) == {}


def test_circular_first_node_on_positive_x_axis():
    pos = circular_positions([7, 8, 9, 10], CANVAS)
    radius = min(CANVAS.width, CANVAS.height) * CANVAS.radius_ratio
    x, y = pos[7]
    assert x == pytest.approx(CANVAS.width / 2 + radius)
    assert y == pytest.approx(CANVAS.height / 2)


def test_circular_nodes_equidistant_from_centre():
    pos = circular_positions(list(range(6)), CANVAS)
    cx, cy = CANVAS.width / 2, CANVAS.height / 2
    distances = {round(math.hypot(x - cx, y - cy), 6) for x, y in pos.values()}
    assert len(distances) == 1


def test_circular_quarter_turn():
    pos = circular_positions([0, 1, 2, 3], CANVAS)
    radius = min(CANVAS.width, CANVAS.height) * CANVAS.radius_ratio
    assert pos[1][0] == pytest.approx(CANVAS.width / 2)
    assert pos[1][1] == pytest.approx(CANVAS.height / 2 + radius)


def test_tree_rows_centred():
    layering = Layering(root=0, members=[[0], [1, 3], [2, 4]])
    pos = tree_positions(layering, CANVAS)
    mid = CANVAS.width / 2
    assert pos[0] == (mid, CANVAS.base_y)
    assert pos[1] == (mid - CANVAS.node_gap / 2, CANVAS.base_y + CANVAS.level_gap)
    assert pos[3] == (mid + CANVAS.node_gap / 2, CANVAS.base_y + CANVAS.level_gap)
    assert pos[4][1] == CANVAS.base_y + 2 * CANVAS.level_gap


def test_tree_custom_canvas():
    canvas = CanvasConfig(width=400, node_gap=50, level_gap=20, base_y=10)
    layering = Layering(root=5, members=[[5], [6, 7, 8]])
    pos = tree_positions(layering, canvas)
    assert [pos[n][0] for n in (6, 7, 8)] == [150, 200, 250]
    assert pos[6][1] == 30
