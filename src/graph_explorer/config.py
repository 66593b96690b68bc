"""Centralized configuration for graph-explorer."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from graph_explorer.types import CycleEquality

MIN_STEP_DELAY_MS: int = 100
MAX_STEP_DELAY_MS: int = 2000
DEFAULT_STEP_DELAY_MS: int = 500


def clamp_delay(ms: int) -> int:
    return max(MIN_STEP_DELAY_MS, min(MAX_STEP_DELAY_MS, int(ms)))


@dataclass
class SessionConfig:
    """Configuration consumed by a session and its algorithm runs."""

    directed: bool = False
    step_delay_ms: int = DEFAULT_STEP_DELAY_MS
    cycle_equality: CycleEquality = field(default_factory=CycleEquality.default)

    def __post_init__(self) -> None:
        self.step_delay_ms = clamp_delay(self.step_delay_ms)

    def with_delay(self, ms: int) -> SessionConfig:
        return replace(self, step_delay_ms=ms)


@dataclass
class CanvasConfig:
    """Geometry used for the default circular layout and tree hanging."""

    width: int = 1000
    height: int = 650
    radius_ratio: float = 0.32
    level_gap: int = 100
    node_gap: int = 80
    base_y: int = 80
