"""Trace events — the observable stream of an algorithm run.

A renderer paints each node/edge in the color of the most recent Highlight
that named it. Pause marks a pacing point; Found confirms one cycle or path;
Completed closes the stream with the full ordered result list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Union

from graph_explorer.types import AlgorithmKind, TargetKind


@dataclass(frozen=True)
class Highlight:
    target: TargetKind
    ref: int | tuple[int, int]
    color: str
    highlighted: bool = True

    @classmethod
    def node(cls, node_id: int, color: str, highlighted: bool = True) -> Highlight:
        return cls(TargetKind.Node, node_id, color, highlighted)

    @classmethod
    def edge(cls, from_id: int, to_id: int, color: str, highlighted: bool = True) -> Highlight:
        return cls(TargetKind.Edge, (from_id, to_id), color, highlighted)

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"kind": self.target.value}
        if self.target is TargetKind.Node:
            out["id"] = self.ref
        else:
            out["from"], out["to"] = self.ref  # type: ignore[misc]
        out["color"] = self.color
        out["highlighted"] = self.highlighted
        return out


@dataclass(frozen=True)
class Pause:
    """Suspend for ``fraction`` of the step delay, but never less than ``minimum_ms``."""

    fraction: float = 1.0
    minimum_ms: int = 0

    def duration_ms(self, step_delay_ms: int) -> float:
        return max(float(self.minimum_ms), step_delay_ms * self.fraction)


@dataclass(frozen=True)
class Found:
    kind: AlgorithmKind
    nodes: tuple[int, ...]
    index: int


@dataclass(frozen=True)
class Completed:
    kind: AlgorithmKind
    results: list[list[int]] = field(default_factory=list)


TraceEvent = Union[Highlight, Pause, Found, Completed]
