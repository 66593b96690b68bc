"""Shared type definitions for graph-explorer.

Enums used across the model, algorithms, trace and session layers.
"""

from __future__ import annotations

from enum import Enum, auto


class AlgorithmKind(Enum):
    CycleSearch = auto()
    PathSearch = auto()
    TreeLayering = auto()

    @property
    def traced(self) -> bool:
        """True for algorithms that stream through an execution trace."""
        return self is not AlgorithmKind.TreeLayering


class TargetKind(Enum):
    Node = "node"
    Edge = "edge"


class CycleEquality(Enum):
    VertexSet = auto()  # sorted node-id multisets compare equal
    Rotation = auto()  # same cyclic sequence up to rotation (and reflection when undirected)

    @classmethod
    def default(cls) -> CycleEquality:
        return cls.VertexSet
