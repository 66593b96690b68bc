"""Execution trace: events, palettes, runs and pacing."""

from graph_explorer.trace.events import Completed, Found, Highlight, Pause, TraceEvent
from graph_explorer.trace.pacing import play
from graph_explorer.trace.runner import TraceRun

__all__ = [
    "Completed",
    "Found",
    "Highlight",
    "Pause",
    "TraceEvent",
    "TraceRun",
    "play",
]
