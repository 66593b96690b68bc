"""Colors used by the trace."""

from __future__ import annotations

VISIT_COLOR = "#fbbf24"
FINISH_COLOR = "#10b981"
ACYCLIC_COLOR = "#22c55e"
FALLBACK_CYCLE_COLOR = "#ef4444"

CYCLE_COLORS: tuple[str, ...] = ("#ef4444", "#f59e0b", "#8b5cf6", "#ec4899", "#06b6d4", "#84cc16")

PATH_COLORS: tuple[str, ...] = (
    "#ef4444",
    "#3b82f6",
    "#f59e0b",
    "#06b6d4",
    "#22c55e",
    "#ec4899",
    "#8b5cf6",
    "#84cc16",
    "#eab308",
    "#f43f5e",
    "#a21caf",
    "#0ea5e9",
)


def cycle_color(index: int) -> str:
    """Color of the index-th reported cycle; the palette does not wrap."""
    if 0 <= index < len(CYCLE_COLORS):
        return CYCLE_COLORS[index]
    return FALLBACK_CYCLE_COLOR


def path_color(index: int) -> str:
    return PATH_COLORS[index % len(PATH_COLORS)]
