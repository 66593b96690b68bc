"""Pacing adapter — replays a run with real delays at its Pause events."""

from __future__ import annotations

import time
from collections.abc import Callable

from graph_explorer.trace.events import Completed, Pause, TraceEvent
from graph_explorer.trace.runner import TraceRun


def play(
    run: TraceRun,
    step_delay_ms: int,
    on_event: Callable[[TraceEvent], None] | None = None,
    sleep: Callable[[float], None] = time.sleep,
) -> Completed | None:
    """Drive run to completion, sleeping at every pacing point.

    Args:
        run: The run to consume.
        step_delay_ms: Base step delay; each Pause scales it.
        on_event: Called with every event before any pause it carries.
        sleep: Sleep function taking seconds (swap out in tests).

    Returns:
        The run's completion event.
    """
    for event in run:
        if on_event is not None:
            on_event(event)
        if isinstance(event, Pause) and step_delay_ms > 0:
            sleep(event.duration_ms(step_delay_ms) / 1000)
    return run.result
