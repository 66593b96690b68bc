"""Execution trace — one cooperative, step-at-a-time algorithm run.

A TraceRun wraps an algorithm's event generator. Every event pulled from it
is first applied to the owning session's graph, then handed to the caller,
so the graph always shows the colors of the latest event. Runs cannot be
cancelled: closing or leaving a run early drains it to completion.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from types import TracebackType

from graph_explorer.trace.events import Completed, TraceEvent
from graph_explorer.types import AlgorithmKind

logger = logging.getLogger(__name__)


class TraceRun:
    def __init__(
        self,
        kind: AlgorithmKind,
        steps: Iterator[TraceEvent],
        apply: Callable[[TraceEvent], None],
        on_finish: Callable[[TraceRun], None],
    ) -> None:
        self.kind = kind
        self._steps = steps
        self._apply = apply
        self._on_finish = on_finish
        self.result: Completed | None = None
        self.finished = False
        self.event_count = 0

    def __iter__(self) -> TraceRun:
        return self

    def __next__(self) -> TraceEvent:
        if self.finished:
            raise StopIteration
        try:
            event = next(self._steps)
        except StopIteration:
            self._finish()
            raise
        except Exception:
            logger.warning("%s run aborted after %d events", self.kind.name, self.event_count)
            self._finish()
            raise
        self.event_count += 1
        self._apply(event)
        if isinstance(event, Completed):
            self.result = event
            self._finish()
        return event

    def _finish(self) -> None:
        if self.finished:
            return
        self.finished = True
        logger.debug("%s run finished after %d events", self.kind.name, self.event_count)
        self._on_finish(self)

    def complete(self) -> Completed | None:
        """Consume every remaining event and return the completion event."""
        for _ in self:
            pass
        return self.result

    def close(self) -> None:
        self.complete()

    @property
    def results(self) -> list[list[int]]:
        return self.result.results if self.result is not None else []

    def __enter__(self) -> TraceRun:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.complete()
