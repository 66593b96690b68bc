"""Exception types raised by graph-explorer."""

from __future__ import annotations


class GraphExplorerError(Exception):
    """Base class for all graph-explorer errors."""


class GraphParseError(GraphExplorerError, ValueError):
    """A graph description was rejected by the strict parser."""

    def __init__(self, line_no: int, line: str, reason: str) -> None:
        self.line_no = line_no
        self.line = line
        self.reason = reason
        super().__init__(f"line {line_no}: {reason}: {line!r}")


class LabelValidationError(GraphExplorerError, ValueError):
    """A label-table edit was refused; the table is left unchanged."""
