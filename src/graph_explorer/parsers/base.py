"""Base parser protocol."""

from __future__ import annotations

from typing import Protocol

from graph_explorer.model.graph import Graph


class Parser(Protocol):
    """Protocol that all graph description parsers must implement."""

    def parse(self, src: str, directed: bool = False) -> Graph:
        """Parse a description into a Graph."""
        ...
