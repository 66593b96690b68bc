"""Label table — tabular CRUD over node labels.

Edits go straight into the session's graph. Every refused edit raises
LabelValidationError and leaves the graph untouched.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from graph_explorer.errors import LabelValidationError
from graph_explorer.session import Session

logger = logging.getLogger(__name__)

_ID_RE = re.compile(r"^\d+$", re.ASCII)


@dataclass(frozen=True)
class LabelRow:
    id: int
    label: str


def parse_node_id(text: str) -> int:
    """Parse a user-typed node id. Anything but plain digits is rejected."""
    stripped = text.strip()
    if not _ID_RE.match(stripped):
        raise LabelValidationError(f"not a valid node id: {text!r}")
    return int(stripped)


class LabelTable:
    def __init__(self, session: Session) -> None:
        self.session = session

    def rows(self) -> list[LabelRow]:
        return [LabelRow(node_id, label) for node_id, label in self.session.graph.labels().items()]

    def as_mapping(self) -> dict[int, str]:
        return self.session.graph.labels()

    def _check_idle(self) -> None:
        if self.session.is_running:
            raise LabelValidationError("labels cannot change while an algorithm is running")

    def add(self, id_text: str, label: str = "") -> LabelRow:
        """Add a new node. Rejects unparsable and already-used ids."""
        self._check_idle()
        node_id = parse_node_id(id_text)
        if self.session.graph.has_node(node_id):
            raise LabelValidationError(f"node {node_id} already exists")
        self.session.add_node(node_id, label)
        return LabelRow(node_id, label)

    def edit(self, node_id: int, label: str) -> LabelRow:
        self._check_idle()
        if not self.session.set_label(node_id, label):
            raise LabelValidationError(f"node {node_id} does not exist")
        return LabelRow(node_id, label)

    def remove(self, node_id: int) -> LabelRow:
        """Delete a node together with its incident edges."""
        self._check_idle()
        node = self.session.remove_node(node_id)
        if node is None:
            raise LabelValidationError(f"node {node_id} does not exist")
        return LabelRow(node.id, node.label)

    def batch_update(self, text: str) -> int:
        """Apply ``id:label,id:label,...``; unknown ids are added, bad ids skipped.

        Returns the number of entries applied.
        """
        self._check_idle()
        applied = 0
        for pair in text.split(","):
            id_part, _, label = pair.partition(":")
            try:
                node_id = parse_node_id(id_part)
            except LabelValidationError:
                logger.debug("batch entry skipped: %r", pair)
                continue
            label = label.strip()
            if self.session.graph.has_node(node_id):
                self.session.set_label(node_id, label)
            else:
                self.session.add_node(node_id, label)
            applied += 1
        return applied

    def search(self, term: str) -> list[LabelRow]:
        """Rows whose id contains term, or whose label contains it ignoring case."""
        needle = term.lower()
        return [r for r in self.rows() if term in str(r.id) or needle in r.label.lower()]

    def sorted_rows(self, by: str = "id", descending: bool = False) -> list[LabelRow]:
        if by == "id":
            return sorted(self.rows(), key=lambda r: r.id, reverse=descending)
        if by == "label":
            return sorted(self.rows(), key=lambda r: r.label.lower(), reverse=descending)
        raise ValueError(f"Unknown sort column '{by}'; use id or label")
