"""Node, Edge and traversal direction.

Nodes and edges are immutable once loaded. Everything outside the
:class:`~refgraph.domain.index.GraphIndex` refers to nodes by id.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class Direction(StrEnum):
    """Which adjacency a traversal follows."""

    INCOMING = "incoming"
    OUTGOING = "outgoing"


@dataclass(frozen=True)
class Node:
    """One object of the reference graph (a data file in the original dump)."""

    id: int
    type: str = ""
    name: str = ""


@dataclass(frozen=True)
class Edge:
    """A directed reference ``source -> target``.

    ``seq`` is the record's position in the input edge list. It keeps two
    records with the same endpoints and label distinct.
    """

    source: int
    target: int
    label: str | None = None
    seq: int = 0

    def far_end(self, direction: Direction) -> int:
        """The endpoint reached when following this edge in *direction*."""
        if direction is Direction.OUTGOING:
            return self.target
        return self.source
