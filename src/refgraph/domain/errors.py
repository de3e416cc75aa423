"""Error taxonomy for loading and traversing a reference graph.

Two conditions are fatal and raised: :class:`MalformedInput` and
:class:`MissingTargetNode`. Dangling edges are not errors; they are
recorded as :class:`DanglingEdgeReference` values on the index and
surfaced as warnings.
"""

from __future__ import annotations

from dataclasses import dataclass


class RefgraphError(Exception):
    """Base class for fatal refgraph conditions."""

    code = "REFGRAPH_ERROR"


class MalformedInput(RefgraphError):
    """The raw input cannot be turned into node and edge records."""

    code = "MALFORMED_INPUT"


class MissingTargetNode(RefgraphError):
    """The requested node id is not present in the node table."""

    code = "MISSING_TARGET_NODE"

    def __init__(self, node_id: int) -> None:
        self.node_id = node_id
        super().__init__(f"Node {node_id} not found in graph")


@dataclass(frozen=True)
class DanglingEdgeReference:
    """An input edge whose endpoint is absent from the node table."""

    source: int
    target: int
    label: str | None
    missing: int

    def describe(self) -> str:
        return f"{self.source} -> {self.target}: node {self.missing} not found"
