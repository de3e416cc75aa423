"""Pydantic models for raw input records.

A graph document is a JSON object::

    {
      "nodes": [{"id": 1, "type": "quest", "name": "SecretCellar.qst"}],
      "edges": [{"source": 2, "target": 1, "label": "leads to"}]
    }

Unknown keys are ignored so that richer dumps load unchanged.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from refgraph.domain.types import Edge, Node


class NodeRecord(BaseModel):
    """One entry of ``nodes``."""

    model_config = {"frozen": True, "extra": "ignore"}

    id: int
    type: str = ""
    name: str = ""

    def to_node(self) -> Node:
        return Node(id=self.id, type=self.type, name=self.name)


class EdgeRecord(BaseModel):
    """One entry of ``edges``."""

    model_config = {"frozen": True, "extra": "ignore"}

    source: int
    target: int
    label: str | None = None

    def to_edge(self) -> Edge:
        return Edge(source=self.source, target=self.target, label=self.label)


class GraphDocument(BaseModel):
    """The full set of records a graph index is built from."""

    model_config = {"frozen": True, "extra": "ignore"}

    nodes: list[NodeRecord] = Field(default_factory=list)
    edges: list[EdgeRecord] = Field(default_factory=list)

    def domain_nodes(self) -> list[Node]:
        return [record.to_node() for record in self.nodes]

    def domain_edges(self) -> list[Edge]:
        return [record.to_edge() for record in self.edges]
