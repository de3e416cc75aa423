"""GraphIndex: node table plus forward and reverse adjacency.

Built once per invocation from the loaded records and read-only after
that. The reverse adjacency is derived at build time by inverting every
well-formed edge, so incoming lookups never scan the edge list.

Adjacency lists keep the input order of edges. Repeated runs over the
same input therefore traverse in the same order and emit identical
documents.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable, Iterator, Sequence
from dataclasses import dataclass, field, replace

from refgraph.domain.errors import DanglingEdgeReference, MalformedInput, MissingTargetNode
from refgraph.domain.types import Direction, Edge, Node

_NO_EDGES: tuple[Edge, ...] = ()


@dataclass
class GraphIndex:
    """In-memory adjacency structure over the full input graph.

    Attributes:
        nodes: Canonical node table keyed by id.
        outgoing: Edges grouped by ``source``, in input order.
        incoming: The same edges grouped by ``target``, in input order.
        edges: Every well-formed edge, in input order.
        dangling: Edges dropped because an endpoint was unknown.
    """

    nodes: dict[int, Node] = field(default_factory=dict)
    outgoing: dict[int, list[Edge]] = field(default_factory=dict)
    incoming: dict[int, list[Edge]] = field(default_factory=dict)
    edges: list[Edge] = field(default_factory=list)
    dangling: list[DanglingEdgeReference] = field(default_factory=list)

    @classmethod
    def build(cls, nodes: Iterable[Node], edges: Iterable[Edge]) -> GraphIndex:
        """Index *nodes* and *edges*.

        Each edge is renumbered with its position in *edges* as ``seq``.
        Edges with an endpoint outside the node table are dropped and
        recorded in :attr:`dangling`.

        Raises:
            MalformedInput: Two nodes share an id.
        """
        index = cls()
        for node in nodes:
            if node.id in index.nodes:
                msg = f"Duplicate node id {node.id}"
                raise MalformedInput(msg)
            index.nodes[node.id] = node

        for seq, edge in enumerate(edges):
            missing = next(
                (nid for nid in (edge.source, edge.target) if nid not in index.nodes), None
            )
            if missing is not None:
                index.dangling.append(
                    DanglingEdgeReference(
                        source=edge.source,
                        target=edge.target,
                        label=edge.label,
                        missing=missing,
                    )
                )
                continue
            indexed = replace(edge, seq=seq)
            index.edges.append(indexed)
            index.outgoing.setdefault(indexed.source, []).append(indexed)
            index.incoming.setdefault(indexed.target, []).append(indexed)
        return index

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)

    def require(self, node_id: int) -> Node:
        """Return the node for *node_id* or raise :class:`MissingTargetNode`."""
        try:
            return self.nodes[node_id]
        except KeyError:
            raise MissingTargetNode(node_id) from None

    def adjacent(self, node_id: int, direction: Direction) -> Sequence[Edge]:
        """Edges leaving (outgoing) or entering (incoming) *node_id*."""
        table = self.outgoing if direction is Direction.OUTGOING else self.incoming
        return table.get(node_id, _NO_EDGES)

    def edges_among(self, node_ids: Collection[int]) -> Iterator[Edge]:
        """Yield every edge with both endpoints in *node_ids*, in input order."""
        found = [
            edge
            for node_id in node_ids
            for edge in self.outgoing.get(node_id, _NO_EDGES)
            if edge.target in node_ids
        ]
        found.sort(key=lambda edge: edge.seq)
        yield from found
