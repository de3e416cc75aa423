"""Subgraph assembly: turn a TraversalResult into a renderable graph.

The assembled graph is a NetworkX ``MultiDiGraph`` so that parallel
edges between the same pair of nodes survive (keyed by ``Edge.seq``).
Nodes are inserted in ascending id order, which fixes the iteration
order of both nodes and edges for the emitters.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias

import networkx as nx

if TYPE_CHECKING:
    from refgraph.domain.index import GraphIndex
    from refgraph.domain.traversal import TraversalResult

Subgraph: TypeAlias = nx.MultiDiGraph


def assemble(result: TraversalResult, index: GraphIndex, *, induced: bool = True) -> Subgraph:
    """Materialize the visited nodes and the edges connecting them.

    Args:
        result: Output of :func:`~refgraph.domain.traversal.traverse`.
        index: The index the traversal ran on; nodes are resolved from it.
        induced: Include every indexed edge between visited nodes. When
            False, only the edges the traversal followed are candidates.

    INVARIANT: no edge in the returned graph references a node outside it.
    """
    visited = result.nodes
    g: Subgraph = nx.MultiDiGraph(target=result.target)

    for node_id in sorted(visited):
        node = index.nodes[node_id]
        g.add_node(
            node_id,
            name=node.name,
            type=node.type,
            distance=result.distances.get(node_id, 0),
            incoming_truncated=node_id in result.truncated_incoming,
            outgoing_truncated=node_id in result.truncated_outgoing,
        )

    candidates = index.edges_among(visited) if induced else result.edges
    for edge in sorted(candidates, key=lambda e: e.seq):
        if edge.source not in visited or edge.target not in visited:
            continue
        g.add_edge(edge.source, edge.target, key=edge.seq, label=edge.label)
    return g
