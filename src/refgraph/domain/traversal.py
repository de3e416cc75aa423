"""Bounded bidirectional traversal around a target node.

Two independent breadth-first explorations start at the target: one
follows outgoing edges up to ``outgoing`` hops, the other follows the
reverse index up to ``incoming`` hops. Each keeps its own visited map
for the duration of a single :func:`traverse` call, so cycles terminate
and no node is expanded twice. The results are merged at the end.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from refgraph.domain.index import GraphIndex
from refgraph.domain.types import Direction, Edge


@dataclass(frozen=True)
class TraversalResult:
    """Nodes and edges visited around ``target``.

    Attributes:
        target: The seed node id.
        nodes: Every visited node id, the target included.
        edges: Every followed edge, once each, in discovery order
            (outgoing exploration first).
        distances: Minimum hop count from the target over both directions.
        truncated_incoming: Nodes with incoming edges left unexpanded.
        truncated_outgoing: Nodes with outgoing edges left unexpanded.
    """

    target: int
    nodes: frozenset[int]
    edges: tuple[Edge, ...]
    distances: dict[int, int] = field(default_factory=dict)
    truncated_incoming: frozenset[int] = frozenset()
    truncated_outgoing: frozenset[int] = frozenset()


@dataclass
class _Exploration:
    depths: dict[int, int]
    edges: list[Edge]
    truncated: set[int]


def traverse(
    index: GraphIndex,
    target: int,
    *,
    incoming: int,
    outgoing: int,
    max_fanout: int | None = None,
) -> TraversalResult:
    """Collect the neighborhood of *target* within the given hop limits.

    Args:
        index: The graph to walk. Never mutated.
        target: Seed node id. Must exist in *index*.
        incoming: Hops to follow backward (nodes referencing the target).
        outgoing: Hops to follow forward (nodes the target references).
        max_fanout: When set, a non-target node with more edges than this
            in the exploration direction is kept but not expanded.

    Raises:
        MissingTargetNode: *target* is not in the index.
        ValueError: A limit is negative or *max_fanout* is below 1.
    """
    if incoming < 0 or outgoing < 0:
        msg = f"Hop limits must be non-negative (incoming={incoming}, outgoing={outgoing})"
        raise ValueError(msg)
    if max_fanout is not None and max_fanout < 1:
        msg = f"max_fanout must be at least 1, got {max_fanout}"
        raise ValueError(msg)
    index.require(target)

    forward = _explore(index, target, Direction.OUTGOING, outgoing, max_fanout)
    backward = _explore(index, target, Direction.INCOMING, incoming, max_fanout)

    distances = dict(forward.depths)
    for node_id, depth in backward.depths.items():
        if depth < distances.get(node_id, depth + 1):
            distances[node_id] = depth

    edges: list[Edge] = []
    seen: set[Edge] = set()
    for edge in (*forward.edges, *backward.edges):
        if edge not in seen:
            seen.add(edge)
            edges.append(edge)

    return TraversalResult(
        target=target,
        nodes=frozenset(distances),
        edges=tuple(edges),
        distances=distances,
        truncated_incoming=frozenset(backward.truncated),
        truncated_outgoing=frozenset(forward.truncated),
    )


def _explore(
    index: GraphIndex,
    target: int,
    direction: Direction,
    limit: int,
    max_fanout: int | None,
) -> _Exploration:
    """Breadth-first walk of one adjacency, bounded by *limit* hops."""
    depths: dict[int, int] = {target: 0}
    edges: list[Edge] = []
    recorded: set[Edge] = set()
    truncated: set[int] = set()

    frontier = [target]
    for depth in range(1, limit + 1):
        if not frontier:
            break
        next_frontier: list[int] = []
        for node_id in frontier:
            adjacent = index.adjacent(node_id, direction)
            if max_fanout is not None and node_id != target and len(adjacent) > max_fanout:
                truncated.add(node_id)
                continue
            for edge in adjacent:
                if edge not in recorded:
                    recorded.add(edge)
                    edges.append(edge)
                neighbor = edge.far_end(direction)
                if neighbor not in depths:
                    depths[neighbor] = depth
                    next_frontier.append(neighbor)
        frontier = next_frontier

    # Whatever is left on the frontier stopped at the hop limit.
    truncated.update(node_id for node_id in frontier if index.adjacent(node_id, direction))
    return _Exploration(depths=depths, edges=edges, truncated=truncated)
