"""NeighborhoodService: extract and inspect dependency neighborhoods.

``extract`` runs the whole pipeline for one target: index (lazy, via the
GraphSource), target check, bounded traversal, subgraph assembly and
document rendering. ``inspect`` reports index statistics and the direct
edges of a single node.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from refgraph.domain.errors import RefgraphError
from refgraph.domain.subgraph import assemble
from refgraph.domain.traversal import traverse
from refgraph.domain.types import Direction
from refgraph.output.emitters import FORMATS, THEMES, render_document
from refgraph.services.base import BaseService
from refgraph.services.result import ServiceResult
from refgraph.services.telemetry import trace_span, traced

if TYPE_CHECKING:
    from refgraph.config.models import NeighborhoodConfig
    from refgraph.domain.index import GraphIndex


class NeighborhoodService(BaseService):
    """Bounded neighborhood extraction over one graph source."""

    @traced
    def extract(
        self,
        params: NeighborhoodConfig,
        *,
        fmt: str = "dot",
        theme: str = "dark",
    ) -> ServiceResult:
        """Extract the neighborhood of ``params.target_id`` and render it.

        The rendered document is returned in ``data["content"]``; writing
        it anywhere is the caller's concern.

        Args:
            params: Target id, hop limits, fan-out limit and edge mode.
            fmt: ``"dot"`` or ``"json"``.
            theme: DOT color theme, ``"dark"`` or ``"light"``.
        """
        op = "extract"
        if fmt not in FORMATS or theme not in THEMES:
            return ServiceResult.failure(
                op,
                "INVALID_FORMAT",
                f"Unknown format/theme: {fmt}/{theme}",
                format=fmt,
                theme=theme,
                valid_formats=list(FORMATS),
                valid_themes=list(THEMES),
            )

        try:
            with trace_span("build_index") as span:
                index = self._source.index
                if span:
                    span.annotate("nodes", len(index.nodes))
                    span.annotate("edges", len(index.edges))
            index.require(params.target_id)

            with trace_span("traverse") as span:
                result = traverse(
                    index,
                    params.target_id,
                    incoming=params.incoming_count,
                    outgoing=params.outgoing_count,
                    max_fanout=params.max_fanout,
                )
                if span:
                    span.annotate("visited", len(result.nodes))
        except RefgraphError as exc:
            return self._error_result(op, exc)

        with trace_span("assemble"):
            subgraph = assemble(result, index, induced=params.induced)

        with trace_span("render"):
            content = render_document(subgraph, fmt, theme=theme)

        nodes = [
            {
                "id": node_id,
                "name": attrs["name"],
                "type": attrs["type"],
                "distance": attrs["distance"],
            }
            for node_id, attrs in subgraph.nodes(data=True)
        ]
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "target_id": params.target_id,
                "format": fmt,
                "incoming_count": params.incoming_count,
                "outgoing_count": params.outgoing_count,
                "node_count": subgraph.number_of_nodes(),
                "edge_count": subgraph.number_of_edges(),
                "nodes": nodes,
                "content": content,
            },
            warnings=self._dangling_warnings(index),
        )

    @traced
    def inspect(self, node_id: int | None = None) -> ServiceResult:
        """Summarize the index, optionally focusing on one node."""
        op = "inspect"
        try:
            index = self._source.index
            node = index.require(node_id) if node_id is not None else None
        except RefgraphError as exc:
            return self._error_result(op, exc)

        data: dict[str, Any] = {
            "path": str(self._source.path),
            "node_count": len(index.nodes),
            "edge_count": len(index.edges),
            "dangling_count": len(index.dangling),
        }
        if node is not None:
            data["node"] = {"id": node.id, "name": node.name, "type": node.type}
            data["incoming"] = _edge_items(index, Direction.INCOMING, node.id)
            data["outgoing"] = _edge_items(index, Direction.OUTGOING, node.id)

        return ServiceResult(
            ok=True,
            op=op,
            data=data,
            warnings=self._dangling_warnings(index),
        )


def _edge_items(index: GraphIndex, direction: Direction, node_id: int) -> list[dict[str, Any]]:
    """Describe the node at the far end of each of *node_id*'s edges."""
    items: list[dict[str, Any]] = []
    for edge in index.adjacent(node_id, direction):
        other = index.nodes[edge.far_end(direction)]
        items.append(
            {"id": other.id, "name": other.name, "type": other.type, "label": edge.label}
        )
    return items
