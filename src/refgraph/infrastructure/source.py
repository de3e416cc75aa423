"""GraphSource: lazily built GraphIndex over an input path.

Rebuilt per invocation, no cross-invocation cache. Commands that fail
argument validation never touch the input.
"""

from __future__ import annotations

from pathlib import Path

import structlog

from refgraph.domain.index import GraphIndex
from refgraph.infrastructure.loader import load_document

log = structlog.get_logger(__name__)


class GraphSource:
    """Lazy-loading index over a JSON document or directory dump."""

    def __init__(self, path: Path, *, pattern: str = "*.json") -> None:
        self.path = path
        self._pattern = pattern
        self._index: GraphIndex | None = None

    @property
    def index(self) -> GraphIndex:
        """Return the index, loading and building it on first access."""
        if self._index is None:
            self._index = self._build()
        return self._index

    def invalidate(self) -> None:
        """Drop the cached index, forcing a reload on next access."""
        self._index = None

    def _build(self) -> GraphIndex:
        document = load_document(self.path, pattern=self._pattern)
        index = GraphIndex.build(document.domain_nodes(), document.domain_edges())

        if index.dangling:
            log.warning(
                "edges.dangling",
                dropped=len(index.dangling),
                path=str(self.path),
            )
            for ref in index.dangling:
                log.debug(
                    "edge.dropped",
                    source=ref.source,
                    target=ref.target,
                    label=ref.label,
                    missing=ref.missing,
                )
        log.debug("index.built", nodes=len(index.nodes), edges=len(index.edges))
        return index
