"""BaseService: foundation for refgraph services.

Every service receives a :class:`GraphSource` at construction time. The
source loads and indexes the input lazily, so a service that fails
before touching the graph never reads the input.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from refgraph.domain.errors import RefgraphError
from refgraph.services.result import ServiceResult

if TYPE_CHECKING:
    from refgraph.domain.index import GraphIndex
    from refgraph.infrastructure.source import GraphSource

# Dangling-edge examples listed individually in warnings.
MAX_DANGLING_EXAMPLES = 10


class BaseService:
    """Base for service-layer classes.

    Usage::

        class NeighborhoodService(BaseService):
            def extract(self, params) -> ServiceResult:
                index = self._source.index
                ...
    """

    def __init__(self, source: GraphSource) -> None:
        self._source = source

    @staticmethod
    def _error_result(op: str, exc: RefgraphError) -> ServiceResult:
        """Convert a fatal domain error into a failed ServiceResult."""
        detail: dict[str, Any] = {}
        node_id = getattr(exc, "node_id", None)
        if node_id is not None:
            detail["node_id"] = node_id
        return ServiceResult.failure(op, exc.code, str(exc), **detail)

    @staticmethod
    def _dangling_warnings(index: GraphIndex) -> list[str]:
        """Summarize dropped edges: one count line plus a few examples."""
        if not index.dangling:
            return []
        warnings = [f"Dropped {len(index.dangling)} edge(s) referencing unknown nodes"]
        for ref in index.dangling[:MAX_DANGLING_EXAMPLES]:
            warnings.append(f"Dangling edge {ref.describe()}")
        remaining = len(index.dangling) - MAX_DANGLING_EXAMPLES
        if remaining > 0:
            warnings.append(f"... and {remaining} more dangling edge(s)")
        return warnings
