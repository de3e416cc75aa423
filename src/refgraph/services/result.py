"""The value every service method hands back to its caller.

Services never print and never exit. They return a frozen
:class:`ServiceResult`, and the command layer decides how to show it
(rich text, ``--json``, ``--quiet``) and which exit status to use.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed: a stable ``code`` plus a readable message."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one service operation.

    Attributes:
        ok: False when ``error`` is set.
        op: Operation name, used to pick a renderer (``"extract"``).
        data: Operation payload.
        warnings: Problems that did not stop the operation, such as
            edges dropped for pointing at unknown nodes.
        error: Set on failure.
        meta: Extra diagnostics; ``meta["telemetry"]`` under ``--verbose``.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(cls, op: str, code: str, message: str, **detail: Any) -> ServiceResult:
        return cls(ok=False, op=op, error=ServiceError(code=code, message=message, detail=detail))

    def without(self, *keys: str, **extra: Any) -> ServiceResult:
        """Copy with *keys* removed from ``data`` and *extra* merged in."""
        data = {k: v for k, v in self.data.items() if k not in keys}
        return self.model_copy(update={"data": {**data, **extra}})
