"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, ``refgraph.toml`` only holds
overrides. Every section is frozen after construction.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

# SecretCellar.qst in the game-data dump the tool was first written for.
DEFAULT_TARGET_ID = 1315204


class NeighborhoodConfig(BaseModel):
    """[neighborhood] section: what to extract around which node."""

    model_config = {"frozen": True}

    target_id: int = DEFAULT_TARGET_ID
    incoming_count: int = Field(default=3, ge=0)
    outgoing_count: int = Field(default=3, ge=0)
    max_fanout: int | None = Field(default=None, ge=1)
    induced: bool = True

    def with_overrides(self, **overrides: Any) -> NeighborhoodConfig:
        """Return a validated copy with non-None *overrides* applied."""
        updates = {k: v for k, v in overrides.items() if v is not None}
        return NeighborhoodConfig.model_validate({**self.model_dump(), **updates})


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    out_file: str = "graph.dot"
    format: Literal["dot", "json"] = "dot"
    theme: Literal["dark", "light"] = "dark"


class InputConfig(BaseModel):
    """[input] section."""

    model_config = {"frozen": True}

    pattern: str = "*.json"
