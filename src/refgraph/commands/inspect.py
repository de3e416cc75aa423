"""Command: summarize a graph source or a single node's direct edges."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from refgraph.commands._base import RefCommand
from refgraph.services.neighborhood import NeighborhoodService

if TYPE_CHECKING:
    from refgraph.commands._context import AppContext


@click.command(
    cls=RefCommand,
    examples="""\
  refgraph inspect dump/
  refgraph inspect graph.json 42
  refgraph --json inspect dump/ 1315204""",
)
@click.argument("json_path", type=click.Path(path_type=Path))
@click.argument("node_id", type=int, required=False)
@click.pass_obj
def inspect(app: AppContext, json_path: Path, node_id: int | None) -> None:
    """Show node/edge counts, and a node's incoming and outgoing edges."""
    app.emit(NeighborhoodService(app.source(json_path)).inspect(node_id))
