"""Command: extract the neighborhood of one node into a graph document."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from refgraph.commands._base import RefCommand
from refgraph.output.emitters import FORMATS, THEMES, write_document
from refgraph.services.neighborhood import NeighborhoodService

if TYPE_CHECKING:
    from refgraph.commands._context import AppContext

_EXTRACT_EXAMPLES = """\
  refgraph extract dump/ -t 1315204
  refgraph extract graph.json -t 42 --incoming-count 1 --outgoing-count 2
  refgraph extract dump/ -t 1315204 --max-fanout 20 -o cellar.dot
  refgraph extract graph.json -t 42 -o - | dot -Tsvg -o neighborhood.svg
  refgraph --json extract graph.json -t 42 --format json -o neighborhood.json"""


@click.command(cls=RefCommand, examples=_EXTRACT_EXAMPLES)
@click.argument("json_path", type=click.Path(path_type=Path))
@click.option(
    "-t",
    "--target-node-id",
    type=int,
    default=None,
    help="Node to center the neighborhood on [default: from config].",
)
@click.option(
    "--incoming-count",
    type=click.IntRange(min=0),
    default=None,
    help="Hops to trace back through referencing nodes [default: 3].",
)
@click.option(
    "--outgoing-count",
    type=click.IntRange(min=0),
    default=None,
    help="Hops to follow through referenced nodes [default: 3].",
)
@click.option(
    "--max-fanout",
    type=click.IntRange(min=1),
    default=None,
    help="Do not expand nodes with more edges than this in a direction.",
)
@click.option(
    "--traversed-only",
    is_flag=True,
    help="Only emit edges the traversal followed, not every edge between kept nodes.",
)
@click.option(
    "-o",
    "--out-file",
    default=None,
    help="Output file, '-' for stdout [default: graph.dot].",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(FORMATS, case_sensitive=False),
    default=None,
    help="Document format [default: dot].",
)
@click.option(
    "--theme",
    type=click.Choice(THEMES, case_sensitive=False),
    default=None,
    help="DOT color theme [default: dark].",
)
@click.pass_obj
def extract(
    app: AppContext,
    json_path: Path,
    target_node_id: int | None,
    incoming_count: int | None,
    outgoing_count: int | None,
    max_fanout: int | None,
    traversed_only: bool,
    out_file: str | None,
    fmt: str | None,
    theme: str | None,
) -> None:
    """Write the dependency neighborhood of a node as a graph document.

    JSON_PATH is a graph document or a directory of object files.
    """
    params = app.settings.neighborhood.with_overrides(
        target_id=target_node_id,
        incoming_count=incoming_count,
        outgoing_count=outgoing_count,
        max_fanout=max_fanout,
        induced=False if traversed_only else None,
    )
    output = app.settings.output
    fmt = (fmt or output.format).lower()
    destination = out_file or output.out_file

    result = NeighborhoodService(app.source(json_path)).extract(
        params,
        fmt=fmt,
        theme=(theme or output.theme).lower(),
    )
    if not result.ok:
        app.emit(result)
        return

    if destination == "-":
        # Only the document goes to stdout.
        click.echo(result.data["content"], nl=False)
        if not app.output.quiet:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
        return

    write_document(Path(destination), result.data["content"])
    app.emit(result.without("content", output_file=destination))
