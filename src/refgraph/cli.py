"""``refgraph`` root group: global output/logging flags, then subcommands."""

from __future__ import annotations

import click

from refgraph import __version__
from refgraph.commands import register_commands
from refgraph.commands._context import AppContext
from refgraph.config.settings import RefgraphSettings


@click.group(
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(__version__, "-V", "--version", prog_name="refgraph")
@click.option("--json", "json_output", is_flag=True, help="Print results as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print node ids only; hide warnings.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logs and step timings.")
@click.option("--log-json", is_flag=True, help="Write log lines to stderr as JSON.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Use this refgraph.toml instead of searching for one.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: bool) -> None:
    """Extract dependency neighborhoods from JSON reference graphs.

    Global options go before the command name:
    ``refgraph --json extract dump/ -t 42``.
    """
    ctx.obj = AppContext(RefgraphSettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
