"""``RefCommand``: a click command with an on-demand ``--examples`` flag.

Examples stay out of ``--help``; ``--examples`` prints them and exits
before any argument is validated.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click


def _print_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
    if not value or ctx.resilient_parsing:
        return
    examples = getattr(ctx.command, "examples", None) or ""
    click.secho(f"Examples for '{ctx.command_path}':", bold=True)
    click.echo()
    for line in examples.splitlines():
        click.echo(f"  {line}")
    ctx.exit(0)


class RefCommand(click.Command):
    """Command that takes an ``examples`` block alongside its help text."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = textwrap.dedent(examples).strip("\n") if examples else None
        if self.examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_print_examples,
                    help="Show usage examples and exit.",
                )
            )
