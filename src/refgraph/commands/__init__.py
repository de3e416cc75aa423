"""Subcommand modules for refgraph.

Provides register_commands() which uses deferred imports to keep
``refgraph --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from refgraph.commands.extract import extract
    from refgraph.commands.inspect import inspect

    cli.add_command(extract)
    cli.add_command(inspect)
