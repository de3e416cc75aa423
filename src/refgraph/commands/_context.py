"""AppContext: per-invocation state shared by every command.

The root group builds it from :class:`RefgraphSettings` and commands get
it through ``@click.pass_obj``. Setting it up configures logging (and
telemetry under ``--verbose``). Commands use it to open graph sources
and to print results with the right stream and exit status.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from refgraph.config.logging import configure_logging
from refgraph.infrastructure.source import GraphSource
from refgraph.output.formatters import OutputSettings, format_result
from refgraph.services.telemetry import enable_telemetry

if TYPE_CHECKING:
    from pathlib import Path

    from refgraph.config.settings import RefgraphSettings
    from refgraph.services.result import ServiceResult

# Scripts can tell fatal conditions apart by exit status.
# Click itself exits with 2 on usage errors.
EXIT_CODES: dict[str, int] = {
    "MALFORMED_INPUT": 3,
    "MISSING_TARGET_NODE": 4,
}
DEFAULT_EXIT_CODE = 1


def exit_code_for(result: ServiceResult) -> int:
    """Exit status for a failed *result*."""
    if result.error is None:
        return DEFAULT_EXIT_CODE
    return EXIT_CODES.get(result.error.code, DEFAULT_EXIT_CODE)


class AppContext:
    """Settings plus the helpers commands need to act on them."""

    def __init__(self, settings: RefgraphSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )
        if settings.verbose:
            enable_telemetry()

    def source(self, path: Path) -> GraphSource:
        """A lazily indexed graph source for *path*."""
        return GraphSource(path, pattern=self.settings.input.pattern)

    def warn(self, warnings: list[str]) -> None:
        """Echo warnings to stderr unless output is JSON or quiet."""
        if self.output.json_output or self.output.quiet:
            return
        for warning in warnings:
            click.echo(f"WARNING: {warning}", err=True)

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; on failure print to stderr and exit non-zero.

        JSON output carries warnings in the payload, so they are only
        echoed separately for human output.
        """
        text = format_result(result, settings=self.output)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(exit_code_for(result))
        click.echo(text)
        self.warn(result.warnings)
