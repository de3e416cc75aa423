"""Rich console used by the renderers.

Renderers print into an in-memory console and return the text, so the
command layer alone decides between stdout and stderr. Rich leaves out
color codes when the buffer is not a terminal.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

REF_THEME = Theme(
    {
        "ref.ok": "bold green",
        "ref.error": "bold red",
        "ref.warning": "bold yellow",
        "ref.op": "bold cyan",
        "ref.key": "dim",
        "ref.id": "bold blue",
        "ref.name": "bold",
        "ref.type": "green",
        "ref.distance": "magenta",
        "ref.label": "italic",
    }
)

DEFAULT_WIDTH = 120


def create_console(*, width: int = DEFAULT_WIDTH) -> Console:
    return Console(file=StringIO(), theme=REF_THEME, highlight=False, width=width)


def get_output(console: Console) -> str:
    """Everything printed to a console made by :func:`create_console`."""
    buffer = console.file
    if not isinstance(buffer, StringIO):
        msg = "console does not write to a StringIO buffer"
        raise TypeError(msg)
    return buffer.getvalue()
