"""Human-readable rendering of ServiceResult values.

``extract`` and ``inspect`` have their own layouts; any other op gets a
plain key/value listing. Bulky payload keys (the rendered document and
node lists) are shown as tables or not at all.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias

from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from refgraph.output.console import create_console, get_output

if TYPE_CHECKING:
    from collections.abc import Callable

    from rich.console import Console

    from refgraph.services.result import ServiceResult


_Renderer: TypeAlias = "Callable[[ServiceResult, Console], None]"

_NOT_LISTED = frozenset({"content", "nodes", "node", "incoming", "outgoing"})

# Spans slower than this are highlighted in the verbose timing tree.
_SLOW_SPAN_MS = 100.0


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render *result* for a terminal. *verbose* adds error detail and timings."""
    console = create_console()
    if not result.ok:
        _error(result, console, verbose=verbose)
    else:
        _RENDERERS.get(result.op, _summary)(result, console)
        if verbose and result.meta:
            _timings(result.meta, console)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """One node id per line when the result lists nodes, else a status line."""
    if not result.ok:
        reason = result.error.message if result.error else "unknown error"
        return f"ERROR: {result.op} — {reason}"
    ids = [str(item["id"]) for item in result.data.get("nodes") or [] if isinstance(item, dict)]
    return "\n".join(ids) if ids else f"OK: {result.op}"


def _kv(console: Console, key: str, value: Any, *, indent: int = 2) -> None:
    if key.endswith("id"):
        style = "ref.id"
    elif key == "name":
        style = "ref.name"
    else:
        style = ""
    label = Text(f"{' ' * indent}{key}: ", style="ref.key")
    console.print(label, Text(str(value), style=style), sep="")


def _summary(result: ServiceResult, console: Console) -> None:
    console.print(Text("OK", style="ref.ok"), Text(result.op, style="ref.op"))
    for key, value in result.data.items():
        if key not in _NOT_LISTED:
            _kv(console, key, value)


def _nodes_table(rows: list[dict[str, Any]], column: str) -> Table:
    """Id/name/type table with one extra *column* (distance or label)."""
    table = Table(pad_edge=False)
    table.add_column("ID", style="ref.id", justify="right", no_wrap=True)
    table.add_column("Name", style="ref.name")
    table.add_column("Type", style="ref.type")
    table.add_column(column.title(), style=f"ref.{column}")
    for row in rows:
        extra = row.get(column)
        table.add_row(
            str(row["id"]),
            row.get("name", ""),
            row.get("type", ""),
            "" if extra is None else str(extra),
        )
    return table


def _extract(result: ServiceResult, console: Console) -> None:
    _summary(result, console)
    if nodes := result.data.get("nodes"):
        console.print()
        console.print(_nodes_table(nodes, "distance"))


def _inspect(result: ServiceResult, console: Console) -> None:
    _summary(result, console)
    node = result.data.get("node")
    if not node:
        return
    console.print()
    console.print(Text(f"  {node['name'] or node['id']}", style="ref.name"))
    _kv(console, "node_id", node["id"])
    _kv(console, "type", node["type"])
    for direction in ("incoming", "outgoing"):
        edges = result.data.get(direction) or []
        console.print(Text(f"  {direction} ({len(edges)})", style="ref.key"))
        if edges:
            console.print(_nodes_table(edges, "label"))


def _error(result: ServiceResult, console: Console, *, verbose: bool) -> None:
    message = result.error.message if result.error else "unknown error"
    console.print(Text("ERROR", style="ref.error"), Text(result.op, style="ref.op"), "—", message)
    if verbose and result.error and result.error.detail:
        for key, value in result.error.detail.items():
            _kv(console, key, value, indent=4)


def _timings(meta: dict[str, Any], console: Console) -> None:
    """Telemetry span tree, then any other meta keys."""
    console.print()
    console.print(Text("  meta:", style="dim"))
    if span := meta.get("telemetry"):
        tree = Tree(_span_label(span))
        _add_children(tree, span)
        console.print(tree)
    for key, value in meta.items():
        if key != "telemetry":
            _kv(console, key, value, indent=4)


def _span_label(span: dict[str, Any]) -> Text:
    duration = float(span.get("duration_ms", 0.0))
    label = Text(f"{duration:8.2f}ms  ", style="yellow" if duration > _SLOW_SPAN_MS else "dim")
    label.append(span.get("name", "?"))
    if annotations := span.get("annotations"):
        label.append("  (" + ", ".join(f"{k}={v}" for k, v in annotations.items()) + ")")
    return label


def _add_children(tree: Tree, span: dict[str, Any]) -> None:
    for child in span.get("children", []):
        _add_children(tree.add(_span_label(child)), child)


_RENDERERS: dict[str, _Renderer] = {
    "extract": _extract,
    "inspect": _inspect,
}
