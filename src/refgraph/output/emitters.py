"""Document emitters: serialize an assembled subgraph to text.

Formats:
- ``dot``: Graphviz DOT language, one statement per node then per edge
- ``json``: ``{"target": id, "nodes": [...], "links": [...]}``

Emitters only read the graph. They encode exactly its nodes and edges.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Literal

if TYPE_CHECKING:
    from refgraph.domain.subgraph import Subgraph

DocumentFormat = Literal["dot", "json"]
Theme = Literal["dark", "light"]

FORMATS: tuple[str, ...] = ("dot", "json")
THEMES: tuple[str, ...] = ("dark", "light")

_DOT_HEADERS: dict[str, list[str]] = {
    "dark": [
        "  bgcolor=black;",
        "  node [color=white fillcolor=black style=filled fontcolor=white shape=box];",
        "  edge [color=white fontcolor=white];",
    ],
    "light": [
        "  node [shape=box];",
    ],
}

_TARGET_FILL: dict[str, str] = {"dark": "blue", "light": "lightblue"}


def render_document(graph: Subgraph, fmt: str = "dot", *, theme: str = "dark") -> str:
    """Serialize *graph* in *fmt*.

    Raises:
        ValueError: Unknown format or theme.
    """
    if fmt == "dot":
        return to_dot(graph, theme=theme)
    if fmt == "json":
        return to_json(graph)
    msg = f"Unknown document format: {fmt!r}"
    raise ValueError(msg)


def to_dot(graph: Subgraph, *, theme: str = "dark") -> str:
    """Generate Graphviz DOT notation from an assembled subgraph."""
    if theme not in _DOT_HEADERS:
        msg = f"Unknown theme: {theme!r}"
        raise ValueError(msg)

    target = graph.graph.get("target")
    lines = ["digraph {", *_DOT_HEADERS[theme]]

    for node_id, attrs in graph.nodes(data=True):
        label = _escape(node_label(node_id, attrs))
        extra = ""
        if node_id == target:
            extra = f" fillcolor={_TARGET_FILL[theme]} style=filled"
        lines.append(f'  "{node_id}" [label="{label}"{extra}];')

    for src, tgt, attrs in graph.edges(data=True):
        edge_label = attrs.get("label")
        if edge_label:
            lines.append(f'  "{src}" -> "{tgt}" [label="{_escape(edge_label)}"];')
        else:
            lines.append(f'  "{src}" -> "{tgt}";')

    lines.append("}")
    return "\n".join(lines) + "\n"


def to_json(graph: Subgraph) -> str:
    """Generate a node/link JSON document from an assembled subgraph."""
    nodes: list[dict[str, Any]] = []
    for node_id, attrs in graph.nodes(data=True):
        nodes.append(
            {
                "id": node_id,
                "name": attrs.get("name", ""),
                "type": attrs.get("type", ""),
                "distance": attrs.get("distance", 0),
                "incoming_truncated": attrs.get("incoming_truncated", False),
                "outgoing_truncated": attrs.get("outgoing_truncated", False),
            }
        )

    links: list[dict[str, Any]] = []
    for src, tgt, attrs in graph.edges(data=True):
        links.append({"source": src, "target": tgt, "label": attrs.get("label")})

    payload = {"target": graph.graph.get("target"), "nodes": nodes, "links": links}
    return json.dumps(payload, indent=2) + "\n"


def node_label(node_id: int, attrs: dict[str, Any]) -> str:
    """Multi-line display label for a node (unescaped)."""
    lines = [attrs.get("name") or str(node_id), f"id={node_id}"]
    if attrs.get("type"):
        lines.append(f"type={attrs['type']}")
    lines.append(f"distance={attrs.get('distance', 0)}")
    if attrs.get("incoming_truncated"):
        lines.append("(incoming edges truncated)")
    if attrs.get("outgoing_truncated"):
        lines.append("(outgoing edges truncated)")
    return "\n".join(lines)


def write_document(path: Path, content: str) -> None:
    """Write *content* to *path*, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as fh:
        fh.write(content)


def _escape(text: str) -> str:
    return text.replace("\\", "\\\\").replace('"', '\\"').replace("\n", "\\n")
