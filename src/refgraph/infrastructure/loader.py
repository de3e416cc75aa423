"""Load raw node and edge records from disk.

Two layouts are understood:

* a single JSON graph document (see :mod:`refgraph.infrastructure.records`);
* a directory dump where every ``*.json`` file is one object carrying
  ``__fileName__`` and ``__snoID__``, and any nested object with both
  ``__raw__`` and ``name`` is a reference to another object's id.

Every failure to read or parse is raised as :class:`MalformedInput`.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from pathlib import Path, PurePosixPath
from typing import Any

import structlog
from pydantic import ValidationError

from refgraph.domain.errors import MalformedInput
from refgraph.infrastructure.records import EdgeRecord, GraphDocument, NodeRecord

log = structlog.get_logger(__name__)

FILE_NAME_KEY = "__fileName__"
SNO_ID_KEY = "__snoID__"
REFERENCE_KEY = "__raw__"


def load_document(path: Path, *, pattern: str = "*.json") -> GraphDocument:
    """Load a graph document from a file or a directory dump.

    Args:
        path: A JSON graph document, or a directory of object files.
        pattern: Glob applied recursively when *path* is a directory.

    Raises:
        MalformedInput: The path is missing or its content cannot be
            parsed into node and edge records.
    """
    if path.is_dir():
        return _load_directory(path, pattern)
    if not path.is_file():
        msg = f"Input path not found: {path}"
        raise MalformedInput(msg)

    raw = _read_json(path)
    if not isinstance(raw, dict) or "nodes" not in raw:
        msg = f"{path}: expected a JSON object with a 'nodes' list"
        raise MalformedInput(msg)
    try:
        document = GraphDocument.model_validate(raw)
    except ValidationError as exc:
        msg = f"{path}: {exc.error_count()} invalid record(s): {exc.errors()[0]['msg']}"
        raise MalformedInput(msg) from exc

    log.debug(
        "document.loaded", path=str(path), nodes=len(document.nodes), edges=len(document.edges)
    )
    return document


def _read_json(path: Path) -> Any:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        msg = f"{path}: {exc}"
        raise MalformedInput(msg) from exc


def _load_directory(root: Path, pattern: str) -> GraphDocument:
    """Build records from one object file per node."""
    files = sorted(p for p in root.rglob(pattern) if p.is_file())
    nodes: list[NodeRecord] = []
    edges: list[EdgeRecord] = []
    skipped = 0

    for file in files:
        obj = _read_json(file)
        if not isinstance(obj, dict):
            skipped += 1
            log.debug("object.skipped", path=str(file), reason="not an object")
            continue
        file_name = obj.get(FILE_NAME_KEY)
        sno_id = obj.get(SNO_ID_KEY)
        if not isinstance(file_name, str) or not _is_id(sno_id):
            skipped += 1
            log.debug("object.skipped", path=str(file), reason="missing identity keys")
            continue

        name = PurePosixPath(file_name).name
        nodes.append(NodeRecord(id=sno_id, type=_type_from_name(name), name=name))
        for label, target in _iter_references(obj):
            edges.append(EdgeRecord(source=sno_id, target=target, label=label))

    log.debug(
        "directory.loaded",
        path=str(root),
        files=len(files),
        nodes=len(nodes),
        edges=len(edges),
        skipped=skipped,
    )
    return GraphDocument(nodes=nodes, edges=edges)


def _iter_references(obj: dict[str, Any]) -> Iterator[tuple[str, int]]:
    """Yield ``(key, target_id)`` for every nested reference, in document order."""
    for key, value in obj.items():
        yield from _walk(value, key)


def _walk(value: Any, key: str) -> Iterator[tuple[str, int]]:
    if isinstance(value, dict):
        if REFERENCE_KEY in value and "name" in value:
            target = value[REFERENCE_KEY]
            if _is_id(target):
                yield key, target
            return
        for nested_key, nested in value.items():
            yield from _walk(nested, nested_key)
    elif isinstance(value, list):
        for nested in value:
            yield from _walk(nested, key)


def _is_id(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _type_from_name(name: str) -> str:
    """``SecretCellar.qst`` -> ``qst``."""
    suffix = PurePosixPath(name).suffix
    return suffix[1:] if suffix else ""
