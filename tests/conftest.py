"""Shared pytest fixtures and graph builders for refgraph tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from refgraph.domain.index import GraphIndex
from refgraph.domain.types import Edge, Node
from refgraph.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _reset_telemetry() -> Generator[None]:
    """``-v`` invocations enable telemetry process-wide; switch it back off."""
    yield
    disable_telemetry()


@pytest.fixture(autouse=True)
def _restore_root_logger() -> Generator[None]:
    """CLI runs attach a handler bound to CliRunner's stderr; drop it afterwards."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    yield
    root.handlers = handlers


@pytest.fixture(autouse=True)
def _no_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Keep a developer's refgraph.toml or REFGRAPH_* env out of tests."""
    monkeypatch.delenv("REFGRAPH_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------


def build_index(
    nodes: dict[int, str] | list[int],
    edges: list[tuple[int, int] | tuple[int, int, str]],
) -> GraphIndex:
    """Index from ``{id: name}`` (or bare ids) and ``(src, dst[, label])`` tuples."""
    names = nodes if isinstance(nodes, dict) else {nid: f"n{nid}" for nid in nodes}
    return GraphIndex.build(
        [Node(id=nid, type="obj", name=name) for nid, name in names.items()],
        [Edge(e[0], e[1], e[2] if len(e) > 2 else None) for e in edges],  # type: ignore[misc]
    )


def graph_document(
    nodes: dict[int, str],
    edges: list[tuple[int, int, str | None]],
    *,
    node_type: str = "quest",
) -> dict[str, Any]:
    return {
        "nodes": [{"id": nid, "type": node_type, "name": name} for nid, name in nodes.items()],
        "edges": [{"source": s, "target": t, "label": label} for s, t, label in edges],
    }


def write_json(path: Path, payload: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


SCENARIO_NODES = {1: "Target", 2: "Parent", 3: "Child"}
SCENARIO_EDGES: list[tuple[int, int, str | None]] = [(2, 1, "leads to"), (1, 3, "spawns")]


@pytest.fixture
def scenario_index() -> GraphIndex:
    """Parent(2) -> Target(1) -> Child(3)."""
    return build_index(SCENARIO_NODES, SCENARIO_EDGES)  # type: ignore[arg-type]


@pytest.fixture
def scenario_file(tmp_path: Path) -> Path:
    """The Parent -> Target -> Child graph as a JSON document on disk."""
    return write_json(tmp_path / "graph.json", graph_document(SCENARIO_NODES, SCENARIO_EDGES))


@pytest.fixture
def sno_dump(tmp_path: Path) -> Path:
    """A directory dump in the per-object layout.

    SecretCellar.qst (100) references Cellar.enc (200) twice under
    different keys and Loot.gam (300) inside a nested list; Town.wrl (400)
    references the quest. One file has no identity keys.
    """
    root = tmp_path / "dump"
    write_json(
        root / "Quest" / "SecretCellar.qst.json",
        {
            "__fileName__": "base/Quest/SecretCellar.qst",
            "__snoID__": 100,
            "snoEncounter": {"__raw__": 200, "name": "Cellar.enc"},
            "phases": [
                {"reward": {"snoLoot": {"__raw__": 300, "name": "Loot.gam"}}},
                {"snoEncounter": {"__raw__": 200, "name": "Cellar.enc"}},
            ],
            "snoMissing": {"__raw__": 999, "name": "Gone.qst"},
        },
    )
    write_json(
        root / "Encounter" / "Cellar.enc.json",
        {"__fileName__": "base/Encounter/Cellar.enc", "__snoID__": 200},
    )
    write_json(
        root / "Loot" / "Loot.gam.json",
        {"__fileName__": "base/Loot/Loot.gam", "__snoID__": 300},
    )
    write_json(
        root / "World" / "Town.wrl.json",
        {
            "__fileName__": "base/World/Town.wrl",
            "__snoID__": 400,
            "quests": [{"__raw__": 100, "name": "SecretCellar.qst"}],
        },
    )
    write_json(root / "meta.json", {"generator": "dump-tool"})
    return root
