from __future__ import annotations

import json
from pathlib import Path

import pytest

from parallelway.chain_io import chain_from_dict
from parallelway.cli import main

L_CHAIN = {
    "vertices": [
        {"id": 1, "x": 0, "y": 0, "tags": {"name": "start"}},
        {"id": 2, "x": 10, "y": 0},
        {"id": 3, "x": 10, "y": 10},
    ],
    "polylines": [
        {"nodes": [1, 2], "tags": {"highway": "track"}},
        {"nodes": [2, 3]},
    ],
}


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    path = tmp_path / "parallelway.json"
    path.write_text("{}", encoding="utf-8")
    return path


def _write(path: Path, data: dict) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_cli_writes_change_set(tmp_path: Path, config_path: Path) -> None:
    source = _write(tmp_path / "chain.json", L_CHAIN)
    output = tmp_path / "out.json"
    code = main([str(source), str(output), "--offset", "2", "--config", str(config_path), "--wkt"])
    assert code == 0

    data = json.loads(output.read_text(encoding="utf-8"))
    assert data["description"] == "Make parallel way(s)"
    assert data["closed"] is False
    assert data["offset"] == 2.0
    assert data["wkt"].startswith("MULTILINESTRING")
    vertices = [op for op in data["operations"] if op["op"] == "create_vertex"]
    ways = [op for op in data["operations"] if op["op"] == "create_polyline"]
    coords = [value for op in vertices for value in (op["x"], op["y"])]
    assert coords == pytest.approx([0, 2, 8, 2, 8, 10])
    assert vertices[0]["tags"] == {"name": "start"}
    assert ways[0]["tags"] == {"highway": "track"}
    assert data["operations"][-1]["op"] == "create_polyline"


def test_cli_no_copy_tags(tmp_path: Path, config_path: Path) -> None:
    source = _write(tmp_path / "chain.json", L_CHAIN)
    output = tmp_path / "out.json"
    code = main(
        [str(source), str(output), "--offset", "-1", "--no-copy-tags", "--config", str(config_path)]
    )
    assert code == 0
    data = json.loads(output.read_text(encoding="utf-8"))
    assert all(op["tags"] == {} for op in data["operations"])
    assert "wkt" not in data


def test_cli_rejects_branching_chain(tmp_path: Path, config_path: Path) -> None:
    chain = {
        "vertices": [
            {"id": 0, "x": 0, "y": 0},
            {"id": 1, "x": 1, "y": 0},
            {"id": 2, "x": 0, "y": 1},
            {"id": 3, "x": -1, "y": 0},
        ],
        "polylines": [{"nodes": [0, 1]}, {"nodes": [0, 2]}, {"nodes": [0, 3]}],
    }
    source = _write(tmp_path / "chain.json", chain)
    output = tmp_path / "out.json"
    code = main([str(source), str(output), "--offset", "1", "--config", str(config_path)])
    assert code == 2
    assert not output.exists()


def test_chain_json_rejects_duplicate_vertex_ids() -> None:
    data = {
        "vertices": [{"id": 1, "x": 0, "y": 0}, {"id": 1, "x": 1, "y": 0}],
        "polylines": [{"nodes": [1, 1]}],
    }
    with pytest.raises(ValueError, match="duplicate vertex id 1"):
        chain_from_dict(data)
