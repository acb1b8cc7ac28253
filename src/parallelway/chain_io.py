from __future__ import annotations

"""JSON 读写：源折线链输入与创建操作输出。"""

import json
from pathlib import Path

from .geometry.model import Polyline, SourceChain, Vertex
from .materialize import ChangeSet, CreateVertex


def chain_from_dict(data: dict) -> SourceChain:
    vertices: dict[int, Vertex] = {}
    for item in data.get("vertices", []):
        key = int(item["id"])
        if key in vertices:
            raise ValueError(f"duplicate vertex id {key}")
        vertices[key] = Vertex(key, float(item["x"]), float(item["y"]), dict(item.get("tags", {})))
    polylines = [
        Polyline(tuple(int(key) for key in item["nodes"]), dict(item.get("tags", {})))
        for item in data.get("polylines", [])
    ]
    return SourceChain(vertices, polylines, int(data.get("reference", 0)))


def load_chain(path: Path) -> SourceChain:
    return chain_from_dict(json.loads(path.read_text(encoding="utf-8")))


def change_set_to_dict(change_set: ChangeSet) -> dict:
    operations = []
    for op in change_set.operations:
        if isinstance(op, CreateVertex):
            operations.append(
                {"op": "create_vertex", "id": op.key, "x": op.x, "y": op.y, "tags": dict(op.tags)}
            )
        else:
            operations.append({"op": "create_polyline", "nodes": list(op.nodes), "tags": dict(op.tags)})
    return {
        "description": change_set.description,
        "closed": change_set.closed,
        "operations": operations,
    }


def dump_change_set(change_set: ChangeSet, path: Path, **extra) -> None:
    data = change_set_to_dict(change_set)
    data.update(extra)
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
