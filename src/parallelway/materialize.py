from __future__ import annotations

"""平行副本：深拷贝源折线（保持端点共享），并生成可撤销的创建操作列表。"""

from dataclasses import dataclass, field
import logging
from typing import Union

import numpy as np
from shapely.geometry import MultiLineString

from .geometry.model import Polyline, SourceChain, Vertex
from .offset.core import OrderedPath

logger = logging.getLogger(__name__)

CHANGE_SET_DESCRIPTION = "Make parallel way(s)"


@dataclass(frozen=True)
class CreateVertex:
    key: int
    x: float
    y: float
    tags: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class CreatePolyline:
    nodes: tuple[int, ...]
    tags: dict[str, str] = field(default_factory=dict)


Operation = Union[CreateVertex, CreatePolyline]


@dataclass(frozen=True)
class ChangeSet:
    description: str
    operations: tuple[Operation, ...]
    closed: bool

    @property
    def vertex_operations(self) -> list[CreateVertex]:
        return [op for op in self.operations if isinstance(op, CreateVertex)]

    @property
    def polyline_operations(self) -> list[CreatePolyline]:
        return [op for op in self.operations if isinstance(op, CreatePolyline)]


@dataclass
class MaterializedCopy(SourceChain):
    # 新顶点 key -> 源顶点 key
    source_keys: dict[int, int] = field(default_factory=dict)

    def apply_positions(self, path: OrderedPath, new_pts: np.ndarray) -> None:
        if len(new_pts) != len(path.keys):
            raise ValueError("position count does not match path")
        for key, point in zip(path.keys, new_pts):
            self.vertices[key].move_to((float(point[0]), float(point[1])))

    def change_set(self, path: OrderedPath) -> ChangeSet:
        keys = list(path.keys[:-1])
        if not path.closed:
            keys.append(path.keys[-1])
        operations: list[Operation] = []
        for key in keys:
            vertex = self.vertices[key]
            operations.append(CreateVertex(key, vertex.x, vertex.y, dict(vertex.tags)))
        for polyline in self.polylines:
            operations.append(CreatePolyline(polyline.nodes, dict(polyline.tags)))
        logger.info(
            "Change set: %s vertices, %s ways",
            len(keys),
            len(self.polylines),
        )
        return ChangeSet(CHANGE_SET_DESCRIPTION, tuple(operations), path.closed)

    def to_geometry(self) -> MultiLineString:
        return MultiLineString(
            [[self.position(key) for key in polyline.nodes] for polyline in self.polylines]
        )


def copy_chain(chain: SourceChain, copy_tags: bool) -> MaterializedCopy:
    vertices: dict[int, Vertex] = {}
    source_keys: dict[int, int] = {}

    def copy_vertex(source_key: int) -> int:
        source = chain.vertices[source_key]
        key = len(vertices)
        vertices[key] = Vertex(key, source.x, source.y, dict(source.tags) if copy_tags else {})
        source_keys[key] = source_key
        return key

    # 只有首尾顶点可能被多条折线共享
    endpoint_map: dict[int, int] = {}
    for polyline in chain.polylines:
        for source_key in (polyline.first, polyline.last):
            if source_key not in endpoint_map:
                endpoint_map[source_key] = copy_vertex(source_key)

    polylines: list[Polyline] = []
    for polyline in chain.polylines:
        interior = [copy_vertex(key) for key in polyline.nodes[1:-1]]
        nodes = (endpoint_map[polyline.first], *interior, endpoint_map[polyline.last])
        polylines.append(Polyline(nodes, dict(polyline.tags) if copy_tags else {}))

    logger.debug("Copied %s ways, %s vertices (tags=%s)", len(polylines), len(vertices), copy_tags)
    return MaterializedCopy(vertices, polylines, chain.reference_index, source_keys)
