from __future__ import annotations

"""基础数据类型：顶点、折线，以及提交偏移的折线链。"""

from dataclasses import dataclass, field
from typing import Iterable

Point2D = tuple[float, float]


@dataclass
class Vertex:
    key: int
    x: float
    y: float
    tags: dict[str, str] = field(default_factory=dict)

    @property
    def position(self) -> Point2D:
        return (self.x, self.y)

    def move_to(self, point: Point2D) -> None:
        self.x = float(point[0])
        self.y = float(point[1])


@dataclass(frozen=True)
class Polyline:
    nodes: tuple[int, ...]
    tags: dict[str, str] = field(default_factory=dict, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "nodes", tuple(self.nodes))
        if len(self.nodes) < 2:
            raise ValueError("polyline must have at least 2 nodes")

    @property
    def first(self) -> int:
        return self.nodes[0]

    @property
    def last(self) -> int:
        return self.nodes[-1]

    @property
    def is_closed(self) -> bool:
        return self.first == self.last

    def __len__(self) -> int:
        return len(self.nodes)


@dataclass(frozen=True)
class WaySegment:
    # 参考线段：第 polyline_index 条折线的第 segment_index 段
    polyline_index: int
    segment_index: int


@dataclass
class SourceChain:
    vertices: dict[int, Vertex]
    polylines: list[Polyline]
    reference_index: int = 0

    def __post_init__(self) -> None:
        if not self.polylines:
            raise ValueError("chain must contain at least 1 polyline")
        if not 0 <= self.reference_index < len(self.polylines):
            raise ValueError("reference_index out of range")
        for polyline in self.polylines:
            for key in polyline.nodes:
                if key not in self.vertices:
                    raise ValueError(f"polyline references unknown vertex {key}")

    @staticmethod
    def from_points(polylines: Iterable[Iterable[Point2D]], reference_index: int = 0) -> "SourceChain":
        """Build a chain from coordinate lists.

        First/last points with equal coordinates share one vertex; interior
        points always get their own vertex.
        """
        vertices: dict[int, Vertex] = {}
        endpoints: dict[Point2D, int] = {}
        built: list[Polyline] = []

        def new_vertex(point: Point2D) -> int:
            key = len(vertices)
            vertices[key] = Vertex(key, point[0], point[1])
            return key

        for coords in polylines:
            points = [(float(x), float(y)) for x, y in coords]
            nodes = []
            for i, point in enumerate(points):
                if i in (0, len(points) - 1):
                    key = endpoints.get(point)
                    if key is None:
                        key = new_vertex(point)
                        endpoints[point] = key
                else:
                    key = new_vertex(point)
                nodes.append(key)
            built.append(Polyline(tuple(nodes)))
        return SourceChain(vertices, built, reference_index)

    def position(self, key: int) -> Point2D:
        return self.vertices[key].position

    def segment_points(self, segment: WaySegment) -> tuple[Point2D, Point2D]:
        polyline = self.polylines[segment.polyline_index]
        if not 0 <= segment.segment_index < len(polyline) - 1:
            raise ValueError("segment_index out of range")
        first = polyline.nodes[segment.segment_index]
        second = polyline.nodes[segment.segment_index + 1]
        return self.position(first), self.position(second)
