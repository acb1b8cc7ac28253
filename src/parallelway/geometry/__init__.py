"""几何子模块导出集合。"""

from .model import Point2D, Polyline, SourceChain, Vertex, WaySegment
from .primitives import (
    closest_point_to_line,
    is_right_of_line,
    line_line_intersection,
    segments_parallel,
)

__all__ = [
    "Point2D",
    "Polyline",
    "SourceChain",
    "Vertex",
    "WaySegment",
    "closest_point_to_line",
    "is_right_of_line",
    "line_line_intersection",
    "segments_parallel",
]
