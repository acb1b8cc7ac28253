"""连通折线的平行（偏移）副本。"""

from .geometry.model import Polyline, SourceChain, Vertex, WaySegment
from .materialize import ChangeSet, MaterializedCopy, copy_chain
from .offset import (
    DegenerateSegmentError,
    InvalidTopologyError,
    OrderedPath,
    build_ordered_path,
    change_offset,
)

__all__ = [
    "ChangeSet",
    "DegenerateSegmentError",
    "InvalidTopologyError",
    "MaterializedCopy",
    "OrderedPath",
    "Polyline",
    "SourceChain",
    "Vertex",
    "WaySegment",
    "build_ordered_path",
    "change_offset",
    "copy_chain",
]
