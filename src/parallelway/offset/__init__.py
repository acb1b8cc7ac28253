"""偏移曲线引擎导出集合。"""

from .chain import build_vertex_order
from .core import OrderedPath, build_ordered_path
from .engine import change_offset
from .errors import DegenerateSegmentError, InvalidTopologyError
from .normals import compute_normals
from .orientation import orient_to_reference

__all__ = [
    "DegenerateSegmentError",
    "InvalidTopologyError",
    "OrderedPath",
    "build_ordered_path",
    "build_vertex_order",
    "change_offset",
    "compute_normals",
    "orient_to_reference",
]
