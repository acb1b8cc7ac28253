from __future__ import annotations

"""偏移引擎：按带符号偏移距离计算新顶点坐标。"""

from typing import TYPE_CHECKING

import numpy as np

from ..geometry.primitives import line_line_intersection, segments_parallel

if TYPE_CHECKING:
    from .core import OrderedPath


def change_offset(path: OrderedPath, d: float) -> np.ndarray:
    """Offset the path ``d`` units; positive ``d`` moves to the side the normals point to.

    1. translate every segment by ``d`` along its normal;
    2. each joint becomes the intersection of the two translated lines that
       meet there (or the translated end point when they are parallel);
    3. open ends follow their only segment, a closed path joins its last and
       first segment at vertex 0 and repeats it at the end.

    Always computed from the path's baseline, so repeated calls do not drift.
    """
    pts = path.pts
    shift = path.normals * float(d)
    starts = pts[:-1] + shift
    ends = pts[1:] + shift

    result = np.empty_like(pts)
    result[0] = starts[0]
    result[-1] = ends[-1]
    for i in range(1, len(pts) - 1):
        result[i] = _join(starts[i - 1], ends[i - 1], starts[i], ends[i])
    if path.closed:
        joint = _join(starts[-1], ends[-1], starts[0], ends[0])
        result[0] = joint
        result[-1] = joint
    return result


def _join(a_start, a_end, b_start, b_end):
    a1 = (float(a_start[0]), float(a_start[1]))
    a2 = (float(a_end[0]), float(a_end[1]))
    b1 = (float(b_start[0]), float(b_start[1]))
    b2 = (float(b_end[0]), float(b_end[1]))
    if segments_parallel(a1, a2, b1, b2):
        return a2
    return line_line_intersection(a1, a2, b1, b2)
