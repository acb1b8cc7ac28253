from __future__ import annotations

import numpy as np

from .errors import DegenerateSegmentError


def compute_normals(pts) -> np.ndarray:
    # 每段的左手单位法向量 (-dy/L, dx/L)
    pts = np.asarray(pts, dtype=np.float64)
    if pts.ndim != 2 or pts.shape[0] < 2:
        raise DegenerateSegmentError()
    deltas = np.diff(pts, axis=0)
    lengths = np.hypot(deltas[:, 0], deltas[:, 1])
    zero = np.flatnonzero(lengths == 0)
    if zero.size:
        raise DegenerateSegmentError(int(zero[0]))
    return np.column_stack((-deltas[:, 1], deltas[:, 0])) / lengths[:, None]
