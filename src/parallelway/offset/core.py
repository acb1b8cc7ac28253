from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from ..geometry.model import SourceChain
from .chain import build_vertex_order
from .normals import compute_normals
from .orientation import orient_to_reference

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class OrderedPath:
    keys: tuple[int, ...]
    pts: np.ndarray
    normals: np.ndarray
    closed: bool
    flipped: bool = False

    def __len__(self) -> int:
        return len(self.keys)


def build_ordered_path(chain: SourceChain, reference_index: int | None = None) -> OrderedPath:
    # 链归约 -> 参考方向归一 -> 法向量；失败时抛出 InvalidTopologyError / DegenerateSegmentError
    if reference_index is None:
        reference_index = chain.reference_index
    if not 0 <= reference_index < len(chain.polylines):
        raise ValueError("reference_index out of range")
    order = build_vertex_order(chain.polylines)
    order, flipped = orient_to_reference(order, chain.polylines[reference_index])

    pts = np.array([chain.position(key) for key in order], dtype=np.float64)
    normals = compute_normals(pts)
    pts.setflags(write=False)
    normals.setflags(write=False)

    closed = order[0] == order[-1]
    logger.info(
        "Ordered path: ways=%s vertices=%s closed=%s flipped=%s",
        len(chain.polylines),
        len(order),
        closed,
        flipped,
    )
    return OrderedPath(tuple(order), pts, normals, closed, flipped)
