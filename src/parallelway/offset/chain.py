from __future__ import annotations

"""折线链归约：把首尾相连的多条折线排成一条顶点序列。"""

from collections import defaultdict
import logging
from typing import Sequence

from ..geometry.model import Polyline
from .errors import InvalidTopologyError

logger = logging.getLogger(__name__)


def build_vertex_order(polylines: Sequence[Polyline]) -> list[int]:
    """Flatten polylines that share only first/last vertices into one vertex key sequence.

    Each polyline is an edge between its first and last vertex. The edges must
    form a single simple path or a single simple cycle; a cycle is returned
    with its start key repeated at the end. Direction is not normalized here.
    """
    if not polylines:
        raise InvalidTopologyError("no ways given")
    if len(polylines) == 1:
        order = list(polylines[0].nodes)
        _check_visited_once(order)
        return order

    # 端点 -> 相连折线下标（按折线顺序，保证遍历确定性）
    adjacency: dict[int, list[int]] = defaultdict(list)
    for index, polyline in enumerate(polylines):
        adjacency[polyline.first].append(index)
        adjacency[polyline.last].append(index)

    for key, edges in adjacency.items():
        if len(edges) > 2:
            raise InvalidTopologyError(f"vertex {key} joins {len(edges)} ways")
    ends = [key for key, edges in adjacency.items() if len(edges) == 1]
    if len(ends) not in (0, 2):
        raise InvalidTopologyError(f"{len(ends)} loose ends")

    start = ends[0] if ends else polylines[0].first
    used = [False] * len(polylines)
    order = [start]
    current = start
    while True:
        index = next((i for i in adjacency[current] if not used[i]), None)
        if index is None:
            break
        used[index] = True
        nodes = polylines[index].nodes
        if nodes[0] != current:
            nodes = nodes[::-1]
        order.extend(nodes[1:])
        current = nodes[-1]

    if not all(used):
        raise InvalidTopologyError("ways are not connected")
    _check_visited_once(order)
    logger.debug("Vertex order: %s ways -> %s vertices", len(polylines), len(order))
    return order


def _check_visited_once(order: list[int]) -> None:
    body = order[:-1] if order[0] == order[-1] else order
    seen: set[int] = set()
    for key in body:
        if key in seen:
            raise InvalidTopologyError(f"vertex {key} visited twice")
        seen.add(key)
