from __future__ import annotations

import logging

from ..geometry.model import Polyline

logger = logging.getLogger(__name__)


def orient_to_reference(order: list[int], reference: Polyline) -> tuple[list[int], bool]:
    """Reverse ``order`` if it runs against the reference polyline's first->last direction.

    Returns the (possibly reversed) order and whether it was reversed.
    """
    flipped = _runs_against(order, reference)
    if flipped:
        logger.debug("Vertex order reversed to follow reference way")
        return order[::-1], True
    return list(order), False


def _runs_against(order: list[int], reference: Polyline) -> bool:
    nodes = reference.nodes
    if order[0] != order[-1]:
        return order.index(reference.first) > order.index(reference.last)

    # Closed: the start key sits at both ends of order, so compare the neighbour
    # of the shared vertex instead of its index.
    start = order[0]
    if reference.first == start and reference.last == start:
        return order[1] != nodes[1]
    if reference.last == start:
        return order[-2] != nodes[-2]
    if reference.first == start:
        return order[1] != nodes[1]
    return order.index(reference.first) > order.index(reference.last)
