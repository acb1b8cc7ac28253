from __future__ import annotations

"""平面直线基础运算：交点、平行判定、投影与左右侧判断。"""

import math

from .model import Point2D

# 单位方向叉积（夹角正弦）低于此值视为平行，接近反向的折返同样走平移端点
PARALLEL_TOLERANCE = 1e-3


def _cross(ax: float, ay: float, bx: float, by: float) -> float:
    return ax * by - ay * bx


def segments_parallel(p1: Point2D, p2: Point2D, p3: Point2D, p4: Point2D) -> bool:
    # 方向单位化后比较叉积，避免长度影响容差
    dx1, dy1 = p2[0] - p1[0], p2[1] - p1[1]
    dx2, dy2 = p4[0] - p3[0], p4[1] - p3[1]
    len1 = math.hypot(dx1, dy1)
    len2 = math.hypot(dx2, dy2)
    if len1 == 0 or len2 == 0:
        return True
    sine = _cross(dx1, dy1, dx2, dy2) / (len1 * len2)
    return abs(sine) < PARALLEL_TOLERANCE


def line_line_intersection(p1: Point2D, p2: Point2D, p3: Point2D, p4: Point2D) -> Point2D:
    """Intersection of the infinite lines p1-p2 and p3-p4.

    Raises ValueError for parallel lines; callers check segments_parallel first.
    """
    dx1, dy1 = p2[0] - p1[0], p2[1] - p1[1]
    dx2, dy2 = p4[0] - p3[0], p4[1] - p3[1]
    denom = _cross(dx1, dy1, dx2, dy2)
    if denom == 0:
        raise ValueError("lines are parallel")
    t = _cross(p3[0] - p1[0], p3[1] - p1[1], dx2, dy2) / denom
    return (p1[0] + t * dx1, p1[1] + t * dy1)


def closest_point_to_line(line_p1: Point2D, line_p2: Point2D, point: Point2D) -> Point2D:
    # 投影到无限长直线（不截断到线段）
    ldx = line_p2[0] - line_p1[0]
    ldy = line_p2[1] - line_p1[1]
    if ldx == 0 and ldy == 0:
        return line_p1
    pdx = point[0] - line_p1[0]
    pdy = point[1] - line_p1[1]
    offset = (pdx * ldx + pdy * ldy) / (ldx * ldx + ldy * ldy)
    return (line_p1[0] + ldx * offset, line_p1[1] + ldy * offset)


def is_right_of_line(line_p1: Point2D, line_p2: Point2D, point: Point2D) -> bool:
    ldx = line_p2[0] - line_p1[0]
    ldy = line_p2[1] - line_p1[1]
    return _cross(ldx, ldy, point[0] - line_p1[0], point[1] - line_p1[1]) < 0


def distance(a: Point2D, b: Point2D) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])
