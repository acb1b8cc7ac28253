from __future__ import annotations

import numpy as np
import pytest
from shapely.geometry import LineString, Polygon

from parallelway.geometry.model import SourceChain
from parallelway.offset import build_ordered_path, change_offset

L_SHAPE = [[(0, 0), (10, 0)], [(10, 0), (10, 10)]]
UNIT_SQUARE = [
    [(0, 0), (1, 0)],
    [(1, 0), (1, 1)],
    [(1, 1), (0, 1)],
    [(0, 1), (0, 0)],
]


def _path(polylines, reference_index: int = 0):
    return build_ordered_path(SourceChain.from_points(polylines, reference_index))


def test_straight_polyline_moves_to_the_left() -> None:
    path = _path([[(0, 0), (10, 0), (20, 0)]])
    result = change_offset(path, 5)
    np.testing.assert_allclose(result, [[0, 5], [10, 5], [20, 5]])


def test_l_shape_corner_is_intersection_of_offset_lines() -> None:
    path = _path(L_SHAPE)
    result = change_offset(path, 2)
    # Left of east is north (y=2), left of north is west (x=8).
    np.testing.assert_allclose(result, [[0, 2], [8, 2], [8, 10]])


def test_l_shape_follows_reversed_reference_way() -> None:
    path = _path([[(0, 0), (10, 0)], [(10, 10), (10, 0)]], reference_index=1)
    assert path.flipped is True
    result = change_offset(path, 2)
    np.testing.assert_allclose(result, [[12, 10], [12, -2], [0, -2]])


def test_square_loop_grows_and_stays_closed() -> None:
    path = _path(UNIT_SQUARE)
    assert path.closed is True
    # Counter-clockwise ring: left normals point inside, so outward is negative.
    result = change_offset(path, -0.25)
    assert np.array_equal(result[0], result[-1])
    np.testing.assert_allclose(
        result,
        [[-0.25, -0.25], [1.25, -0.25], [1.25, 1.25], [-0.25, 1.25], [-0.25, -0.25]],
    )
    assert Polygon(result).area == pytest.approx(1.5 * 1.5)


@pytest.mark.parametrize("d", [0.1, -0.3, 2.0, -7.5])
def test_closed_path_repeats_first_vertex_exactly(d: float) -> None:
    path = _path([[(0, 0), (4, 0), (6, 3)], [(6, 3), (1, 5), (0, 0)]])
    result = change_offset(path, d)
    assert np.array_equal(result[0], result[-1])


@pytest.mark.parametrize(
    "polylines",
    [
        [[(0, 0), (10, 0), (20, 0)]],
        L_SHAPE,
        UNIT_SQUARE,
        [[(0, 0), (3, 1), (4, 5), (9, 2)]],
    ],
)
def test_zero_offset_reproduces_baseline(polylines) -> None:
    path = _path(polylines)
    np.testing.assert_allclose(change_offset(path, 0), path.pts, atol=1e-12)


def test_repeated_offsets_do_not_drift() -> None:
    path = _path([[(0, 0), (3, 1), (4, 5), (9, 2)]])
    baseline = np.array(path.pts)
    first = change_offset(path, 1.7)
    for d in (4.0, -3.0, 0.5, 1.7, -1.7):
        change_offset(path, d)
    assert np.array_equal(first, change_offset(path, 1.7))
    assert np.array_equal(baseline, path.pts)
    assert path.pts.flags.writeable is False
    assert path.normals.flags.writeable is False


def test_collinear_vertices_move_exactly_perpendicular() -> None:
    path = _path([[(0, 0), (3, 4), (6, 8), (9, 12)]])
    d = -2.5
    result = change_offset(path, d)
    shifts = result - path.pts
    np.testing.assert_allclose(np.hypot(shifts[:, 0], shifts[:, 1]), abs(d))
    np.testing.assert_allclose(shifts @ np.array([3.0, 4.0]), 0.0, atol=1e-12)
    first = result[1] - result[0]
    for point in result[2:]:
        rel = point - result[0]
        assert abs(first[0] * rel[1] - first[1] * rel[0]) < 1e-9


def test_opposite_offsets_reflect_across_baseline() -> None:
    path = _path([[(1, 1), (5, 4)]])
    plus = change_offset(path, 1.5)
    minus = change_offset(path, -1.5)
    np.testing.assert_allclose(plus + minus, 2 * path.pts)


def test_near_parallel_joint_uses_translated_point() -> None:
    path = _path([[(0, 0), (10, 0), (20, 1e-12)]])
    result = change_offset(path, 5)
    assert np.all(np.isfinite(result))
    np.testing.assert_allclose(result[1], [10, 5], atol=1e-6)


def test_near_antiparallel_joint_stays_near_path() -> None:
    path = _path([[(0, 0), (10, 0), (0, 1e-5)]])
    result = change_offset(path, 1.0)
    assert np.all(np.isfinite(result))
    assert np.all(np.abs(result) < 100)
    np.testing.assert_allclose(result[1], [10, 1], atol=1e-6)


@pytest.mark.parametrize("d", [1.0, -1.0])
def test_open_path_matches_shapely_mitre_offset(d: float) -> None:
    coords = [(0, 0), (10, 0), (15, 5), (25, 5)]
    path = _path([coords])
    expected = LineString(coords).offset_curve(d, join_style="mitre", mitre_limit=10.0)
    assert LineString(change_offset(path, d)).hausdorff_distance(expected) < 1e-6
