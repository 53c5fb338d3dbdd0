#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
曲线平滑测试
"""

import math

import pytest

from campus_nav.navigation.core.bezier_smoother import (
    BezierSegment,
    bezier_point,
    cell_center,
    direction_at_progress,
    path_length,
    point_at_progress,
    point_on_path,
    smooth_path,
)


def test_cell_center():
    assert cell_center((1, 2), 10, 20) == (25, 30)


@pytest.mark.parametrize("path, expected", [
    ([], 0),
    ([(0, 0)], 0),
    ([(0, 0), (0, 1)], 1),
    ([(0, 0), (0, 1), (1, 1), (2, 1), (2, 2)], 4),
])
def test_segment_count(path, expected):
    assert len(smooth_path(path, 10, 10)) == expected


def test_two_point_segment_control_points():
    (seg,) = smooth_path([(0, 0), (0, 1)], 10, 10)
    assert seg.p1 == (5, 5)
    assert seg.p2 == (15, 5)
    assert seg.cp1 == pytest.approx((5 + 10 / 12, 5))
    assert seg.cp2 == pytest.approx((15 - 10 / 12, 5))
    assert seg.length == pytest.approx(10)


def test_denominator_is_configurable():
    (seg,) = smooth_path([(0, 0), (0, 1)], 10, 10, denominator=3.0)
    assert seg.cp1 == pytest.approx((5 + 10 * 0.5 / 3, 5))


def test_corner_control_points():
    first, second = smooth_path([(0, 0), (0, 1), (1, 1)], 10, 10)
    assert first.cp1 == pytest.approx((5 + 10 / 12, 5))
    assert first.cp2 == pytest.approx((15 - 10 / 12, 5 - 10 / 12))
    assert second.p1 == first.p2
    assert second.p2 == (15, 15)


def test_straight_path_length():
    segments = smooth_path([(0, 0), (0, 1), (0, 2)], 10, 10)
    assert path_length(segments) == pytest.approx(20)


def test_bezier_endpoints():
    p0, p1, p2, p3 = (0, 0), (1, 2), (3, 2), (4, 0)
    assert bezier_point(p0, p1, p2, p3, 0) == pytest.approx(p0)
    assert bezier_point(p0, p1, p2, p3, 1) == pytest.approx(p3)


def test_progress_endpoints_coincide_with_path_ends():
    path = [(0, 0), (1, 0), (1, 1), (2, 1), (2, 2)]
    segments = smooth_path(path, 8, 6)

    start = point_at_progress(segments, 0)
    end = point_at_progress(segments, 1)
    assert start.point == pytest.approx(cell_center(path[0], 8, 6))
    assert end.point == pytest.approx(cell_center(path[-1], 8, 6))


def test_progress_is_clamped():
    segments = smooth_path([(0, 0), (0, 1), (0, 2)], 10, 10)
    assert point_on_path(segments, -0.5) == pytest.approx((5, 5))
    assert point_on_path(segments, 2.0) == pytest.approx((25, 5))


def test_midpoint_of_symmetric_path():
    segments = smooth_path([(0, 0), (0, 1), (0, 2)], 10, 10)
    assert point_on_path(segments, 0.5) == pytest.approx((15, 5), abs=1e-6)


def test_tangent_direction():
    east = smooth_path([(0, 0), (0, 1), (0, 2)], 10, 10)
    assert point_at_progress(east, 0.5).tangent_angle == pytest.approx(0.0, abs=1e-6)

    # row 增大 -> y 增大
    south = smooth_path([(0, 0), (1, 0), (2, 0)], 10, 10)
    assert direction_at_progress(south, 0.5) == pytest.approx(math.pi / 2, abs=1e-6)


def test_empty_segments():
    assert point_on_path([], 0.3) is None
    assert point_at_progress([], 0.3) is None
    assert direction_at_progress([], 0.3) == 0.0


def test_zero_length_segment_does_not_divide_by_zero():
    seg = BezierSegment(p1=(1, 1), cp1=(1, 1), cp2=(1, 1), p2=(1, 1), length=0.0)
    assert point_on_path([seg], 0.5) == (1, 1)
