#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径平滑模块：Catmull-Rom 样条转三次 Bezier 分段

功能：
- 栅格路径 -> 渲染坐标（像素）下的 Bezier 分段
- 折线采样估算每段弧长
- 按进度 [0, 1] 取路径上的点和切线方向（用于动画）
"""

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from loguru import logger

from campus_nav.navigation.common.constants import (
    ARC_LENGTH_SAMPLES,
    DEFAULT_TENSION,
    DEFAULT_TENSION_DENOMINATOR,
    DIRECTION_EPSILON,
)

Point = Tuple[float, float]  # (x, y)


@dataclass(frozen=True)
class BezierSegment:
    """三次 Bezier 分段：p1 -> p2，控制点 cp1 / cp2"""
    p1: Point
    cp1: Point
    cp2: Point
    p2: Point
    length: float


@dataclass(frozen=True)
class PathSample:
    point: Point
    tangent_angle: float  # 弧度，atan2(dy, dx)


def cell_center(coord: Tuple[int, int], cell_width: float, cell_height: float) -> Point:
    """栅格坐标 (row, col) 转单元格中心的渲染坐标 (x, y)"""
    row, col = coord
    return (col * cell_width + cell_width / 2, row * cell_height + cell_height / 2)


def bezier_point(p0: Point, p1: Point, p2: Point, p3: Point, t: float) -> Point:
    """三次 Bezier 曲线上参数 t 处的点"""
    mt = 1 - t
    mt2 = mt * mt
    t2 = t * t
    x = mt2 * mt * p0[0] + 3 * mt2 * t * p1[0] + 3 * mt * t2 * p2[0] + t2 * t * p3[0]
    y = mt2 * mt * p0[1] + 3 * mt2 * t * p1[1] + 3 * mt * t2 * p2[1] + t2 * t * p3[1]
    return (x, y)


def bezier_length(p0: Point, p1: Point, p2: Point, p3: Point, steps: int = ARC_LENGTH_SAMPLES) -> float:
    """等参数步长折线近似弧长"""
    length = 0.0
    prev = p0
    for i in range(1, steps + 1):
        current = bezier_point(p0, p1, p2, p3, i / steps)
        length += math.hypot(current[0] - prev[0], current[1] - prev[1])
        prev = current
    return length


def smooth_path(
    path: Sequence[Tuple[int, int]],
    cell_width: float,
    cell_height: float,
    tension: float = DEFAULT_TENSION,
    denominator: float = DEFAULT_TENSION_DENOMINATOR,
    samples: int = ARC_LENGTH_SAMPLES,
) -> List[BezierSegment]:
    """
    栅格路径转 Bezier 分段

    Args:
        path: 栅格路径 [(row, col), ...]
        cell_width: 单元格宽度（渲染坐标）
        cell_height: 单元格高度（渲染坐标）
        tension: Catmull-Rom 张力
        denominator: 控制点缩放分母
        samples: 每段弧长采样数

    Returns:
        N 个点返回 N-1 段；少于 2 个点返回 []
    """
    if len(path) < 2:
        return []

    points = [cell_center(coord, cell_width, cell_height) for coord in path]
    last = len(points) - 1
    k = tension / denominator

    segments: List[BezierSegment] = []
    for i in range(last):
        # 两端重复边界点
        p0 = points[max(0, i - 1)]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[min(last, i + 2)]

        cp1 = (p1[0] + (p2[0] - p0[0]) * k, p1[1] + (p2[1] - p0[1]) * k)
        cp2 = (p2[0] - (p3[0] - p1[0]) * k, p2[1] - (p3[1] - p1[1]) * k)

        length = bezier_length(p1, cp1, cp2, p2, samples)
        segments.append(BezierSegment(p1=p1, cp1=cp1, cp2=cp2, p2=p2, length=length))

    logger.debug(f"路径平滑完成: {len(path)} 个点 -> {len(segments)} 段")
    return segments


def path_length(segments: Sequence[BezierSegment]) -> float:
    return sum(seg.length for seg in segments)


def point_on_path(segments: Sequence[BezierSegment], progress: float) -> Optional[Point]:
    """
    按进度取路径上的点

    Args:
        segments: Bezier 分段
        progress: 进度，超出 [0, 1] 时截断

    Returns:
        渲染坐标点；segments 为空返回 None
    """
    if not segments:
        return None

    progress = min(1.0, max(0.0, progress))
    target = progress * path_length(segments)

    for seg in segments:
        if target <= seg.length:
            t = target / seg.length if seg.length > 0 else 0.0
            return bezier_point(seg.p1, seg.cp1, seg.cp2, seg.p2, t)
        target -= seg.length

    # 浮点累计误差落到末尾之后
    return segments[-1].p2


def direction_at_progress(
    segments: Sequence[BezierSegment],
    progress: float,
    epsilon: float = DIRECTION_EPSILON,
) -> float:
    """进度处的切线方向（弧度），用前后 epsilon 两点的割线近似"""
    if not segments:
        return 0.0

    before = point_on_path(segments, max(0.0, progress - epsilon))
    after = point_on_path(segments, min(1.0, progress + epsilon))
    return math.atan2(after[1] - before[1], after[0] - before[0])


def point_at_progress(
    segments: Sequence[BezierSegment],
    t: float,
    epsilon: float = DIRECTION_EPSILON,
) -> Optional[PathSample]:
    """进度 t 处的点和切线方向；segments 为空返回 None"""
    point = point_on_path(segments, t)
    if point is None:
        return None
    return PathSample(point=point, tangent_angle=direction_at_progress(segments, t, epsilon))
