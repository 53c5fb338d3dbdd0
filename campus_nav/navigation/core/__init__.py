#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
导航核心：BFS 路径规划、路径缓存、曲线平滑
"""

from .map_model import Coordinate, FloorGrid, as_coordinate, coord_label
from .bfs_planner import find_path, in_bounds, is_walkable
from .path_cache import PathCache, get_or_compute_path
from .bezier_smoother import (
    BezierSegment,
    PathSample,
    cell_center,
    direction_at_progress,
    path_length,
    point_at_progress,
    point_on_path,
    smooth_path,
)

__all__ = [
    'Coordinate',
    'FloorGrid',
    'as_coordinate',
    'coord_label',
    'find_path',
    'in_bounds',
    'is_walkable',
    'PathCache',
    'get_or_compute_path',
    'BezierSegment',
    'PathSample',
    'cell_center',
    'direction_at_progress',
    'path_length',
    'point_at_progress',
    'point_on_path',
    'smooth_path',
]
