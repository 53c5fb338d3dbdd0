#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
导航模块

提供栅格寻路、路径缓存、曲线平滑和导航会话。
"""

from .core import find_path, get_or_compute_path, smooth_path, point_at_progress, PathCache, Coordinate
from .runtime import NavigationSession, RouteResult

__all__ = [
    'find_path',
    'get_or_compute_path',
    'smooth_path',
    'point_at_progress',
    'PathCache',
    'Coordinate',
    'NavigationSession',
    'RouteResult',
]
