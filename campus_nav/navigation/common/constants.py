#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
导航常量定义
"""

from typing import Tuple

# 栅格取值（与 grid.json 一致：1=可通行，0=障碍）
WALKABLE: int = 1
BLOCKED: int = 0

# 四邻域扩展顺序 (d_row, d_col)，决定等长路径的选择，不可调整
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int], ...] = (
    (1, 0),
    (-1, 0),
    (0, 1),
    (0, -1),
)

# 曲线平滑
DEFAULT_TENSION: float = 0.5
DEFAULT_TENSION_DENOMINATOR: float = 6.0
ARC_LENGTH_SAMPLES: int = 20

# 动画
DEFAULT_ANIMATION_DURATION_MS: float = 3000.0
DIRECTION_EPSILON: float = 0.001
MAX_DIRECTION_INDICATORS: int = 5
PULSE_COUNT: int = 3
PULSE_SPACING: float = 0.15
