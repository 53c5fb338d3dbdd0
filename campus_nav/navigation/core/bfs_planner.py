#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径规划模块：在 0/1 占用栅格上用 BFS 求四邻域最短路径

栅格无权重，BFS 即最优；邻居扩展顺序固定为 NEIGHBOR_OFFSETS，
多条等长路径时结果由该顺序唯一确定。
"""

# 标准库导入
from collections import deque
from typing import Any, Dict, List, Tuple

# 第三方库导入
import numpy as np
from loguru import logger

from campus_nav.navigation.common.constants import NEIGHBOR_OFFSETS, WALKABLE
from campus_nav.navigation.core.map_model import Coordinate, as_coordinate


def in_bounds(grid: Any, coord: Tuple[int, int]) -> bool:
    """坐标是否在栅格范围内"""
    cells = np.asarray(grid)
    rows, cols = cells.shape
    row, col = coord
    return 0 <= row < rows and 0 <= col < cols


def is_walkable(grid: Any, coord: Tuple[int, int]) -> bool:
    """坐标是否在范围内且可通行"""
    cells = np.asarray(grid)
    if not in_bounds(cells, coord):
        return False
    row, col = coord
    return int(cells[row, col]) == WALKABLE


def find_path(grid: Any, start: Tuple[int, int], end: Tuple[int, int]) -> List[Coordinate]:
    """
    BFS 最短路径

    Args:
        grid: 二维 0/1 栅格（np.ndarray / FloorGrid / 嵌套列表），1=可通行
        start: 起点 (row, col)
        end: 终点 (row, col)

    Returns:
        从 start 到 end（含两端）的坐标列表；无路可达返回 []。
        start == end 时直接返回 [start]，不检查可通行性。
    """
    start = as_coordinate(start)
    end = as_coordinate(end)

    if start == end:
        return [start]

    cells = np.asarray(grid)
    rows, cols = cells.shape

    if not is_walkable(cells, start) or not is_walkable(cells, end):
        logger.debug(f"[BFS] 起点或终点越界/位于障碍上: start={start}, end={end}, grid_size=({rows}, {cols})")
        return []

    queue = deque([start])
    visited = {start}
    came_from: Dict[Coordinate, Coordinate] = {}
    nodes_explored = 0

    while queue:
        current = queue.popleft()
        nodes_explored += 1

        # 出队时才判断终点
        if current == end:
            break

        for d_row, d_col in NEIGHBOR_OFFSETS:
            n_row, n_col = current.row + d_row, current.col + d_col

            if n_row < 0 or n_row >= rows or n_col < 0 or n_col >= cols:
                continue
            if int(cells[n_row, n_col]) != WALKABLE:
                continue

            neighbor = Coordinate(n_row, n_col)
            if neighbor in visited:
                continue

            visited.add(neighbor)
            came_from[neighbor] = current
            queue.append(neighbor)

    if end not in came_from:
        logger.debug(f"[BFS] 无法到达终点: start={start}, end={end}, 探索节点数={nodes_explored}")
        return []

    # 回溯路径
    path = [end]
    cur = end
    while cur in came_from:
        cur = came_from[cur]
        path.append(cur)
    path.reverse()

    logger.debug(f"[BFS] 路径规划成功: 路径长度={len(path)}, 探索节点数={nodes_explored}")
    return path
