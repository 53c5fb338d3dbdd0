#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
BFS 路径规划测试
"""

from collections import deque

import numpy as np
import pytest

from campus_nav.navigation.core.bfs_planner import find_path, in_bounds, is_walkable
from campus_nav.navigation.core.map_model import Coordinate, FloorGrid


def _distance_map(grid: np.ndarray, source):
    """独立的 BFS 距离表，用于校验路径长度"""
    rows, cols = grid.shape
    dist = {tuple(source): 0}
    queue = deque([tuple(source)])
    while queue:
        r, c = queue.popleft()
        for dr, dc in ((0, 1), (0, -1), (1, 0), (-1, 0)):
            nr, nc = r + dr, c + dc
            if 0 <= nr < rows and 0 <= nc < cols and grid[nr, nc] == 1 and (nr, nc) not in dist:
                dist[(nr, nc)] = dist[(r, c)] + 1
                queue.append((nr, nc))
    return dist


def _assert_valid_path(grid, path, start, end):
    assert path[0] == start
    assert path[-1] == end
    for (r0, c0), (r1, c1) in zip(path, path[1:]):
        assert abs(r0 - r1) + abs(c0 - c1) == 1
    for r, c in path:
        assert grid[r, c] == 1


def test_example_route_is_pinned(example_grid):
    path = find_path(example_grid, (0, 0), (2, 2))
    assert path == [(0, 0), (1, 0), (1, 1), (2, 1), (2, 2)]
    assert all(isinstance(p, Coordinate) for p in path)


def test_blocked_start_returns_empty(example_grid):
    assert find_path(example_grid, (0, 2), (2, 2)) == []


def test_blocked_end_returns_empty(example_grid):
    assert find_path(example_grid, (0, 0), (2, 0)) == []


def test_start_equals_end_short_circuits(example_grid):
    assert find_path(example_grid, (1, 1), (1, 1)) == [(1, 1)]
    # 障碍格和越界坐标同样直接返回
    assert find_path(example_grid, (0, 2), (0, 2)) == [(0, 2)]
    assert find_path(example_grid, (7, 7), (7, 7)) == [(7, 7)]


@pytest.mark.parametrize("start, end", [
    ((-1, 0), (2, 2)),
    ((0, 0), (3, 0)),
    ((0, 0), (0, 3)),
    ((0, 0), (-1, -1)),
])
def test_out_of_bounds_returns_empty(example_grid, start, end):
    assert find_path(example_grid, start, end) == []


def test_disconnected_returns_empty():
    grid = np.array([
        [1, 0, 1],
        [1, 0, 1],
    ])
    assert find_path(grid, (0, 0), (1, 2)) == []


def test_accepts_lists_arrays_and_floor_grid(example_grid):
    expected = find_path(example_grid, (0, 0), (2, 2))
    assert find_path(example_grid.tolist(), (0, 0), (2, 2)) == expected
    assert find_path(FloorGrid(example_grid), (0, 0), (2, 2)) == expected
    assert find_path(example_grid, Coordinate(0, 0), {"row": 2, "col": 2}) == expected


def test_deterministic_tie_break():
    grid = np.ones((2, 2), dtype=np.uint8)
    # 先扩展 row+1 方向
    assert find_path(grid, (0, 0), (1, 1)) == [(0, 0), (1, 0), (1, 1)]
    assert find_path(grid, (1, 1), (0, 0)) == [(1, 1), (0, 1), (0, 0)]


def test_detour_around_wall():
    grid = np.ones((5, 5), dtype=np.uint8)
    grid[0:4, 2] = 0
    path = find_path(grid, (0, 0), (0, 4))
    _assert_valid_path(grid, path, (0, 0), (0, 4))
    assert len(path) == 13


def test_random_grids_shortest_and_symmetric():
    rng = np.random.default_rng(7)
    for _ in range(30):
        grid = (rng.random((8, 9)) > 0.3).astype(np.uint8)
        walkable = [tuple(int(v) for v in rc) for rc in np.argwhere(grid == 1)]
        if len(walkable) < 2:
            continue
        idx = rng.choice(len(walkable), size=2, replace=False)
        start, end = walkable[idx[0]], walkable[idx[1]]
        dist = _distance_map(grid, start)
        path = find_path(grid, start, end)
        if end in dist:
            _assert_valid_path(grid, path, start, end)
            assert len(path) == dist[end] + 1
            assert len(find_path(grid, end, start)) == len(path)
        else:
            assert path == []
            assert find_path(grid, end, start) == []


def test_grid_not_modified(example_grid):
    before = example_grid.copy()
    find_path(example_grid, (0, 0), (2, 2))
    assert np.array_equal(before, example_grid)


def test_helpers(example_grid):
    assert in_bounds(example_grid, (2, 2))
    assert not in_bounds(example_grid, (3, 0))
    assert is_walkable(example_grid, (0, 0))
    assert not is_walkable(example_grid, (0, 2))
    assert not is_walkable(example_grid, (-1, 0))
