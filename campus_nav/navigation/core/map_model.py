#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
地图模型：栅格坐标与只读占用栅格
"""

from typing import Any, Mapping, NamedTuple, Sequence, Tuple

import numpy as np

from campus_nav.navigation.common.constants import BLOCKED, WALKABLE
from campus_nav.navigation.common.exceptions import MapDataError


class Coordinate(NamedTuple):
    """栅格坐标 (row, col)，与普通二元组比较相等"""
    row: int
    col: int


def as_coordinate(value: Any) -> Coordinate:
    """
    统一坐标表示

    Args:
        value: Coordinate、(row, col) 二元组，或带 row/col 键的映射

    Returns:
        Coordinate
    """
    if isinstance(value, Coordinate):
        return value
    if isinstance(value, Mapping):
        return Coordinate(int(value["row"]), int(value["col"]))
    row, col = value
    return Coordinate(int(row), int(col))


def coord_label(coord: Tuple[int, int]) -> str:
    """行用字母、列从 1 开始计数的坐标标签，例如 (0, 0) -> "A1" """
    row, col = coord
    return f"{chr(ord('A') + row)}{col + 1}"


class FloorGrid:
    """
    只读占用栅格（1=可通行，0=障碍）

    实现了 ``__array__``，可以直接传给 find_path 等接收数组的函数。
    """

    def __init__(self, cells: np.ndarray):
        cells = np.array(cells, dtype=np.uint8)
        if cells.ndim != 2 or cells.size == 0:
            raise MapDataError(f"栅格必须是非空二维数组: shape={cells.shape}")
        if not np.isin(cells, (BLOCKED, WALKABLE)).all():
            raise MapDataError("栅格只能包含 0 / 1")
        cells.setflags(write=False)
        self._cells = cells

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "FloorGrid":
        """从嵌套列表构建，校验每行列数一致"""
        if not rows:
            raise MapDataError("栅格为空")
        width = len(rows[0])
        for idx, row in enumerate(rows):
            if len(row) != width:
                raise MapDataError(f"第 {idx} 行列数为 {len(row)}，期望 {width}")
        return cls(np.asarray(rows))

    @property
    def cells(self) -> np.ndarray:
        return self._cells

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def cols(self) -> int:
        return self._cells.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)

    def in_bounds(self, coord: Tuple[int, int]) -> bool:
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols

    def is_walkable(self, coord: Tuple[int, int]) -> bool:
        if not self.in_bounds(coord):
            return False
        row, col = coord
        return int(self._cells[row, col]) == WALKABLE

    def walkable_count(self) -> int:
        return int(np.count_nonzero(self._cells == WALKABLE))

    def __array__(self, dtype=None, copy=None):
        cells = self._cells if dtype is None else self._cells.astype(dtype)
        if copy and cells is self._cells:
            return cells.copy()
        return cells

    def __repr__(self) -> str:
        return f"FloorGrid(rows={self.rows}, cols={self.cols}, walkable={self.walkable_count()})"
