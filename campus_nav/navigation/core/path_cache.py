#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
路径缓存：按有序 (start, end) 记忆 BFS 结果

栅格在一次会话中不变，缓存不做淘汰；换图时必须 invalidate()。
"""

import threading
from typing import Any, Callable, Dict, List, Optional, Tuple

from loguru import logger

from campus_nav.navigation.core.bfs_planner import find_path
from campus_nav.navigation.core.map_model import Coordinate, as_coordinate

CacheKey = Tuple[int, int, int, int]
PathFinderFn = Callable[[Any, Tuple[int, int], Tuple[int, int]], List[Coordinate]]

_MISSING = object()


class PathCache:
    """
    路径缓存

    - key 为 (start.row, start.col, end.row, end.col)，正反方向分别缓存
    - 空路径（不连通）同样缓存
    - 线程安全
    """

    def __init__(self, finder: PathFinderFn = find_path) -> None:
        self._finder = finder
        self._lock = threading.Lock()
        self._entries: Dict[CacheKey, Tuple[Coordinate, ...]] = {}
        self._grid: Optional[Any] = None
        self.hits = 0
        self.misses = 0

    @staticmethod
    def make_key(start: Tuple[int, int], end: Tuple[int, int]) -> CacheKey:
        start = as_coordinate(start)
        end = as_coordinate(end)
        return (start.row, start.col, end.row, end.col)

    def get_or_compute(self, grid: Any, start: Tuple[int, int], end: Tuple[int, int]) -> List[Coordinate]:
        """
        命中直接返回缓存结果，未命中调用 finder 计算并写入

        Args:
            grid: 栅格。缓存按对象身份绑定栅格，调用方必须每次传入同一个栅格对象；
                传入新对象（哪怕内容相同，例如每次 arr.tolist()）会清空缓存，永远无法命中
            start: 起点 (row, col)
            end: 终点 (row, col)

        Returns:
            路径坐标列表（副本）
        """
        key = self.make_key(start, end)

        with self._lock:
            if self._grid is not None and grid is not self._grid:
                if self._entries:
                    logger.warning(f"PathCache: 栅格对象已变化，清空 {len(self._entries)} 条缓存")
                self._entries.clear()
            self._grid = grid

            cached = self._entries.get(key, _MISSING)
            if cached is not _MISSING:
                self.hits += 1
                return list(cached)

            self.misses += 1
            path = self._finder(grid, start, end)
            self._entries[key] = tuple(path)

        logger.debug(f"PathCache: 新增缓存 key={key}, 路径长度={len(path)}")
        return list(path)

    def invalidate(self) -> None:
        """清空全部缓存（换图 / 重新加载栅格时调用）"""
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            self._grid = None
        logger.info(f"PathCache: 已清空 {count} 条缓存")

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, pair: Tuple[Tuple[int, int], Tuple[int, int]]) -> bool:
        start, end = pair
        key = self.make_key(start, end)
        with self._lock:
            return key in self._entries


def get_or_compute_path(cache: PathCache, grid: Any, start: Tuple[int, int], end: Tuple[int, int]) -> List[Coordinate]:
    """带缓存的 find_path"""
    return cache.get_or_compute(grid, start, end)
