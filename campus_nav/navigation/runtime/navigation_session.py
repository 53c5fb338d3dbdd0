#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
NavigationSession：一次导航会话的状态容器

持有当前楼层栅格、地点目录和路径缓存。换图时缓存随之清空，
调用方拿到的始终是针对当前栅格计算的路径。
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Tuple, Union

from loguru import logger

from campus_nav.navigation.common.exceptions import LocationNotFoundError
from campus_nav.navigation.common.logger import SetupLogger
from campus_nav.navigation.config.loader import load_config
from campus_nav.navigation.config.models import NavigatorConfig
from campus_nav.navigation.core.bezier_smoother import BezierSegment, smooth_path
from campus_nav.navigation.core.bfs_planner import find_path
from campus_nav.navigation.core.map_model import Coordinate, FloorGrid, as_coordinate, coord_label
from campus_nav.navigation.core.path_cache import PathCache
from campus_nav.navigation.data.locations import (
    GridPoint,
    Location,
    LocationDirectory,
    NamedNode,
    RoofReference,
    location_label,
)
from campus_nav.navigation.data.map_loader import FloorMap, load_floor_map, load_roof_refs
from campus_nav.navigation.runtime.path_animation import PathAnimation

Endpoint = Union[Location, Tuple[int, int], Coordinate]


@dataclass
class RouteResult:
    ok: bool
    start: Optional[Coordinate] = None
    end: Optional[Coordinate] = None
    path: List[Coordinate] = field(default_factory=list)
    segments: List[BezierSegment] = field(default_factory=list)
    reason: str = ""

    @property
    def steps(self) -> int:
        """路径格数（界面上显示的距离）"""
        return len(self.path)


class NavigationSession:
    """
    导航会话

    示例:
        ```python
        session = NavigationSession(config)
        session.load_map_file("public/grid.json")
        session.set_render_size(1200, 800)
        result = session.plan_route((0, 0), (10, 12))
        ```
    """

    def __init__(self, config: Optional[NavigatorConfig] = None):
        self.config_ = config or NavigatorConfig()
        self.grid_: Optional[FloorGrid] = None
        self.directory_ = LocationDirectory()
        self.cache_ = PathCache(find_path)
        self.cell_size_: Optional[Tuple[float, float]] = None
        self.render_size_: Optional[Tuple[float, float]] = None

    @classmethod
    def from_config_file(cls, config_path: Union[str, Path], setup_logging: bool = True) -> "NavigationSession":
        """
        从配置文件创建会话：配置日志，并加载配置中给出的栅格和参考点

        Args:
            config_path: YAML 配置文件路径
            setup_logging: 是否按配置初始化 loguru

        Returns:
            NavigationSession
        """
        config = load_config(config_path)
        if setup_logging:
            SetupLogger(config.logging.log_dir, config.logging.level)

        session = cls(config)
        if config.map.grid_path:
            session.load_map_file()
        if config.map.roof_refs_path:
            session.load_roof_refs_file()
        return session

    # ---------------- 地图 ----------------
    def load_map(self, floor_map: FloorMap) -> None:
        """安装新栅格，清空路径缓存"""
        self.grid_ = floor_map.grid
        self.cache_.invalidate()
        self.directory_ = LocationDirectory(floor_map.nodes, self.directory_.roof_refs)
        if self.render_size_ is not None:
            self.set_render_size(*self.render_size_)
        logger.info(f"导航会话已加载地图: {self.grid_!r}")

    def load_map_file(self, path: Optional[Union[str, Path]] = None) -> None:
        path = path or self.config_.map.grid_path
        if path is None:
            raise ValueError("未指定栅格文件路径")
        self.load_map(load_floor_map(path))

    def load_roof_refs(self, refs: Sequence[RoofReference]) -> None:
        self.directory_ = LocationDirectory(self.directory_.nodes, refs)

    def load_roof_refs_file(self, path: Optional[Union[str, Path]] = None) -> None:
        path = path or self.config_.map.roof_refs_path
        if path is None:
            raise ValueError("未指定参考点文件路径")
        self.load_roof_refs(load_roof_refs(path, self.grid_))

    @property
    def directory(self) -> LocationDirectory:
        return self.directory_

    def set_render_size(self, width: float, height: float) -> None:
        """设置渲染尺寸（图片像素），据此计算单元格尺寸"""
        self.render_size_ = (width, height)
        if self.grid_ is None:
            return
        self.cell_size_ = (width / self.grid_.cols, height / self.grid_.rows)

    # ---------------- 路径 ----------------
    def _compute_path(self, start: Coordinate, end: Coordinate) -> List[Coordinate]:
        if self.config_.cache.enabled:
            return self.cache_.get_or_compute(self.grid_, start, end)
        return find_path(self.grid_, start, end)

    def _smooth(self, path: Sequence[Coordinate]) -> List[BezierSegment]:
        if self.cell_size_ is None:
            return []
        smoothing = self.config_.smoothing
        return smooth_path(
            path,
            self.cell_size_[0],
            self.cell_size_[1],
            tension=smoothing.tension,
            denominator=smoothing.denominator,
            samples=smoothing.arc_length_samples,
        )

    def _check_endpoint(self, name: str, coord: Coordinate) -> Optional[str]:
        if not self.grid_.in_bounds(coord):
            return f"{name}超出地图范围: {tuple(coord)}"
        if not self.grid_.is_walkable(coord):
            return f"{name}位于障碍上: {coord_label(coord)}"
        return None

    def plan_route(self, start: Endpoint, end: Endpoint) -> RouteResult:
        """
        规划路线

        Args:
            start: 起点（地点对象或 (row, col)）
            end: 终点（地点对象或 (row, col)）

        Returns:
            RouteResult，失败时 ok=False 并给出原因
        """
        if self.grid_ is None:
            return RouteResult(ok=False, reason="地图未加载")

        start_coord = _endpoint_coordinate(start)
        end_coord = _endpoint_coordinate(end)

        if start_coord != end_coord:
            for name, coord in (("起点", start_coord), ("终点", end_coord)):
                reason = self._check_endpoint(name, coord)
                if reason is not None:
                    logger.warning(f"路线规划失败: {reason}")
                    return RouteResult(ok=False, start=start_coord, end=end_coord, reason=reason)

        path = self._compute_path(start_coord, end_coord)
        if not path:
            reason = f"无法找到路线: {_describe(start)} -> {_describe(end)}"
            logger.warning(reason)
            return RouteResult(ok=False, start=start_coord, end=end_coord, reason=reason)

        logger.info(f"路线规划成功: {_describe(start)} -> {_describe(end)}, 步数={len(path)}")
        return RouteResult(
            ok=True,
            start=start_coord,
            end=end_coord,
            path=path,
            segments=self._smooth(path),
            reason="ok",
        )

    def plan_route_by_nodes(self, start_key: str, end_key: str) -> RouteResult:
        """按节点 id / 名称规划"""
        try:
            start = self.directory_.find_node(start_key)
            end = self.directory_.find_node(end_key)
        except LocationNotFoundError as e:
            logger.warning(f"路线规划失败: {e}")
            return RouteResult(ok=False, reason=str(e))
        return self.plan_route(start, end)

    def plan_route_by_codes(self, start_code: str, end_code: str) -> RouteResult:
        """按屋顶参考点编码规划"""
        try:
            start = self.directory_.find_roof_ref(start_code)
            end = self.directory_.find_roof_ref(end_code)
        except LocationNotFoundError as e:
            logger.warning(f"路线规划失败: {e}")
            return RouteResult(ok=False, reason=str(e))
        return self.plan_route(start, end)

    def plan_route_from_qr(self, payload: Union[str, Mapping[str, Any]], end: Endpoint) -> RouteResult:
        """以扫码得到的参考点为起点规划"""
        try:
            start = self.directory_.resolve_qr(payload)
        except LocationNotFoundError as e:
            logger.warning(f"二维码无法定位: {e}")
            return RouteResult(ok=False, reason=str(e))
        return self.plan_route(start, end)

    def animation_for(self, result: RouteResult) -> PathAnimation:
        anim_cfg = self.config_.animation
        return PathAnimation(
            result.segments,
            duration_ms=anim_cfg.duration_ms,
            epsilon=anim_cfg.direction_epsilon,
            max_indicators=anim_cfg.max_indicators,
        )


def _endpoint_coordinate(endpoint: Endpoint) -> Coordinate:
    if isinstance(endpoint, (GridPoint, NamedNode, RoofReference)):
        return endpoint.coordinate
    return as_coordinate(endpoint)


def _describe(endpoint: Endpoint) -> str:
    if isinstance(endpoint, (GridPoint, NamedNode, RoofReference)):
        return location_label(endpoint)
    return str(tuple(as_coordinate(endpoint)))
