#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
地点模型：栅格点 / 命名节点 / 屋顶参考点

三种地点都只是坐标的载体，进入路径规划前统一解析为 Coordinate。
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from loguru import logger

from campus_nav.navigation.common.exceptions import LocationNotFoundError
from campus_nav.navigation.core.map_model import Coordinate, FloorGrid, coord_label

_CODE_PREFIX_RE = re.compile(r"^[A-Z]+")
_CODE_NUMBER_RE = re.compile(r"\d+")


@dataclass(frozen=True)
class GridPoint:
    coordinate: Coordinate


@dataclass(frozen=True)
class NamedNode:
    """命名地点（办公室、教室等）"""
    id: str
    name: str
    type: str
    coordinate: Coordinate


@dataclass(frozen=True)
class RoofReference:
    """屋顶参考点，例如 "A101" """
    code: str
    coordinate: Coordinate


Location = Union[GridPoint, NamedNode, RoofReference]


@dataclass(frozen=True)
class QrScan:
    type: str
    code: str
    timestamp: Optional[str] = None


def resolve_coordinate(location: Location) -> Coordinate:
    return location.coordinate


def location_label(location: Location) -> str:
    """界面显示用名称"""
    if isinstance(location, NamedNode):
        return location.name
    if isinstance(location, RoofReference):
        return location.code
    return coord_label(location.coordinate)


def roof_ref_sort_key(ref: RoofReference):
    """先按字母前缀，再按数字部分排序（A2 < A10 < B1）"""
    prefix = _CODE_PREFIX_RE.match(ref.code)
    number = _CODE_NUMBER_RE.search(ref.code)
    return (prefix.group(0) if prefix else "", int(number.group(0)) if number else 0)


def parse_qr_payload(payload: Union[str, Mapping[str, Any]]) -> QrScan:
    """
    解析二维码内容

    Args:
        payload: {"type": "roofRef"|"manual", "code": ..., "timestamp": ...}，
            其 JSON 字符串，或直接是编码字符串

    Returns:
        QrScan

    Raises:
        LocationNotFoundError: 编码为空
    """
    if isinstance(payload, str):
        text = payload.strip()
        if text.startswith("{"):
            try:
                payload = json.loads(text)
            except json.JSONDecodeError as e:
                raise LocationNotFoundError(f"二维码内容不是有效 JSON: {e}") from e
        else:
            payload = {"type": "manual", "code": text}

    code = str(payload.get("code") or "").strip()
    if not code:
        raise LocationNotFoundError("二维码内容缺少编码")

    return QrScan(
        type=str(payload.get("type") or "manual"),
        code=code,
        timestamp=payload.get("timestamp"),
    )


class LocationDirectory:
    """节点与参考点的查找、排序、搜索"""

    def __init__(self, nodes: Iterable[NamedNode] = (), roof_refs: Iterable[RoofReference] = ()):
        self._nodes: List[NamedNode] = list(nodes)
        self._roof_refs: List[RoofReference] = list(roof_refs)

        self._nodes_by_id: Dict[str, NamedNode] = {}
        self._nodes_by_name: Dict[str, NamedNode] = {}
        for node in self._nodes:
            self._nodes_by_id.setdefault(node.id, node)
            self._nodes_by_name.setdefault(node.name.lower(), node)

        self._refs_by_code: Dict[str, RoofReference] = {}
        for ref in self._roof_refs:
            key = ref.code.upper()
            if key in self._refs_by_code:
                logger.warning(f"重复的参考点编码: {ref.code}，保留第一个")
                continue
            self._refs_by_code[key] = ref

    @property
    def nodes(self) -> List[NamedNode]:
        return list(self._nodes)

    @property
    def roof_refs(self) -> List[RoofReference]:
        return list(self._roof_refs)

    def find_node(self, key: str) -> NamedNode:
        """按 id 或名称（不区分大小写）查找节点"""
        node = self._nodes_by_id.get(key) or self._nodes_by_name.get(str(key).lower())
        if node is None:
            raise LocationNotFoundError(f"地点不存在: {key}")
        return node

    def find_roof_ref(self, code: str) -> RoofReference:
        ref = self._refs_by_code.get(str(code).strip().upper())
        if ref is None:
            raise LocationNotFoundError(f"参考点不存在: {code}")
        return ref

    def resolve_qr(self, payload: Union[str, Mapping[str, Any]]) -> RoofReference:
        scan = parse_qr_payload(payload)
        logger.info(f"二维码解析: type={scan.type}, code={scan.code}")
        return self.find_roof_ref(scan.code)

    def sorted_nodes(self) -> List[NamedNode]:
        return sorted(self._nodes, key=lambda n: n.name)

    def sorted_roof_refs(self) -> List[RoofReference]:
        return sorted(self._roof_refs, key=roof_ref_sort_key)

    def search_nodes(self, term: str = "") -> List[NamedNode]:
        """按名称或类型（office / room ...）过滤"""
        term = term.strip().lower()
        return [n for n in self.sorted_nodes() if term in n.name.lower() or term in n.type.lower()]

    def search_roof_refs(self, term: str = "") -> List[RoofReference]:
        term = term.strip().lower()
        return [r for r in self.sorted_roof_refs() if term in r.code.lower()]

    def stats(self, grid: Optional[FloorGrid] = None) -> Dict[str, int]:
        """节点统计：总数、办公室、教室、其他，给定栅格时附带可通行格数"""
        offices = sum(1 for n in self._nodes if n.type == "office")
        rooms = sum(1 for n in self._nodes if n.type == "room")
        result = {
            "total_nodes": len(self._nodes),
            "offices": offices,
            "rooms": rooms,
            "others": len(self._nodes) - offices - rooms,
        }
        if grid is not None:
            result["walkable_cells"] = grid.walkable_count()
        return result
