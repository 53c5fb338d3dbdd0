#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
地图数据加载器

读取 grid.json（栅格 + 节点）和 roof_refs.json（屋顶参考点），
使用 Pydantic 校验文档结构。
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from campus_nav.navigation.common.exceptions import MapDataError
from campus_nav.navigation.core.map_model import Coordinate, FloorGrid
from campus_nav.navigation.data.locations import NamedNode, RoofReference


class NodeRecord(BaseModel):
    """grid.json 中的节点"""
    id: str
    name: str
    type: str = Field("other", description="office / room / ...")
    row: int
    col: int

    @field_validator('id', mode='before')
    @classmethod
    def coerce_id(cls, v: Any) -> str:
        """id 可能是数字"""
        return str(v)


class GridDocument(BaseModel):
    """grid.json 文档"""
    rows: int = Field(..., gt=0)
    cols: int = Field(..., gt=0)
    grid: List[List[int]]
    nodes: List[NodeRecord] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_shape(self) -> "GridDocument":
        """验证栅格尺寸与 rows / cols 一致，且只有 0 / 1"""
        if len(self.grid) != self.rows:
            raise ValueError(f"栅格行数 {len(self.grid)} 与 rows={self.rows} 不一致")
        for idx, row in enumerate(self.grid):
            if len(row) != self.cols:
                raise ValueError(f"第 {idx} 行列数 {len(row)} 与 cols={self.cols} 不一致")
            if any(v not in (0, 1) for v in row):
                raise ValueError(f"第 {idx} 行包含 0/1 以外的值")
        return self


class RoofRefRecord(BaseModel):
    code: str
    row: int
    col: int


class RoofRefDocument(BaseModel):
    """roof_refs.json 文档"""
    model_config = ConfigDict(populate_by_name=True)

    roof_refs: List[RoofRefRecord] = Field(default_factory=list, alias="roofRefs")


@dataclass
class FloorMap:
    grid: FloorGrid
    nodes: List[NamedNode] = field(default_factory=list)


def _log_validation_error(title: str, e: ValidationError) -> None:
    logger.error(f"{title}:\n{e}")
    for error in e.errors():
        field_path = " -> ".join(str(loc) for loc in error['loc'])
        logger.error(f"  {field_path}: {error['msg']}")


def _read_json(path: Union[str, Path]) -> Any:
    path = Path(path)
    if not path.exists():
        error_msg = f"地图文件不存在: {path}"
        logger.error(error_msg)
        raise FileNotFoundError(error_msg)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        error_msg = f"JSON格式错误: {path}: {e}"
        logger.error(error_msg)
        raise MapDataError(error_msg) from e


def parse_floor_map(data: Dict[str, Any]) -> FloorMap:
    """
    解析 grid.json 内容

    Args:
        data: {rows, cols, grid, nodes}

    Returns:
        FloorMap，越界节点被丢弃

    Raises:
        MapDataError: 文档结构无效
    """
    try:
        doc = GridDocument.model_validate(data)
    except ValidationError as e:
        _log_validation_error("栅格文档验证失败", e)
        raise MapDataError(f"栅格文档验证失败: {e.error_count()} 处错误") from e

    grid = FloorGrid.from_rows(doc.grid)

    nodes: List[NamedNode] = []
    for record in doc.nodes:
        coord = Coordinate(record.row, record.col)
        if not grid.in_bounds(coord):
            logger.warning(f"节点越界，已忽略: id={record.id}, name={record.name}, coord={coord}")
            continue
        nodes.append(NamedNode(id=record.id, name=record.name, type=record.type, coordinate=coord))

    logger.info(f"栅格加载完成: {grid.rows}x{grid.cols}, 节点数={len(nodes)}")
    return FloorMap(grid=grid, nodes=nodes)


def load_floor_map(path: Union[str, Path]) -> FloorMap:
    return parse_floor_map(_read_json(path))


def parse_roof_refs(data: Dict[str, Any], grid: Optional[FloorGrid] = None) -> List[RoofReference]:
    """
    解析参考点文档

    Args:
        data: {"roofRefs": [{code, row, col}, ...]}
        grid: 给定时丢弃越界参考点

    Returns:
        RoofReference 列表
    """
    try:
        doc = RoofRefDocument.model_validate(data)
    except ValidationError as e:
        _log_validation_error("参考点文档验证失败", e)
        raise MapDataError(f"参考点文档验证失败: {e.error_count()} 处错误") from e

    refs: List[RoofReference] = []
    for record in doc.roof_refs:
        coord = Coordinate(record.row, record.col)
        if grid is not None and not grid.in_bounds(coord):
            logger.warning(f"参考点越界，已忽略: code={record.code}, coord={coord}")
            continue
        refs.append(RoofReference(code=record.code, coordinate=coord))

    logger.info(f"参考点加载完成: {len(refs)} 个")
    return refs


def load_roof_refs(path: Union[str, Path], grid: Optional[FloorGrid] = None) -> List[RoofReference]:
    return parse_roof_refs(_read_json(path), grid)
