#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
导航配置模型

使用Pydantic定义类型安全的配置模型，所有字段都有默认值，可以只写需要覆盖的部分。
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator

from campus_nav.navigation.common.constants import (
    ARC_LENGTH_SAMPLES,
    DEFAULT_ANIMATION_DURATION_MS,
    DEFAULT_TENSION,
    DEFAULT_TENSION_DENOMINATOR,
    DIRECTION_EPSILON,
    MAX_DIRECTION_INDICATORS,
)

_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class MapConfig(BaseModel):
    """地图数据配置"""
    grid_path: Optional[str] = Field(None, description="grid.json 路径")
    roof_refs_path: Optional[str] = Field(None, description="屋顶参考点 JSON 路径")


class SmoothingConfig(BaseModel):
    """曲线平滑配置"""
    tension: float = Field(DEFAULT_TENSION, description="Catmull-Rom 张力")
    denominator: float = Field(DEFAULT_TENSION_DENOMINATOR, description="控制点缩放分母")
    arc_length_samples: int = Field(ARC_LENGTH_SAMPLES, description="每段弧长采样数")

    @field_validator('tension', 'denominator')
    @classmethod
    def validate_positive_float(cls, v: float) -> float:
        """验证正浮点数"""
        if v <= 0:
            raise ValueError(f"值必须大于0: {v}")
        return v

    @field_validator('arc_length_samples')
    @classmethod
    def validate_samples(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"采样数必须至少为1: {v}")
        return v


class AnimationConfig(BaseModel):
    """路径动画配置"""
    duration_ms: float = Field(DEFAULT_ANIMATION_DURATION_MS, description="动画时长（毫秒）")
    direction_epsilon: float = Field(DIRECTION_EPSILON, description="切线方向差分步长（进度单位）")
    max_indicators: int = Field(MAX_DIRECTION_INDICATORS, description="方向指示箭头最大数量")

    @field_validator('duration_ms')
    @classmethod
    def validate_duration(cls, v: float) -> float:
        if v <= 0:
            raise ValueError(f"动画时长必须大于0: {v}")
        return v

    @field_validator('direction_epsilon')
    @classmethod
    def validate_epsilon(cls, v: float) -> float:
        if not 0.0 < v < 0.5:
            raise ValueError(f"差分步长必须在(0, 0.5)之间: {v}")
        return v

    @field_validator('max_indicators')
    @classmethod
    def validate_max_indicators(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"指示箭头数量不能为负数: {v}")
        return v


class CacheConfig(BaseModel):
    """路径缓存配置"""
    enabled: bool = Field(True, description="是否启用路径缓存")


class LoggingConfig(BaseModel):
    """日志配置"""
    level: str = Field("INFO", description="日志级别")
    log_dir: Optional[str] = Field(None, description="日志目录，为空只输出到控制台")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"未知的日志级别: {v}，可选: {', '.join(_LOG_LEVELS)}")
        return level


class NavigatorConfig(BaseModel):
    """导航总配置"""
    map: MapConfig = Field(default_factory=MapConfig)
    smoothing: SmoothingConfig = Field(default_factory=SmoothingConfig)
    animation: AnimationConfig = Field(default_factory=AnimationConfig)
    cache: CacheConfig = Field(default_factory=CacheConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
