#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
导航配置模块

提供类型安全的配置管理和验证。
"""

from .models import (
    NavigatorConfig,
    MapConfig,
    SmoothingConfig,
    AnimationConfig,
    CacheConfig,
    LoggingConfig,
)
from .loader import load_config

__all__ = [
    'NavigatorConfig',
    'MapConfig',
    'SmoothingConfig',
    'AnimationConfig',
    'CacheConfig',
    'LoggingConfig',
    'load_config'
]
