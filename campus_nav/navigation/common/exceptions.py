#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
自定义异常类：定义导航模块的专用异常
"""


class NavigationError(Exception):
    """导航模块基础异常类"""
    pass


class ConfigurationError(NavigationError):
    """配置错误异常"""
    pass


class MapDataError(NavigationError):
    """地图数据（栅格 / 参考点文档）格式错误异常"""
    pass


class LocationNotFoundError(NavigationError):
    """地点（节点、参考点编码、二维码）不存在异常"""
    pass
