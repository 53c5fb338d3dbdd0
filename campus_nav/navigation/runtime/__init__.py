#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
导航运行时：会话与路径动画
"""

from .navigation_session import NavigationSession, RouteResult
from .path_animation import AnimationFrame, PathAnimation, ease_in_out_cubic

__all__ = ['NavigationSession', 'RouteResult', 'AnimationFrame', 'PathAnimation', 'ease_in_out_cubic']
