#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
campus_nav：室内导航核心库

栅格最短路径（BFS）、路径缓存、Catmull-Rom/Bezier 曲线平滑。
"""

__version__ = "0.1.0"
