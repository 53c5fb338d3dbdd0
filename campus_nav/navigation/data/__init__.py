#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
地图数据与地点模型
"""

from .locations import (
    GridPoint,
    NamedNode,
    RoofReference,
    Location,
    QrScan,
    LocationDirectory,
    location_label,
    parse_qr_payload,
    resolve_coordinate,
)
from .map_loader import FloorMap, load_floor_map, load_roof_refs, parse_floor_map, parse_roof_refs

__all__ = [
    'GridPoint',
    'NamedNode',
    'RoofReference',
    'Location',
    'QrScan',
    'LocationDirectory',
    'location_label',
    'parse_qr_payload',
    'resolve_coordinate',
    'FloorMap',
    'load_floor_map',
    'load_roof_refs',
    'parse_floor_map',
    'parse_roof_refs',
]
