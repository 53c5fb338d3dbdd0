#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
测试公共夹具
"""

import json
from pathlib import Path

import numpy as np
import pytest

from campus_nav.navigation.data.map_loader import FloorMap, parse_floor_map


# 3x3 示例：0=障碍
EXAMPLE_GRID = [
    [1, 1, 0],
    [1, 1, 1],
    [0, 1, 1],
]

SAMPLE_DOCUMENT = {
    "rows": 5,
    "cols": 6,
    "grid": [
        [1, 1, 1, 0, 1, 1],
        [1, 0, 1, 0, 1, 0],
        [1, 0, 1, 1, 1, 1],
        [1, 0, 0, 0, 0, 1],
        [1, 1, 1, 1, 1, 1],
    ],
    "nodes": [
        {"id": "n1", "name": "Main Office", "type": "office", "row": 0, "col": 0},
        {"id": "n2", "name": "Room 204", "type": "room", "row": 0, "col": 5},
        {"id": "n3", "name": "Library", "type": "room", "row": 4, "col": 3},
        {"id": "n4", "name": "Elevator", "type": "elevator", "row": 2, "col": 2},
    ],
}

SAMPLE_ROOF_REFS = {
    "roofRefs": [
        {"code": "A101", "row": 0, "col": 0},
        {"code": "A10", "row": 2, "col": 4},
        {"code": "A2", "row": 4, "col": 0},
        {"code": "B1", "row": 0, "col": 5},
    ]
}


@pytest.fixture
def example_grid() -> np.ndarray:
    return np.array(EXAMPLE_GRID, dtype=np.uint8)


@pytest.fixture
def sample_document() -> dict:
    return json.loads(json.dumps(SAMPLE_DOCUMENT))


@pytest.fixture
def sample_roof_refs() -> dict:
    return json.loads(json.dumps(SAMPLE_ROOF_REFS))


@pytest.fixture
def floor_map(sample_document) -> FloorMap:
    return parse_floor_map(sample_document)


@pytest.fixture
def map_files(tmp_path: Path, sample_document, sample_roof_refs):
    """把示例文档写到临时目录，返回 (grid_path, roof_refs_path)"""
    grid_path = tmp_path / "grid.json"
    refs_path = tmp_path / "roof_refs.json"
    grid_path.write_text(json.dumps(sample_document), encoding="utf-8")
    refs_path.write_text(json.dumps(sample_roof_refs), encoding="utf-8")
    return grid_path, refs_path
