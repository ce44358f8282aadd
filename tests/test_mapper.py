import pytest

from L3_world import OccupancyGrid, CellType
from L4_detection import (
    BoundingBox,
    DetectedObject,
    is_obstacle_label,
    safety_margin_cells,
    bbox_footprint,
    mark_detections,
    mark_goal,
    mark_agent
)


@pytest.mark.parametrize("label, expected", [
    ("Stone Wall", True),
    ("ENEMY archer", True),
    ("road block", True),
    ("treasure chest", False),
    ("door", False),
])
def test_obstacle_vocabulary(label, expected):
    assert is_obstacle_label(label) is expected


def test_safety_margin(empty_grid):
    assert safety_margin_cells(empty_grid) == 1
    assert safety_margin_cells(OccupancyGrid(200, 100)) == 4
    assert safety_margin_cells(OccupancyGrid(10, 10)) == 1


def test_footprint_includes_margin(empty_grid):
    bbox = BoundingBox(0.25, 0.25, 0.125, 0.25)
    assert bbox_footprint(bbox, empty_grid) == (19, 14, 31, 31)


def test_footprint_clipped_at_edges(empty_grid):
    bbox = BoundingBox(0.0, 0.0, 1.5, 1.5)
    assert bbox_footprint(bbox, empty_grid) == (0, 0, 79, 59)


def test_mark_detections_fills_footprint(empty_grid):
    detections = [DetectedObject(BoundingBox(0.25, 0.25, 0.125, 0.25), "Stone Wall")]
    assert mark_detections(empty_grid, detections) == 1
    assert empty_grid.count(CellType.OBSTACLE) == 13 * 18
    assert empty_grid.get_cell(19, 14) == CellType.OBSTACLE
    assert empty_grid.get_cell(31, 31) == CellType.OBSTACLE
    assert empty_grid.get_cell(32, 20) == CellType.FREE
    assert empty_grid.get_cell(18, 20) == CellType.FREE


def test_mark_detections_ignores_other_labels(empty_grid):
    detections = [DetectedObject(BoundingBox(0.25, 0.25, 0.125, 0.25), "door")]
    assert mark_detections(empty_grid, detections) == 0
    assert empty_grid.count(CellType.OBSTACLE) == 0


def test_mark_detections_accepts_none(empty_grid):
    assert mark_detections(empty_grid, None) == 0


def test_mark_goal_radius(empty_grid):
    mark_goal(empty_grid, (0.5, 0.5))
    assert empty_grid.count(CellType.GOAL) == 25
    assert empty_grid.get_cell(42, 32) == CellType.GOAL
    assert empty_grid.get_cell(43, 32) == CellType.FREE


def test_mark_goal_near_corner(empty_grid):
    mark_goal(empty_grid, (0.0, 0.0))
    assert empty_grid.count(CellType.GOAL) == 9


def test_mark_agent_center(empty_grid):
    mark_agent(empty_grid)
    assert empty_grid.get_cell(40, 30) == CellType.AGENT
    assert empty_grid.count(CellType.AGENT) == 1
