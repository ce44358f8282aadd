# =============================================================================
# L4 Detection - Detection to Grid Mapping
# =============================================================================
# Rasterizes detections, the goal and the agent into an occupancy grid.
# =============================================================================

from typing import Iterable, Optional, Tuple

from L3_world import OccupancyGrid, CellType

from .types import DetectedObject, BoundingBox
from .config import (
    OBSTACLE_LABELS,
    OBSTACLE_SAFETY_MARGIN_FRACTION,
    OBSTACLE_MIN_SAFETY_MARGIN_CELLS,
    GOAL_MARK_RADIUS
)


def is_obstacle_label(label: str, vocabulary: Tuple[str, ...] = OBSTACLE_LABELS) -> bool:
    """Case-insensitive substring match against the obstacle vocabulary."""
    lowered = label.lower()
    return any(word in lowered for word in vocabulary)


def safety_margin_cells(grid: OccupancyGrid) -> int:
    return max(OBSTACLE_MIN_SAFETY_MARGIN_CELLS,
               int(grid.width * OBSTACLE_SAFETY_MARGIN_FRACTION))


def bbox_footprint(bbox: BoundingBox, grid: OccupancyGrid) -> Tuple[int, int, int, int]:
    """
    Grid footprint of a bounding box expanded by the safety margin.

    Returns:
        (start_x, start_y, end_x, end_y), inclusive and clipped to the grid
    """
    margin = safety_margin_cells(grid)
    start_x = max(0, int(bbox.x * grid.width) - margin)
    start_y = max(0, int(bbox.y * grid.height) - margin)
    end_x = min(grid.width - 1, int(bbox.right * grid.width) + margin)
    end_y = min(grid.height - 1, int(bbox.bottom * grid.height) + margin)
    return start_x, start_y, end_x, end_y


def mark_detections(grid: OccupancyGrid,
                    detections: Optional[Iterable[DetectedObject]]) -> int:
    """
    Mark the footprint of every obstacle detection.

    Returns:
        Number of detections marked as obstacles
    """
    marked = 0
    for detection in detections or ():
        if not is_obstacle_label(detection.label):
            continue
        start_x, start_y, end_x, end_y = bbox_footprint(detection.bbox, grid)
        grid.fill_rect(start_x, end_x + 1, start_y, end_y + 1, CellType.OBSTACLE)
        marked += 1
    return marked


def mark_goal(grid: OccupancyGrid, goal_pos: Tuple[float, float],
              radius: int = GOAL_MARK_RADIUS):
    goal_x = int(goal_pos[0] * grid.width)
    goal_y = int(goal_pos[1] * grid.height)
    for dx in range(-radius, radius + 1):
        for dy in range(-radius, radius + 1):
            grid.set_cell(goal_x + dx, goal_y + dy, CellType.GOAL)


def mark_agent(grid: OccupancyGrid):
    # The agent is always modeled at the center of the view
    grid.set_cell(grid.width // 2, grid.height // 2, CellType.AGENT)
