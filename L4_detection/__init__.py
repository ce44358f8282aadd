# =============================================================================
# L4 Detection Package
# =============================================================================
# Bridge between the external detector and the occupancy grid.
#
# Responsibilities:
# - Detection data structures (normalized bounding boxes, labels)
# - Detector / input actuator contracts
# - Obstacle vocabulary matching and grid rasterization
#
# Usage:
#   from L4_detection import DetectedObject, BoundingBox, mark_detections
#   det = DetectedObject(BoundingBox(0.4, 0.4, 0.1, 0.1), "stone wall", 0.8)
#   mark_detections(grid, [det])
# =============================================================================

# Types
from .types import (
    BoundingBox,
    DetectedObject
)

# Interfaces
from .interfaces import (
    Detector,
    InputActuator
)

# Grid mapping
from .mapper import (
    is_obstacle_label,
    safety_margin_cells,
    bbox_footprint,
    mark_detections,
    mark_goal,
    mark_agent
)

from .config import OBSTACLE_LABELS, DEFAULT_CONFIDENCE_THRESHOLD

__all__ = [
    # Types
    'BoundingBox',
    'DetectedObject',

    # Interfaces
    'Detector',
    'InputActuator',

    # Grid mapping
    'is_obstacle_label',
    'safety_margin_cells',
    'bbox_footprint',
    'mark_detections',
    'mark_goal',
    'mark_agent',

    # Config exports
    'OBSTACLE_LABELS',
    'DEFAULT_CONFIDENCE_THRESHOLD',
]

__version__ = '2.0.0'
