# =============================================================================
# L5 Decision Package
# =============================================================================
# Potential field navigation layer.
#
# Responsibilities:
# - Force computation (goal attraction, obstacle repulsion, exploration)
# - Smoothing, clamping and damping of the steering force
# - Occupancy grid update from detections
# - Navigation diagnostics (performance metrics, composite score)
# - Navigation tick (detector -> grid -> force -> actuator)
#
# Usage:
#   from L5_decision import PotentialFieldNavigator, NavigationParameters
#   nav = PotentialFieldNavigator(NavigationParameters())
#   nav.reset_visited_cells()
#   force = nav.compute_force((0.1, 0.5), (0.9, 0.5), grid)
#
# Note: Grid and scenarios live in L3_world, detector types in L4_detection.
# =============================================================================

# Types and data structures
from .types import (
    MovementDirection,
    NavigationParameters,
    PerformanceMetrics
)

# Core components
from .navigator import PotentialFieldNavigator

# Complete layer
from .layer import NavigationLayer, force_to_direction

from .config import PARAMETER_RANGES

__all__ = [
    # Types
    'MovementDirection',
    'NavigationParameters',
    'PerformanceMetrics',

    # Navigator
    'PotentialFieldNavigator',

    # Complete layer
    'NavigationLayer',
    'force_to_direction',

    # Config exports
    'PARAMETER_RANGES',
]

__version__ = '2.0.0'
