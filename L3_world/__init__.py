# =============================================================================
# L3 World Model Package
# =============================================================================
# World representation layer for potential field navigation.
#
# Responsibilities:
# - Occupancy grid (Free / Obstacle / Goal / Agent cells)
# - Synthetic scenario layouts for parameter evaluation
#
# Usage:
#   from L3_world import OccupancyGrid, CellType, ScenarioPresets
#   grid = OccupancyGrid(80, 60)
#   ScenarioPresets.scenario_obstacle_avoidance(grid)
#   grid.get_cell(40, 30)   # CellType.OBSTACLE
# =============================================================================

from .grid import OccupancyGrid, CellType
from .scenarios import (
    TestScenario,
    ScenarioPresets,
    SCENARIO_CATALOG,
    build_scenario_grid
)

# Re-export config for convenience
from .config import (
    DEFAULT_GRID_WIDTH,
    DEFAULT_GRID_HEIGHT,
    SCENARIO_GRID_WIDTH,
    SCENARIO_GRID_HEIGHT,
    SCENARIO_START_POSITION,
    SCENARIO_GOAL_POSITION
)

__all__ = [
    # Grid
    'OccupancyGrid',
    'CellType',

    # Scenarios
    'TestScenario',
    'ScenarioPresets',
    'SCENARIO_CATALOG',
    'build_scenario_grid',

    # Config exports
    'DEFAULT_GRID_WIDTH',
    'DEFAULT_GRID_HEIGHT',
    'SCENARIO_GRID_WIDTH',
    'SCENARIO_GRID_HEIGHT',
    'SCENARIO_START_POSITION',
    'SCENARIO_GOAL_POSITION',
]

__version__ = '2.0.0'
