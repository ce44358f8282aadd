# =============================================================================
# L3 World Model - Scenario Presets
# =============================================================================
# Fixed synthetic obstacle layouts used to score navigation parameters.
# =============================================================================

from dataclasses import dataclass
from typing import Callable, Dict, List

from .grid import OccupancyGrid, CellType
from .config import (
    SCENARIO_GRID_WIDTH,
    SCENARIO_GRID_HEIGHT,
    BLOCK_X_RANGE,
    BLOCK_Y_RANGE,
    MAZE_COLUMN_SPACING,
    MAZE_TOP_COLUMN_START_X,
    MAZE_TOP_Y_RANGE,
    MAZE_BOTTOM_COLUMN_START_X,
    MAZE_BOTTOM_Y_RANGE,
    BAND_1_X_RANGE,
    BAND_2_X_RANGE,
    BAND_Y_RANGE
)


@dataclass(frozen=True)
class TestScenario:
    """Catalog entry for a synthetic scenario."""
    __test__ = False  # not a pytest class

    name: str
    difficulty: int
    description: str


class ScenarioPresets:
    """Presets for the synthetic test scenarios."""

    @staticmethod
    def scenario_simple_path(grid: OccupancyGrid):
        """Open corridor, no obstacles."""
        grid.clear()
        return {'type': 'simple_path', 'num_obstacle_cells': 0}

    @staticmethod
    def scenario_obstacle_avoidance(grid: OccupancyGrid):
        """Single rectangular block in the middle of the grid."""
        grid.clear()
        grid.fill_rect(BLOCK_X_RANGE[0], BLOCK_X_RANGE[1],
                       BLOCK_Y_RANGE[0], BLOCK_Y_RANGE[1],
                       CellType.OBSTACLE)
        return {'type': 'obstacle_avoidance',
                'num_obstacle_cells': grid.count(CellType.OBSTACLE)}

    @staticmethod
    def scenario_complex_maze(grid: OccupancyGrid):
        """Two rows of one-cell wall columns with gaps between them."""
        grid.clear()
        for x in range(MAZE_TOP_COLUMN_START_X, grid.width, MAZE_COLUMN_SPACING):
            grid.fill_rect(x, x + 1, MAZE_TOP_Y_RANGE[0], MAZE_TOP_Y_RANGE[1],
                           CellType.OBSTACLE)
        for x in range(MAZE_BOTTOM_COLUMN_START_X, grid.width, MAZE_COLUMN_SPACING):
            grid.fill_rect(x, x + 1, MAZE_BOTTOM_Y_RANGE[0], MAZE_BOTTOM_Y_RANGE[1],
                           CellType.OBSTACLE)
        return {'type': 'complex_maze',
                'num_obstacle_cells': grid.count(CellType.OBSTACLE)}

    @staticmethod
    def scenario_dynamic_obstacles(grid: OccupancyGrid):
        """Two parallel vertical obstacle bands (a frozen dynamic scene)."""
        grid.clear()
        for x_range in (BAND_1_X_RANGE, BAND_2_X_RANGE):
            grid.fill_rect(x_range[0], x_range[1], BAND_Y_RANGE[0], BAND_Y_RANGE[1],
                           CellType.OBSTACLE)
        return {'type': 'dynamic_obstacles',
                'num_obstacle_cells': grid.count(CellType.OBSTACLE)}


SCENARIO_CATALOG: List[TestScenario] = [
    TestScenario('SimplePath', 1, 'Straight path without obstacles'),
    TestScenario('ObstacleAvoidance', 2, 'Single block between start and goal'),
    TestScenario('ComplexMaze', 3, 'Staggered wall columns'),
    TestScenario('DynamicObstacles', 4, 'Two vertical obstacle bands'),
]

_BUILDERS: Dict[str, Callable[[OccupancyGrid], dict]] = {
    'SimplePath': ScenarioPresets.scenario_simple_path,
    'ObstacleAvoidance': ScenarioPresets.scenario_obstacle_avoidance,
    'ComplexMaze': ScenarioPresets.scenario_complex_maze,
    'DynamicObstacles': ScenarioPresets.scenario_dynamic_obstacles,
}


def build_scenario_grid(scenario: TestScenario,
                        width: int = SCENARIO_GRID_WIDTH,
                        height: int = SCENARIO_GRID_HEIGHT) -> OccupancyGrid:
    """Allocate a grid and lay out the obstacles of `scenario`."""
    try:
        builder = _BUILDERS[scenario.name]
    except KeyError:
        raise ValueError(f"Unknown scenario: {scenario.name}") from None
    grid = OccupancyGrid(width, height)
    builder(grid)
    return grid
