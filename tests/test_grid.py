import numpy as np
import pytest

from L3_world import (
    OccupancyGrid,
    CellType,
    ScenarioPresets,
    SCENARIO_CATALOG,
    TestScenario,
    build_scenario_grid
)


def test_grid_starts_free(empty_grid):
    assert empty_grid.count(CellType.FREE) == 80 * 60
    assert empty_grid.shape == (80, 60)


def test_grid_invalid_size():
    with pytest.raises(ValueError):
        OccupancyGrid(0, 10)


def test_out_of_bounds_read_is_obstacle(empty_grid):
    """Unknown space is never reported as free."""
    assert empty_grid.get_cell(-1, 0) == CellType.OBSTACLE
    assert empty_grid.get_cell(0, -1) == CellType.OBSTACLE
    assert empty_grid.get_cell(80, 10) == CellType.OBSTACLE
    assert empty_grid.get_cell(10, 60) == CellType.OBSTACLE


def test_out_of_bounds_write_is_ignored(empty_grid):
    before = empty_grid.as_array()
    empty_grid.set_cell(-1, 5, CellType.OBSTACLE)
    empty_grid.set_cell(80, 5, CellType.OBSTACLE)
    empty_grid.set_cell(5, 60, CellType.GOAL)
    assert np.array_equal(before, empty_grid.as_array())


def test_set_get_and_clear(empty_grid):
    empty_grid.set_cell(3, 4, CellType.GOAL)
    empty_grid.set_cell(5, 6, CellType.OBSTACLE)
    assert empty_grid.get_cell(3, 4) == CellType.GOAL
    assert empty_grid.get_cell(5, 6) == CellType.OBSTACLE

    empty_grid.clear()
    assert empty_grid.count(CellType.FREE) == 80 * 60


def test_in_bounds(empty_grid):
    assert empty_grid.in_bounds(0, 0)
    assert empty_grid.in_bounds(79, 59)
    assert not empty_grid.in_bounds(80, 0)
    assert not empty_grid.in_bounds(0, 60)
    assert not empty_grid.in_bounds(-1, -1)


def test_fill_rect_is_clipped(empty_grid):
    empty_grid.fill_rect(75, 90, -5, 3, CellType.OBSTACLE)
    # x 75..79, y 0..2
    assert empty_grid.count(CellType.OBSTACLE) == 5 * 3
    cells = empty_grid.cells_of(CellType.OBSTACLE)
    assert cells[:, 0].min() == 75 and cells[:, 0].max() == 79
    assert cells[:, 1].min() == 0 and cells[:, 1].max() == 2


def test_fill_rect_fully_outside(empty_grid):
    empty_grid.fill_rect(100, 120, 0, 10, CellType.OBSTACLE)
    assert empty_grid.count(CellType.OBSTACLE) == 0


def test_grid_equality(empty_grid):
    other = OccupancyGrid(80, 60)
    assert empty_grid == other
    other.set_cell(1, 1, CellType.OBSTACLE)
    assert empty_grid != other


# Scenario layouts
def test_catalog_order_and_difficulty():
    assert [s.name for s in SCENARIO_CATALOG] == [
        'SimplePath', 'ObstacleAvoidance', 'ComplexMaze', 'DynamicObstacles']
    assert [s.difficulty for s in SCENARIO_CATALOG] == [1, 2, 3, 4]


def test_simple_path_has_no_obstacles():
    grid = build_scenario_grid(SCENARIO_CATALOG[0])
    assert grid.count(CellType.OBSTACLE) == 0


def test_obstacle_avoidance_block():
    grid = build_scenario_grid(SCENARIO_CATALOG[1])
    assert grid.count(CellType.OBSTACLE) == 100
    assert grid.get_cell(40, 30) == CellType.OBSTACLE
    assert grid.get_cell(34, 30) == CellType.FREE
    assert grid.get_cell(45, 30) == CellType.FREE


def test_complex_maze_columns():
    grid = build_scenario_grid(SCENARIO_CATALOG[2])
    # 8 top columns and 8 bottom columns, 20 cells each
    assert grid.count(CellType.OBSTACLE) == 320
    assert grid.get_cell(10, 5) == CellType.OBSTACLE
    assert grid.get_cell(15, 50) == CellType.OBSTACLE
    assert grid.get_cell(10, 30) == CellType.FREE


def test_dynamic_obstacles_bands():
    grid = build_scenario_grid(SCENARIO_CATALOG[3])
    assert grid.count(CellType.OBSTACLE) == 2 * 10 * 40
    assert grid.get_cell(25, 30) == CellType.OBSTACLE
    assert grid.get_cell(55, 30) == CellType.OBSTACLE
    assert grid.get_cell(40, 30) == CellType.FREE


def test_preset_clears_previous_layout(empty_grid):
    ScenarioPresets.scenario_dynamic_obstacles(empty_grid)
    info = ScenarioPresets.scenario_obstacle_avoidance(empty_grid)
    assert info['num_obstacle_cells'] == 100


def test_unknown_scenario():
    with pytest.raises(ValueError):
        build_scenario_grid(TestScenario('Nowhere', 9, 'missing'))
