import numpy as np
import pytest

from L3_world import CellType, SCENARIO_CATALOG, build_scenario_grid
from L5_decision import NavigationParameters, PerformanceMetrics, PARAMETER_RANGES


def test_overall_score_weights():
    metrics = PerformanceMetrics(distance_to_goal=0.1,
                                 obstacle_density=0.05,
                                 min_obstacle_distance=0.2,
                                 force_consistency=0.5)
    assert metrics.distance_score == pytest.approx(80.0)
    assert metrics.safety_score == pytest.approx(40.0)
    assert metrics.consistency_score == pytest.approx(25.0)
    assert metrics.obstacle_score == pytest.approx(90.0)
    assert metrics.overall_score == pytest.approx(58.0)


def test_sub_scores_never_negative():
    metrics = PerformanceMetrics(distance_to_goal=1.0,
                                 obstacle_density=0.9,
                                 min_obstacle_distance=0.0,
                                 force_consistency=0.0)
    assert metrics.distance_score == 0.0
    assert metrics.obstacle_score == 0.0
    assert metrics.overall_score == 0.0


def test_metrics_without_obstacles(navigator, empty_grid):
    metrics = navigator.calculate_performance_metrics((0.1, 0.5), (0.9, 0.5), empty_grid)
    assert metrics.distance_to_goal == pytest.approx(0.8)
    assert metrics.obstacle_density == 0.0
    assert metrics.min_obstacle_distance == 1.0


def test_metrics_with_obstacles(navigator):
    grid = build_scenario_grid(SCENARIO_CATALOG[1])
    metrics = navigator.calculate_performance_metrics((0.5, 0.7), (0.9, 0.5), grid)
    assert metrics.obstacle_density == pytest.approx(100 / 4800)
    # nearest block cell is (40, 34) -> (0.5, 34/60)
    assert metrics.min_obstacle_distance == pytest.approx(0.7 - 34 / 60)


def test_consistency_uses_fresh_force(navigator, empty_grid):
    metrics = navigator.calculate_performance_metrics((0.1, 0.5), (0.9, 0.5), empty_grid)
    force = navigator.previous_force
    assert metrics.force_consistency == pytest.approx(max(0.0, 1.0 - float(np.dot(force, force))))


def test_metrics_advance_session(mocker, navigator, empty_grid):
    spy = mocker.spy(navigator, 'compute_force')
    navigator.calculate_performance_metrics((0.1, 0.5), (0.9, 0.5), empty_grid)
    assert spy.call_count == 1
    assert len(navigator.visited_cells) == 1


def test_default_parameters_in_range():
    assert NavigationParameters().out_of_range() == []


def test_out_of_range_reports_names():
    params = NavigationParameters(goal_attraction_strength=5.0, force_window_radius=2)
    assert params.out_of_range() == ['goal_attraction_strength', 'force_window_radius']
    assert set(PARAMETER_RANGES) == set(params.to_dict())
