import numpy as np
import pytest

from L3_world import SCENARIO_CATALOG, build_scenario_grid
from L5_decision import NavigationParameters, PotentialFieldNavigator
from L6_tuning import ScenarioHarness


@pytest.fixture
def harness():
    return ScenarioHarness()


def test_run_scenario_shape(harness, navigator):
    result = harness.run_scenario(navigator, SCENARIO_CATALOG[0])
    assert result.scenario_name == 'SimplePath'
    assert len(result.metrics) == 10
    assert len(result.trajectory) == 11
    assert result.trajectory[0] == (0.1, 0.5)
    assert result.execution_time >= 0.0


def test_score_is_mean_of_step_scores(harness, navigator):
    result = harness.run_scenario(navigator, SCENARIO_CATALOG[1])
    assert result.score == pytest.approx(np.mean([m.overall_score for m in result.metrics]))


def test_trajectory_stays_in_unit_square(harness, navigator):
    for result in harness.run_all(navigator):
        positions = np.array(result.trajectory)
        assert positions.min() >= 0.0
        assert positions.max() <= 1.0


def test_agent_moves_toward_goal(harness, navigator):
    result = harness.run_scenario(navigator, SCENARIO_CATALOG[0])
    assert result.trajectory[-1][0] > result.trajectory[0][0]
    assert result.metrics[-1].distance_to_goal < result.metrics[0].distance_to_goal


def test_run_all_covers_catalog(harness, navigator):
    results = harness.run_all(navigator)
    assert [r.scenario_name for r in results] == [s.name for s in SCENARIO_CATALOG]


def drive_without_reset(navigator, steps=10):
    """One navigator through every scenario back to back, no session reset."""
    scores = []
    for scenario in SCENARIO_CATALOG:
        grid = build_scenario_grid(scenario)
        agent, goal = np.array([0.1, 0.5]), np.array([0.9, 0.5])
        step_scores = []
        for _ in range(steps):
            step_scores.append(
                navigator.calculate_performance_metrics(agent, goal, grid).overall_score)
            force = navigator.compute_force(agent, goal, grid)
            agent = np.clip(agent + force * 0.05, 0.0, 1.0)
        scores.append(np.mean(step_scores))
    return scores


def test_session_carries_across_scenarios(mocker, harness, navigator):
    spy = mocker.spy(navigator, 'reset_visited_cells')
    results = harness.run_all(navigator)
    assert spy.call_count == 0
    assert len(navigator.visited_cells) >= 10

    expected = drive_without_reset(PotentialFieldNavigator())
    assert np.allclose([r.score for r in results], expected)


def test_optional_reset_between_scenarios(mocker, navigator):
    harness = ScenarioHarness(reset_between_scenarios=True)
    spy = mocker.spy(navigator, 'reset_visited_cells')
    results = harness.run_all(navigator)
    assert spy.call_count == len(SCENARIO_CATALOG)

    isolated = [ScenarioHarness().run_scenario(PotentialFieldNavigator(), scenario).score
                for scenario in SCENARIO_CATALOG]
    assert np.allclose([r.score for r in results], isolated)


def test_scores_are_deterministic(harness):
    params = NavigationParameters(goal_attraction_strength=1.5)
    first = harness.run_all(PotentialFieldNavigator(params))
    second = harness.run_all(PotentialFieldNavigator(params))
    assert [r.score for r in first] == [r.score for r in second]


def test_custom_steps():
    harness = ScenarioHarness(scenarios=SCENARIO_CATALOG[:1], steps=3)
    result = harness.run_all(PotentialFieldNavigator())[0]
    assert len(result.metrics) == 3
