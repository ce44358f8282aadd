# =============================================================================
# L6 Tuning - Scenario Harness
# =============================================================================
# Drives a navigator through the synthetic scenarios and scores the run.
# =============================================================================

import time
import numpy as np
from typing import List, Optional, Sequence

from L3_world import (
    TestScenario,
    SCENARIO_CATALOG,
    SCENARIO_START_POSITION,
    SCENARIO_GOAL_POSITION,
    build_scenario_grid
)
from L5_decision import PotentialFieldNavigator

from .types import ScenarioResult
from .config import HARNESS_STEPS, HARNESS_STEP_SCALE, HARNESS_RESET_BETWEEN_SCENARIOS


class ScenarioHarness:
    """
    Fixed-step simulation of the navigator on synthetic grids.

    Every step scores the state (which also advances the navigator),
    computes the force and moves the agent by force * step_scale,
    clamped to [0, 1]^2. Apart from the timing, runs are deterministic.

    One navigator runs the scenarios back to back: visited cells and the
    previous force carry over from one scenario into the next unless
    reset_between_scenarios is set.
    """

    def __init__(self,
                 scenarios: Optional[Sequence[TestScenario]] = None,
                 steps: int = HARNESS_STEPS,
                 step_scale: float = HARNESS_STEP_SCALE,
                 start_pos: Sequence[float] = SCENARIO_START_POSITION,
                 goal_pos: Sequence[float] = SCENARIO_GOAL_POSITION,
                 reset_between_scenarios: bool = HARNESS_RESET_BETWEEN_SCENARIOS):
        self.scenarios: List[TestScenario] = list(
            scenarios if scenarios is not None else SCENARIO_CATALOG)
        self.steps = steps
        self.step_scale = step_scale
        self.start_pos = np.asarray(start_pos, dtype=float)
        self.goal_pos = np.asarray(goal_pos, dtype=float)
        self.reset_between_scenarios = reset_between_scenarios

    def run_scenario(self, navigator: PotentialFieldNavigator,
                     scenario: TestScenario) -> ScenarioResult:
        """Run one scenario, continuing the navigator's current session."""
        grid = build_scenario_grid(scenario)
        if self.reset_between_scenarios:
            navigator.reset_visited_cells()

        agent_pos = self.start_pos.copy()
        metrics_list = []
        trajectory = [tuple(agent_pos)]

        start = time.perf_counter()
        for _ in range(self.steps):
            metrics_list.append(
                navigator.calculate_performance_metrics(agent_pos, self.goal_pos, grid))

            force = navigator.compute_force(agent_pos, self.goal_pos, grid)
            agent_pos = np.clip(agent_pos + force * self.step_scale, 0.0, 1.0)
            trajectory.append(tuple(agent_pos))
        elapsed_ms = (time.perf_counter() - start) * 1000.0

        return ScenarioResult(
            scenario_name=scenario.name,
            score=float(np.mean([m.overall_score for m in metrics_list])) if metrics_list else 0.0,
            execution_time=elapsed_ms / max(1, self.steps),
            metrics=metrics_list,
            trajectory=trajectory
        )

    def run_all(self, navigator: PotentialFieldNavigator) -> List[ScenarioResult]:
        return [self.run_scenario(navigator, scenario) for scenario in self.scenarios]
