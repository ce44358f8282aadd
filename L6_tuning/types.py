# =============================================================================
# L6 Tuning - Types and Data Structures
# =============================================================================
# Search space entries and optimization result records.
# =============================================================================

from dataclasses import dataclass, field
from typing import Dict, List

from L3_world import TestScenario
from L5_decision import PerformanceMetrics


@dataclass
class OptimizationParameter:
    """Searched coefficient with its declared range and mutation step."""
    name: str
    min_value: float
    max_value: float
    step: float

    def __post_init__(self):
        if self.min_value > self.max_value:
            raise ValueError(
                f"Parameter {self.name}: min {self.min_value} > max {self.max_value}")
        if self.step < 0:
            raise ValueError(f"Parameter {self.name}: negative step {self.step}")


@dataclass
class ScenarioResult:
    """Outcome of one scenario run."""
    scenario_name: str
    score: float                        # Mean composite score over the steps
    execution_time: float               # Mean wall-clock time per step (ms)
    metrics: List[PerformanceMetrics] = field(default_factory=list)
    trajectory: List[tuple] = field(default_factory=list)


@dataclass
class ParameterCombinationResult:
    """One evaluated candidate."""
    generation: int
    parameters: Dict[str, float]
    scenario_results: List[ScenarioResult]
    average_score: float                # Fitness
    execution_time: float               # Mean per-scenario step time (ms)


@dataclass
class OptimizationResult:
    """Final output of an optimization run."""
    best_parameters: Dict[str, float]
    best_score: float
    all_results: List[ParameterCombinationResult]
    test_scenarios: List[TestScenario]
    generations: int = 0
