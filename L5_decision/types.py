# =============================================================================
# L5 Decision - Types and Data Structures
# =============================================================================
# Navigation parameters, performance metrics and movement commands.
# =============================================================================

from dataclasses import dataclass, fields
from enum import Enum
from typing import Dict, List, Tuple

from .config import (
    GOAL_ATTRACTION_STRENGTH,
    OBSTACLE_REPULSION_STRENGTH,
    OBSTACLE_INFLUENCE_RADIUS,
    EXPLORATION_STRENGTH,
    PATH_SMOOTHING_FACTOR,
    MAX_OBSTACLE_FORCE,
    GOAL_PROXIMITY_THRESHOLD,
    OBSTACLE_SAFETY_DISTANCE,
    VELOCITY_DAMPING_FACTOR,
    FORCE_WINDOW_RADIUS,
    PARAMETER_RANGES,
    SCORE_WEIGHT_DISTANCE,
    SCORE_WEIGHT_SAFETY,
    SCORE_WEIGHT_CONSISTENCY,
    SCORE_WEIGHT_OBSTACLE,
    DISTANCE_SCORE_SCALE,
    SAFETY_SCORE_SCALE,
    CONSISTENCY_SCORE_SCALE,
    OBSTACLE_SCORE_SCALE
)


# =============================================================================
# Navigation Enumerations
# =============================================================================

class MovementDirection(Enum):
    """Directional command derived from a steering force."""
    IDLE = "IDLE"
    FORWARD_RIGHT = "FORWARD_RIGHT"   # angle in (-45, 45]
    FORWARD_LEFT = "FORWARD_LEFT"     # angle in (45, 135]
    BACK_RIGHT = "BACK_RIGHT"         # angle in (-135, -45]
    BACK_LEFT = "BACK_LEFT"           # everything else


# =============================================================================
# Navigation Parameters
# =============================================================================

@dataclass
class NavigationParameters:
    """
    Coefficients of the potential field force model.

    The navigator uses them as given; callers that need range checks use
    out_of_range() before handing them over.
    """
    goal_attraction_strength: float = GOAL_ATTRACTION_STRENGTH
    obstacle_repulsion_strength: float = OBSTACLE_REPULSION_STRENGTH
    obstacle_influence_radius: float = OBSTACLE_INFLUENCE_RADIUS
    exploration_strength: float = EXPLORATION_STRENGTH
    path_smoothing_factor: float = PATH_SMOOTHING_FACTOR
    max_obstacle_force: float = MAX_OBSTACLE_FORCE
    goal_proximity_threshold: float = GOAL_PROXIMITY_THRESHOLD
    obstacle_safety_distance: float = OBSTACLE_SAFETY_DISTANCE
    velocity_damping_factor: float = VELOCITY_DAMPING_FACTOR
    force_window_radius: int = FORCE_WINDOW_RADIUS

    def to_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def out_of_range(self, ranges: Dict[str, Tuple[float, float]] = None) -> List[str]:
        """Names of the coefficients lying outside their declared range."""
        ranges = PARAMETER_RANGES if ranges is None else ranges
        violations = []
        for name, (low, high) in ranges.items():
            value = getattr(self, name)
            if not low <= value <= high:
                violations.append(name)
        return violations


# =============================================================================
# Performance Metrics
# =============================================================================

@dataclass
class PerformanceMetrics:
    """Diagnostics of a single navigation step."""
    distance_to_goal: float
    obstacle_density: float             # Fraction of obstacle cells
    min_obstacle_distance: float        # 1.0 when there is no obstacle
    force_consistency: float            # 0 = stable direction, 1 = unstable

    @property
    def distance_score(self) -> float:
        return max(0.0, 100.0 - self.distance_to_goal * DISTANCE_SCORE_SCALE)

    @property
    def safety_score(self) -> float:
        return max(0.0, self.min_obstacle_distance * SAFETY_SCORE_SCALE)

    @property
    def consistency_score(self) -> float:
        return max(0.0, self.force_consistency * CONSISTENCY_SCORE_SCALE)

    @property
    def obstacle_score(self) -> float:
        return max(0.0, 100.0 - self.obstacle_density * OBSTACLE_SCORE_SCALE)

    @property
    def overall_score(self) -> float:
        """Weighted composite score (0-100 for typical inputs)."""
        return (SCORE_WEIGHT_DISTANCE * self.distance_score +
                SCORE_WEIGHT_SAFETY * self.safety_score +
                SCORE_WEIGHT_CONSISTENCY * self.consistency_score +
                SCORE_WEIGHT_OBSTACLE * self.obstacle_score)
