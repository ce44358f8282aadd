# =============================================================================
# L5 Decision - Potential Field Navigator
# =============================================================================
# Reactive navigator that blends goal attraction, obstacle repulsion and an
# exploration bias over a square window of grid cells around the agent.
#
# All positions are normalized to [0, 1] x [0, 1]; grid cell of a position
# p is floor(p * dimension).
#
# The navigator is stateful: it remembers the previous output force (for
# smoothing) and the set of visited cells (for exploration). Call
# compute_force() once per decision tick, in order, and
# reset_visited_cells() at the start of every navigation session.
# =============================================================================

import numpy as np
from typing import Iterable, Optional, Sequence, Set, Tuple

from L3_world import OccupancyGrid, CellType
from L4_detection import DetectedObject, mark_detections, mark_goal, mark_agent

from .types import NavigationParameters, PerformanceMetrics
from .config import (
    MIN_FORCE_DISTANCE,
    GOAL_FORCE_OFFSET,
    OBSTACLE_FORCE_OFFSET,
    MIN_NORMALIZE_MAGNITUDE,
    NO_OBSTACLE_DISTANCE
)


class PotentialFieldNavigator:
    """
    Potential field force engine.

    Produces a steering vector whose magnitude never exceeds
    params.velocity_damping_factor.
    """

    def __init__(self, params: Optional[NavigationParameters] = None):
        """
        Initialize the navigator.

        Args:
            params: Force model coefficients (defaults if None). Used as
                given, no range validation is applied.
        """
        self.params = params if params is not None else NavigationParameters()

        self._visited_cells: Set[Tuple[int, int]] = set()
        self._previous_force = np.zeros(2)

    # =========================================================================
    # Session state
    # =========================================================================

    @property
    def visited_cells(self) -> frozenset:
        return frozenset(self._visited_cells)

    @property
    def previous_force(self) -> np.ndarray:
        return self._previous_force.copy()

    def reset_visited_cells(self):
        """Forget visited cells and the previous force (new session)."""
        self._visited_cells.clear()
        self._previous_force = np.zeros(2)

    # =========================================================================
    # Force computation
    # =========================================================================

    @staticmethod
    def to_cell(pos: np.ndarray, grid: OccupancyGrid) -> Tuple[int, int]:
        return (int(np.floor(pos[0] * grid.width)),
                int(np.floor(pos[1] * grid.height)))

    def compute_force(self,
                      agent_pos: Sequence[float],
                      goal_pos: Sequence[float],
                      grid: OccupancyGrid) -> np.ndarray:
        """
        Compute the steering force for one decision tick.

        Args:
            agent_pos: Agent position [x, y] (normalized)
            goal_pos: Goal position [x, y] (normalized)
            grid: Current occupancy grid

        Returns:
            Force vector [fx, fy]; the zero vector once the goal is reached
        """
        p = self.params
        agent = np.asarray(agent_pos, dtype=float)
        goal = np.asarray(goal_pos, dtype=float)

        # Arrival: leave the session state untouched
        if np.linalg.norm(goal - agent) < p.goal_proximity_threshold:
            return np.zeros(2)

        agent_cell = self.to_cell(agent, grid)
        total = self._window_force(agent, goal, grid, agent_cell)

        magnitude = np.linalg.norm(total)
        if magnitude > p.max_obstacle_force:
            total = total * (p.max_obstacle_force / magnitude)

        total = (total * (1.0 - p.path_smoothing_factor) +
                 self._previous_force * p.path_smoothing_factor)

        magnitude = np.linalg.norm(total)
        if magnitude > MIN_NORMALIZE_MAGNITUDE:
            total = total / magnitude

        total = total * p.velocity_damping_factor

        self._previous_force = total.copy()
        self._visited_cells.add(agent_cell)
        return total

    def _window_force(self,
                      agent: np.ndarray,
                      goal: np.ndarray,
                      grid: OccupancyGrid,
                      agent_cell: Tuple[int, int]) -> np.ndarray:
        """Sum of the blended cell forces over the in-bounds window cells."""
        p = self.params
        radius = int(p.force_window_radius)
        cx, cy = agent_cell

        x0, x1 = max(0, cx - radius), min(grid.width, cx + radius + 1)
        y0, y1 = max(0, cy - radius), min(grid.height, cy + radius + 1)
        if x0 >= x1 or y0 >= y1:
            return np.zeros(2)

        xs, ys = np.meshgrid(np.arange(x0, x1), np.arange(y0, y1), indexing='ij')
        cell_pos = np.stack([xs / grid.width, ys / grid.height], axis=-1)
        cells = grid.as_array()[x0:x1, y0:y1]

        goal_force = self._goal_force(cell_pos, goal).sum(axis=(0, 1))

        obstacle_mask = cells == CellType.OBSTACLE
        if obstacle_mask.any():
            influence = p.obstacle_influence_radius / max(grid.width, grid.height)
            obstacle_force = self._obstacle_force(
                cell_pos, agent, obstacle_mask, influence).sum(axis=(0, 1))
        else:
            obstacle_force = np.zeros(2)

        # Every unvisited window cell adds (s, s)
        visited_in_window = sum(1 for (x, y) in self._visited_cells
                                if x0 <= x < x1 and y0 <= y < y1)
        unvisited = cells.size - visited_in_window
        explore_force = np.full(2, p.exploration_strength * unvisited)

        return (p.goal_attraction_strength * goal_force +
                p.obstacle_repulsion_strength * obstacle_force +
                p.exploration_strength * explore_force)

    @staticmethod
    def _goal_force(cell_pos: np.ndarray, goal: np.ndarray) -> np.ndarray:
        """Attraction 1 / (d + 0.2) along the cell-to-goal direction."""
        diff = goal - cell_pos
        dist = np.linalg.norm(diff, axis=-1)
        valid = dist >= MIN_FORCE_DISTANCE
        safe_dist = np.where(valid, dist, 1.0)
        scale = np.where(valid, 1.0 / (safe_dist + GOAL_FORCE_OFFSET) / safe_dist, 0.0)
        return diff * scale[..., None]

    def _obstacle_force(self,
                        cell_pos: np.ndarray,
                        agent: np.ndarray,
                        obstacle_mask: np.ndarray,
                        influence: float) -> np.ndarray:
        """Repulsion 1 / (d_eff^2 + 0.01) along the obstacle-to-agent direction."""
        diff = agent - cell_pos
        dist = np.linalg.norm(diff, axis=-1)
        effective = np.maximum(0.0, dist - self.params.obstacle_safety_distance)
        active = (obstacle_mask &
                  (effective > MIN_FORCE_DISTANCE) &
                  (effective < influence))
        safe_dist = np.where(active, dist, 1.0)
        scale = np.where(active,
                         1.0 / (effective ** 2 + OBSTACLE_FORCE_OFFSET) / safe_dist,
                         0.0)
        return diff * scale[..., None]

    # =========================================================================
    # Grid update
    # =========================================================================

    def update_grid(self,
                    grid: OccupancyGrid,
                    detections: Optional[Iterable[DetectedObject]],
                    goal_screen_pos: Sequence[float]):
        """
        Rebuild the grid from a fresh detection frame.

        Clears the grid, marks obstacle footprints, the goal neighborhood
        and the (always centered) agent cell. An empty or missing detection
        list yields a grid without obstacles.
        """
        grid.clear()
        mark_detections(grid, detections)
        mark_goal(grid, goal_screen_pos)
        mark_agent(grid)

    # =========================================================================
    # Diagnostics
    # =========================================================================

    def calculate_performance_metrics(self,
                                      agent_pos: Sequence[float],
                                      goal_pos: Sequence[float],
                                      grid: OccupancyGrid) -> PerformanceMetrics:
        """
        Score the current navigation state.

        Note: runs compute_force() internally, so it advances the
        previous-force and visited-cell state like a regular tick.
        """
        agent = np.asarray(agent_pos, dtype=float)
        goal = np.asarray(goal_pos, dtype=float)

        distance_to_goal = float(np.linalg.norm(goal - agent))

        obstacle_cells = grid.cells_of(CellType.OBSTACLE)
        obstacle_density = len(obstacle_cells) / float(grid.width * grid.height)

        if len(obstacle_cells) == 0:
            min_obstacle_distance = NO_OBSTACLE_DISTANCE
        else:
            obstacle_pos = obstacle_cells / np.array([grid.width, grid.height], dtype=float)
            min_obstacle_distance = float(
                np.linalg.norm(obstacle_pos - agent, axis=1).min())

        current_force = self.compute_force(agent, goal, grid)
        consistency = 1.0 - abs(float(np.dot(current_force, self._previous_force)))

        return PerformanceMetrics(
            distance_to_goal=distance_to_goal,
            obstacle_density=obstacle_density,
            min_obstacle_distance=min_obstacle_distance,
            force_consistency=max(0.0, consistency)
        )
