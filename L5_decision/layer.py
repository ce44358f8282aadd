# =============================================================================
# L5 Decision - Navigation Layer
# =============================================================================
# One navigation tick as performed by the external control loop:
# - L4 detector output (every N ticks) rebuilds the occupancy grid
# - the potential field navigator computes the steering force
# - the input actuator turns the force into directional commands
# =============================================================================

import logging
import threading
import numpy as np
from typing import Any, Callable, List, Optional, Sequence

from L3_world import OccupancyGrid
from L4_detection import (
    Detector,
    InputActuator,
    DetectedObject,
    DEFAULT_CONFIDENCE_THRESHOLD
)

from .navigator import PotentialFieldNavigator
from .types import NavigationParameters, MovementDirection
from .config import (
    NAV_GRID_WIDTH,
    NAV_GRID_HEIGHT,
    NAV_DETECTION_INTERVAL,
    NAV_TICK_INTERVAL,
    NAV_AGENT_POSITION,
    NAV_OBSTACLE_PROMPT,
    NAV_GOAL_PROMPT,
    NAV_IDLE_FORCE_THRESHOLD
)

logger = logging.getLogger(__name__)


def force_to_direction(force: Sequence[float],
                       idle_threshold: float = NAV_IDLE_FORCE_THRESHOLD) -> MovementDirection:
    """Quantize a steering force into one of four diagonal directions."""
    fx, fy = float(force[0]), float(force[1])
    if abs(fx) < idle_threshold and abs(fy) < idle_threshold:
        return MovementDirection.IDLE

    degrees = np.degrees(np.arctan2(fy, fx))
    if -45.0 < degrees <= 45.0:
        return MovementDirection.FORWARD_RIGHT
    elif 45.0 < degrees <= 135.0:
        return MovementDirection.FORWARD_LEFT
    elif -135.0 < degrees <= -45.0:
        return MovementDirection.BACK_RIGHT
    return MovementDirection.BACK_LEFT


class NavigationLayer:
    """
    Complete navigation layer with potential field navigation.

    Integrates:
    - an external Detector (obstacle and goal prompts)
    - PotentialFieldNavigator with its own occupancy grid
    - an external InputActuator
    """

    def __init__(self,
                 detector: Optional[Detector],
                 actuator: InputActuator,
                 params: Optional[NavigationParameters] = None,
                 capture: Optional[Callable[[], Any]] = None,
                 grid_width: int = NAV_GRID_WIDTH,
                 grid_height: int = NAV_GRID_HEIGHT,
                 detection_interval: int = NAV_DETECTION_INTERVAL,
                 tick_interval: float = NAV_TICK_INTERVAL,
                 confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD,
                 obstacle_prompt: str = NAV_OBSTACLE_PROMPT,
                 goal_prompt: str = NAV_GOAL_PROMPT):
        """
        Initialize navigation layer.

        Args:
            detector: Vision detector, None to navigate on an empty grid
            actuator: Receives the force of every tick
            params: Force model coefficients
            capture: Returns the current scene handed to the detector
            grid_width: Occupancy grid width (cells)
            grid_height: Occupancy grid height (cells)
            detection_interval: Run detection every N ticks
            tick_interval: Seconds waited between ticks in run()
            confidence_threshold: Passed through to the detector
            obstacle_prompt: Label prompt for obstacles
            goal_prompt: Label prompt for goals
        """
        if detection_interval < 1:
            raise ValueError(f"detection_interval must be >= 1, got {detection_interval}")
        self.detector = detector
        self.actuator = actuator
        self.capture = capture
        self.navigator = PotentialFieldNavigator(params)
        self.grid = OccupancyGrid(grid_width, grid_height)
        self.detection_interval = detection_interval
        self.tick_interval = tick_interval
        self.confidence_threshold = confidence_threshold
        self.obstacle_prompt = obstacle_prompt
        self.goal_prompt = goal_prompt

        self.frame_count = 0
        self.last_detections: List[DetectedObject] = []
        self.last_force = np.zeros(2)

    def reset(self):
        """Start a new navigation session."""
        self.navigator.reset_visited_cells()
        self.grid.clear()
        self.frame_count = 0
        self.last_detections = []
        self.last_force = np.zeros(2)

    def set_grid_size(self, width: int, height: int):
        self.grid = OccupancyGrid(width, height)

    def detect_objects(self) -> List[DetectedObject]:
        """
        Query the detector with the obstacle and goal prompts.

        A failing detector yields no detections for this cycle.
        """
        if self.detector is None:
            return []
        scene = self.capture() if self.capture is not None else None
        detections: List[DetectedObject] = []
        try:
            detections.extend(self.detector.detect(
                scene, self.obstacle_prompt, self.confidence_threshold) or [])
            detections.extend(self.detector.detect(
                scene, self.goal_prompt, self.confidence_threshold) or [])
        except Exception as e:
            logger.warning("Detection failed: %s", e)
        return detections

    def step(self, goal_screen_pos: Sequence[float]) -> np.ndarray:
        """
        Execute one navigation tick.

        Returns:
            Force handed to the actuator
        """
        self.frame_count += 1

        if self.frame_count % self.detection_interval == 0:
            self.last_detections = self.detect_objects()
            self.navigator.update_grid(self.grid, self.last_detections, goal_screen_pos)
            logger.debug("Detected %d objects", len(self.last_detections))

        force = self.navigator.compute_force(NAV_AGENT_POSITION, goal_screen_pos, self.grid)
        self.last_force = force
        self.actuator.apply(force)
        return force

    def run(self,
            goal_screen_pos: Sequence[float],
            stop_event: Optional[threading.Event] = None,
            max_ticks: Optional[int] = None) -> int:
        """
        Navigate until cancelled.

        Cancellation is cooperative: the stop event is checked between
        ticks, never during a force computation.

        Args:
            goal_screen_pos: Goal position (normalized screen coordinates)
            stop_event: Set to stop the loop
            max_ticks: Optional tick limit

        Returns:
            Number of ticks executed
        """
        stop_event = stop_event if stop_event is not None else threading.Event()
        self.reset()
        logger.info("Navigation started, goal=(%.3f, %.3f)",
                    goal_screen_pos[0], goal_screen_pos[1])
        ticks = 0
        try:
            while not stop_event.is_set():
                if max_ticks is not None and ticks >= max_ticks:
                    break
                self.step(goal_screen_pos)
                ticks += 1
                stop_event.wait(self.tick_interval)
        finally:
            self.actuator.stop()
            logger.info("Navigation stopped after %d ticks", ticks)
        return ticks

    def get_statistics(self) -> dict:
        return {
            'frame_count': self.frame_count,
            'num_detections': len(self.last_detections),
            'visited_cells': len(self.navigator.visited_cells),
            'last_force': self.last_force.tolist(),
            'direction': force_to_direction(self.last_force).value,
        }
