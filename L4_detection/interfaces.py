# =============================================================================
# L4 Detection - Collaborator Interfaces
# =============================================================================
# Narrow contracts for the parts of the navigation loop that live outside
# the core: the vision detector and the input actuator.
# =============================================================================

import numpy as np
from abc import ABC, abstractmethod
from typing import Any, List

from .types import DetectedObject


class Detector(ABC):
    """
    Open-vocabulary object detector.

    Implementations wrap a vision model; the core only consumes the
    returned list.
    """

    @abstractmethod
    def detect(self, scene: Any, prompt: str,
               confidence_threshold: float) -> List[DetectedObject]:
        """
        Detect objects matching `prompt` in a captured scene.

        Args:
            scene: Captured frame, opaque to the core
            prompt: Comma separated label prompt
            confidence_threshold: Minimum confidence of returned detections

        Returns:
            Detections with normalized bounding boxes
        """


class InputActuator(ABC):
    """Turns a steering force into directional commands."""

    @abstractmethod
    def apply(self, force: np.ndarray):
        """Issue commands for a finite 2D force vector."""

    @abstractmethod
    def stop(self):
        """Release every held command."""
