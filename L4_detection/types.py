# =============================================================================
# L4 Detection - Types and Data Structures
# =============================================================================
# Detector output consumed by the navigation core.
# =============================================================================

from dataclasses import dataclass


@dataclass(frozen=True)
class BoundingBox:
    """Axis-aligned box in normalized [0, 1] image coordinates."""
    x: float          # Left edge
    y: float          # Top edge
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass
class DetectedObject:
    """
    Single detection emitted by the external detector.

    Confidence filtering has already been applied by the detector.
    """
    bbox: BoundingBox
    label: str
    confidence: float = 1.0
