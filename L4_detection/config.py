# =============================================================================
# L4 Detection - Configuration
# =============================================================================
# Parameters for turning detector output into occupancy grid cells.
# =============================================================================

# =============================================================================
# OBSTACLE VOCABULARY
# =============================================================================
# A detection is an obstacle when its label contains one of these words
# (case-insensitive substring match)
OBSTACLE_LABELS = ("enemy", "wall", "obstacle", "barrier", "block")

# =============================================================================
# GRID MAPPING
# =============================================================================
# Safety margin added around every obstacle footprint, as a fraction of the
# grid width (at least one cell)
OBSTACLE_SAFETY_MARGIN_FRACTION = 0.02
OBSTACLE_MIN_SAFETY_MARGIN_CELLS = 1

# Radius (cells) of the square neighborhood marked as goal
GOAL_MARK_RADIUS = 2

# =============================================================================
# DETECTOR DEFAULTS
# =============================================================================
DEFAULT_CONFIDENCE_THRESHOLD = 0.5
