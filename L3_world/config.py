# =============================================================================
# L3 World Model - Configuration
# =============================================================================
# All configurable parameters for the occupancy grid and synthetic scenarios.
# =============================================================================

# =============================================================================
# OCCUPANCY GRID
# =============================================================================
# Grid size in cells (width x height)
DEFAULT_GRID_WIDTH = 80
DEFAULT_GRID_HEIGHT = 60

# =============================================================================
# SCENARIO GRID
# =============================================================================
# Synthetic scenarios are always built on a grid of this size
SCENARIO_GRID_WIDTH = 80
SCENARIO_GRID_HEIGHT = 60

# Start and goal positions (normalized [0, 1] coordinates)
SCENARIO_START_POSITION = (0.1, 0.5)
SCENARIO_GOAL_POSITION = (0.9, 0.5)

# =============================================================================
# SCENARIO GEOMETRY
# =============================================================================
# Ranges are half-open cell ranges: (start, stop)

# --- ObstacleAvoidance: single block in the middle ---
BLOCK_X_RANGE = (35, 45)
BLOCK_Y_RANGE = (25, 35)

# --- ComplexMaze: wall columns hanging from the top and rising from the bottom ---
MAZE_COLUMN_SPACING = 10
MAZE_TOP_COLUMN_START_X = 0
MAZE_TOP_Y_RANGE = (0, 20)
MAZE_BOTTOM_COLUMN_START_X = 5
MAZE_BOTTOM_Y_RANGE = (40, 60)

# --- DynamicObstacles: two vertical bands ---
BAND_1_X_RANGE = (20, 30)
BAND_2_X_RANGE = (50, 60)
BAND_Y_RANGE = (10, 50)
