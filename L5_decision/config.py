# =============================================================================
# L5 Decision - Configuration
# =============================================================================
# All configurable parameters for the potential field navigator and the
# navigation tick.
# =============================================================================

# =============================================================================
# FORCE MODEL COEFFICIENTS (defaults)
# =============================================================================
GOAL_ATTRACTION_STRENGTH = 1.2      # Attraction towards the goal
OBSTACLE_REPULSION_STRENGTH = 6.0   # Repulsion from obstacle cells
OBSTACLE_INFLUENCE_RADIUS = 12.0    # Repulsion range (grid cells)
EXPLORATION_STRENGTH = 0.08         # Bias towards unvisited cells
PATH_SMOOTHING_FACTOR = 0.7         # Weight of the previous force (0..1)
MAX_OBSTACLE_FORCE = 2.0            # Clamp on the summed window force
GOAL_PROXIMITY_THRESHOLD = 0.05     # Arrival distance (normalized units)
OBSTACLE_SAFETY_DISTANCE = 0.1      # Distance subtracted before repulsion
VELOCITY_DAMPING_FACTOR = 0.95      # Scale of the final unit force
FORCE_WINDOW_RADIUS = 8             # Half side of the force window (cells)

# Valid range of every coefficient: (min, max)
PARAMETER_RANGES = {
    'goal_attraction_strength': (0.5, 2.0),
    'obstacle_repulsion_strength': (3.0, 10.0),
    'obstacle_influence_radius': (8.0, 20.0),
    'exploration_strength': (0.0, 0.5),
    'path_smoothing_factor': (0.0, 0.95),
    'max_obstacle_force': (1.0, 3.0),
    'goal_proximity_threshold': (0.01, 0.2),
    'obstacle_safety_distance': (0.05, 0.2),
    'velocity_damping_factor': (0.1, 1.0),
    'force_window_radius': (4, 16),
}

# =============================================================================
# FORCE COMPUTATION CONSTANTS
# =============================================================================
MIN_FORCE_DISTANCE = 0.001          # Below this no force is computed
GOAL_FORCE_OFFSET = 0.2             # 1 / (d + offset) attraction
OBSTACLE_FORCE_OFFSET = 0.01        # 1 / (d^2 + offset) repulsion
MIN_NORMALIZE_MAGNITUDE = 0.001     # Forces below this stay unnormalized

# =============================================================================
# PERFORMANCE SCORE
# =============================================================================
SCORE_WEIGHT_DISTANCE = 0.4
SCORE_WEIGHT_SAFETY = 0.3
SCORE_WEIGHT_CONSISTENCY = 0.2
SCORE_WEIGHT_OBSTACLE = 0.1

DISTANCE_SCORE_SCALE = 200.0        # distance_score = 100 - scale * distance
SAFETY_SCORE_SCALE = 200.0          # safety_score = scale * min_obstacle_distance
CONSISTENCY_SCORE_SCALE = 50.0      # consistency_score = scale * consistency
OBSTACLE_SCORE_SCALE = 200.0        # obstacle_score = 100 - scale * density

# Minimum obstacle distance reported when the grid holds no obstacle
NO_OBSTACLE_DISTANCE = 1.0

# =============================================================================
# NAVIGATION SESSION
# =============================================================================
NAV_GRID_WIDTH = 80
NAV_GRID_HEIGHT = 60
NAV_DETECTION_INTERVAL = 3          # Run the detector every N ticks
NAV_TICK_INTERVAL = 0.08            # Seconds between ticks
NAV_AGENT_POSITION = (0.5, 0.5)     # Agent is always at the view center
NAV_OBSTACLE_PROMPT = "enemy, wall, obstacle"
NAV_GOAL_PROMPT = "door, exit, treasure"

# Forces with both components below this map to IDLE
NAV_IDLE_FORCE_THRESHOLD = 0.1
