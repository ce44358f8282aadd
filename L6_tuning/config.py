# =============================================================================
# L6 Tuning - Configuration
# =============================================================================
# Parameters of the scenario harness and the genetic parameter optimizer.
# =============================================================================

# =============================================================================
# SCENARIO HARNESS
# =============================================================================
HARNESS_STEPS = 10              # Simulated steps per scenario
HARNESS_STEP_SCALE = 0.05       # Position += force * scale
HARNESS_RESET_BETWEEN_SCENARIOS = False  # Session state carries across scenarios

# =============================================================================
# GENETIC ALGORITHM
# =============================================================================
GA_POPULATION_SIZE = 30
GA_DEFAULT_GENERATIONS = 50
GA_ELITE_DIVISOR = 5            # Elites = max(GA_MIN_ELITES, size // divisor)
GA_MIN_ELITES = 2
GA_CROSSOVER_PARENT_PROB = 0.5  # Chance of inheriting a gene from parent 1
GA_MUTATION_RATE = 0.1          # Per-gene mutation probability

# =============================================================================
# SEARCH SPACE
# =============================================================================
# (name, min, max, step); names are NavigationParameters fields
SEARCH_SPACE = [
    ('goal_attraction_strength', 0.5, 2.0, 0.2),
    ('obstacle_repulsion_strength', 3.0, 10.0, 0.5),
    ('obstacle_influence_radius', 8.0, 20.0, 2.0),
    ('path_smoothing_factor', 0.3, 0.9, 0.1),
    ('max_obstacle_force', 1.0, 3.0, 0.2),
    ('obstacle_safety_distance', 0.05, 0.2, 0.02),
    ('force_window_radius', 4, 16, 2),
]

# =============================================================================
# PRESET COMPARISON
# =============================================================================
# Base configurations compared with a short optimization run each
COMPARISON_PRESETS = [
    {'goal_attraction_strength': 1.0, 'obstacle_repulsion_strength': 5.0,
     'path_smoothing_factor': 0.6},
    {'goal_attraction_strength': 1.5, 'obstacle_repulsion_strength': 7.0,
     'path_smoothing_factor': 0.8},
    {'goal_attraction_strength': 0.8, 'obstacle_repulsion_strength': 4.0,
     'path_smoothing_factor': 0.5},
]
COMPARISON_GENERATIONS = 10

# =============================================================================
# ANALYSIS
# =============================================================================
SENSITIVITY_BINS = 4            # Quantile bins per parameter
