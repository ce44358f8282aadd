# =============================================================================
# L6 Tuning Package
# =============================================================================
# Offline tuning of the potential field coefficients.
#
# Responsibilities:
# - Scenario harness (fixed-step runs on synthetic grids, composite score)
# - Genetic optimizer (elitism, uniform crossover, bounded mutation)
# - Result analysis (history table, sensitivity, report, fitness plot)
#
# Usage:
#   from L6_tuning import PotentialFieldOptimizer
#   optimizer = PotentialFieldOptimizer(seed=42)
#   result = optimizer.run(generations=20)
#   result.best_parameters, result.best_score
#
# Note: Persisting the best parameters is up to the caller (see optimize.py).
# =============================================================================

# Types
from .types import (
    OptimizationParameter,
    ScenarioResult,
    ParameterCombinationResult,
    OptimizationResult
)

# Core components
from .harness import ScenarioHarness
from .optimizer import (
    PARAMETER_FIELDS,
    PotentialFieldOptimizer,
    build_parameters,
    default_search_space,
    compare_presets
)

# Analysis
from .analysis import (
    results_to_frame,
    parameter_sensitivity,
    performance_report,
    fitness_by_generation,
    plot_fitness_history,
    export_best_parameters
)

__all__ = [
    # Types
    'OptimizationParameter',
    'ScenarioResult',
    'ParameterCombinationResult',
    'OptimizationResult',

    # Harness and optimizer
    'ScenarioHarness',
    'PARAMETER_FIELDS',
    'PotentialFieldOptimizer',
    'build_parameters',
    'default_search_space',
    'compare_presets',

    # Analysis
    'results_to_frame',
    'parameter_sensitivity',
    'performance_report',
    'fitness_by_generation',
    'plot_fitness_history',
    'export_best_parameters',
]

__version__ = '2.0.0'
