# =============================================================================
# L6 Tuning - Genetic Parameter Optimizer
# =============================================================================
# Evolves NavigationParameters candidates and scores each one by running the
# scenario harness with its own navigator instance.
#
# Individuals are rows of a numpy array (one column per searched parameter).
# All randomness comes from a single numpy Generator, so a fixed seed makes
# a run reproducible.
# =============================================================================

import logging
import dataclasses
import numpy as np
from numpy.random import default_rng
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from L3_world import TestScenario
from L5_decision import NavigationParameters, PotentialFieldNavigator

from .harness import ScenarioHarness
from .types import (
    OptimizationParameter,
    ParameterCombinationResult,
    OptimizationResult
)
from .config import (
    GA_POPULATION_SIZE,
    GA_DEFAULT_GENERATIONS,
    GA_ELITE_DIVISOR,
    GA_MIN_ELITES,
    GA_CROSSOVER_PARENT_PROB,
    GA_MUTATION_RATE,
    SEARCH_SPACE,
    COMPARISON_PRESETS,
    COMPARISON_GENERATIONS
)

logger = logging.getLogger(__name__)


# Searched name -> (NavigationParameters field, converter)
PARAMETER_FIELDS: Dict[str, Tuple[str, Callable]] = {
    'goal_attraction_strength': ('goal_attraction_strength', float),
    'obstacle_repulsion_strength': ('obstacle_repulsion_strength', float),
    'obstacle_influence_radius': ('obstacle_influence_radius', float),
    'exploration_strength': ('exploration_strength', float),
    'path_smoothing_factor': ('path_smoothing_factor', float),
    'max_obstacle_force': ('max_obstacle_force', float),
    'goal_proximity_threshold': ('goal_proximity_threshold', float),
    'obstacle_safety_distance': ('obstacle_safety_distance', float),
    'velocity_damping_factor': ('velocity_damping_factor', float),
    'force_window_radius': ('force_window_radius', int),
}


def default_search_space() -> List[OptimizationParameter]:
    return [OptimizationParameter(name, low, high, step)
            for name, low, high, step in SEARCH_SPACE]


def build_parameters(base: NavigationParameters,
                     values: Dict[str, float]) -> NavigationParameters:
    """
    Copy `base` with the candidate values applied.

    Raises:
        KeyError: a name has no NavigationParameters field
    """
    changes = {}
    for name, value in values.items():
        field_name, convert = PARAMETER_FIELDS[name]
        changes[field_name] = convert(value)
    return dataclasses.replace(base, **changes)


class PotentialFieldOptimizer:
    """
    Genetic search over the navigation coefficients.

    Per generation: evaluate every individual, keep the top
    max(2, size // 5) as elites, fill the rest with uniform crossover of
    two random elites followed by per-gene mutation. The best candidate
    ever evaluated is returned, not the best of the last generation.
    """

    def __init__(self,
                 base_params: Optional[NavigationParameters] = None,
                 search_space: Optional[Sequence[OptimizationParameter]] = None,
                 population_size: int = GA_POPULATION_SIZE,
                 mutation_rate: float = GA_MUTATION_RATE,
                 harness: Optional[ScenarioHarness] = None,
                 seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        """
        Initialize the optimizer.

        Args:
            base_params: Values of the coefficients that are not searched
            search_space: Searched parameters (default SEARCH_SPACE)
            population_size: Individuals per generation
            mutation_rate: Per-gene mutation probability
            harness: Scenario harness used for scoring
            seed: Seed of the random generator (ignored when rng is given)
            rng: Random generator to draw from
        """
        if population_size < 1:
            raise ValueError(f"population_size must be >= 1, got {population_size}")

        self.base_params = base_params if base_params is not None else NavigationParameters()
        self.parameters: List[OptimizationParameter] = list(
            search_space if search_space is not None else default_search_space())
        for param in self.parameters:
            if param.name not in PARAMETER_FIELDS:
                raise KeyError(f"No navigation field for parameter '{param.name}'")

        self.population_size = int(population_size)
        self.mutation_rate = float(mutation_rate)
        self.harness = harness if harness is not None else ScenarioHarness()

        self.rng = rng if rng is not None else default_rng(seed)

        self._low = np.array([p.min_value for p in self.parameters], dtype=float)
        self._high = np.array([p.max_value for p in self.parameters], dtype=float)
        self._step = np.array([p.step for p in self.parameters], dtype=float)

        self.pop = self._init_population()

    @property
    def parameter_names(self) -> List[str]:
        return [p.name for p in self.parameters]

    @property
    def test_scenarios(self) -> List[TestScenario]:
        return list(self.harness.scenarios)

    def elite_count(self, ranked: int) -> int:
        return min(ranked, max(GA_MIN_ELITES, self.population_size // GA_ELITE_DIVISOR))

    # =========================================================================
    # Genetic operators
    # =========================================================================

    def _init_population(self) -> np.ndarray:
        samples = self.rng.random((self.population_size, len(self.parameters)))
        return self._low + samples * (self._high - self._low)

    def _random_individual(self) -> np.ndarray:
        return self._low + self.rng.random(len(self.parameters)) * (self._high - self._low)

    def _crossover(self, parent_a: np.ndarray, parent_b: np.ndarray) -> np.ndarray:
        # per-gene coin flip picks the parent
        from_a = self.rng.random(parent_a.shape) < GA_CROSSOVER_PARENT_PROB
        return np.where(from_a, parent_a, parent_b)

    def _mutate(self, individual: np.ndarray) -> np.ndarray:
        mask = self.rng.random(individual.shape) < self.mutation_rate
        offsets = self.rng.uniform(-1.0, 1.0, individual.shape) * self._step
        mutated = np.where(mask, individual + offsets, individual)
        return np.clip(mutated, self._low, self._high)

    def _evolve(self, pop: np.ndarray, fitness: np.ndarray) -> np.ndarray:
        """Build the next generation from ranked individuals."""
        # stable sort: equal fitness keeps evaluation order
        order = np.argsort(-fitness, kind='stable')
        n_elites = self.elite_count(len(order))
        elites = pop[order[:n_elites]]

        new_pop = np.empty((self.population_size, len(self.parameters)), dtype=float)
        n_keep = min(n_elites, self.population_size)
        new_pop[:n_keep] = elites[:n_keep]

        for i in range(n_keep, self.population_size):
            if n_elites >= 2:
                a = elites[self.rng.integers(n_elites)]
                b = elites[self.rng.integers(n_elites)]
                new_pop[i] = self._mutate(self._crossover(a, b))
            else:
                new_pop[i] = self._random_individual()
        return new_pop

    # =========================================================================
    # Evaluation
    # =========================================================================

    def to_values(self, individual: np.ndarray) -> Dict[str, float]:
        """Candidate values as the navigator receives them (converted per field)."""
        return {name: PARAMETER_FIELDS[name][1](float(v))
                for name, v in zip(self.parameter_names, individual)}

    def build_parameters(self, values: Dict[str, float]) -> NavigationParameters:
        return build_parameters(self.base_params, values)

    def evaluate(self, individual: np.ndarray, generation: int = 0) -> ParameterCombinationResult:
        """Score one candidate on every scenario with a fresh navigator."""
        values = self.to_values(individual)
        navigator = PotentialFieldNavigator(self.build_parameters(values))
        scenario_results = self.harness.run_all(navigator)

        return ParameterCombinationResult(
            generation=generation,
            parameters=values,
            scenario_results=scenario_results,
            average_score=float(np.mean([r.score for r in scenario_results])),
            execution_time=float(np.mean([r.execution_time for r in scenario_results]))
        )

    # =========================================================================
    # Main loop
    # =========================================================================

    def run(self, generations: int = GA_DEFAULT_GENERATIONS,
            on_generation: Optional[Callable[[int, np.ndarray, np.ndarray], None]] = None
            ) -> OptimizationResult:
        """
        Run the genetic search.

        Args:
            generations: Number of generations (no early stopping)
            on_generation: Called with (generation, population, fitness)

        Returns:
            OptimizationResult with the global best and the full history
        """
        if generations < 1:
            raise ValueError(f"generations must be >= 1, got {generations}")

        logger.info("Starting optimization: %d scenarios, %d parameters, %d generations",
                    len(self.harness.scenarios), len(self.parameters), generations)

        history: List[ParameterCombinationResult] = []
        best: Optional[ParameterCombinationResult] = None

        for gen in range(int(generations)):
            fitness = np.zeros(self.population_size, dtype=float)
            for i in range(self.population_size):
                result = self.evaluate(self.pop[i], generation=gen)
                history.append(result)
                fitness[i] = result.average_score
                logger.debug("Generation %d individual %d: score %.3f", gen, i, fitness[i])

                if best is None or result.average_score > best.average_score:
                    best = result
                    logger.info("New best parameter set, score %.2f", best.average_score)

            if on_generation is not None:
                on_generation(gen, self.pop.copy(), fitness.copy())

            logger.info("Generation %d/%d: best fitness = %.3f",
                        gen + 1, generations, best.average_score)

            self.pop = self._evolve(self.pop, fitness)

        return OptimizationResult(
            best_parameters=dict(best.parameters),
            best_score=best.average_score,
            all_results=history,
            test_scenarios=self.test_scenarios,
            generations=int(generations)
        )


def compare_presets(presets: Sequence[Dict[str, float]] = COMPARISON_PRESETS,
                    generations: int = COMPARISON_GENERATIONS,
                    population_size: int = GA_POPULATION_SIZE,
                    seed: Optional[int] = None) -> List[Tuple[Dict[str, float], OptimizationResult]]:
    """Run a short optimization from each preset base configuration."""
    rng = default_rng(seed)
    outcomes = []
    for preset in presets:
        base = build_parameters(NavigationParameters(), preset)
        optimizer = PotentialFieldOptimizer(base_params=base,
                                            population_size=population_size,
                                            rng=rng)
        outcomes.append((dict(preset), optimizer.run(generations)))
    return outcomes
