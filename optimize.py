# =============================================================================
# OPTIMIZE - Parameter Tuning Entry Point
# =============================================================================
# Runs the genetic optimizer over the synthetic scenarios:
# - L3: World Layer    (occupancy grid, scenario layouts)
# - L5: Decision Layer (potential field navigator)
# - L6: Tuning Layer   (scenario harness, genetic optimizer, analysis)
# =============================================================================

import os
import argparse
import logging
from datetime import datetime

from L5_decision import NavigationParameters
from L6_tuning import (
    PotentialFieldOptimizer,
    compare_presets,
    results_to_frame,
    parameter_sensitivity,
    performance_report,
    plot_fitness_history,
    export_best_parameters
)
from L6_tuning.config import (
    GA_POPULATION_SIZE,
    GA_DEFAULT_GENERATIONS,
    COMPARISON_GENERATIONS
)


def print_header(title: str):
    print(f"\n{'='*60}")
    print(title)
    print(f"{'='*60}")


def print_base_config(params: NavigationParameters):
    print_header("BASE CONFIGURATION")
    for name, value in params.to_dict().items():
        print(f"  {name}: {value}")


def print_result(result):
    print_header("OPTIMIZATION RESULT")
    print(f"Best composite score: {result.best_score:.2f}")
    print(f"Scenarios: {len(result.test_scenarios)}")
    print(f"Evaluated combinations: {len(result.all_results)}")
    print("\nBest parameters:")
    for name, value in result.best_parameters.items():
        print(f"  {name}: {value:.4f}")

    print_header("PARAMETER SENSITIVITY")
    sensitivity = parameter_sensitivity(result)
    for row in sensitivity.itertuples(index=False):
        print(f"  {row.parameter}: variance = {row.variance:.4f}, |r| = {row.correlation:.3f}")

    report = performance_report(result)
    print_header("PERFORMANCE REPORT")
    print(f"Mean execution time: {report['mean_execution_time_ms']:.2f} ms")
    print(f"Best execution time: {report['best_execution_time_ms']:.2f} ms")
    print(f"Time improvement:    {report['time_improvement_pct']:.2f}%")
    print(f"Mean score: {report['mean_score']:.2f}")
    print(f"Max score:  {report['max_score']:.2f}")
    print(f"Min score:  {report['min_score']:.2f}")
    print(f"Score improvement:   {report['score_improvement_pct']:.2f}%")
    print(f"{'='*60}\n")


def save_outputs(result, output_dir: str, plot: bool):
    """Saves best parameters, history and plot in organized subfolders."""
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')

    params_dir = os.path.join(output_dir, "best_parameters")
    history_dir = os.path.join(output_dir, "history")
    for directory in [params_dir, history_dir]:
        os.makedirs(directory, exist_ok=True)

    # JSON - Best parameters
    json_file = os.path.join(params_dir, f"best_parameters_{timestamp}.json")
    export_best_parameters(result, json_file)
    print(f"Best parameters saved: {json_file}")

    # CSV - Every evaluated combination
    csv_file = os.path.join(history_dir, f"history_{timestamp}.csv")
    results_to_frame(result).to_csv(csv_file, index=False, encoding='utf-8')
    print(f"History saved: {csv_file}")

    if plot:
        plot_dir = os.path.join(output_dir, "plots")
        os.makedirs(plot_dir, exist_ok=True)
        png_file = os.path.join(plot_dir, f"fitness_{timestamp}.png")
        plot_fitness_history(result, png_file)
        print(f"Fitness plot saved: {png_file}")


# =============================================================================
# Argument Parser
# =============================================================================
def parse_arguments(argv=None):
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog='optimize.py',
        description="""
  POTENTIAL FIELD PARAMETER OPTIMIZATION

  Tunes the coefficients of the potential field navigator with a genetic
  algorithm. Every candidate drives its own navigator through four
  synthetic scenarios (SimplePath, ObstacleAvoidance, ComplexMaze,
  DynamicObstacles) on an 80x60 grid; fitness is the mean composite score.
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
EXAMPLES:
  python optimize.py                              # 50 generations, population 30
  python optimize.py --generations 20 --seed 42   # Reproducible short run
  python optimize.py --plot                       # Also save a fitness plot
  python optimize.py --compare                    # Compare the preset base configs
"""
    )

    parser.add_argument(
        '--generations',
        type=int,
        default=GA_DEFAULT_GENERATIONS,
        metavar='N',
        help=f'Number of generations (default: {GA_DEFAULT_GENERATIONS})'
    )

    parser.add_argument(
        '--population',
        type=int,
        default=GA_POPULATION_SIZE,
        metavar='N',
        help=f'Population size (default: {GA_POPULATION_SIZE})'
    )

    parser.add_argument(
        '--seed',
        type=int,
        default=None,
        help='Random seed for a reproducible run'
    )

    parser.add_argument(
        '--output-dir',
        type=str,
        default='log',
        metavar='DIR',
        help='Directory for results (default: log)'
    )

    parser.add_argument(
        '--plot',
        action='store_true',
        help='Save a fitness-per-generation plot'
    )

    parser.add_argument(
        '--compare',
        action='store_true',
        help=f'Run {COMPARISON_GENERATIONS} generations for each preset base configuration'
    )

    parser.add_argument(
        '--no-save',
        action='store_true',
        help='Do not write result files'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Debug logging'
    )

    return parser.parse_args(argv)


# =============================================================================
# Main Entry Point
# =============================================================================
def main(argv=None):
    args = parse_arguments(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )

    print("="*60)
    print("POTENTIAL FIELD PARAMETER OPTIMIZATION")
    print("="*60)

    if args.compare:
        print_header("PRESET COMPARISON")
        for preset, result in compare_presets(population_size=args.population, seed=args.seed):
            print("Preset: " + ", ".join(f"{k}={v}" for k, v in preset.items()))
            print(f"  Best composite score: {result.best_score:.2f}")
        return 0

    base_params = NavigationParameters()
    print_base_config(base_params)

    optimizer = PotentialFieldOptimizer(
        base_params=base_params,
        population_size=args.population,
        seed=args.seed
    )
    result = optimizer.run(generations=args.generations)

    print_result(result)

    if not args.no_save:
        save_outputs(result, args.output_dir, args.plot)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
