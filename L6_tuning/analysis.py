# =============================================================================
# L6 Tuning - Result Analysis
# =============================================================================
# Tabular view of the optimization history, parameter sensitivity,
# performance report and fitness plot.
# =============================================================================

import json
import numpy as np
import pandas as pd
from typing import Optional

from .types import OptimizationResult
from .config import SENSITIVITY_BINS


def results_to_frame(result: OptimizationResult) -> pd.DataFrame:
    """One row per evaluated candidate: generation, parameters, score, time."""
    rows = []
    for combo in result.all_results:
        row = {'generation': combo.generation}
        row.update(combo.parameters)
        row['average_score'] = combo.average_score
        row['execution_time'] = combo.execution_time
        for scenario in combo.scenario_results:
            row[f'score_{scenario.scenario_name}'] = scenario.score
        rows.append(row)
    return pd.DataFrame(rows)


def parameter_sensitivity(result: OptimizationResult,
                          bins: int = SENSITIVITY_BINS) -> pd.DataFrame:
    """
    How strongly each parameter drives the score.

    Columns:
        variance: variance of the mean score across value-quantile bins
        correlation: |Pearson r| between parameter value and score
    """
    df = results_to_frame(result)
    names = list(result.best_parameters.keys())
    records = []
    for name in names:
        values = df[name]
        if values.nunique() > 1:
            binned = pd.qcut(values, q=min(bins, values.nunique()), duplicates='drop')
            bin_means = df.groupby(binned, observed=True)['average_score'].mean()
            variance = float(bin_means.var(ddof=1)) if len(bin_means) > 1 else 0.0
            correlation = values.corr(df['average_score'])
            correlation = 0.0 if pd.isna(correlation) else abs(float(correlation))
        else:
            variance = 0.0
            correlation = 0.0
        records.append({'parameter': name,
                        'variance': 0.0 if pd.isna(variance) else variance,
                        'correlation': correlation})
    return (pd.DataFrame(records, columns=['parameter', 'variance', 'correlation'])
            .sort_values('variance', ascending=False, kind='stable')
            .reset_index(drop=True))


def performance_report(result: OptimizationResult) -> dict:
    """Execution time and score statistics over every evaluated candidate."""
    df = results_to_frame(result)
    if df.empty:
        return {}

    avg_time = float(df['execution_time'].mean())
    best_time = float(df['execution_time'].min())
    avg_score = float(df['average_score'].mean())

    return {
        'evaluations': int(len(df)),
        'mean_execution_time_ms': avg_time,
        'best_execution_time_ms': best_time,
        'time_improvement_pct': (avg_time - best_time) / avg_time * 100 if avg_time > 0 else 0.0,
        'mean_score': avg_score,
        'max_score': float(df['average_score'].max()),
        'min_score': float(df['average_score'].min()),
        'score_improvement_pct': ((float(df['average_score'].max()) - avg_score) / avg_score * 100
                                  if avg_score > 0 else 0.0),
    }


def fitness_by_generation(result: OptimizationResult) -> pd.DataFrame:
    """Per generation: mean and max fitness, and the best fitness so far."""
    df = results_to_frame(result)
    grouped = df.groupby('generation')['average_score'].agg(['mean', 'max'])
    grouped['best_so_far'] = grouped['max'].cummax()
    return grouped


def plot_fitness_history(result: OptimizationResult, filename: str,
                         title: Optional[str] = None) -> str:
    """Save a best-so-far / generation-mean fitness plot to `filename`."""
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt

    history = fitness_by_generation(result)

    fig, ax = plt.subplots(figsize=(8, 4.5))
    ax.plot(history.index, history['best_so_far'], 'b-', linewidth=2, label='Best so far')
    ax.plot(history.index, history['mean'], 'g--', linewidth=1.5, label='Generation mean')
    ax.fill_between(history.index, history['mean'], history['max'], color='g', alpha=0.15)
    ax.set_xlabel('Generation')
    ax.set_ylabel('Fitness (composite score)')
    ax.set_title(title or 'Potential field parameter optimization')
    ax.grid(True, alpha=0.3)
    ax.legend(loc='lower right')
    fig.tight_layout()
    fig.savefig(filename, dpi=120)
    plt.close(fig)
    return filename


def export_best_parameters(result: OptimizationResult, filename: str) -> dict:
    output = {
        'best_score': result.best_score,
        'generations': result.generations,
        'evaluations': len(result.all_results),
        'scenarios': [s.name for s in result.test_scenarios],
        'parameters': result.best_parameters,
    }
    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(output, f, indent=2, ensure_ascii=False, default=_to_builtin)
    return output


def _to_builtin(value):
    if isinstance(value, np.generic):
        return value.item()
    return str(value)
