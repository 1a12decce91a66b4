# Parametric arrow sweeps (spine, point weights, length...) -> DataFrame
"""
EXPLORE: PARAMETER SWEEPS
=========================

PURPOSE:
--------
A single analysis answers "what are the frequencies of THIS arrow?". Tuning
an arrow means asking the same question over a grid: several spines,
several point weights, several cut lengths. run_sweep() evaluates the
cartesian product of the given values and collects one row per variant.

    grid = {'spine': [400, 500, 600], 'tip_grains': [100, 125, 150]}
    df = run_sweep(base_params, grid)      # 9 rows

Failed variants (invalid inputs, singular mass matrix) stay in the table
with ok=False and the reason, so the grid keeps its shape.
"""

import dataclasses
import itertools
import logging
from typing import Any, Dict, Iterable, List, Tuple

import numpy as np
import pandas as pd
from tqdm import tqdm

from .analysis import AnalysisParams, analyze
from .config import CONFIG, AnalysisConfig
from .kernel.errors import InvalidParameter, SingularSystem

logger = logging.getLogger(__name__)

SWEEPABLE = tuple(
    f.name for f in dataclasses.fields(AnalysisParams) if f.name != 'extra_point_masses'
)


def expand_grid(grid: Dict[str, Iterable[Any]]) -> List[Dict[str, Any]]:
    """Cartesian product of a {field: values} grid as a list of overrides."""
    unknown = [k for k in grid if k not in SWEEPABLE]
    if unknown:
        raise InvalidParameter(f"Cannot sweep over {unknown}; choose from {list(SWEEPABLE)}")

    keys = list(grid)
    values = [list(grid[k]) for k in keys]
    return [dict(zip(keys, combo)) for combo in itertools.product(*values)]


def evaluate_variant(
    params: AnalysisParams,
    n_report_modes: int = 3,
    config: AnalysisConfig = CONFIG
) -> Tuple[bool, Dict[str, float], str]:
    """
    Analyze one variant.

    Returns:
    --------
    (ok, metrics, reason)
        metrics holds ei, axial_factor, total_mass and f1..f{n_report_modes}
        (NaN where the shaft has fewer modes).
    """
    try:
        result = analyze(params, config)
    except (InvalidParameter, SingularSystem) as e:
        return False, {}, str(e)

    metrics = {
        'ei': result.ei,
        'axial_factor': result.axial_factor,
        'total_mass': result.masses.total_mass,
    }
    freqs = result.frequencies
    for k in range(n_report_modes):
        metrics[f'f{k + 1}'] = float(freqs[k]) if k < len(freqs) else np.nan

    reason = '; '.join(result.warnings)
    return True, metrics, reason


def run_sweep(
    base: AnalysisParams,
    grid: Dict[str, Iterable[Any]],
    n_report_modes: int = 3,
    show_progress: bool = False,
    config: AnalysisConfig = CONFIG
) -> pd.DataFrame:
    """
    Evaluate every combination of `grid` applied on top of `base`.

    Parameters:
    -----------
    base : AnalysisParams
        Values for every field not in the grid
    grid : dict
        AnalysisParams field name -> values to try
    n_report_modes : int
        Frequencies reported per row (f1, f2, ...)
    show_progress : bool
        Whether to show a progress bar

    Returns:
    --------
    pd.DataFrame
        One row per variant: swept parameters, 'ok', 'reason', metrics
    """
    overrides = expand_grid(grid)
    metric_cols = ['ei', 'axial_factor', 'total_mass'] + [f'f{k + 1}' for k in range(n_report_modes)]

    results = []
    iterator = tqdm(overrides, desc="Analyzing") if show_progress else overrides

    for override in iterator:
        params = dataclasses.replace(base, **override)
        ok, metrics, reason = evaluate_variant(params, n_report_modes, config)

        row = dict(override)
        row['ok'] = ok
        row['reason'] = reason
        for col in metric_cols:
            row[col] = metrics.get(col, np.nan)
        results.append(row)

    df = pd.DataFrame(results)
    n_failed = int((~df['ok']).sum()) if len(df) else 0
    logger.info("Sweep finished: %d variants, %d failed", len(df), n_failed)
    return df
