"""Performance metrics for benchmarking front quality.

This module scores Pareto front approximations with the R2 indicator and,
for comparison, with pymoo's hypervolume indicator.
"""

import numpy as np
from pymoo.indicators.hv import HV

from r2_indicator import R2


def r2(objectives: np.ndarray, reference_front: np.ndarray, indicator: R2 | None = None) -> float:
    """Compute the R2 indicator of a front against a reference front.

    Args:
        objectives: (n, n_obj) objective values of the Pareto front approximation
        reference_front: (n_ref, n_obj) true Pareto front used for normalization
        indicator: Indicator to use. Defaults to R2() (100 bi-objective weights).

    Returns:
        R2 value (lower is better)

    Raises:
        ValueError: If objectives array is empty
    """
    if objectives.size == 0:
        raise ValueError("objectives array cannot be empty")

    indicator = indicator or R2()
    return indicator.value(objectives, reference_front)


def hypervolume(objectives: np.ndarray, ref_point: np.ndarray | None = None) -> float:
    """Compute the hypervolume indicator with pymoo.

    Args:
        objectives: (n, n_obj) objective values of the Pareto front approximation
        ref_point: Reference point. Defaults to [1.1, 1.1], slightly worse
            than the ZDT nadir point (1, 1).

    Returns:
        Hypervolume value (higher is better)
    """
    if objectives.ndim != 2:
        raise ValueError(f"objectives must be 2D array, got shape {objectives.shape}")

    if ref_point is None:
        ref_point = np.array([1.1, 1.1])

    return float(HV(ref_point=ref_point)(objectives))
