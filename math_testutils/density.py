"""
Compaction of discrete density tables.
"""

from __future__ import annotations

from typing import MutableSequence

import numpy as np


def eliminate_zero_mass_points(
    density_points: MutableSequence[int],
    density_values: MutableSequence[float],
) -> int:
    """
    Drop points with zero (or negative, or NaN) mass from parallel arrays.

    Both sequences are compacted in place so that their first K entries hold
    the positive-mass points in their original order. Entries past K are
    left stale and must not be read.

    Parameters
    ----------
    density_points : MutableSequence[int]
        Support points, list or 1-D array
    density_values : MutableSequence[float]
        Mass at each point, same length as ``density_points``

    Returns
    -------
    int
        K, the number of positive-mass points
    """
    positive = np.asarray(density_values, dtype=np.float64) > 0
    k = int(np.count_nonzero(positive))

    if k < positive.size:
        density_points[:k] = np.asarray(density_points)[positive].tolist()
        density_values[:k] = np.asarray(density_values)[positive].tolist()
    return k
