"""
Reference statistics for cross-checking numerical code in tests.

Contains:
- sum_square_dev: naive sum of squared deviations
- update_counts: quartile bucket counter
- distribution_quartiles: quartile cut points of a scipy.stats distribution
- assert_chi_square_accept: chi-square goodness-of-fit assertion
- assert_quartiles_fit: bucket a sample by quartiles and test the fit
"""

from __future__ import annotations

import logging
from typing import Iterable, MutableSequence, Optional, Sequence

import numpy as np
from scipy import stats

from .config.constants import CHI_SQUARE_ALPHA, QUARTILE_PROBABILITIES

logger = logging.getLogger(__name__)


def sum_square_dev(values: Iterable[float], target: float) -> float:
    """
    Sum of squared deviations of ``values`` from ``target``.

    Accumulates term by term with no compensation, so it can serve as a
    reference for more careful implementations.

    Parameters
    ----------
    values : Iterable[float]
        Deviates
    target : float
        Value to compute deviations from

    Returns
    -------
    float
        Sum of squared deviations (0.0 for empty input)
    """
    sumsq = 0.0
    for v in values:
        dev = float(v) - target
        sumsq += dev * dev
    return sumsq


def update_counts(
    value: float,
    counts: MutableSequence[int],
    quartiles: Sequence[float],
) -> None:
    """
    Increment the quartile bucket that ``value`` falls in.

    counts[0] <-> 1st quartile ... counts[3] <-> top quartile. A value equal
    to a cut point belongs to the lower bucket, except at q1 where it goes
    to bucket 1.
    """
    if value < quartiles[0]:
        counts[0] += 1
    elif value > quartiles[2]:
        counts[3] += 1
    elif value > quartiles[1]:
        counts[2] += 1
    else:
        counts[1] += 1


def distribution_quartiles(distribution) -> np.ndarray:
    """
    Quartile cut points ``[q1, q2, q3]`` of a frozen scipy.stats distribution.

    Parameters
    ----------
    distribution : scipy.stats frozen distribution
        Anything exposing ``ppf``

    Returns
    -------
    np.ndarray
        Array of shape (3,)
    """
    return np.asarray(distribution.ppf(QUARTILE_PROBABILITIES), dtype=np.float64)


def assert_chi_square_accept(
    expected: Sequence[float],
    observed: Sequence[float],
    alpha: float = CHI_SQUARE_ALPHA,
    labels: Optional[Sequence[str]] = None,
) -> None:
    """
    Assert that observed counts are consistent with expected counts.

    Runs a Pearson chi-square goodness-of-fit test. Expected counts are
    rescaled to the observed total before computing the statistic.

    Parameters
    ----------
    expected : Sequence[float]
        Expected counts (all positive)
    observed : Sequence[float]
        Observed counts
    alpha : float
        Significance level, in (0, 0.5]
    labels : Optional[Sequence[str]]
        Bin labels used in the failure message (defaults to bin indices)

    Raises
    ------
    ValueError
        If the inputs are malformed
    AssertionError
        If the test rejects at level ``alpha``
    """
    expected = np.asarray(expected, dtype=np.float64)
    observed = np.asarray(observed, dtype=np.float64)

    if expected.shape != observed.shape or expected.ndim != 1:
        raise ValueError(
            f"expected and observed must be 1-D of equal length, got "
            f"{expected.shape} and {observed.shape}"
        )
    if expected.size < 2:
        raise ValueError(f"need at least 2 bins, got {expected.size}")
    if np.any(expected <= 0):
        raise ValueError("expected counts must be positive")
    if not 0 < alpha <= 0.5:
        raise ValueError(f"alpha must be in (0, 0.5], got {alpha}")
    if labels is None:
        labels = [str(i) for i in range(expected.size)]
    elif len(labels) != expected.size:
        raise ValueError("labels must match the number of bins")

    scaled = expected * (observed.sum() / expected.sum())
    chi_sq = float(np.sum((observed - scaled) ** 2 / scaled))
    p_value = float(stats.chi2.sf(chi_sq, df=expected.size - 1))
    logger.debug("chi-square = %.4f, p = %.4g (alpha = %g)", chi_sq, p_value, alpha)

    if p_value < alpha:
        rows = [f"{'value':>10} {'expected':>12} {'observed':>12}"]
        for label, e, o in zip(labels, scaled, observed):
            rows.append(f"{label:>10} {e:12.2f} {o:12.0f}")
        np.testing.assert_(
            False,
            f"Chi-square test failed p = {p_value:.4g} chisquare statistic = "
            f"{chi_sq:.4f}.\n" + "\n".join(rows) + "\nThis test can fail "
            f"randomly due to sampling error with probability {alpha}.",
        )


def assert_quartiles_fit(
    sample: Iterable[float],
    distribution,
    alpha: float = CHI_SQUARE_ALPHA,
) -> np.ndarray:
    """
    Assert that a sample is spread evenly over a distribution's quartiles.

    Returns
    -------
    np.ndarray
        The four bucket counts
    """
    quartiles = distribution_quartiles(distribution)
    counts = np.zeros(4, dtype=np.int64)
    n = 0
    for value in sample:
        update_counts(value, counts, quartiles)
        n += 1

    expected = np.full(4, n / 4.0)
    labels = ["Q1", "Q2", "Q3", "Q4"]
    assert_chi_square_accept(expected, counts, alpha=alpha, labels=labels)
    return counts
