"""
Floating-point and serialization assertions for math unit tests.

Contains:
- assert_equals / assert_same: NaN- and infinity-aware scalar comparison
- assert_array_equals: element-wise comparison with per-index reporting
- assert_relatively_equals: tolerance scaled to the expected magnitude
- check_serialized_equality: pickle round trip preserves equality and hash

All failures surface as ``AssertionError`` raised through ``numpy.testing``.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import numpy as np

from .serialization import serialize_and_recover

logger = logging.getLogger(__name__)


def assert_equals(
    expected: float,
    actual: float,
    delta: float,
    msg: Optional[str] = None,
) -> None:
    """
    Verify that expected and actual are within delta, or are both NaN or
    infinities of the same sign.

    Parameters
    ----------
    expected : float
        Reference value
    actual : float
        Value under test
    delta : float
        Maximum allowed absolute difference
    msg : Optional[str]
        Message attached to the failure

    Raises
    ------
    AssertionError
        If the values are not equal under the rule above
    """
    if np.isnan(expected):
        np.testing.assert_(np.isnan(actual), f"{actual} is not NaN.")
    else:
        header = f"{msg}\n" if msg else ""
        np.testing.assert_(
            _equals_including_nan(expected, actual, delta),
            f"{header}expected: {expected} but was: {actual} (delta = {delta})",
        )


def assert_same(expected: float, actual: float) -> None:
    """Verify that two values are identical, NaN and same-signed infinities included."""
    assert_equals(expected, actual, 0)


def _equals_including_nan(expected: float, actual: float, delta: float) -> bool:
    if np.isnan(expected) or np.isnan(actual):
        return bool(np.isnan(expected) and np.isnan(actual))
    # same-signed infinities
    if expected == actual:
        return True
    return bool(abs(expected - actual) <= delta)


def assert_array_equals(
    expected: Sequence[float],
    observed: Sequence[float],
    tolerance: float,
    msg: Optional[str] = None,
) -> None:
    """
    Verify that two arrays have the same length and that each pair of
    elements satisfies the ``assert_equals`` rule.

    Every mismatching index is listed in the failure message.
    """
    expected = np.asarray(expected, dtype=np.float64)
    observed = np.asarray(observed, dtype=np.float64)
    header = f"{msg}\n" if msg else ""

    np.testing.assert_(
        expected.shape[0] == observed.shape[0],
        f"{header}(arrays not same length) expected length = "
        f"{expected.shape[0]} observed length = {observed.shape[0]}",
    )

    lines = []
    for i, (e, o) in enumerate(zip(expected, observed)):
        if not _equals_including_nan(e, o, tolerance):
            lines.append(f"[{i}] Elements differ. Expected: {e} observed: {o}")
    np.testing.assert_(not lines, header + "\n".join(lines))


def assert_relatively_equals(
    expected: float,
    actual: float,
    relative_error: float,
    msg: Optional[str] = None,
) -> None:
    """Verify that actual is within ``|relative_error * expected|`` of expected."""
    assert_equals(expected, actual, abs(relative_error * expected), msg)


def check_serialized_equality(obj: Any) -> None:
    """
    Verify that pickling preserves equality and hash.

    The object is round-tripped through ``serialize_and_recover``; a failed
    round trip yields None and fails the equality check. Equality treats NaN
    as equal to NaN; the hash check only applies to hashable objects whose
    own ``==`` accepts the recovered copy, since NaN hashes by identity.

    Parameters
    ----------
    obj : Any
        The object to serialize and recover
    """
    recovered = serialize_and_recover(obj)
    np.testing.assert_equal(recovered, obj, err_msg="Equals check")

    try:
        expected_hash = hash(obj)
    except TypeError:
        logger.debug("Skipping hash check for unhashable %s", type(obj).__name__)
        return
    if not (recovered == obj):
        logger.debug("Skipping hash check for NaN-valued %s", type(obj).__name__)
        return
    np.testing.assert_equal(hash(recovered), expected_hash, err_msg="HashCode check")
