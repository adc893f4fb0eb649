"""
Math Test Utilities
===================

Static helper routines for the unit tests of a numerical library.

This package provides:

- **assertions**: NaN/infinity-aware float comparisons and a pickle
  equality check
- **serialization**: serialize-and-recover round trip
- **stats**: naive sum of squared deviations, quartile bucket counts and
  chi-square goodness-of-fit assertions
- **density**: zero-mass elimination for discrete density tables
- **config**: shared numerical defaults

Usage
-----

```python
import numpy as np
from scipy import stats
from math_testutils import assert_equals, assert_quartiles_fit

assert_equals(0.1 + 0.2, 0.3, 1e-12)
rng = np.random.default_rng(0)
assert_quartiles_fit(rng.normal(size=1000), stats.norm())
```
"""

__version__ = "0.1.0"

from .assertions import (
    assert_equals,
    assert_same,
    assert_array_equals,
    assert_relatively_equals,
    check_serialized_equality,
)

from .serialization import serialize_and_recover

from .stats import (
    sum_square_dev,
    update_counts,
    distribution_quartiles,
    assert_chi_square_accept,
    assert_quartiles_fit,
)

from .density import eliminate_zero_mass_points

__all__ = [
    "__version__",
    # Assertions
    "assert_equals",
    "assert_same",
    "assert_array_equals",
    "assert_relatively_equals",
    "check_serialized_equality",
    # Serialization
    "serialize_and_recover",
    # Statistics
    "sum_square_dev",
    "update_counts",
    "distribution_quartiles",
    "assert_chi_square_accept",
    "assert_quartiles_fit",
    # Density
    "eliminate_zero_mass_points",
]
