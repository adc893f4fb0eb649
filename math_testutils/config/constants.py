"""
Numerical defaults shared by the test helpers.
"""

from __future__ import annotations

import pickle


# =============================================================================
# Goodness of fit
# =============================================================================

# Significance level below which a chi-square test rejects the fit
CHI_SQUARE_ALPHA = 0.001

# Cut points that split a distribution into four equiprobable buckets
QUARTILE_PROBABILITIES = (0.25, 0.5, 0.75)

# =============================================================================
# Serialization
# =============================================================================

PICKLE_PROTOCOL = pickle.HIGHEST_PROTOCOL
