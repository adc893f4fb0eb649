"""
Unit tests for the math_testutils package.

Test suite covers:
- Floating-point assertions (NaN, infinities, tolerance)
- Serialize-and-recover round trip and serialization equality
- Sum of squared deviations and quartile bucketing
- Chi-square goodness-of-fit helpers
- Zero-mass point elimination
"""
