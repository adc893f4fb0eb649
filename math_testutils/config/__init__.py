"""
Configuration module for math_testutils.

Contains the numerical defaults used across the helpers.
"""

from .constants import (
    CHI_SQUARE_ALPHA,
    QUARTILE_PROBABILITIES,
    PICKLE_PROTOCOL,
)

__all__ = [
    "CHI_SQUARE_ALPHA",
    "QUARTILE_PROBABILITIES",
    "PICKLE_PROTOCOL",
]
