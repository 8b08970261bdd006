"""
Package Express Data

Static reference data for limits, pricing, and session text.

Structure:
    - reference/limits.py:   weight and dimension limits
    - reference/pricing.py:  cost formula divisor and display format
    - reference/messages.py: user-facing strings
"""

from .reference.limits import (
    MAX_WEIGHT_LBS,
    MAX_DIMENSIONS_TOTAL_IN,
    WEIGHT_FIELD,
    DIMENSION_FIELDS,
    DIMENSIONS_TOTAL_FIELD,
)
from .reference.pricing import COST_DIVISOR, CURRENCY_FORMAT
from .reference import messages


__all__ = [
    # Limits
    "MAX_WEIGHT_LBS",
    "MAX_DIMENSIONS_TOTAL_IN",
    "WEIGHT_FIELD",
    "DIMENSION_FIELDS",
    "DIMENSIONS_TOTAL_FIELD",
    # Pricing
    "COST_DIVISOR",
    "CURRENCY_FORMAT",
    # Text
    "messages",
]
