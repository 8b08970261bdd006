"""
Maximum Dimensions Limit

Packages whose width + height + length exceeds 50 inches are refused.
"""

import polars as pl

from ..data import MAX_DIMENSIONS_TOTAL_IN, DIMENSION_FIELDS, messages
from .base import Limit


class MaxDimensions(Limit):
    """Maximum Dimensions - sum of the three sides over the limit."""

    # Identity
    name = "DIMENSIONS"

    # Rule
    threshold = MAX_DIMENSIONS_TOTAL_IN
    message = messages.TOO_BIG

    @classmethod
    def measure(cls, weight: float, width: float, height: float, length: float) -> float:
        return width + height + length

    @classmethod
    def conditions(cls) -> pl.Expr:
        return pl.sum_horizontal(DIMENSION_FIELDS) > cls.threshold
