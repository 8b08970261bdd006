"""
Maximum Weight Limit

Packages heavier than 50 lbs are refused.
"""

import polars as pl

from ..data import MAX_WEIGHT_LBS, WEIGHT_FIELD, messages
from .base import Limit


class MaxWeight(Limit):
    """Maximum Weight - actual weight over the limit."""

    # Identity
    name = "WEIGHT"

    # Rule
    threshold = MAX_WEIGHT_LBS
    message = messages.TOO_HEAVY

    @classmethod
    def measure(cls, weight: float, width: float, height: float, length: float) -> float:
        return weight

    @classmethod
    def conditions(cls) -> pl.Expr:
        return pl.col(WEIGHT_FIELD) > cls.threshold
