"""
Limit Base Class

Shared base class for all Package Express shipping limits.
"""

from abc import ABC
import polars as pl


class Limit(ABC):
    """
    Base class for all shipping limits.

    A limit is exceeded when the measured value is strictly greater than
    the threshold. Reaching the threshold exactly is still accepted.

    Attributes:
        IDENTITY
            name      - Short code (e.g., "WEIGHT", "DIMENSIONS")

        RULE
            threshold - Largest accepted value
            message   - Text shown to the user when the limit is exceeded
    """

    # -------------------------------------------------------------------------
    # IDENTITY
    # -------------------------------------------------------------------------
    name: str

    # -------------------------------------------------------------------------
    # RULE
    # -------------------------------------------------------------------------
    threshold: float
    message: str

    # -------------------------------------------------------------------------
    # METHODS
    # -------------------------------------------------------------------------

    @classmethod
    def measure(cls, weight: float, width: float, height: float, length: float) -> float:
        """Value compared against the threshold."""
        raise NotImplementedError

    @classmethod
    def exceeded(cls, weight: float, width: float, height: float, length: float) -> bool:
        return cls.measure(weight, width, height, length) > cls.threshold

    @classmethod
    def conditions(cls) -> pl.Expr:
        """
        Polars expression for when this limit is exceeded.

        Default returns False (limit never triggers).
        Override to evaluate the rule on a shipment DataFrame.
        """
        return pl.lit(False)
