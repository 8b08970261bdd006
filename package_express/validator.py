"""
Package Validator

Checks a package against the Package Express limits. Each check returns an
(ok, error_message) pair; error_message is empty when ok is True.

Negative, zero and non-finite values are not rejected here.
"""

from .limits import MaxWeight, MaxDimensions


class PackageValidator:
    """Stateless validator built on the limit classes."""

    def validate_weight(self, weight: float) -> tuple[bool, str]:
        if MaxWeight.exceeded(weight, 0.0, 0.0, 0.0):
            return False, MaxWeight.message
        return True, ""

    def validate_dimensions(self, width: float, height: float, length: float) -> tuple[bool, str]:
        if MaxDimensions.exceeded(0.0, width, height, length):
            return False, MaxDimensions.message
        return True, ""
