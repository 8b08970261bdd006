"""
Package Express Limits Package

Exports all limit classes in the order they are checked.

Processing Order:
    1. MaxWeight     - checked as soon as the weight is known
    2. MaxDimensions - checked once width, height and length are known

Usage:
    from package_express.limits import ALL, MaxWeight, MaxDimensions
"""

from .base import Limit
from .max_weight import MaxWeight
from .max_dimensions import MaxDimensions


# All limits - order matches the order the session collects input
ALL: list[type[Limit]] = [MaxWeight, MaxDimensions]


# =============================================================================
# HELPERS
# =============================================================================

def get_limit(name: str) -> type[Limit]:
    """Get a limit class by its short code."""
    for limit in ALL:
        if limit.name == name:
            return limit
    raise KeyError(f"Unknown limit: {name}")


# =============================================================================
# VALIDATION
# =============================================================================

def validate_limits() -> None:
    """
    Validate limit configuration integrity.

    Raises ValueError if any configuration issues are found.
    Called at import time to fail fast on configuration errors.
    """
    errors = []
    seen = set()

    for limit in ALL:
        name = getattr(limit, "name", None)
        if not name:
            errors.append(f"{limit.__name__}: missing name")
        elif name in seen:
            errors.append(f"{name}: duplicate name")
        else:
            seen.add(name)

        if not getattr(limit, "message", None):
            errors.append(f"{limit.__name__}: missing message")

        threshold = getattr(limit, "threshold", None)
        if threshold is None or threshold <= 0:
            errors.append(f"{limit.__name__}: threshold must be positive, got {threshold!r}")

    if errors:
        raise ValueError("Limit configuration errors:\n  " + "\n  ".join(errors))


# Run validation at import time
validate_limits()


__all__ = [
    "Limit",
    "MaxWeight",
    "MaxDimensions",
    "ALL",
    "get_limit",
    "validate_limits",
]
