"""
Package Express Shipping Cost Calculator

Two entry points share one formula:

    cost = width * height * length * weight / 100

SINGLE PACKAGE
--------------
    ShippingCalculator().calculate_cost(package) prices one Package as-is.
    No limits are applied; the caller validates first.

BATCH
-----
    DataFrame in, DataFrame out. The input needs the columns below; the
    output is the same DataFrame with limit flags and costs appended.

REQUIRED INPUT COLUMNS
----------------------
    weight_lbs  - Actual weight in pounds
    width_in    - Package width in inches
    height_in   - Package height in inches
    length_in   - Package length in inches

OUTPUT COLUMNS ADDED
--------------------
    supplement_shipments() adds:
        - dimensions_total_in
        - exceeds_* flags (one per limit), is_shippable

    calculate() adds:
        - cost_total (null when the package is not shippable)
        - calculator_version

USAGE
-----
    from package_express.calculate_costs import calculate_costs
    result = calculate_costs(df)
"""

import polars as pl

from .version import VERSION
from .package import Package
from .data import COST_DIVISOR, DIMENSION_FIELDS, DIMENSIONS_TOTAL_FIELD, WEIGHT_FIELD
from .limits import ALL


REQUIRED_COLUMNS = [WEIGHT_FIELD] + DIMENSION_FIELDS


# =============================================================================
# SINGLE PACKAGE
# =============================================================================

class ShippingCalculator:
    """Prices a single package. Pure; no rounding."""

    def calculate_cost(self, package: Package) -> float:
        return (package.width * package.height * package.length * package.weight) / COST_DIVISOR


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def calculate_costs(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate shipping costs for a shipment DataFrame.

    Args:
        df: Shipment DataFrame with required columns (see module docstring)

    Returns:
        DataFrame with limit flags and costs appended
    """
    df = supplement_shipments(df)
    df = calculate(df)
    return df


# =============================================================================
# SUPPLEMENT SHIPMENTS
# =============================================================================

def supplement_shipments(df: pl.DataFrame) -> pl.DataFrame:
    """
    Add the dimension total and one exceeds_* flag per limit.

    Raises:
        ValueError: If a required column is missing
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required column(s): {', '.join(missing)}")

    df = df.with_columns(
        pl.sum_horizontal(DIMENSION_FIELDS).cast(pl.Float64).alias(DIMENSIONS_TOTAL_FIELD)
    )
    df = _apply_limits(df)

    return df


def _apply_limits(df: pl.DataFrame) -> pl.DataFrame:
    """Flag every limit independently, then combine into is_shippable."""
    flag_cols = [f"exceeds_{limit.name.lower()}" for limit in ALL]

    df = df.with_columns([
        limit.conditions().alias(flag_col)
        for limit, flag_col in zip(ALL, flag_cols)
    ])

    return df.with_columns(
        (~pl.any_horizontal(flag_cols)).alias("is_shippable")
    )


# =============================================================================
# CALCULATE COSTS
# =============================================================================

def calculate(df: pl.DataFrame) -> pl.DataFrame:
    """
    Calculate costs for supplemented shipments.

    Args:
        df: Supplemented shipment DataFrame from supplement_shipments

    Returns:
        DataFrame with cost_total and calculator_version
    """
    df = _calculate_total(df)
    df = _stamp_version(df)
    return df


def _calculate_total(df: pl.DataFrame) -> pl.DataFrame:
    """Apply the cost formula to shippable rows; refused rows get null."""
    cost = (
        pl.col("width_in") * pl.col("height_in") * pl.col("length_in") * pl.col(WEIGHT_FIELD)
    ).cast(pl.Float64) / COST_DIVISOR

    return df.with_columns(
        pl.when(pl.col("is_shippable"))
        .then(cost)
        .otherwise(pl.lit(None, dtype=pl.Float64))
        .alias("cost_total")
    )


def _stamp_version(df: pl.DataFrame) -> pl.DataFrame:
    """Stamp calculator version on output."""
    return df.with_columns(pl.lit(VERSION).alias("calculator_version"))


__all__ = [
    "ShippingCalculator",
    "calculate_costs",
    "supplement_shipments",
    "calculate",
    "REQUIRED_COLUMNS",
]
