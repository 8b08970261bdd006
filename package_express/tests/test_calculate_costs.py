"""
Unit Tests for Package Express Cost Calculator

Tests the single-package formula and the batch DataFrame pipeline.

Run with: pytest package_express/tests/test_calculate_costs.py -v
"""

import pytest
import polars as pl

from package_express.calculate_costs import (
    ShippingCalculator,
    calculate_costs,
    supplement_shipments,
    calculate,
)
from package_express.package import Package
from package_express.version import VERSION


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def calculator():
    return ShippingCalculator()


@pytest.fixture
def base_shipment():
    """Base shipment within every limit."""
    return pl.DataFrame({
        "weight_lbs": [10.0],
        "width_in": [10.0],
        "height_in": [10.0],
        "length_in": [10.0],
    })


# =============================================================================
# SINGLE PACKAGE
# =============================================================================

class TestCalculateCost:

    def test_ten_cubed_times_ten(self, calculator):
        """10 x 10 x 10 x 10 / 100 = 100."""
        package = Package(weight=10.0, width=10.0, height=10.0, length=10.0)
        assert calculator.calculate_cost(package) == pytest.approx(100.0)

    @pytest.mark.parametrize("weight,width,height,length", [
        (2.5, 4.0, 6.0, 8.0),
        (50.0, 16.0, 17.0, 17.0),
        (0.1, 0.3, 0.7, 1.1),
    ])
    def test_formula(self, calculator, weight, width, height, length):
        package = Package(weight=weight, width=width, height=height, length=length)
        expected = width * height * length * weight / 100
        assert calculator.calculate_cost(package) == pytest.approx(expected)

    def test_no_rounding(self, calculator):
        package = Package(weight=1.0, width=1.0, height=1.0, length=1.234)
        assert calculator.calculate_cost(package) == pytest.approx(0.01234)

    def test_idempotent(self, calculator):
        package = Package(weight=3.0, width=7.0, height=11.0, length=13.0)
        first = calculator.calculate_cost(package)
        assert calculator.calculate_cost(package) == first
        assert package == Package(weight=3.0, width=7.0, height=11.0, length=13.0)

    def test_empty_package_costs_zero(self, calculator):
        assert calculator.calculate_cost(Package()) == 0.0


# =============================================================================
# SUPPLEMENT TESTS
# =============================================================================

class TestSupplementShipments:

    def test_dimensions_total(self, base_shipment):
        df = supplement_shipments(base_shipment)
        assert df["dimensions_total_in"][0] == pytest.approx(30.0)

    def test_shippable(self, base_shipment):
        df = supplement_shipments(base_shipment)
        assert df["exceeds_weight"][0] == False
        assert df["exceeds_dimensions"][0] == False
        assert df["is_shippable"][0] == True

    def test_too_heavy_flag(self, base_shipment):
        shipment = base_shipment.with_columns(pl.lit(60.0).alias("weight_lbs"))
        df = supplement_shipments(shipment)
        assert df["exceeds_weight"][0] == True
        assert df["is_shippable"][0] == False

    def test_too_big_flag(self, base_shipment):
        shipment = base_shipment.with_columns([
            pl.lit(20.0).alias("width_in"),
            pl.lit(20.0).alias("height_in"),
            pl.lit(20.0).alias("length_in"),
        ])
        df = supplement_shipments(shipment)
        assert df["exceeds_dimensions"][0] == True
        assert df["exceeds_weight"][0] == False
        assert df["is_shippable"][0] == False

    def test_limits_at_boundary(self, base_shipment):
        """Weight 50 and dimension total 50 are both accepted."""
        shipment = base_shipment.with_columns([
            pl.lit(50.0).alias("weight_lbs"),
            pl.lit(25.0).alias("length_in"),
            pl.lit(15.0).alias("width_in"),
        ])
        df = supplement_shipments(shipment)
        assert df["is_shippable"][0] == True

    def test_missing_column(self, base_shipment):
        with pytest.raises(ValueError, match="length_in"):
            supplement_shipments(base_shipment.drop("length_in"))


# =============================================================================
# CALCULATE TESTS
# =============================================================================

class TestCalculate:

    def test_cost_total(self, base_shipment):
        df = calculate_costs(base_shipment)
        assert df["cost_total"][0] == pytest.approx(100.0)

    def test_refused_rows_have_no_cost(self, base_shipment):
        shipment = base_shipment.with_columns(pl.lit(60.0).alias("weight_lbs"))
        df = calculate_costs(shipment)
        assert df["cost_total"][0] is None

    def test_integer_columns(self):
        df = calculate_costs(pl.DataFrame({
            "weight_lbs": [10],
            "width_in": [10],
            "height_in": [10],
            "length_in": [10],
        }))
        assert df["cost_total"].dtype == pl.Float64
        assert df["cost_total"][0] == pytest.approx(100.0)

    def test_batch_matches_single_package(self, calculator):
        rows = [
            Package(weight=2.0, width=3.0, height=4.0, length=5.0),
            Package(weight=49.5, width=16.5, height=16.5, length=17.0),
            Package(weight=7.25, width=1.5, height=9.0, length=12.0),
        ]
        df = calculate_costs(pl.DataFrame([p.to_row() for p in rows]))
        for package, cost in zip(rows, df["cost_total"].to_list()):
            assert cost == pytest.approx(calculator.calculate_cost(package))

    def test_version_stamped(self, base_shipment):
        df = calculate(supplement_shipments(base_shipment))
        assert df["calculator_version"][0] == VERSION

    def test_input_columns_preserved(self, base_shipment):
        shipment = base_shipment.with_columns(pl.lit("A-1").alias("order_id"))
        df = calculate_costs(shipment)
        assert df["order_id"][0] == "A-1"
        assert len(df) == 1
