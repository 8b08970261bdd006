"""
Package Express Module

Interactive shipping quote for a single package: weight and dimension
limits, cost formula, and the console session that ties them together.
"""

from .calculate_costs import ShippingCalculator, calculate_costs
from .package import Package
from .version import VERSION

__all__ = ["ShippingCalculator", "calculate_costs", "Package", "VERSION"]
