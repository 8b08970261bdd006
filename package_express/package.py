"""
Package Record

One shipment's weight and dimensions, filled in field by field as the user
answers each prompt. Validity is checked separately by PackageValidator.
"""

from dataclasses import dataclass


@dataclass
class Package:
    """Weight in pounds, dimensions in inches. Starts empty (all zero)."""

    weight: float = 0.0
    width: float = 0.0
    height: float = 0.0
    length: float = 0.0

    def to_row(self) -> dict:
        """Shipment row in the column layout used by calculate_costs."""
        return {
            "weight_lbs": self.weight,
            "width_in": self.width,
            "height_in": self.height,
            "length_in": self.length,
        }
