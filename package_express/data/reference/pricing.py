"""
Pricing Configuration

cost = width * height * length * weight / COST_DIVISOR
"""

COST_DIVISOR = 100
CURRENCY_FORMAT = "${:.2f}"   # Two decimal places, no rounding before display
