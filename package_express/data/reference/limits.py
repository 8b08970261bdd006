"""
Shipping Limits Configuration

Package Express acceptance limits. Units are implied: pounds for weight,
inches for dimensions.
"""

MAX_WEIGHT_LBS = 50           # Heaviest package accepted
MAX_DIMENSIONS_TOTAL_IN = 50  # Max of width + height + length

# Fields compared against the limits
WEIGHT_FIELD = "weight_lbs"
DIMENSION_FIELDS = ["width_in", "height_in", "length_in"]
DIMENSIONS_TOTAL_FIELD = "dimensions_total_in"
