"""
Billable Weight Configuration

HOW VOLUMETRIC WEIGHT WORKS
---------------------------
Shipping weight = max(actual_weight, volumetric_weight)

    volumetric_weight_kg = cubic_cm / 6000

There is no threshold - every package compares actual vs volumetric weight
and bills the higher.
"""

DIM_FACTOR = 6000             # Cubic centimeters per kilogram
DIM_THRESHOLD = 0             # No threshold - always compare actual vs volumetric

# Fields used in calculation
THRESHOLD_FIELD = "cubic_cm"  # Compare this field against DIM_THRESHOLD
FACTOR_FIELD = "cubic_cm"     # Divide this field by DIM_FACTOR for volumetric weight
