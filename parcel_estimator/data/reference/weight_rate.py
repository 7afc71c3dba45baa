"""
Weight Rate

Linear charge per kilogram of shipping weight, on top of the distance tier.
Fractional kilograms are charged pro rata; rounding happens on the totals.
"""

RATE_PER_KG = 3000
