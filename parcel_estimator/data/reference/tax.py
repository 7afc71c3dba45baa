"""
Tax and Insurance

Both are percentages of the subtotal (base + weight + category surcharge).
Neither is applied on top of the other.
"""

TAX_RATE = 0.11               # 11% VAT, no exemptions
INSURANCE_RATE = 0.02         # 2% of subtotal, only when insured
