"""
Input Validation

Turns raw form values (strings or numbers) into a PackageInput.

Weight is checked before dimensions, so a form with both wrong reports the
weight first.
"""

import math

from .errors import InvalidDimensions, InvalidWeight
from .models import Category, City, PackageInput


def _positive_number(value) -> float | None:
    """Parse value as a finite number > 0, or return None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    return number


def validate_weight(weight) -> float:
    """
    Parse a declared weight in kilograms.

    Raises:
        InvalidWeight: If weight is missing, non-numeric, or <= 0
    """
    number = _positive_number(weight)
    if number is None:
        raise InvalidWeight()
    return number


def validate_dimensions(length, width, height) -> tuple[float, float, float]:
    """
    Parse length, width and height in centimeters.

    Raises:
        InvalidDimensions: If any dimension is missing, non-numeric, or <= 0
    """
    parsed = tuple(_positive_number(v) for v in (length, width, height))
    if any(v is None for v in parsed):
        raise InvalidDimensions()
    return parsed


def parse_package(
    weight,
    length,
    width,
    height,
    origin: City | str = City.JAKARTA,
    destination: City | str = City.BANDUNG,
    category: Category | str = Category.DOCUMENTS,
    insured: bool = False,
) -> PackageInput:
    """
    Validate raw form input and build a PackageInput.

    Defaults match the initial state of the estimate form.

    Raises:
        InvalidWeight: Bad weight (checked first)
        InvalidDimensions: Bad length, width or height
        ValueError: origin, destination or category outside their enumerations
    """
    weight_kg = validate_weight(weight)
    length_cm, width_cm, height_cm = validate_dimensions(length, width, height)

    return PackageInput(
        weight_kg=weight_kg,
        length_cm=length_cm,
        width_cm=width_cm,
        height_cm=height_cm,
        origin=City(origin),
        destination=City(destination),
        category=Category(category),
        insured=bool(insured),
    )


__all__ = [
    "validate_weight",
    "validate_dimensions",
    "parse_package",
]
