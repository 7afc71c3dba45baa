"""
Package Input Errors

Raised while turning raw form input into a PackageInput. The pricing engine
never raises these; it assumes its input has already been validated.
"""


class PackageInputError(ValueError):
    """Base class for invalid package input."""

    message = "Invalid package input"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class InvalidWeight(PackageInputError):
    """Weight missing, non-numeric, or not positive."""

    message = "Please enter a valid package weight"


class InvalidDimensions(PackageInputError):
    """Length, width or height missing, non-numeric, or not positive."""

    message = "Please enter valid package dimensions"
