"""
Domain exceptions.

Typed exceptions for explicit error handling.
"""

from __future__ import annotations


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    All domain-specific exceptions inherit from this.
    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# NUTRITION DOMAIN EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class NutritionDomainError(DomainError):
    """Base exception for nutrition domain."""

    pass


class ReferenceDataError(NutritionDomainError):
    """
    Reference tables are inconsistent.

    Raised when:
    - A Daily Reference Value is zero or negative
    - A nutrient key maps to a DV key missing from the DRV table
    - A DV key has no display unit

    Example:
        >>> raise ReferenceDataError("DV key 'protein' has no unit")
    """

    pass


# ═══════════════════════════════════════════════════════════
# VALIDATION EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ValidationError(DomainError):
    """
    Input validation failed.

    Raised when:
    - Invalid input format
    - Missing required fields
    - Out of range values

    Example:
        >>> raise ValidationError("Nutrient key cannot be empty")
    """

    pass


class InvalidMeasurementError(ValidationError):
    """
    Nutrient measurement rejected.

    Raised when:
    - Value is negative
    - Value is NaN or infinite
    - Value is not numeric

    Example:
        >>> raise InvalidMeasurementError("fat_100g: value must be >= 0, got -1")
    """

    pass
