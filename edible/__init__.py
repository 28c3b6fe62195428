"""
Edible nutrition evaluation engine.

This package converts per-100g nutrient measurements from a food-product
database into %Daily Value figures, display units and tier labels.

Structure:
- domain/: Reference tables, value objects and pure calculators
- application/: Services turning whole nutriment records into display rows
- infrastructure/: Configuration and logging setup
- tests/: Test suite
"""

__version__ = "1.0.0"

from edible.domain.nutrition.calculator import (  # noqa: E402
    calculate_daily_value,
    classify_dv_color,
    classify_dv_label,
    convert_salt_to_sodium,
    resolve_unit,
)

__all__ = [
    "calculate_daily_value",
    "classify_dv_color",
    "classify_dv_label",
    "convert_salt_to_sodium",
    "resolve_unit",
]
