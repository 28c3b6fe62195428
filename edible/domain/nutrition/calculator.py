"""
Nutrition calculator - %Daily Value core logic.

Responsibilities:
- %DV per nutrient key against FDA Daily Reference Values
- Display unit resolution, also for nutrients without a DV
- Salt to sodium conversion (1 g salt = 400 mg sodium)
- Tier classification (High / Good / Moderate / Low) for badges and bars

All functions are pure: no I/O, no state, safe to call concurrently.
Missing data never raises; it yields a NoDailyValueResult.
"""

from __future__ import annotations

import math
from typing import Final, Optional

from edible.domain.nutrition.models import (
    DailyValueResult,
    DVResult,
    DVTier,
    NoDailyValueResult,
    NutrientMeasurement,
    NutrientUnit,
)
from edible.domain.nutrition.reference_values import (
    DAILY_REFERENCE_VALUES,
    NUTRIENT_DV_MAPPING,
    NUTRIENT_UNITS,
)

# Salt is ~40% sodium by mass: 1 g salt -> 400 mg sodium.
SALT_TO_SODIUM_MG_PER_G: Final[float] = 400.0

# Inclusive lower bounds, evaluated high to low.
HIGH_DV_THRESHOLD: Final[float] = 20.0
GOOD_DV_THRESHOLD: Final[float] = 10.0
MODERATE_DV_THRESHOLD: Final[float] = 5.0


def round_one_decimal(value: float) -> float:
    """Round to one decimal place, halves away from zero.

    NaN and infinities are returned unchanged.
    """
    if not math.isfinite(value):
        return value

    scaled = abs(value) * 10
    if not math.isfinite(scaled):
        return value

    rounded = math.floor(scaled + 0.5) / 10
    return -rounded if value < 0 and rounded else rounded


def resolve_unit(nutrient_key: str) -> str:
    """Resolve display unit for a nutrient key.

    Name patterns are checked before the DV table so nutrients without a
    Daily Value (energy, sugars) still get a stable unit. First match wins:

    1. "energy" or "kcal" -> kcal
    2. "sugars" -> g
    3. "salt" -> g
    4. mapped DV key -> unit from NUTRIENT_UNITS
    5. "vitamin" or "mineral" -> mg
    6. g

    Args:
        nutrient_key: Nutrient key, e.g. 'vitamin-c_100g'

    Returns:
        Unit string ('kcal', 'g', 'mg' or 'μg')
    """
    if "energy" in nutrient_key or "kcal" in nutrient_key:
        return NutrientUnit.KCAL.value

    if "sugars" in nutrient_key:
        return NutrientUnit.GRAM.value

    if "salt" in nutrient_key:
        return NutrientUnit.GRAM.value

    dv_key = NUTRIENT_DV_MAPPING.get(nutrient_key)
    if dv_key:
        return NUTRIENT_UNITS.get(dv_key, NutrientUnit.GRAM.value)

    if "vitamin" in nutrient_key or "mineral" in nutrient_key:
        return NutrientUnit.MILLIGRAM.value

    return NutrientUnit.GRAM.value


def _daily_value_for(nutrient_key: str) -> Optional[float]:
    dv_key = NUTRIENT_DV_MAPPING.get(nutrient_key)
    if not dv_key:
        return None

    daily_value = DAILY_REFERENCE_VALUES.get(dv_key)
    if not daily_value:
        return None

    return daily_value


def calculate_daily_value(nutrient_key: str, nutrient_value: float) -> DVResult:
    """Calculate %Daily Value for a nutrient amount per 100g.

    Args:
        nutrient_key: Nutrient key (e.g. 'fat_100g'); unknown keys allowed
        nutrient_value: Amount per 100g in the nutrient's unit

    Returns:
        DailyValueResult, or NoDailyValueResult when no DV applies

    Example:
        >>> result = calculate_daily_value("proteins_100g", 10)
        >>> assert result.has_dv and result.percentage == 20.0
        >>> assert calculate_daily_value("sugars_100g", 10).percentage is None
    """
    unit = resolve_unit(nutrient_key)
    daily_value = _daily_value_for(nutrient_key)

    if daily_value is None:
        return NoDailyValueResult(unit=unit)

    percentage = (nutrient_value / daily_value) * 100

    return DailyValueResult(
        daily_value=daily_value,
        percentage=round_one_decimal(percentage),
        unit=unit,
    )


def evaluate_measurement(measurement: NutrientMeasurement) -> DVResult:
    """Calculate %DV for an already validated measurement.

    Validated counterpart of calculate_daily_value: build the measurement
    with NutrientMeasurement.from_raw to reject negative or NaN input.
    """
    return calculate_daily_value(measurement.key, measurement.value)


def convert_salt_to_sodium(salt_grams: float) -> float:
    """Convert salt (g) to sodium equivalent (mg).

    Example:
        >>> assert convert_salt_to_sodium(1) == 400
        >>> assert convert_salt_to_sodium(0.5) == 200
    """
    return salt_grams * SALT_TO_SODIUM_MG_PER_G


def classify_dv_tier(percentage: float) -> DVTier:
    """Classify %DV into a tier (20 / 10 / 5 thresholds, inclusive)."""
    if percentage >= HIGH_DV_THRESHOLD:
        return DVTier.HIGH
    elif percentage >= GOOD_DV_THRESHOLD:
        return DVTier.GOOD
    elif percentage >= MODERATE_DV_THRESHOLD:
        return DVTier.MODERATE
    else:
        return DVTier.LOW


def classify_dv_color(percentage: float) -> str:
    """Hex color for the %DV progress bar."""
    return classify_dv_tier(percentage).color


def classify_dv_label(percentage: float) -> str:
    """Descriptive label for the %DV level."""
    return classify_dv_tier(percentage).label


def progress_width(percentage: Optional[float]) -> float:
    """Progress bar width in percent, clamped to [0, 100]."""
    if percentage is None:
        return 0.0
    return max(0.0, min(100.0, float(percentage)))


__all__ = [
    "SALT_TO_SODIUM_MG_PER_G",
    "HIGH_DV_THRESHOLD",
    "GOOD_DV_THRESHOLD",
    "MODERATE_DV_THRESHOLD",
    "round_one_decimal",
    "resolve_unit",
    "calculate_daily_value",
    "evaluate_measurement",
    "convert_salt_to_sodium",
    "classify_dv_tier",
    "classify_dv_color",
    "classify_dv_label",
    "progress_width",
]
