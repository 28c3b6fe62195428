"""
Nutrition evaluation models.

Immutable value objects for nutrient measurements and %DV results.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Any, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from edible.domain.shared.errors import InvalidMeasurementError


class NutrientUnit(str, Enum):
    """Display unit for a nutrient amount."""

    KCAL = "kcal"
    GRAM = "g"
    MILLIGRAM = "mg"
    MICROGRAM = "μg"


class DVTier(str, Enum):
    """
    %DV tier used for badges and progress bar colors.

    Follows the FDA "5/20" reading rule: 5% DV or less is low,
    20% DV or more is high.
    """

    HIGH = "HIGH"
    GOOD = "GOOD"
    MODERATE = "MODERATE"
    LOW = "LOW"

    @property
    def label(self) -> str:
        """Human readable label."""
        return _TIER_LABELS[self]

    @property
    def color(self) -> str:
        """Hex color token."""
        return _TIER_COLORS[self]


_TIER_LABELS = {
    DVTier.HIGH: "High",
    DVTier.GOOD: "Good",
    DVTier.MODERATE: "Moderate",
    DVTier.LOW: "Low",
}

_TIER_COLORS = {
    DVTier.HIGH: "#10B981",  # green
    DVTier.GOOD: "#3B82F6",  # blue
    DVTier.MODERATE: "#F59E0B",  # yellow
    DVTier.LOW: "#6B7280",  # gray
}


class NutrientMeasurement(BaseModel):
    """
    Single nutrient amount per 100g of product.

    Example:
        >>> m = NutrientMeasurement(key="fat_100g", value=15.6)
        >>> assert m.value == 15.6
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., min_length=1, description="Nutrient key, e.g. 'fat_100g'")
    value: float = Field(..., ge=0, description="Amount per 100g")

    @field_validator("key")
    @classmethod
    def not_blank(cls, v: str) -> str:
        """Ensure key is not whitespace."""
        if not v.strip():
            raise ValueError("Nutrient key cannot be empty or whitespace")
        return v.strip()

    @field_validator("value")
    @classmethod
    def finite(cls, v: float) -> float:
        """Reject NaN and infinity."""
        if not math.isfinite(v):
            raise ValueError("Nutrient value must be finite")
        return v

    @classmethod
    def from_raw(cls, key: str, value: Any) -> NutrientMeasurement:
        """
        Build a measurement from an untrusted record entry.

        Args:
            key: Nutrient key
            value: Raw value (number or numeric string)

        Returns:
            Validated measurement

        Raises:
            InvalidMeasurementError: If the value is not a finite,
                non-negative number or the key is blank
        """
        if not isinstance(key, str) or not key.strip():
            raise InvalidMeasurementError("Nutrient key cannot be empty")
        if isinstance(value, bool):
            raise InvalidMeasurementError(f"{key}: value must be numeric, got {value!r}")
        try:
            number = float(value)
        except (TypeError, ValueError) as e:
            raise InvalidMeasurementError(f"{key}: value must be numeric, got {value!r}") from e

        if not math.isfinite(number):
            raise InvalidMeasurementError(f"{key}: value must be finite, got {number}")
        if number < 0:
            raise InvalidMeasurementError(f"{key}: value must be >= 0, got {number}")

        return cls(key=key, value=number)


class DailyValueResult(BaseModel):
    """%DV result for a nutrient that has a Daily Value."""

    model_config = ConfigDict(frozen=True)

    has_dv: Literal[True] = True
    daily_value: float = Field(..., gt=0, description="Reference daily amount")
    percentage: float = Field(..., description="%DV rounded to one decimal")
    unit: str

    def to_dict(self) -> dict[str, Any]:
        """Presentation-layer record."""
        return {
            "dailyValue": self.daily_value,
            "percentage": self.percentage,
            "unit": self.unit,
            "hasDV": True,
        }


class NoDailyValueResult(BaseModel):
    """Result for a nutrient without a Daily Value (unit only)."""

    model_config = ConfigDict(frozen=True)

    has_dv: Literal[False] = False
    daily_value: None = None
    percentage: None = None
    unit: str

    def to_dict(self) -> dict[str, Any]:
        """Presentation-layer record."""
        return {
            "dailyValue": None,
            "percentage": None,
            "unit": self.unit,
            "hasDV": False,
        }


# Tagged on has_dv: check it before reading daily_value/percentage.
DVResult = Union[DailyValueResult, NoDailyValueResult]


class NutritionFactRow(BaseModel):
    """One displayed nutrient row with its %DV and badge."""

    model_config = ConfigDict(frozen=True)

    key: str
    amount: float = Field(..., description="Amount per 100g as reported")
    unit: str
    result: DVResult
    tier: Optional[DVTier] = None
    bar_width: float = Field(0.0, ge=0, le=100, description="Progress bar width (%)")

    @property
    def label(self) -> Optional[str]:
        """Tier label, None when no DV applies."""
        return self.tier.label if self.tier else None

    @property
    def color(self) -> Optional[str]:
        """Tier color, None when no DV applies."""
        return self.tier.color if self.tier else None


class NutritionFacts(BaseModel):
    """Evaluated nutriment record, rows in display order."""

    model_config = ConfigDict(frozen=True)

    rows: list[NutritionFactRow] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list, description="Keys rejected as invalid")

    def get(self, key: str) -> Optional[NutritionFactRow]:
        """Find row by nutrient key."""
        for row in self.rows:
            if row.key == key:
                return row
        return None
