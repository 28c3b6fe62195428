"""
Nutrition facts service.

Turns a whole nutriment record into display rows: %DV, tier badge and
progress bar width per nutrient, in label order.
"""

from typing import Any, Mapping, Optional

import structlog

from edible.domain.barcode.openfoodfacts_mapper import OpenFoodFactsMapper
from edible.domain.barcode.openfoodfacts_models import OFFProduct
from edible.domain.nutrition.calculator import (
    calculate_daily_value,
    classify_dv_tier,
    convert_salt_to_sodium,
    progress_width,
    resolve_unit,
)
from edible.domain.nutrition.models import (
    DVResult,
    DVTier,
    NutrientMeasurement,
    NutritionFactRow,
    NutritionFacts,
)
from edible.domain.shared.errors import InvalidMeasurementError

logger = structlog.get_logger(__name__)

SALT_KEY = "salt_100g"
SODIUM_KEY = "sodium_100g"

# Label order; other keys follow alphabetically.
DISPLAY_ORDER = (
    "energy_kcal_100g",
    "fat_100g",
    "saturated-fat_100g",
    "carbohydrates_100g",
    "sugars_100g",
    "fiber_100g",
    "proteins_100g",
    SALT_KEY,
    SODIUM_KEY,
)


def _display_rank(key: str) -> tuple[int, str]:
    try:
        return (DISPLAY_ORDER.index(key), key)
    except ValueError:
        return (len(DISPLAY_ORDER), key)


class NutritionFactsService:
    """Evaluates nutriment records for the nutrition facts panel.

    Flow:
    1. Validate each entry (negative, NaN and non-numeric values skipped)
    2. Convert salt to sodium mg before the %DV lookup
    3. Calculate %DV, tier and bar width per nutrient
    4. Sort rows in label order
    """

    def evaluate(self, nutriments: Mapping[str, Any]) -> NutritionFacts:
        """Evaluate a nutriment record.

        Args:
            nutriments: Nutrient key -> amount per 100g

        Returns:
            NutritionFacts with rows in display order and skipped keys

        Example:
            >>> facts = NutritionFactsService().evaluate({"salt_100g": 1})
            >>> row = facts.get("salt_100g")
            >>> assert row.result.percentage == 17.4
            >>> assert row.label == "Good"
        """
        rows: list[NutritionFactRow] = []
        skipped: list[str] = []

        for key, raw_value in nutriments.items():
            try:
                measurement = NutrientMeasurement.from_raw(key, raw_value)
            except InvalidMeasurementError as e:
                logger.warning(
                    "Skipping invalid nutrient measurement",
                    key=key,
                    error=str(e),
                )
                skipped.append(str(key))
                continue

            rows.append(self.evaluate_measurement(measurement))

        rows.sort(key=lambda row: _display_rank(row.key))

        logger.debug(
            "Nutrition facts evaluated",
            rows=len(rows),
            with_dv=sum(1 for row in rows if row.result.has_dv),
            skipped=len(skipped),
        )

        return NutritionFacts(rows=rows, skipped=skipped)

    def evaluate_product(self, product: OFFProduct) -> NutritionFacts:
        """Evaluate the nutriments of an OpenFoodFacts product.

        Product nutriments are already validated by the mapper, so every
        entry becomes a row.
        """
        measurements = OpenFoodFactsMapper.to_measurements(product)
        logger.debug(
            "Evaluating product nutriments",
            code=product.code,
            nutriments=len(measurements),
        )

        rows = [self.evaluate_measurement(m) for m in measurements]
        rows.sort(key=lambda row: _display_rank(row.key))
        return NutritionFacts(rows=rows)

    def evaluate_measurement(self, measurement: NutrientMeasurement) -> NutritionFactRow:
        """Build a single display row.

        Salt is evaluated through its sodium equivalent, since the sodium
        Daily Value is stored in mg and salt arrives in g.
        """
        result = self._daily_value(measurement)

        tier: Optional[DVTier] = None
        if result.has_dv:
            tier = classify_dv_tier(result.percentage)

        return NutritionFactRow(
            key=measurement.key,
            amount=measurement.value,
            unit=resolve_unit(measurement.key),
            result=result,
            tier=tier,
            bar_width=progress_width(result.percentage),
        )

    @staticmethod
    def _daily_value(measurement: NutrientMeasurement) -> DVResult:
        if measurement.key == SALT_KEY:
            sodium_mg = convert_salt_to_sodium(measurement.value)
            return calculate_daily_value(SODIUM_KEY, sodium_mg)
        return calculate_daily_value(measurement.key, measurement.value)
