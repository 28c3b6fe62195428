"""
OpenFoodFacts data mapper.

Transforms already-fetched OpenFoodFacts product documents into domain
models and nutrient measurements.
"""

from typing import Any

import structlog

from edible.domain.barcode.openfoodfacts_models import (
    NovaGroup,
    NutriscoreGrade,
    OFFProduct,
    OFFSearchResult,
)
from edible.domain.nutrition.models import NutrientMeasurement
from edible.domain.shared.errors import InvalidMeasurementError

logger = structlog.get_logger(__name__)

PER_100G_SUFFIX = "_100g"

# OFF spelling -> evaluator nutrient key
KEY_ALIASES = {
    "energy-kcal_100g": "energy_kcal_100g",
}


class OpenFoodFactsMapper:
    """Maps OpenFoodFacts API data to domain models."""

    @staticmethod
    def normalize_key(key: str) -> str:
        """Map an OFF nutriment key to the evaluator's key."""
        return KEY_ALIASES.get(key, key)

    @staticmethod
    def parse_nutriments(nutriments_data: dict[str, Any]) -> dict[str, float]:
        """Keep valid per-100g nutriments.

        Args:
            nutriments_data: Raw ``nutriments`` object

        Returns:
            Normalized key -> non-negative finite amount

        Example:
            >>> OpenFoodFactsMapper.parse_nutriments(
            ...     {"energy-kcal_100g": 539, "fat": 30.9, "salt_100g": "0.1"}
            ... )
            {'energy_kcal_100g': 539.0, 'salt_100g': 0.1}
        """
        nutriments: dict[str, float] = {}

        for raw_key, raw_value in nutriments_data.items():
            if not isinstance(raw_key, str) or not raw_key.endswith(PER_100G_SUFFIX):
                continue

            key = OpenFoodFactsMapper.normalize_key(raw_key)
            try:
                measurement = NutrientMeasurement.from_raw(key, raw_value)
            except InvalidMeasurementError as e:
                logger.debug(
                    "Skipping invalid nutriment",
                    key=raw_key,
                    error=str(e),
                )
                continue

            nutriments[measurement.key] = measurement.value

        return nutriments

    @staticmethod
    def parse_product_response(response_data: dict[str, Any]) -> OFFSearchResult:
        """Parse OpenFoodFacts product API response.

        Args:
            response_data: Raw API response JSON

        Returns:
            Parsed OFFSearchResult

        Example:
            >>> response = {
            ...     "status": 1,
            ...     "product": {
            ...         "code": "3017620422003",
            ...         "product_name": "Nutella",
            ...         "nutriments": {"fat_100g": 30.9},
            ...     },
            ... }
            >>> result = OpenFoodFactsMapper.parse_product_response(response)
            >>> assert result.product.nutriments["fat_100g"] == 30.9
        """
        status = response_data.get("status", 0)

        if status == 0 or "product" not in response_data:
            return OFFSearchResult(status=status, product=None)

        product_data = response_data["product"]
        nutriments_data = product_data.get("nutriments")
        if not isinstance(nutriments_data, dict):
            if nutriments_data is not None:
                logger.warning(
                    "Ignoring malformed nutriments",
                    code=product_data.get("code", ""),
                    type=type(nutriments_data).__name__,
                )
            nutriments_data = {}
        nutriments = OpenFoodFactsMapper.parse_nutriments(nutriments_data)

        # Parse nutriscore
        nutriscore_raw = product_data.get("nutriscore_grade")
        nutriscore = None
        if nutriscore_raw:
            try:
                nutriscore = NutriscoreGrade(str(nutriscore_raw).lower())
            except ValueError:
                nutriscore = NutriscoreGrade.UNKNOWN

        # Parse nova group
        nova_raw = product_data.get("nova_group")
        nova = None
        if nova_raw:
            try:
                nova = NovaGroup(str(nova_raw))
            except ValueError:
                nova = NovaGroup.UNKNOWN

        product = OFFProduct(
            code=product_data.get("code", ""),
            product_name=product_data.get("product_name"),
            brands=product_data.get("brands"),
            nutriments=nutriments,
            nutriscore_grade=nutriscore,
            nova_group=nova,
        )

        return OFFSearchResult(status=status, product=product)

    @staticmethod
    def to_measurements(product: OFFProduct) -> list[NutrientMeasurement]:
        """Convert product nutriments to measurements, sorted by key."""
        return [
            NutrientMeasurement(key=key, value=value)
            for key, value in sorted(product.nutriments.items())
        ]
