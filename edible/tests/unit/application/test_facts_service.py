"""
Unit tests for NutritionFactsService.
"""

from typing import Any

import pytest

from edible.application.nutrition.facts_service import NutritionFactsService
from edible.domain.barcode.openfoodfacts_mapper import OpenFoodFactsMapper
from edible.domain.barcode.openfoodfacts_models import OFFProduct
from edible.domain.nutrition.models import DVTier


class TestNutritionFactsService:
    """Test nutrition facts evaluation."""

    def test_rows_in_display_order(
        self,
        facts_service: NutritionFactsService,
        sample_nutriments: dict[str, Any],
    ) -> None:
        """Label nutrients first, others alphabetically after."""
        facts = facts_service.evaluate(sample_nutriments)

        assert [row.key for row in facts.rows] == [
            "energy_kcal_100g",
            "fat_100g",
            "saturated-fat_100g",
            "carbohydrates_100g",
            "sugars_100g",
            "fiber_100g",
            "proteins_100g",
            "salt_100g",
            "calcium_100g",
        ]
        assert facts.skipped == []

    def test_row_values(
        self,
        facts_service: NutritionFactsService,
        sample_nutriments: dict[str, Any],
    ) -> None:
        """Should compute %DV, tier and bar width per row."""
        facts = facts_service.evaluate(sample_nutriments)

        fat = facts.get("fat_100g")
        assert fat is not None
        assert fat.result.percentage == 39.6
        assert fat.tier == DVTier.HIGH
        assert fat.bar_width == 39.6
        assert fat.unit == "g"

        energy = facts.get("energy_kcal_100g")
        assert energy is not None
        assert energy.result.has_dv is False
        assert energy.tier is None
        assert energy.bar_width == 0.0
        assert energy.unit == "kcal"

        calcium = facts.get("calcium_100g")
        assert calcium is not None
        assert calcium.result.percentage == 8.3
        assert calcium.label == "Moderate"
        assert calcium.unit == "mg"

    def test_salt_converted_to_sodium(self, facts_service: NutritionFactsService) -> None:
        """1g salt -> 400mg sodium -> 17.4% -> Good."""
        facts = facts_service.evaluate({"salt_100g": 1})

        row = facts.get("salt_100g")
        assert row is not None
        assert row.amount == 1.0
        assert row.unit == "g"
        assert row.result.daily_value == 2300
        assert row.result.percentage == 17.4
        assert row.result.unit == "mg"
        assert row.label == "Good"
        assert row.color == "#3B82F6"

    def test_salt_and_sodium_rows(self, facts_service: NutritionFactsService) -> None:
        """Salt and sodium are evaluated on separate rows."""
        facts = facts_service.evaluate({"sodium_100g": 230, "salt_100g": 0.5})

        assert [row.key for row in facts.rows] == ["salt_100g", "sodium_100g"]
        assert facts.get("sodium_100g").result.percentage == 10.0
        assert facts.get("salt_100g").result.percentage == 8.7

    def test_bar_width_clamped(self, facts_service: NutritionFactsService) -> None:
        """Bar never exceeds 100%."""
        facts = facts_service.evaluate({"sodium_100g": 4600})

        row = facts.get("sodium_100g")
        assert row.result.percentage == 200.0
        assert row.bar_width == 100.0
        assert row.tier == DVTier.HIGH

    @pytest.mark.parametrize("value", [-5, "abc", float("nan"), None])
    def test_invalid_values_skipped(
        self,
        facts_service: NutritionFactsService,
        value: Any,
    ) -> None:
        """Invalid measurements are skipped, not raised."""
        facts = facts_service.evaluate({"fat_100g": value, "proteins_100g": 10})

        assert facts.skipped == ["fat_100g"]
        assert [row.key for row in facts.rows] == ["proteins_100g"]

    def test_empty(self, facts_service: NutritionFactsService) -> None:
        """Empty record gives empty facts."""
        facts = facts_service.evaluate({})

        assert facts.rows == []
        assert facts.skipped == []

    def test_evaluate_product(
        self,
        facts_service: NutritionFactsService,
        sample_off_product: OFFProduct,
    ) -> None:
        """Product nutriments are evaluated like a plain record."""
        facts = facts_service.evaluate_product(sample_off_product)

        assert facts == facts_service.evaluate(sample_off_product.nutriments)
        assert len(facts.rows) == len(sample_off_product.nutriments)

    def test_evaluate_parsed_product(
        self,
        facts_service: NutritionFactsService,
        sample_off_response: dict[str, Any],
    ) -> None:
        """Parsed product rows come out in label order with salt converted."""
        product = OpenFoodFactsMapper.parse_product_response(sample_off_response).product

        facts = facts_service.evaluate_product(product)

        assert [row.key for row in facts.rows] == [
            "energy_kcal_100g",
            "fat_100g",
            "sugars_100g",
            "salt_100g",
        ]
        assert facts.skipped == []
        assert facts.get("salt_100g").result.percentage == 1.9
