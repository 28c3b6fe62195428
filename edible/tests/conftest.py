"""
Shared fixtures for edible tests.
"""

from typing import Any

import pytest

from edible.application.nutrition.facts_service import NutritionFactsService
from edible.domain.barcode.openfoodfacts_models import OFFProduct


# ═══════════════════════════════════════════════════════════
# DOMAIN MODEL FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def sample_nutriments() -> dict[str, Any]:
    """Per-100g nutriments for Nutella, evaluator keys."""
    return {
        "energy_kcal_100g": 539.0,
        "fat_100g": 30.9,
        "saturated-fat_100g": 10.6,
        "carbohydrates_100g": 57.5,
        "sugars_100g": 56.3,
        "fiber_100g": 0.0,
        "proteins_100g": 6.3,
        "salt_100g": 0.107,
        "calcium_100g": 108.0,
    }


@pytest.fixture
def sample_off_response() -> dict[str, Any]:
    """Raw OpenFoodFacts product response."""
    return {
        "status": 1,
        "product": {
            "code": "3017620422003",
            "product_name": "Nutella",
            "brands": "Ferrero",
            "nutriscore_grade": "E",
            "nova_group": 4,
            "nutriments": {
                "energy-kcal_100g": 539,
                "energy-kcal_unit": "kcal",
                "fat_100g": 30.9,
                "fat": 30.9,
                "sugars_100g": "56.3",
                "salt_100g": 0.107,
                "proteins_100g": None,
                "sodium_100g": -1,
            },
        },
    }


@pytest.fixture
def sample_off_product(sample_nutriments: dict[str, Any]) -> OFFProduct:
    """Sample OpenFoodFacts product (Nutella)."""
    return OFFProduct(
        code="3017620422003",
        product_name="Nutella",
        brands="Ferrero",
        nutriments=sample_nutriments,
    )


# ═══════════════════════════════════════════════════════════
# SERVICE FIXTURES
# ═══════════════════════════════════════════════════════════


@pytest.fixture
def facts_service() -> NutritionFactsService:
    """Nutrition facts service."""
    return NutritionFactsService()
