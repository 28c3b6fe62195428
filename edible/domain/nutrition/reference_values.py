"""
FDA Daily Reference Values and nutrient key mappings.

Reference amounts for adults and children aged 4 and older, based on a
2,000-calorie daily intake. Tables are read-only and shared process-wide.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping, Optional

from edible.domain.shared.errors import ReferenceDataError


DAILY_REFERENCE_VALUES: Final[Mapping[str, float]] = MappingProxyType(
    {
        # Macronutrients
        "totalFat": 78,  # g
        "saturatedFat": 20,  # g
        "cholesterol": 300,  # mg
        "sodium": 2300,  # mg
        "potassium": 4700,  # mg
        "totalCarbohydrate": 275,  # g
        "dietaryFiber": 28,  # g
        "protein": 50,  # g
        # Vitamins
        "vitaminA": 900,  # μg
        "vitaminC": 90,  # mg
        "vitaminD": 20,  # μg
        "vitaminE": 15,  # mg
        "vitaminK": 120,  # μg
        "thiamin": 1.2,  # mg (B1)
        "riboflavin": 1.3,  # mg (B2)
        "niacin": 16,  # mg (B3)
        "vitaminB6": 1.7,  # mg
        "folate": 400,  # μg
        "vitaminB12": 2.4,  # μg
        "biotin": 30,  # μg
        "pantothenicAcid": 5,  # mg
        # Minerals
        "calcium": 1300,  # mg
        "iron": 18,  # mg
        "phosphorus": 1250,  # mg
        "iodine": 150,  # μg
        "magnesium": 420,  # mg
        "zinc": 11,  # mg
        "selenium": 55,  # μg
        "copper": 0.9,  # mg
        "manganese": 2.3,  # mg
        "chromium": 35,  # μg
        "molybdenum": 45,  # μg
        "chloride": 2300,  # mg
        "choline": 550,  # mg
    }
)

# None marks nutrients that are displayed but have no Daily Value.
NUTRIENT_DV_MAPPING: Final[Mapping[str, Optional[str]]] = MappingProxyType(
    {
        "energy_kcal_100g": None,
        # Macronutrients
        "fat_100g": "totalFat",
        "saturated-fat_100g": "saturatedFat",
        "cholesterol_100g": "cholesterol",
        "sodium_100g": "sodium",
        "potassium_100g": "potassium",
        "carbohydrates_100g": "totalCarbohydrate",
        "fiber_100g": "dietaryFiber",
        "proteins_100g": "protein",
        "sugars_100g": None,
        "salt_100g": "sodium",  # evaluated via sodium equivalent
        # Vitamins
        "vitamin-a_100g": "vitaminA",
        "vitamin-c_100g": "vitaminC",
        "vitamin-d_100g": "vitaminD",
        "vitamin-e_100g": "vitaminE",
        "vitamin-k_100g": "vitaminK",
        "vitamin-b1_100g": "thiamin",
        "vitamin-b2_100g": "riboflavin",
        "vitamin-b3_100g": "niacin",
        "vitamin-b6_100g": "vitaminB6",
        "folates_100g": "folate",
        "vitamin-b12_100g": "vitaminB12",
        "biotin_100g": "biotin",
        "pantothenic-acid_100g": "pantothenicAcid",
        # Minerals
        "calcium_100g": "calcium",
        "iron_100g": "iron",
        "phosphorus_100g": "phosphorus",
        "iodine_100g": "iodine",
        "magnesium_100g": "magnesium",
        "zinc_100g": "zinc",
        "selenium_100g": "selenium",
        "copper_100g": "copper",
        "manganese_100g": "manganese",
        "chromium_100g": "chromium",
        "molybdenum_100g": "molybdenum",
        "chloride_100g": "chloride",
        "choline_100g": "choline",
    }
)

NUTRIENT_UNITS: Final[Mapping[str, str]] = MappingProxyType(
    {
        # Macronutrients
        "totalFat": "g",
        "saturatedFat": "g",
        "cholesterol": "mg",
        "sodium": "mg",
        "potassium": "mg",
        "totalCarbohydrate": "g",
        "dietaryFiber": "g",
        "protein": "g",
        # Vitamins
        "vitaminA": "μg",
        "vitaminC": "mg",
        "vitaminD": "μg",
        "vitaminE": "mg",
        "vitaminK": "μg",
        "thiamin": "mg",
        "riboflavin": "mg",
        "niacin": "mg",
        "vitaminB6": "mg",
        "folate": "μg",
        "vitaminB12": "μg",
        "biotin": "μg",
        "pantothenicAcid": "mg",
        # Minerals
        "calcium": "mg",
        "iron": "mg",
        "phosphorus": "mg",
        "iodine": "μg",
        "magnesium": "mg",
        "zinc": "mg",
        "selenium": "μg",
        "copper": "mg",
        "manganese": "mg",
        "chromium": "μg",
        "molybdenum": "μg",
        "chloride": "mg",
        "choline": "mg",
    }
)


def validate_reference_tables(
    daily_values: Mapping[str, float] = DAILY_REFERENCE_VALUES,
    dv_mapping: Mapping[str, Optional[str]] = NUTRIENT_DV_MAPPING,
    units: Mapping[str, str] = NUTRIENT_UNITS,
) -> None:
    """Check the reference tables are mutually consistent.

    Args:
        daily_values: DV key -> reference amount
        dv_mapping: Nutrient key -> DV key or None
        units: DV key -> display unit

    Raises:
        ReferenceDataError: If a DV is not positive, a mapping points to a
            missing DV key, or a DV key has no unit
    """
    for dv_key, amount in daily_values.items():
        if amount <= 0:
            raise ReferenceDataError(f"Daily value for '{dv_key}' must be positive, got {amount}")
        if dv_key not in units:
            raise ReferenceDataError(f"DV key '{dv_key}' has no display unit")

    for nutrient_key, dv_key in dv_mapping.items():
        if dv_key is not None and dv_key not in daily_values:
            raise ReferenceDataError(f"Nutrient '{nutrient_key}' maps to unknown DV key '{dv_key}'")


validate_reference_tables()


__all__ = [
    "DAILY_REFERENCE_VALUES",
    "NUTRIENT_DV_MAPPING",
    "NUTRIENT_UNITS",
    "validate_reference_tables",
]
