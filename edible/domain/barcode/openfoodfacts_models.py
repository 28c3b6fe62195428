"""
OpenFoodFacts domain models.

Product documents as returned by the food-product database, reduced to the
fields the nutrition evaluator reads.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class NutriscoreGrade(str, Enum):
    """Nutriscore grade classification."""

    A = "a"  # Best
    B = "b"
    C = "c"
    D = "d"
    E = "e"  # Worst
    UNKNOWN = "unknown"


class NovaGroup(str, Enum):
    """NOVA food processing classification."""

    GROUP_1 = "1"  # Unprocessed or minimally processed
    GROUP_2 = "2"  # Processed culinary ingredients
    GROUP_3 = "3"  # Processed foods
    GROUP_4 = "4"  # Ultra-processed foods
    UNKNOWN = "unknown"


class OFFProduct(BaseModel):
    """OpenFoodFacts product.

    ``nutriments`` keeps only numeric per-100g entries, keyed with the
    evaluator's nutrient keys (e.g. ``energy_kcal_100g``, ``fat_100g``).

    Example:
        >>> product = OFFProduct(
        ...     code="3017620422003",
        ...     product_name="Nutella",
        ...     nutriments={"fat_100g": 30.9, "sugars_100g": 56.3},
        ... )
        >>> assert product.nutriments["fat_100g"] == 30.9
    """

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Product barcode")
    product_name: Optional[str] = Field(None, description="Product name")
    brands: Optional[str] = Field(None, description="Brand names")
    nutriments: dict[str, float] = Field(
        default_factory=dict, description="Nutrient key -> amount per 100g"
    )
    nutriscore_grade: Optional[NutriscoreGrade] = Field(None, description="Nutriscore grade (a-e)")
    nova_group: Optional[NovaGroup] = Field(None, description="NOVA processing group (1-4)")


class OFFSearchResult(BaseModel):
    """OpenFoodFacts product lookup response."""

    model_config = ConfigDict(frozen=True)

    status: int = Field(..., description="API status (1=found, 0=not)")
    product: Optional[OFFProduct] = Field(None, description="Product data (if found)")

    def is_found(self) -> bool:
        """Check if product was found."""
        return self.status == 1 and self.product is not None
