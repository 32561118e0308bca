"""brewCOGS Data Models"""

from brewcogs.models.catalog import (
    CategoryPreset,
    Product,
    PurchaseUnit,
    ServingCost,
    ServingUnit,
)
from brewcogs.models.common import (
    CostSource,
    CostStatus,
    Unit,
    UnitKind,
)
from brewcogs.models.recipe import (
    FamilyCostBreakdown,
    IngredientLine,
    LineCost,
    PackagedOutput,
    PerCountCost,
    PerMassCost,
    PerVolumeCost,
    ProductFamily,
    RecipeBatch,
    ServingOptionCost,
    UnitCost,
    VariantCost,
)

__all__ = [
    # Common
    "Unit", "UnitKind", "CostStatus", "CostSource",
    # Catalog
    "PurchaseUnit", "ServingUnit", "ServingCost", "CategoryPreset", "Product",
    # Recipe
    "IngredientLine", "RecipeBatch", "PackagedOutput", "ProductFamily",
    "PerVolumeCost", "PerMassCost", "PerCountCost", "UnitCost",
    "LineCost", "ServingOptionCost", "VariantCost", "FamilyCostBreakdown",
]
