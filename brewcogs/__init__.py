"""
brewCOGS Core Package

Unit conversion and costing for brewery products: servings per purchase,
cost per serving, margin-based pricing and recipe batch costing.
"""

__version__ = "0.1.0"

from brewcogs.models.catalog import Product, PurchaseUnit, ServingUnit
from brewcogs.models.recipe import IngredientLine, PackagedOutput, ProductFamily, RecipeBatch

__all__ = [
    "PurchaseUnit",
    "ServingUnit",
    "Product",
    "IngredientLine",
    "RecipeBatch",
    "PackagedOutput",
    "ProductFamily",
]
