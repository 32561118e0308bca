"""
brewCOGS Services

Costing functions are pure and stateless; ProductService wraps the store.
"""

from brewcogs.services.catalog import Catalog, load_catalog
from brewcogs.services.costing import (
    cost_per_serving,
    evaluate_serving,
    servings_per_purchase,
    snapshot_product,
    suggested_price,
)
from brewcogs.services.product_service import ProductService
from brewcogs.services.recipe_costing import (
    batch_per_canonical_unit_cost,
    batch_total_cost,
    batch_unit_cost,
    cost_family,
    line_cost,
    output_purchase_cost,
    unit_cost_of,
)
from brewcogs.services.units import kind_of, same_kind, to_canonical

__all__ = [
    "kind_of",
    "to_canonical",
    "same_kind",
    "servings_per_purchase",
    "cost_per_serving",
    "suggested_price",
    "evaluate_serving",
    "snapshot_product",
    "line_cost",
    "batch_total_cost",
    "batch_per_canonical_unit_cost",
    "batch_unit_cost",
    "output_purchase_cost",
    "unit_cost_of",
    "cost_family",
    "Catalog",
    "load_catalog",
    "ProductService",
]
