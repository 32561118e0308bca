"""
Product Service - validation and save flow for catalog products

Validates a finished product form, snapshots its derived costs and
writes it to the store.
"""

import logging
import math
from typing import Dict, List, Optional

from brewcogs.config import Settings, get_settings
from brewcogs.data.categories import get_category
from brewcogs.errors import ValidationError
from brewcogs.models.catalog import Product
from brewcogs.services.catalog import Catalog, load_catalog
from brewcogs.services.costing import snapshot_product
from brewcogs.services.units import same_kind
from brewcogs.storage.json_store import JsonProductStore

logger = logging.getLogger(__name__)


class ProductService:
    """Main service for product CRUD operations."""

    def __init__(
        self,
        store: Optional[JsonProductStore] = None,
        settings: Optional[Settings] = None,
    ):
        self.settings = settings or get_settings()
        self.store = store or JsonProductStore(self.settings.catalog_path)

    # =========================================================================
    # Validation
    # =========================================================================

    def validate(self, product: Product) -> Dict[str, str]:
        """Field -> message for everything that blocks a save."""
        errors = {}
        purchase = product.purchase_unit
        serving = product.serving_unit

        if not product.name.strip():
            errors["name"] = "Name is required."
        if not product.category:
            errors["category"] = "Category is required."
        else:
            preset = get_category(product.category)
            if preset is None:
                errors["category"] = "Unknown category."
            elif product.subcategory and product.subcategory not in preset.subcategories:
                errors["subcategory"] = f"Unknown subcategory for {preset.name}."
        if not product.vendor.strip():
            errors["vendor"] = "Vendor is required."
        if purchase is None:
            errors["purchase_unit"] = "Purchase unit is required."
        elif purchase.size <= 0:
            errors["purchase_size"] = "Purchase size must be > 0."
        if serving is None:
            errors["serving_unit"] = "Serving unit is required."
        elif serving.size <= 0:
            errors["serving_size"] = "Serving size must be > 0."
        if purchase is not None and serving is not None:
            if not same_kind(purchase.base_unit, serving.base_unit or purchase.base_unit):
                errors["unit_family"] = (
                    "Purchase and serving units must be the same kind "
                    "(volume/volume, mass/mass, or each/each)."
                )
        cost = product.cost_per_purchase
        if cost is not None and (not math.isfinite(cost) or cost < 0):
            errors["cost"] = "Cost must be a non-negative number."

        return errors

    # =========================================================================
    # CRUD
    # =========================================================================

    def save(self, product: Product) -> Product:
        """Validate, snapshot derived fields, then create or update."""
        errors = self.validate(product)
        if errors:
            logger.debug(f"Rejected product '{product.name}': {sorted(errors)}")
            raise ValidationError("Product failed validation", details=errors)

        snapshot = snapshot_product(product, self.settings)
        if snapshot.id:
            changes = snapshot.model_dump(exclude={"id", "created_at", "updated_at"})
            return self.store.update(snapshot.id, changes)
        return self.store.create(snapshot)

    def list_products(self, active_only: bool = False) -> List[Product]:
        """List all products."""
        products = self.store.fetch_all()
        if active_only:
            products = [p for p in products if p.is_active]
        return products

    def get(self, product_id: str) -> Optional[Product]:
        return self.store.get(product_id)

    def delete(self, product_id: str) -> bool:
        return self.store.remove(product_id)

    def set_active(self, product_id: str, is_active: bool) -> Product:
        return self.store.set_active(product_id, is_active)

    def catalog(self) -> Catalog:
        """Lookup index over the current products."""
        return load_catalog(self.store)
