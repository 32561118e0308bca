"""
JSON Product Store

Keyed-record product storage in a single JSON file.
Swap for a database-backed store later; the interface stays the same.
"""

import json
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from brewcogs.errors import ProductNotFoundError, StorageError
from brewcogs.models.catalog import Product

logger = logging.getLogger(__name__)


class JsonProductStore:
    """
    Product store backed by one JSON file holding a list of records.

    A missing or corrupt file reads as an empty catalog.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)

    # =========================================================================
    # File I/O
    # =========================================================================

    def _read(self) -> List[Product]:
        if not self.path.exists():
            return []

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning(f"Corrupt product store {self.path}, reading as empty: {e}")
            return []
        except OSError as e:
            raise StorageError(
                f"Could not read product store: {e}",
                details={"path": str(self.path)}
            ) from e

        if not isinstance(raw, list):
            logger.warning(f"Product store {self.path} is not a list, ignoring")
            return []

        products = []
        for record in raw:
            try:
                products.append(Product.model_validate(record))
            except PydanticValidationError as e:
                logger.warning(f"Skipping invalid product record: {e.error_count()} errors")
        return products

    def _write(self, products: List[Product]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump([p.model_dump(mode="json") for p in products], f, indent=2)
        except OSError as e:
            logger.error(f"Failed to write product store {self.path}: {e}")
            raise StorageError(
                f"Could not write product store: {e}",
                details={"path": str(self.path)}
            ) from e

    # =========================================================================
    # CRUD
    # =========================================================================

    def fetch_all(self) -> List[Product]:
        """All stored products."""
        return self._read()

    def get(self, product_id: str) -> Optional[Product]:
        """Get a product by ID."""
        for product in self._read():
            if product.id == product_id:
                return product
        return None

    def create(self, product: Product) -> Product:
        """Store a new product, assigning an ID and timestamps."""
        now = datetime.utcnow()
        item = product.model_copy(update={
            "id": f"p_{uuid.uuid4().hex[:12]}",
            "created_at": now,
            "updated_at": now,
        })

        products = self._read()
        products.append(item)
        self._write(products)

        logger.info(f"Created product {item.id} ({item.name})")
        return item

    def update(self, product_id: str, changes: Dict[str, Any]) -> Product:
        """Merge changes into an existing product."""
        products = self._read()
        for i, existing in enumerate(products):
            if existing.id == product_id:
                merged = {**existing.model_dump(), **changes}
                merged["id"] = product_id
                merged["created_at"] = existing.created_at
                merged["updated_at"] = datetime.utcnow()
                products[i] = Product.model_validate(merged)
                self._write(products)

                logger.info(f"Updated product {product_id}")
                return products[i]

        raise ProductNotFoundError(product_id)

    def remove(self, product_id: str) -> bool:
        """Delete a product. Returns False if it did not exist."""
        products = self._read()
        remaining = [p for p in products if p.id != product_id]
        if len(remaining) == len(products):
            return False

        self._write(remaining)
        logger.info(f"Deleted product {product_id}")
        return True

    def set_active(self, product_id: str, is_active: bool) -> Product:
        """Activate or deactivate a product."""
        return self.update(product_id, {"is_active": bool(is_active)})
