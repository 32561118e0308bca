"""
Catalog Lookup

Resolves ingredient references to catalog products by name or SKU.
"""

import logging
from typing import Callable, Dict, Iterable, List, Optional

from brewcogs.errors import StorageError
from brewcogs.models.catalog import Product

logger = logging.getLogger(__name__)

CatalogLookup = Callable[[str], Optional[Product]]


def _normalize(key: Optional[str]) -> str:
    return (key or "").strip().lower()


class Catalog:
    """
    In-memory product index.

    Matches are case-insensitive and exact against name or SKU. Instances
    are callable so they can be passed wherever a CatalogLookup is expected.
    """

    def __init__(self, products: Optional[Iterable[Product]] = None):
        self.products: List[Product] = list(products or [])

        self._by_name: Dict[str, Product] = {}
        self._by_sku: Dict[str, Product] = {}
        self._build_index()

    def _build_index(self):
        for product in self.products:
            name = _normalize(product.name)
            sku = _normalize(product.sku)
            if name and name not in self._by_name:
                self._by_name[name] = product
            if sku and sku not in self._by_sku:
                self._by_sku[sku] = product

        logger.debug(f"Built catalog index with {len(self.products)} products")

    def lookup(self, key: Optional[str]) -> Optional[Product]:
        """Find a product by name or SKU. Name matches win."""
        wanted = _normalize(key)
        if not wanted:
            return None
        return self._by_name.get(wanted) or self._by_sku.get(wanted)

    __call__ = lookup

    def __len__(self) -> int:
        return len(self.products)

    @classmethod
    def empty(cls) -> "Catalog":
        return cls([])


def load_catalog(store) -> Catalog:
    """
    Best-effort load of all products from a store.

    A failing store yields an empty catalog; linked ingredient lines then
    fall back to their manual costs.
    """
    try:
        products = store.fetch_all()
    except StorageError as e:
        logger.warning(f"Catalog unavailable, using empty catalog: {e.message}")
        return Catalog.empty()

    return Catalog(products)
