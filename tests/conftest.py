"""Pytest configuration and fixtures."""

import os
from pathlib import Path

import pytest

# Set test environment before importing settings
os.environ["BREWCOGS_DEBUG"] = "true"
os.environ["BREWCOGS_LOG_LEVEL"] = "DEBUG"

from brewcogs.config import Settings
from brewcogs.models.catalog import Product, PurchaseUnit, ServingUnit
from brewcogs.services.catalog import Catalog
from brewcogs.storage.json_store import JsonProductStore


@pytest.fixture
def settings() -> Settings:
    """Default rounding settings."""
    return Settings()


@pytest.fixture
def half_barrel() -> PurchaseUnit:
    """A half-barrel keg expressed in liters."""
    return PurchaseUnit(name="1/2 BBL", size=58.67, pack_qty=1, base_unit="L")


@pytest.fixture
def half_liter_pour() -> ServingUnit:
    """A 0.5L pour with no loss."""
    return ServingUnit(name="0.5L Pour", size=0.5, base_unit="L", yield_loss_pct=0)


@pytest.fixture
def catalog_products() -> list:
    """Ingredients as they would come out of the product store."""
    return [
        Product(
            id="p_extract",
            name="Pale Malt Extract",
            sku="VND-IN-PALE-MALT",
            category="brewingIngredient",
            vendor="Brewers Supply",
            purchase_unit=PurchaseUnit(name="1 L jug", size=1, base_unit="L"),
            cost_per_purchase=20.0,
        ),
        Product(
            id="p_hops",
            name="Cascade Hops",
            sku="VND-IN-CASCADE",
            category="brewingIngredient",
            vendor="Brewers Supply",
            purchase_unit=PurchaseUnit(name="1 lb bag", size=1, base_unit="lb"),
            cost_per_purchase=18.0,
        ),
        Product(
            id="p_no_cost",
            name="House Yeast",
            sku="HOUSE-YEAST",
            category="brewingIngredient",
            vendor="In-house",
            purchase_unit=PurchaseUnit(name="pitch", size=1, base_unit="each"),
        ),
    ]


@pytest.fixture
def catalog(catalog_products) -> Catalog:
    return Catalog(catalog_products)


@pytest.fixture
def store(tmp_path: Path) -> JsonProductStore:
    """Empty product store in a temp directory."""
    return JsonProductStore(tmp_path / "products.json")
