"""
Catalog Data Models

Purchase/serving unit declarations and the persisted product record.
"""

import math
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from brewcogs.models.common import PLACEHOLDER, CostStatus, Unit


def coerce_amount(value: Any) -> float:
    """Parse a numeric form value; blanks, garbage and NaN become 0."""
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(amount):
        return 0.0
    return amount


class PurchaseUnit(BaseModel):
    """How a product is bought: pack_qty containers of size base_unit each."""

    name: str = Field(default="", description="Label, e.g. '1/2 BBL keg'")
    size: float = Field(default=0.0, description="Size of one container")
    pack_qty: int = Field(default=1, description="Containers per purchase")
    base_unit: Unit = Field(default=Unit.EACH)

    @field_validator("size", mode="before")
    @classmethod
    def _coerce_size(cls, v):
        return coerce_amount(v)

    @field_validator("pack_qty", mode="before")
    @classmethod
    def _default_pack_qty(cls, v):
        try:
            v = int(v)
        except (TypeError, ValueError):
            return 1
        return v if v > 0 else 1


class ServingUnit(BaseModel):
    """How a product is sold: one serving of size base_unit."""

    name: str = Field(default="", description="Label, e.g. '0.5L pour'")
    size: float = Field(default=0.0, description="Size of one serving before loss")
    base_unit: Optional[Unit] = Field(
        default=None,
        description="Serving unit; None means the purchase unit"
    )
    yield_loss_pct: float = Field(default=0.0, description="Waste/spillage percent, clamped to 0-100")

    @field_validator("size", "yield_loss_pct", mode="before")
    @classmethod
    def _coerce_numbers(cls, v):
        return coerce_amount(v)


class ServingCost(BaseModel):
    """Per-serving result with a status tag."""

    status: CostStatus = CostStatus.PENDING
    servings_per_purchase: float = 0.0
    cost_per_serving: float = 0.0
    suggested_price: Optional[float] = None

    @property
    def is_ok(self) -> bool:
        return self.status == CostStatus.OK

    def display(self, cost_decimals: int = 4, price_decimals: int = 2) -> Dict[str, str]:
        """Format for a table cell; anything not computable shows a dash."""
        if not self.is_ok:
            return {
                "servings_per_purchase": PLACEHOLDER,
                "cost_per_serving": PLACEHOLDER,
                "suggested_price": PLACEHOLDER,
            }
        price = (
            f"${self.suggested_price:.{price_decimals}f}"
            if self.suggested_price is not None else PLACEHOLDER
        )
        return {
            "servings_per_purchase": f"{self.servings_per_purchase:.1f}",
            "cost_per_serving": f"${self.cost_per_serving:.{cost_decimals}f}",
            "suggested_price": price,
        }


class CategoryPreset(BaseModel):
    """
    A product category with its standard containers and pours.

    Presets are starting points: callers get copies and may edit sizes.
    """

    id: str
    name: str
    description: str = ""
    subcategories: List[str] = Field(default_factory=list)

    # Families group variants (e.g. draft and packaged versions of one beer)
    is_family: bool = False
    variant_categories: List[str] = Field(default_factory=list)
    parent_category: Optional[str] = None

    purchase_units: Dict[str, PurchaseUnit] = Field(default_factory=dict)
    serving_options: Dict[str, ServingUnit] = Field(default_factory=dict)

    # Typical batch for recipe families, as a purchase-style declaration
    default_batch: Optional[PurchaseUnit] = None


class Product(BaseModel):
    """A catalog product as persisted by the product store."""

    id: Optional[str] = None
    name: str = ""
    sku: str = ""
    category: str = ""
    subcategory: str = ""
    vendor: str = ""
    description: str = ""
    is_active: bool = True

    purchase_unit: Optional[PurchaseUnit] = None
    serving_unit: Optional[ServingUnit] = None

    cost_per_purchase: Optional[float] = None
    target_margin_pct: float = 0.0

    # Snapshot of derived values taken at save time
    servings_per_purchase: Optional[float] = None
    cost_per_serving: Optional[float] = None
    suggested_price: Optional[float] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Fields from older records we do not model
    custom_fields: Dict[str, Any] = Field(default_factory=dict)
