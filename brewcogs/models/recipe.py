"""
Recipe Data Models

A recipe batch built from ingredient lines, packaged into several outputs
(variants), each sold through one or more serving options.
"""

from typing import Annotated, List, Literal, Optional, Union

import pandas as pd
from pydantic import BaseModel, Field, field_validator

from brewcogs.models.catalog import PurchaseUnit, ServingCost, ServingUnit, coerce_amount
from brewcogs.models.common import CostSource, Unit


# ============================================================================
# Inputs
# ============================================================================

class IngredientLine(BaseModel):
    """One ingredient in a recipe, optionally linked to a catalog product."""

    name: str = Field(default="", description="Free-text label for the line")
    linked_ref: Optional[str] = Field(default=None, description="Catalog product name or SKU")
    quantity: float = Field(default=0.0, ge=0)
    unit: Unit = Field(default=Unit.EACH)
    cost_hint: float = Field(default=0.0, ge=0, description="Manual cost used when the link does not resolve")

    @field_validator("quantity", "cost_hint", mode="before")
    @classmethod
    def _coerce_numbers(cls, v):
        return coerce_amount(v)


class RecipeBatch(BaseModel):
    """One production run yielding batch_size of batch_unit."""

    batch_size: float = 0.0
    batch_unit: Unit = Unit.L
    ingredients: List[IngredientLine] = Field(default_factory=list)

    @field_validator("batch_size", mode="before")
    @classmethod
    def _coerce_size(cls, v):
        return coerce_amount(v)


class PackagedOutput(BaseModel):
    """One container size a batch is packaged into (keg, can, bottle)."""

    name: str = ""
    sku: str = ""
    purchase_unit: PurchaseUnit = Field(default_factory=PurchaseUnit)
    serving_options: List[ServingUnit] = Field(default_factory=list)
    cost_per_purchase: float = Field(default=0.0, description="Manual cost when recipe costing does not apply")
    target_margin_pct: float = 0.0

    @field_validator("cost_per_purchase", "target_margin_pct", mode="before")
    @classmethod
    def _coerce_numbers(cls, v):
        return coerce_amount(v)


class ProductFamily(BaseModel):
    """A beer (or other house product) with one recipe and many variants."""

    name: str = ""
    category: str = ""
    recipe: Optional[RecipeBatch] = None
    variants: List[PackagedOutput] = Field(default_factory=list)


# ============================================================================
# Per-canonical-unit cost (tagged by kind)
# ============================================================================

class _UnitCost(BaseModel):
    """Cost of one canonical unit; price amounts with recipe_costing.unit_cost_of."""
    per_unit: float = 0.0


class PerVolumeCost(_UnitCost):
    """Cost per milliliter."""
    kind: Literal["volume"] = "volume"


class PerMassCost(_UnitCost):
    """Cost per gram."""
    kind: Literal["mass"] = "mass"


class PerCountCost(_UnitCost):
    """Cost per each."""
    kind: Literal["count"] = "count"


UnitCost = Annotated[
    Union[PerVolumeCost, PerMassCost, PerCountCost],
    Field(discriminator="kind"),
]


# ============================================================================
# Results
# ============================================================================

class LineCost(BaseModel):
    """Resolved cost of one ingredient line."""
    name: str = ""
    linked_ref: Optional[str] = None
    cost: float = 0.0
    source: CostSource = CostSource.MANUAL


class ServingOptionCost(BaseModel):
    """Cost of one serving option under a variant."""
    serving: ServingUnit
    result: ServingCost


class VariantCost(BaseModel):
    """Derived costs for one packaged output."""
    name: str = ""
    sku: str = ""
    purchase_cost: float = 0.0
    source: CostSource = CostSource.MANUAL
    servings: List[ServingOptionCost] = Field(default_factory=list)


class FamilyCostBreakdown(BaseModel):
    """Full recomputation for one product family."""

    family_name: str = ""
    lines: List[LineCost] = Field(default_factory=list)
    batch_total_cost: float = 0.0
    unit_cost: Optional[UnitCost] = None
    variants: List[VariantCost] = Field(default_factory=list)

    def to_dataframe(self) -> pd.DataFrame:
        """One row per (variant, serving option)."""
        rows = []
        for variant in self.variants:
            for option in variant.servings:
                rows.append({
                    "variant": variant.name,
                    "sku": variant.sku,
                    "purchase_cost": variant.purchase_cost,
                    "cost_source": variant.source.value,
                    "serving": option.serving.name,
                    "status": option.result.status.value,
                    "servings_per_purchase": option.result.servings_per_purchase,
                    "cost_per_serving": option.result.cost_per_serving,
                    "suggested_price": option.result.suggested_price,
                })
        if not rows:
            return pd.DataFrame()
        return pd.DataFrame(rows)
