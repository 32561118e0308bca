"""
Recipe Costing

Turns a recipe batch into a per-unit cost and prices each packaged output
from it. The resulting purchase cost feeds the regular costing engine for
every serving option, so per-serving math lives in one place.

Nothing here raises on partial input: unresolved links, kind mismatches
and empty batches fall back to manual costs or zero.
"""

import logging
import math
from typing import List, Optional, Tuple

from brewcogs.models.catalog import Product
from brewcogs.models.common import CostSource, UnitKind
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
from brewcogs.services.catalog import CatalogLookup
from brewcogs.services.costing import evaluate_serving
from brewcogs.services.units import kind_of, kind_of_or_none, same_kind, to_canonical

logger = logging.getLogger(__name__)

_UNIT_COST_TYPES = {
    UnitKind.VOLUME: PerVolumeCost,
    UnitKind.MASS: PerMassCost,
    UnitKind.COUNT: PerCountCost,
}


def _linked_cost(line: IngredientLine, product: Product) -> Optional[float]:
    """Cost of a line priced from a catalog product, or None if not computable."""
    purchase = product.purchase_unit
    product_cost = product.cost_per_purchase
    if purchase is None or product_cost is None:
        return None
    if not math.isfinite(product_cost) or product_cost < 0:
        logger.debug(f"Unusable catalog cost {product_cost!r} for '{line.linked_ref}'")
        return None

    if not same_kind(purchase.base_unit, line.unit):
        logger.debug(
            f"Kind mismatch for '{line.linked_ref}': "
            f"product in {purchase.base_unit.value}, line in {line.unit.value}"
        )
        return None

    purchase_canonical = to_canonical(purchase.size, purchase.base_unit) * purchase.pack_qty
    if purchase_canonical <= 0:
        return None

    cost = product_cost / purchase_canonical * to_canonical(line.quantity, line.unit)
    return cost if math.isfinite(cost) else None


def resolve_line(
    line: IngredientLine,
    catalog_lookup: Optional[CatalogLookup] = None,
) -> LineCost:
    """Cost of one ingredient line along with where it came from."""
    if line.linked_ref and catalog_lookup is not None:
        product = catalog_lookup(line.linked_ref)
        if product is None:
            logger.debug(f"No catalog match for '{line.linked_ref}', using manual cost")
        else:
            cost = _linked_cost(line, product)
            if cost is not None:
                return LineCost(
                    name=line.name or product.name,
                    linked_ref=line.linked_ref,
                    cost=cost,
                    source=CostSource.CATALOG,
                )

    return LineCost(
        name=line.name,
        linked_ref=line.linked_ref,
        cost=line.cost_hint or 0.0,
        source=CostSource.MANUAL,
    )


def line_cost(line: IngredientLine, catalog_lookup: Optional[CatalogLookup] = None) -> float:
    """Cost of one ingredient line; linked product first, manual hint otherwise."""
    return resolve_line(line, catalog_lookup).cost


def batch_total_cost(batch: RecipeBatch, catalog_lookup: Optional[CatalogLookup] = None) -> float:
    """Sum of all ingredient line costs."""
    return sum(line_cost(line, catalog_lookup) for line in batch.ingredients)


def _per_unit(total: float, batch: RecipeBatch) -> float:
    if kind_of(batch.batch_unit) == UnitKind.COUNT:
        denominator = batch.batch_size
    else:
        denominator = to_canonical(batch.batch_size, batch.batch_unit)
    return total / denominator if denominator > 0 else 0.0


def batch_per_canonical_unit_cost(
    batch: RecipeBatch,
    catalog_lookup: Optional[CatalogLookup] = None,
) -> float:
    """Batch cost per ml, per g, or per each depending on the batch unit."""
    return _per_unit(batch_total_cost(batch, catalog_lookup), batch)


def batch_unit_cost(
    batch: RecipeBatch,
    catalog_lookup: Optional[CatalogLookup] = None,
) -> UnitCost:
    """Per-canonical-unit cost tagged with the batch's kind."""
    cost_type = _UNIT_COST_TYPES[kind_of(batch.batch_unit)]
    return cost_type(per_unit=batch_per_canonical_unit_cost(batch, catalog_lookup))


def unit_cost_of(unit_cost: UnitCost, amount, unit) -> Optional[float]:
    """Price an amount at a per-unit cost; None when the unit is of another kind."""
    if kind_of_or_none(unit) != UnitKind(unit_cost.kind):
        return None
    return unit_cost.per_unit * to_canonical(amount, unit)


def _output_cost(unit_cost: UnitCost, output: PackagedOutput) -> Tuple[float, CostSource]:
    purchase = output.purchase_unit
    cost = unit_cost_of(unit_cost, purchase.size, purchase.base_unit)
    if cost is None:
        logger.debug(
            f"Output '{output.name}' in {purchase.base_unit.value} does not match "
            f"batch kind {unit_cost.kind}, using manual cost"
        )
        return output.cost_per_purchase or 0.0, CostSource.MANUAL
    return cost, CostSource.RECIPE


def output_purchase_cost(
    batch: RecipeBatch,
    output: PackagedOutput,
    catalog_lookup: Optional[CatalogLookup] = None,
) -> float:
    """
    Purchase cost of one packaged output derived from the batch.

    Falls back to the output's manually entered cost when the output unit
    is not the same kind as the batch unit.
    """
    return _output_cost(batch_unit_cost(batch, catalog_lookup), output)[0]


def cost_family(
    family: ProductFamily,
    catalog_lookup: Optional[CatalogLookup] = None,
) -> FamilyCostBreakdown:
    """
    Recompute every derived value for a product family from scratch.

    Without a recipe each variant is priced from its manual cost.
    """
    lines: List[LineCost] = []
    total = 0.0
    unit_cost: Optional[UnitCost] = None

    if family.recipe is not None:
        lines = [resolve_line(line, catalog_lookup) for line in family.recipe.ingredients]
        total = sum(line.cost for line in lines)
        cost_type = _UNIT_COST_TYPES[kind_of(family.recipe.batch_unit)]
        unit_cost = cost_type(per_unit=_per_unit(total, family.recipe))

    variants = []
    for output in family.variants:
        if unit_cost is not None:
            purchase_cost, source = _output_cost(unit_cost, output)
        else:
            purchase_cost, source = output.cost_per_purchase or 0.0, CostSource.MANUAL

        servings = [
            ServingOptionCost(
                serving=serving,
                result=evaluate_serving(
                    output.purchase_unit,
                    serving,
                    purchase_cost,
                    output.target_margin_pct,
                ),
            )
            for serving in output.serving_options
        ]

        variants.append(VariantCost(
            name=output.name,
            sku=output.sku,
            purchase_cost=purchase_cost,
            source=source,
            servings=servings,
        ))

    return FamilyCostBreakdown(
        family_name=family.name,
        lines=lines,
        batch_total_cost=total,
        unit_cost=unit_cost,
        variants=variants,
    )
