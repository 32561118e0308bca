"""
Costing Engine

Servings per purchase, cost per serving and margin-based suggested price.

Every function degrades to 0 / None on partial or mismatched input instead
of raising: a half-filled form is a normal state, not an error.
Rounding happens only in the snapshot helpers, never between steps.
"""

import logging
from typing import Optional

from brewcogs.config import Settings, get_settings
from brewcogs.models.catalog import Product, PurchaseUnit, ServingCost, ServingUnit, coerce_amount
from brewcogs.models.common import CostStatus
from brewcogs.services.units import same_kind, to_canonical

logger = logging.getLogger(__name__)


def servings_per_purchase(
    purchase: Optional[PurchaseUnit],
    serving: Optional[ServingUnit],
) -> float:
    """
    Number of servings one purchase yields, after yield loss.

    Returns 0 when either side is missing, the units are of different
    kinds, or the serving size is not positive.
    """
    if purchase is None or serving is None:
        return 0.0

    serving_unit = serving.base_unit or purchase.base_unit
    if not same_kind(purchase.base_unit, serving_unit):
        return 0.0

    total_purchase = to_canonical(purchase.size, purchase.base_unit) * (purchase.pack_qty or 1)
    single_serving = to_canonical(serving.size, serving_unit)
    if single_serving <= 0:
        return 0.0

    raw = total_purchase / single_serving
    loss = min(max(coerce_amount(serving.yield_loss_pct), 0.0), 100.0) / 100
    return max(0.0, raw * (1 - loss))


def cost_per_serving(cost_per_purchase, servings) -> float:
    """Cost of one serving; 0 when there are no servings."""
    cost = coerce_amount(cost_per_purchase)
    servings = coerce_amount(servings)
    return cost / servings if servings > 0 else 0.0


def suggested_price(cost_per_serving_value, target_margin_pct) -> Optional[float]:
    """
    Price at which (price - cost) / price equals the target margin.

    Margin is on price, not markup on cost. None unless 0 < margin < 100.
    """
    cost = coerce_amount(cost_per_serving_value)
    margin = coerce_amount(target_margin_pct) / 100
    if margin <= 0 or margin >= 1:
        return None
    return cost / (1 - margin)


def evaluate_serving(
    purchase: Optional[PurchaseUnit],
    serving: Optional[ServingUnit],
    cost_per_purchase=0.0,
    target_margin_pct=0.0,
) -> ServingCost:
    """Run the full per-serving chain and tag the outcome."""
    if purchase is None or serving is None:
        return ServingCost(status=CostStatus.PENDING)

    if not same_kind(purchase.base_unit, serving.base_unit or purchase.base_unit):
        logger.debug(
            f"Incompatible units: purchase {purchase.base_unit} vs serving {serving.base_unit}"
        )
        return ServingCost(status=CostStatus.INCOMPATIBLE)

    servings = servings_per_purchase(purchase, serving)
    if servings <= 0:
        return ServingCost(status=CostStatus.PENDING)

    cps = cost_per_serving(cost_per_purchase, servings)
    return ServingCost(
        status=CostStatus.OK,
        servings_per_purchase=servings,
        cost_per_serving=cps,
        suggested_price=suggested_price(cps, target_margin_pct),
    )


# =========================================================================
# Persistence boundary
# =========================================================================

def round_cost(value: Optional[float], settings: Optional[Settings] = None) -> Optional[float]:
    if value is None:
        return None
    settings = settings or get_settings()
    return round(value, settings.cost_decimals)


def round_price(value: Optional[float], settings: Optional[Settings] = None) -> Optional[float]:
    if value is None:
        return None
    settings = settings or get_settings()
    return round(value, settings.price_decimals)


def snapshot_product(product: Product, settings: Optional[Settings] = None) -> Product:
    """
    Copy of product with servings, cost per serving and suggested price
    filled in as plain rounded numbers.
    """
    settings = settings or get_settings()

    servings = servings_per_purchase(product.purchase_unit, product.serving_unit)
    cps = cost_per_serving(product.cost_per_purchase, servings)
    price = suggested_price(cps, product.target_margin_pct)

    return product.model_copy(update={
        "servings_per_purchase": round(servings, settings.servings_decimals),
        "cost_per_serving": round_cost(cps, settings),
        "suggested_price": round_price(price, settings),
    })
