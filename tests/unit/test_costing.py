"""Tests for the costing engine."""

import pytest

from brewcogs.config import Settings
from brewcogs.models.catalog import Product, PurchaseUnit, ServingCost, ServingUnit
from brewcogs.models.common import CostStatus
from brewcogs.services.costing import (
    cost_per_serving,
    evaluate_serving,
    round_cost,
    round_price,
    servings_per_purchase,
    snapshot_product,
    suggested_price,
)


class TestServingsPerPurchase:
    """Tests for servings_per_purchase."""

    def test_half_barrel_half_liter(self, half_barrel, half_liter_pour):
        """58.67L keg into 0.5L pours."""
        assert servings_per_purchase(half_barrel, half_liter_pour) == pytest.approx(117.34)

    def test_yield_loss_reduces_servings(self, half_barrel):
        serving = ServingUnit(size=0.5, base_unit="L", yield_loss_pct=10)
        assert servings_per_purchase(half_barrel, serving) == pytest.approx(105.606)

    def test_matches_closed_form_without_loss(self):
        purchase = PurchaseUnit(size=750, pack_qty=12, base_unit="ml")
        serving = ServingUnit(size=1.5, base_unit="oz")
        expected = (750 * 12 * 1) / (1.5 * 29.5735)
        assert servings_per_purchase(purchase, serving) == pytest.approx(expected)

    def test_pack_qty_multiplies(self):
        serving = ServingUnit(size=1, base_unit="each")
        case = PurchaseUnit(size=1, pack_qty=24, base_unit="each")
        assert servings_per_purchase(case, serving) == 24

    def test_cross_kind_is_zero(self, half_barrel):
        serving = ServingUnit(size=100, base_unit="g")
        assert servings_per_purchase(half_barrel, serving) == 0

    @pytest.mark.parametrize("p_size,s_size", [(1, 1), (1000, 0.001), (0, 5)])
    def test_cross_kind_ignores_magnitudes(self, p_size, s_size):
        purchase = PurchaseUnit(size=p_size, base_unit="each")
        serving = ServingUnit(size=s_size, base_unit="lb")
        assert servings_per_purchase(purchase, serving) == 0

    def test_missing_inputs(self, half_barrel, half_liter_pour):
        assert servings_per_purchase(None, half_liter_pour) == 0
        assert servings_per_purchase(half_barrel, None) == 0

    def test_zero_serving_size(self, half_barrel):
        assert servings_per_purchase(half_barrel, ServingUnit(size=0, base_unit="L")) == 0

    def test_serving_unit_defaults_to_purchase_unit(self, half_barrel):
        assert servings_per_purchase(half_barrel, ServingUnit(size=0.5)) == pytest.approx(117.34)

    def test_loss_is_clamped(self, half_barrel):
        over = ServingUnit(size=0.5, base_unit="L", yield_loss_pct=150)
        under = ServingUnit(size=0.5, base_unit="L", yield_loss_pct=-20)
        assert servings_per_purchase(half_barrel, over) == 0
        assert servings_per_purchase(half_barrel, under) == pytest.approx(117.34)

    def test_monotonic_in_yield_loss(self, half_barrel):
        previous = None
        for loss in range(0, 101, 5):
            serving = ServingUnit(size=0.5, base_unit="L", yield_loss_pct=loss)
            current = servings_per_purchase(half_barrel, serving)
            if previous is not None:
                assert current <= previous
            previous = current

    def test_zero_pack_qty_treated_as_one(self, half_liter_pour):
        purchase = PurchaseUnit(size=58.67, pack_qty=0, base_unit="L")
        assert purchase.pack_qty == 1
        assert servings_per_purchase(purchase, half_liter_pour) == pytest.approx(117.34)


class TestCostPerServing:
    """Tests for cost_per_serving."""

    def test_divides(self):
        assert cost_per_serving(150, 117.34) == pytest.approx(1.27834, abs=1e-4)

    def test_zero_servings(self):
        assert cost_per_serving(10, 0) == 0

    def test_unparseable_cost(self):
        assert cost_per_serving("n/a", 10) == 0
        assert cost_per_serving(None, 10) == 0


class TestSuggestedPrice:
    """Tests for suggested_price."""

    def test_seventy_five_percent_margin(self):
        assert suggested_price(1.50, 75) == pytest.approx(6.00)

    @pytest.mark.parametrize("margin", [0, -10, 100, 150])
    def test_out_of_range_margin(self, margin):
        assert suggested_price(1.50, margin) is None

    @pytest.mark.parametrize("margin", [1, 25, 50, 72.5, 99])
    def test_margin_on_price(self, margin):
        cost = 1.2783
        price = suggested_price(cost, margin)
        assert (price - cost) / price == pytest.approx(margin / 100)

    def test_not_markup_on_cost(self):
        assert suggested_price(1.0, 50) == pytest.approx(2.0)
        assert suggested_price(1.0, 50) != pytest.approx(1.5)

    def test_keeps_full_precision(self):
        assert suggested_price(1, 70) == pytest.approx(3.3333333)


class TestEvaluateServing:
    """Tests for the tagged per-serving result."""

    def test_ok(self, half_barrel, half_liter_pour):
        result = evaluate_serving(half_barrel, half_liter_pour, 150, 75)

        assert result.status == CostStatus.OK
        assert result.servings_per_purchase == pytest.approx(117.34)
        assert result.cost_per_serving == pytest.approx(150 / 117.34)
        assert result.suggested_price == pytest.approx(150 / 117.34 / 0.25)

    def test_incompatible(self, half_barrel):
        result = evaluate_serving(half_barrel, ServingUnit(size=5, base_unit="g"), 150)
        assert result.status == CostStatus.INCOMPATIBLE
        assert result.servings_per_purchase == 0

    def test_pending_when_incomplete(self, half_barrel):
        assert evaluate_serving(half_barrel, None).status == CostStatus.PENDING
        assert evaluate_serving(half_barrel, ServingUnit(base_unit="L")).status == CostStatus.PENDING

    def test_no_margin_no_price(self, half_barrel, half_liter_pour):
        result = evaluate_serving(half_barrel, half_liter_pour, 150)
        assert result.is_ok
        assert result.suggested_price is None

    def test_idempotent(self, half_barrel, half_liter_pour):
        first = evaluate_serving(half_barrel, half_liter_pour, 150, 70)
        second = evaluate_serving(half_barrel, half_liter_pour, 150, 70)
        assert first == second

    def test_display_placeholder(self):
        cells = ServingCost(status=CostStatus.INCOMPATIBLE).display()
        assert set(cells.values()) == {"—"}

    def test_display_ok(self, half_barrel, half_liter_pour):
        cells = evaluate_serving(half_barrel, half_liter_pour, 150, 75).display()
        assert cells["servings_per_purchase"] == "117.3"
        assert cells["cost_per_serving"] == "$1.2783"
        assert cells["suggested_price"] == "$5.11"


class TestSnapshot:
    """Tests for rounding at the persistence boundary."""

    def test_snapshot_rounds(self, half_barrel, half_liter_pour, settings):
        product = Product(
            name="Aslan Pils",
            purchase_unit=half_barrel,
            serving_unit=half_liter_pour,
            cost_per_purchase=150,
            target_margin_pct=75,
        )

        snap = snapshot_product(product, settings)

        assert snap.servings_per_purchase == 117.34
        assert snap.cost_per_serving == 1.2783
        assert snap.suggested_price == 5.11
        # Input product untouched
        assert product.cost_per_serving is None

    def test_snapshot_price_is_from_unrounded_cost(self, settings):
        product = Product(
            purchase_unit=PurchaseUnit(size=3, base_unit="each"),
            serving_unit=ServingUnit(size=1, base_unit="each"),
            cost_per_purchase=1,
            target_margin_pct=50,
        )

        snap = snapshot_product(product, settings)

        assert snap.cost_per_serving == 0.3333
        assert snap.suggested_price == 0.67

    def test_snapshot_incomplete_product(self, settings):
        snap = snapshot_product(Product(name="Draft"), settings)
        assert snap.servings_per_purchase == 0
        assert snap.cost_per_serving == 0
        assert snap.suggested_price is None

    def test_custom_decimals(self):
        settings = Settings(cost_decimals=2, price_decimals=1)
        assert round_cost(1.23456, settings) == 1.23
        assert round_price(6.06, settings) == 6.1
        assert round_price(None, settings) is None
