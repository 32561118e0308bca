"""Tests for unit conversion."""

import math

import pytest

from brewcogs.errors import UnrecognizedUnit
from brewcogs.models.common import Unit, UnitKind
from brewcogs.services.units import (
    UNIT_TABLE,
    from_canonical,
    kind_of,
    same_kind,
    to_canonical,
)


class TestKindOf:
    """Tests for kind_of."""

    @pytest.mark.parametrize("unit,kind", [
        ("L", UnitKind.VOLUME),
        ("ml", UnitKind.VOLUME),
        ("oz", UnitKind.VOLUME),
        ("gal", UnitKind.VOLUME),
        ("lb", UnitKind.MASS),
        ("g", UnitKind.MASS),
        ("each", UnitKind.COUNT),
    ])
    def test_known_units(self, unit, kind):
        assert kind_of(unit) == kind

    def test_accepts_enum_members(self):
        assert kind_of(Unit.GAL) == UnitKind.VOLUME

    def test_case_insensitive_symbols(self):
        assert kind_of("l") == UnitKind.VOLUME
        assert kind_of("Each") == UnitKind.COUNT

    def test_unknown_unit_raises(self):
        """Unknown symbols are an explicit error, not a silent count."""
        with pytest.raises(UnrecognizedUnit) as exc:
            kind_of("bbl")
        assert exc.value.code == "UNRECOGNIZED_UNIT"
        assert exc.value.unit == "bbl"


class TestToCanonical:
    """Tests for to_canonical."""

    @pytest.mark.parametrize("unit", [u.value for u in Unit])
    def test_zero_is_zero(self, unit):
        assert to_canonical(0, unit) == 0

    def test_volume_factors(self):
        assert to_canonical(1, "L") == 1000
        assert to_canonical(2, "oz") == pytest.approx(59.147)
        assert to_canonical(1, "gal") == pytest.approx(3785.41)

    def test_mass_factors(self):
        assert to_canonical(2, "lb") == pytest.approx(907.184)
        assert to_canonical(250, "g") == 250

    def test_count_unchanged(self):
        assert to_canonical(24, "each") == 24

    @pytest.mark.parametrize("amount", [None, float("nan"), "", "abc"])
    def test_bad_amounts_are_zero(self, amount):
        assert to_canonical(amount, "L") == 0

    def test_numeric_strings_parse(self):
        assert to_canonical("1.5", "L") == 1500

    def test_unknown_unit_raises(self):
        with pytest.raises(UnrecognizedUnit):
            to_canonical(1, "pint")

    def test_from_canonical_inverts(self):
        ml = to_canonical(12, "oz")
        assert from_canonical(ml, "oz") == pytest.approx(12)

    def test_factors_are_positive(self):
        assert all(factor > 0 for _, factor in UNIT_TABLE.values())


class TestSameKind:
    """Tests for same_kind."""

    def test_volume_pair(self):
        assert same_kind("L", "oz") is True

    def test_mass_pair(self):
        assert same_kind("lb", "g") is True

    def test_each_pair(self):
        assert same_kind("each", "each") is True

    @pytest.mark.parametrize("a,b", [
        ("L", "g"),
        ("lb", "ml"),
        ("each", "L"),
        ("g", "each"),
    ])
    def test_cross_kind(self, a, b):
        assert same_kind(a, b) is False

    def test_unknown_never_raises(self):
        assert same_kind("bbl", "L") is False
        assert same_kind(None, None) is False

    def test_symmetric(self):
        units = [u.value for u in Unit]
        for a in units:
            for b in units:
                assert same_kind(a, b) == same_kind(b, a)


def test_no_nan_leaks():
    assert not math.isnan(to_canonical(float("nan"), "gal"))
