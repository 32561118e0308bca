"""
Unit Conversion

Normalizes quantities to the canonical unit of their kind:
volume -> milliliters, mass -> grams, count -> each.
Pure functions over a fixed unit table.
"""

from typing import Dict, Optional, Tuple, Union

from brewcogs.errors import UnrecognizedUnit
from brewcogs.models.catalog import coerce_amount
from brewcogs.models.common import Unit, UnitKind

UnitLike = Union[Unit, str]


# Unit -> (kind, factor to canonical unit)
UNIT_TABLE: Dict[Unit, Tuple[UnitKind, float]] = {
    # Volume: canonical = ml
    Unit.L: (UnitKind.VOLUME, 1000.0),
    Unit.ML: (UnitKind.VOLUME, 1.0),
    Unit.OZ: (UnitKind.VOLUME, 29.5735),
    Unit.GAL: (UnitKind.VOLUME, 3785.41),
    # Mass: canonical = g
    Unit.LB: (UnitKind.MASS, 453.592),
    Unit.G: (UnitKind.MASS, 1.0),
    # Count
    Unit.EACH: (UnitKind.COUNT, 1.0),
}


def resolve_unit(unit: UnitLike) -> Optional[Unit]:
    """Map a symbol to a Unit, or None if it is not in the table."""
    if isinstance(unit, Unit):
        return unit
    try:
        return Unit(unit)
    except ValueError:
        return None


def kind_of(unit: UnitLike) -> UnitKind:
    """Kind of a unit symbol. Raises UnrecognizedUnit for unknown symbols."""
    resolved = resolve_unit(unit)
    if resolved is None:
        raise UnrecognizedUnit(unit)
    return UNIT_TABLE[resolved][0]


def kind_of_or_none(unit: UnitLike) -> Optional[UnitKind]:
    resolved = resolve_unit(unit)
    return UNIT_TABLE[resolved][0] if resolved is not None else None


def factor(unit: UnitLike) -> float:
    """Conversion factor from unit to its canonical unit."""
    resolved = resolve_unit(unit)
    if resolved is None:
        raise UnrecognizedUnit(unit)
    return UNIT_TABLE[resolved][1]


def to_canonical(amount, unit: UnitLike) -> float:
    """
    Convert an amount to the canonical unit of its kind.

    None, NaN and unparseable amounts count as 0.
    Count units are returned unchanged.
    """
    amount = coerce_amount(amount)
    if kind_of(unit) == UnitKind.COUNT:
        return amount
    return amount * factor(unit)


def from_canonical(amount, unit: UnitLike) -> float:
    """Express a canonical amount in the given unit."""
    amount = coerce_amount(amount)
    return amount / factor(unit)


def same_kind(unit_a: UnitLike, unit_b: UnitLike) -> bool:
    """True if both units are recognized and share a kind. Never raises."""
    kind_a = kind_of_or_none(unit_a)
    kind_b = kind_of_or_none(unit_b)
    return kind_a is not None and kind_a == kind_b
