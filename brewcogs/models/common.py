"""Common types used across brewCOGS."""

from enum import Enum


class UnitKind(str, Enum):
    """Physical dimension of a unit."""
    VOLUME = "volume"
    MASS = "mass"
    COUNT = "count"


class Unit(str, Enum):
    """Supported unit symbols."""
    L = "L"
    ML = "ml"
    OZ = "oz"
    GAL = "gal"
    LB = "lb"
    G = "g"
    EACH = "each"

    @classmethod
    def _missing_(cls, value):
        # Case-insensitive fallback ("l" -> L, "Each" -> each)
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return None


class CostStatus(str, Enum):
    """Outcome of a per-serving calculation."""
    OK = "ok"
    PENDING = "pending"            # Not enough input yet
    INCOMPATIBLE = "incompatible"  # Units of different kinds


class CostSource(str, Enum):
    """Where a cost figure came from."""
    CATALOG = "catalog"
    RECIPE = "recipe"
    MANUAL = "manual"


PLACEHOLDER = "—"
