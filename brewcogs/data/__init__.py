"""Reference data: category presets."""

from brewcogs.data.categories import (
    FOH_CATEGORIES,
    get_category,
    list_categories,
    purchase_preset,
    serving_preset,
)

__all__ = [
    "FOH_CATEGORIES",
    "get_category",
    "list_categories",
    "purchase_preset",
    "serving_preset",
]
