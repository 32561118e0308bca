"""
Front-of-house product categories

Standard containers (how we buy) and pours (how we sell) per category.
Every size is an explicit quantity in the unit table; nothing assumes a
bottle or case size behind the scenes.
"""

import logging
from typing import Dict, List, Optional

from brewcogs.models.catalog import CategoryPreset, PurchaseUnit, ServingUnit

logger = logging.getLogger(__name__)


# Kegs
HALF_BARREL = PurchaseUnit(name="1/2 BBL (15.5 gal)", size=58.67, base_unit="L")
SIXTH_BARREL = PurchaseUnit(name="1/6 BBL (5.16 gal)", size=5.16, base_unit="gal")

# Draft pours shared by beer, cider and kombucha
POUR_12OZ = ServingUnit(name="12oz Pour", size=12, base_unit="oz")
POUR_4OZ = ServingUnit(name="4oz Pour", size=4, base_unit="oz")
TASTER_2OZ = ServingUnit(name="2oz Taster", size=2, base_unit="oz")


FOH_CATEGORIES: Dict[str, CategoryPreset] = {
    # ------------------------------------------------------------------
    # Beer families (parent + variants)
    # ------------------------------------------------------------------
    "beerFamily": CategoryPreset(
        id="beerFamily",
        name="Beer Family (Parent)",
        description="A beer style with draft and packaged variants",
        subcategories=[
            "Aslan Core Beers",
            "Aslan Seasonal",
            "Aslan Limited Release",
            "Guest Beer Styles",
        ],
        is_family=True,
        variant_categories=["draftBeer", "packagedBeer"],
        default_batch=PurchaseUnit(name="5 gal pilot batch", size=5, base_unit="gal"),
    ),
    "draftBeer": CategoryPreset(
        id="draftBeer",
        name="Draft Beer (Variant)",
        description="Keg purchases within a beer family",
        subcategories=[
            "Aslan Core - Draft",
            "Aslan Seasonal - Draft",
            "Aslan Limited - Draft",
            "Guest Taps",
        ],
        parent_category="beerFamily",
        purchase_units={
            "half-barrel": HALF_BARREL,
            "sixth-barrel": SIXTH_BARREL,
        },
        serving_options={
            "0.5L": ServingUnit(name="0.5L Pour", size=0.5, base_unit="L"),
            "0.3L": ServingUnit(name="0.3L Pour", size=0.3, base_unit="L"),
            "12oz": POUR_12OZ,
            "4oz": POUR_4OZ,
            "2oz": TASTER_2OZ,
            "32oz-growler": ServingUnit(name="32oz Growler Fill", size=32, base_unit="oz"),
            "64oz-growler": ServingUnit(name="64oz Growler Fill", size=64, base_unit="oz"),
            "64oz-pitcher": ServingUnit(name="64oz Pitcher", size=64, base_unit="oz"),
        },
    ),
    "packagedBeer": CategoryPreset(
        id="packagedBeer",
        name="Packaged Beer (Variant)",
        description="Cans and bottles within a beer family",
        subcategories=["Aslan Cans", "Aslan Bottles"],
        parent_category="beerFamily",
        purchase_units={
            "flat": PurchaseUnit(name="Flat (24 x 12oz cans)", size=12, pack_qty=24, base_unit="oz"),
            "six-pack": PurchaseUnit(name="Six Pack (6 x 12oz)", size=12, pack_qty=6, base_unit="oz"),
            "single-can": PurchaseUnit(name="Single 12oz Can", size=12, base_unit="oz"),
            "bottle-500ml": PurchaseUnit(name="500ml Bottle", size=500, base_unit="ml"),
        },
        serving_options={
            "single-can": ServingUnit(name="Single 12oz Can", size=12, base_unit="oz"),
            "single-bottle": ServingUnit(name="Single 500ml Bottle", size=500, base_unit="ml"),
            "six-pack": ServingUnit(name="Six Pack", size=72, base_unit="oz"),
            "flat": ServingUnit(name="Flat (24 cans)", size=288, base_unit="oz"),
        },
    ),

    # ------------------------------------------------------------------
    # Batch cocktails
    # ------------------------------------------------------------------
    "cocktailFamily": CategoryPreset(
        id="cocktailFamily",
        name="Batch Cocktail Family",
        description="Cocktail recipe with multiple ingredients",
        subcategories=[
            "Margarita Family",
            "Moscow Mule Family",
            "Seasonal Cocktail Family",
            "Sangria Family",
        ],
        is_family=True,
        variant_categories=["cocktailIngredient"],
        default_batch=PurchaseUnit(name="5 gal batch", size=5, base_unit="gal"),
    ),
    "cocktailIngredient": CategoryPreset(
        id="cocktailIngredient",
        name="Cocktail Ingredient",
        description="Individual ingredients for batch cocktails",
        subcategories=[
            "Spirits",
            "Liqueurs",
            "Mixers",
            "Fresh Ingredients",
            "Syrups",
            "Garnishes",
        ],
        parent_category="cocktailFamily",
        purchase_units={
            "bottle-750ml": PurchaseUnit(name="750ml Bottle", size=750, base_unit="ml"),
            "bottle-1L": PurchaseUnit(name="1L Bottle", size=1, base_unit="L"),
            "gallon": PurchaseUnit(name="Gallon", size=1, base_unit="gal"),
        },
    ),

    # ------------------------------------------------------------------
    # Single categories
    # ------------------------------------------------------------------
    "cider": CategoryPreset(
        id="cider",
        name="Cider",
        subcategories=["Draft Cider", "Guest Cider"],
        purchase_units={"half-barrel": HALF_BARREL},
        serving_options={"12oz": POUR_12OZ, "4oz": POUR_4OZ, "2oz": TASTER_2OZ},
    ),
    "kombucha": CategoryPreset(
        id="kombucha",
        name="Kombucha",
        subcategories=["Draft Kombucha", "Guest Kombucha"],
        purchase_units={"sixth-barrel": SIXTH_BARREL},
        serving_options={"12oz": POUR_12OZ, "4oz": POUR_4OZ, "2oz": TASTER_2OZ},
    ),
    "wine": CategoryPreset(
        id="wine",
        name="Wine",
        subcategories=["Red Wine", "White Wine", "Rosé Wine", "Sparkling Wine"],
        purchase_units={
            "bottle-750ml": PurchaseUnit(name="750ml Bottle", size=750, base_unit="ml"),
            "case-wine": PurchaseUnit(name="Case (12 x 750ml)", size=750, pack_qty=12, base_unit="ml"),
        },
        serving_options={
            "5oz-glass": ServingUnit(name="5oz Glass", size=5, base_unit="oz"),
            "6oz-glass": ServingUnit(name="6oz Glass", size=6, base_unit="oz"),
            "9oz-glass": ServingUnit(name="9oz Glass", size=9, base_unit="oz"),
            "bottle": ServingUnit(name="Bottle (750ml)", size=750, base_unit="ml"),
        },
    ),
    "naBeverages": CategoryPreset(
        id="naBeverages",
        name="N/A Beverages",
        subcategories=[
            "Fountain Drinks",
            "Hop Water",
            "Coffee",
            "Kids Drinks",
            "Non-Alcoholic Beer",
        ],
        purchase_units={
            # Syrup bags are declared by finished volume at 1:5 dilution
            "syrup-2.5gal": PurchaseUnit(name="2.5 Gal Syrup Bag (12.5 gal mixed)", size=12.5, base_unit="gal"),
            "syrup-5gal": PurchaseUnit(name="5 Gal Syrup Bag (25 gal mixed)", size=25, base_unit="gal"),
            "half-barrel-hopwater": HALF_BARREL.model_copy(update={"name": "1/2 BBL Hop Water"}),
            "sixth-barrel-hopwater": SIXTH_BARREL.model_copy(update={"name": "1/6 BBL Hop Water"}),
            # Coffee is sold by the cup: 32 cups/lb x 5 lb
            "5lb-coffee": PurchaseUnit(name="5lb Coffee Bag (160 cups)", size=160, base_unit="each"),
            "gallon-milk": PurchaseUnit(name="Gallon Milk/Juice", size=1, base_unit="gal"),
            "case-24x12oz": PurchaseUnit(name="Case (24 x 12oz)", size=12, pack_qty=24, base_unit="oz"),
            "case-24x16oz": PurchaseUnit(name="Case (24 x 16oz)", size=16, pack_qty=24, base_unit="oz"),
        },
        serving_options={
            "0.5L-fountain": ServingUnit(name="0.5L Fountain", size=0.5, base_unit="L"),
            "0.3L-fountain": ServingUnit(name="0.3L Fountain", size=0.3, base_unit="L"),
            "16oz-kids": ServingUnit(name="16oz Kids", size=16, base_unit="oz"),
            "8oz-coffee": ServingUnit(name="8oz Coffee", size=1, base_unit="each"),
            "12oz-hopwater": ServingUnit(name="12oz Hop Water", size=12, base_unit="oz"),
            "12oz-nabeer": ServingUnit(name="12oz NA Beer", size=12, base_unit="oz"),
            "16oz-nabeer": ServingUnit(name="16oz NA Beer", size=16, base_unit="oz"),
        },
    ),
    "retail": CategoryPreset(
        id="retail",
        name="Retail (Merchandise)",
        subcategories=[
            "T-Shirts", "Hoodies", "Hats", "Glassware",
            "Accessories", "Gift Cards", "Growlers",
        ],
        purchase_units={"item": PurchaseUnit(name="Individual Item", size=1, base_unit="each")},
        serving_options={"item": ServingUnit(name="Individual Item", size=1, base_unit="each")},
    ),
}


def get_category(category_id: Optional[str]) -> Optional[CategoryPreset]:
    """Get a category preset by ID, or None if unknown."""
    preset = FOH_CATEGORIES.get(category_id or "")
    return preset.model_copy(deep=True) if preset else None


def list_categories(include_families: bool = True) -> List[CategoryPreset]:
    """All category presets, optionally without family parents."""
    return [
        preset.model_copy(deep=True)
        for preset in FOH_CATEGORIES.values()
        if include_families or not preset.is_family
    ]


def purchase_preset(category_id: str, key: str) -> Optional[PurchaseUnit]:
    """Editable copy of a category's standard container."""
    preset = FOH_CATEGORIES.get(category_id)
    unit = preset.purchase_units.get(key) if preset else None
    if unit is None:
        logger.debug(f"No purchase preset '{key}' in category '{category_id}'")
        return None
    return unit.model_copy(deep=True)


def serving_preset(category_id: str, key: str) -> Optional[ServingUnit]:
    """Editable copy of a category's standard pour."""
    preset = FOH_CATEGORIES.get(category_id)
    option = preset.serving_options.get(key) if preset else None
    if option is None:
        logger.debug(f"No serving preset '{key}' in category '{category_id}'")
        return None
    return option.model_copy(deep=True)
