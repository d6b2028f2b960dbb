"""Restaurant filtering by dietary preference."""
from ..models.catalog import Restaurant
from ..models.profile import FoodPreference


VEGETARIAN_FRIENDLY_CUISINES = {"Lebanese", "International"}
NON_VEGAN_CUISINES = {"Traditional Saudi"}


def filter_restaurants(food_pref: FoodPreference, catalog: list[Restaurant]) -> list[Restaurant]:
    """Keep the restaurants compatible with a dietary preference, in catalog order."""
    pref = FoodPreference(food_pref)
    if pref == FoodPreference.VEGETARIAN:
        return [r for r in catalog if r.cuisine in VEGETARIAN_FRIENDLY_CUISINES]
    if pref == FoodPreference.VEGAN:
        return [r for r in catalog if r.cuisine not in NON_VEGAN_CUISINES]
    return list(catalog)
