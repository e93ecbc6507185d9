"""Proportional nutrient scaling."""

from decimal import ROUND_HALF_UP, Decimal

from food_diary.domain.nutrients import NUTRIENT_FIELDS, NutrientProfile


def round_half_away(value: float) -> float:
    """Round to the nearest integer, halves away from zero."""
    return float(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def round_to_3_decimals(value: float) -> float:
    """Round a value to 3 decimal places, halves away from zero."""
    return round_half_away(value * 1000) / 1000


def scale_nutrients(base: NutrientProfile, amount_g: float) -> NutrientProfile:
    """Scale a per-100g profile to ``amount_g`` grams.

    Absent fields stay absent. Integer fields are rounded to whole numbers,
    everything else to 3 decimals.
    """
    ratio = amount_g / 100.0
    scaled: dict[str, float | int] = {}
    for nutrient in NUTRIENT_FIELDS:
        value = getattr(base, nutrient.name)
        if value is None:
            continue
        if nutrient.integer:
            scaled[nutrient.name] = int(round_half_away(value * ratio))
        else:
            scaled[nutrient.name] = round_to_3_decimals(value * ratio)
    return NutrientProfile(**scaled)


def add_scaled_nutrients(
    total: NutrientProfile, component: NutrientProfile, amount_g: float
) -> NutrientProfile:
    """Return ``total`` plus ``component`` scaled to ``amount_g`` grams."""
    portion = scale_nutrients(component, amount_g)
    summed: dict[str, float | int] = total.present_values()
    for nutrient in NUTRIENT_FIELDS:
        value = getattr(portion, nutrient.name)
        if value is None:
            continue
        current = summed.get(nutrient.name)
        if current is None:
            summed[nutrient.name] = value
        elif nutrient.integer:
            summed[nutrient.name] = int(current) + int(value)
        else:
            summed[nutrient.name] = round_to_3_decimals(current + value)
    return NutrientProfile(**summed)
