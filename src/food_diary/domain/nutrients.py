"""Nutrient profile model and its field table."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict


class NutrientProfile(BaseModel):
    """Sparse nutrient values, per 100 g unless noted otherwise.

    ``None`` means the value is unknown and is never treated as zero.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    # Macronutrients
    calories: float | None = None
    protein_g: float | None = None
    total_fat_g: float | None = None
    carbohydrates_g: float | None = None
    dietary_fiber_g: float | None = None
    total_sugars_g: float | None = None
    added_sugars_g: float | None = None
    water_g: float | None = None

    # Fats
    saturated_fats_g: float | None = None
    monounsaturated_fats_g: float | None = None
    polyunsaturated_fats_g: float | None = None
    trans_fats_g: float | None = None

    # Omega acids
    omega_3_mg: float | None = None
    omega_6_mg: float | None = None
    omega_9_mg: float | None = None
    alpha_linolenic_acid_mg: float | None = None
    linoleic_acid_mg: float | None = None
    eicosapentaenoic_acid_mg: float | None = None
    docosahexaenoic_acid_mg: float | None = None

    cholesterol_mg: float | None = None

    # Vitamins
    vitamin_a_mcg: float | None = None
    vitamin_c_mg: float | None = None
    vitamin_d_mcg: float | None = None
    vitamin_e_mg: float | None = None
    vitamin_k_mcg: float | None = None
    vitamin_b1_mg: float | None = None
    vitamin_b2_mg: float | None = None
    vitamin_b3_mg: float | None = None
    vitamin_b5_mg: float | None = None
    vitamin_b6_mg: float | None = None
    vitamin_b7_mcg: float | None = None
    vitamin_b9_mcg: float | None = None
    vitamin_b12_mcg: float | None = None
    folate_dfe_mcg: float | None = None
    choline_mg: float | None = None

    # Minerals
    calcium_mg: float | None = None
    iron_mg: float | None = None
    magnesium_mg: float | None = None
    phosphorus_mg: float | None = None
    potassium_mg: float | None = None
    sodium_mg: float | None = None
    zinc_mg: float | None = None
    copper_mg: float | None = None
    manganese_mg: float | None = None
    selenium_mcg: float | None = None
    iodine_mcg: float | None = None

    # Amino acids
    lysine_mg: float | None = None
    methionine_mg: float | None = None
    cysteine_mg: float | None = None
    phenylalanine_mg: float | None = None
    tyrosine_mg: float | None = None
    threonine_mg: float | None = None
    tryptophan_mg: float | None = None
    valine_mg: float | None = None
    histidine_mg: float | None = None
    leucine_mg: float | None = None
    isoleucine_mg: float | None = None

    caffeine_mg: float | None = None
    ethyl_alcohol_g: float | None = None

    glycemic_index: int | None = None
    glycemic_load: float | None = None

    def present_values(self) -> dict[str, float | int]:
        """Return only the fields that carry a value."""
        return {
            nutrient.name: getattr(self, nutrient.name)
            for nutrient in NUTRIENT_FIELDS
            if getattr(self, nutrient.name) is not None
        }

    def to_payload(self) -> dict[str, float | int]:
        """Serialize for JSON storage, dropping absent fields."""
        return self.model_dump(exclude_none=True)


@dataclass(frozen=True)
class NutrientField:
    """Name and numeric kind of a nutrient profile field."""

    name: str
    integer: bool = False


def _float_fields(*names: str) -> tuple[NutrientField, ...]:
    return tuple(NutrientField(name) for name in names)


NUTRIENT_FIELDS: tuple[NutrientField, ...] = (
    *_float_fields(
        "calories",
        "protein_g",
        "total_fat_g",
        "carbohydrates_g",
        "dietary_fiber_g",
        "total_sugars_g",
        "added_sugars_g",
        "water_g",
        "saturated_fats_g",
        "monounsaturated_fats_g",
        "polyunsaturated_fats_g",
        "trans_fats_g",
        "omega_3_mg",
        "omega_6_mg",
        "omega_9_mg",
        "alpha_linolenic_acid_mg",
        "linoleic_acid_mg",
        "eicosapentaenoic_acid_mg",
        "docosahexaenoic_acid_mg",
        "cholesterol_mg",
        "vitamin_a_mcg",
        "vitamin_c_mg",
        "vitamin_d_mcg",
        "vitamin_e_mg",
        "vitamin_k_mcg",
        "vitamin_b1_mg",
        "vitamin_b2_mg",
        "vitamin_b3_mg",
        "vitamin_b5_mg",
        "vitamin_b6_mg",
        "vitamin_b7_mcg",
        "vitamin_b9_mcg",
        "vitamin_b12_mcg",
        "folate_dfe_mcg",
        "choline_mg",
        "calcium_mg",
        "iron_mg",
        "magnesium_mg",
        "phosphorus_mg",
        "potassium_mg",
        "sodium_mg",
        "zinc_mg",
        "copper_mg",
        "manganese_mg",
        "selenium_mcg",
        "iodine_mcg",
        "lysine_mg",
        "methionine_mg",
        "cysteine_mg",
        "phenylalanine_mg",
        "tyrosine_mg",
        "threonine_mg",
        "tryptophan_mg",
        "valine_mg",
        "histidine_mg",
        "leucine_mg",
        "isoleucine_mg",
        "caffeine_mg",
        "ethyl_alcohol_g",
    ),
    NutrientField("glycemic_index", integer=True),
    NutrientField("glycemic_load"),
)
