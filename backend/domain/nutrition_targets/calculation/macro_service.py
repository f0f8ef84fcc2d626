"""MacroService - Macronutrient distribution calculation."""

from ..core.ports.calculators import IMacroCalculator
from ..core.value_objects.macro_split import (
    CARBS_KCAL_PER_G,
    FAT_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    MacroSplit,
)
from .rounding import round_half_away_from_zero

PROTEIN_SHARE = 0.30
FAT_SHARE = 0.30
CARBS_SHARE = 0.40


class MacroService(IMacroCalculator):
    """Split daily calories 30/30/40 into protein, fat and carbs.

    Each macro is derived independently from the *unrounded* calorie
    figure and rounded half away from zero:

        protein = round(0.30 x kcal / 4)
        fat     = round(0.30 x kcal / 9)
        carbs   = round(0.40 x kcal / 4)
    """

    def calculate(self, calories: float) -> MacroSplit:
        """Calculate macro grams.

        Args:
            calories: Goal-adjusted calories, before rounding

        Returns:
            MacroSplit: Protein/fat/carbs in grams

        Example:
            >>> MacroService().calculate(2797.75)
            MacroSplit(protein_g=210, fat_g=93, carbs_g=280)
        """
        calories = max(0.0, calories)
        return MacroSplit(
            protein_g=round_half_away_from_zero(PROTEIN_SHARE * calories / PROTEIN_KCAL_PER_G),
            fat_g=round_half_away_from_zero(FAT_SHARE * calories / FAT_KCAL_PER_G),
            carbs_g=round_half_away_from_zero(CARBS_SHARE * calories / CARBS_KCAL_PER_G),
        )
