"""MacroSplit value object - macronutrient distribution."""

from dataclasses import dataclass

PROTEIN_KCAL_PER_G = 4
FAT_KCAL_PER_G = 9
CARBS_KCAL_PER_G = 4


@dataclass(frozen=True)
class MacroSplit:
    """Macronutrient distribution in grams.

    Uses standard calorie conversion: protein 4 kcal/g, carbs 4 kcal/g,
    fat 9 kcal/g.

    Attributes:
        protein_g: Protein in grams (non-negative)
        fat_g: Fat in grams (non-negative)
        carbs_g: Carbohydrates in grams (non-negative)
    """

    protein_g: int
    fat_g: int
    carbs_g: int

    def __post_init__(self) -> None:
        """Validate macronutrients are non-negative.

        Raises:
            ValueError: If any macronutrient is negative
        """
        if self.protein_g < 0:
            raise ValueError(f"Protein must be non-negative, got {self.protein_g}")
        if self.fat_g < 0:
            raise ValueError(f"Fat must be non-negative, got {self.fat_g}")
        if self.carbs_g < 0:
            raise ValueError(f"Carbs must be non-negative, got {self.carbs_g}")

    def total_calories(self) -> int:
        """Calculate total calories from macronutrients.

        Example:
            >>> MacroSplit(protein_g=210, fat_g=93, carbs_g=280).total_calories()
            2797
        """
        return (
            self.protein_g * PROTEIN_KCAL_PER_G
            + self.fat_g * FAT_KCAL_PER_G
            + self.carbs_g * CARBS_KCAL_PER_G
        )

    def __str__(self) -> str:
        return f"{self.protein_g}P / {self.carbs_g}C / {self.fat_g}F"
