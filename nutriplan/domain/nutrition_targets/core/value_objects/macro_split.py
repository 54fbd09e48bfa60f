"""MacroSplit value object - macronutrient distribution."""

from dataclasses import dataclass

from ..constants import KCAL_PER_G_CARBS, KCAL_PER_G_FAT, KCAL_PER_G_PROTEIN
from ..rounding import round_half_away


@dataclass(frozen=True)
class MacroPercentages:
    """Share of total calories per macronutrient, rounded to whole percent.

    Attributes:
        protein_percent: Protein share (0-100)
        carb_percent: Carbohydrate share (0-100)
        fat_percent: Fat share (0-100)
    """

    protein_percent: int
    carb_percent: int
    fat_percent: int


@dataclass(frozen=True)
class MacroSplit:
    """Macronutrient distribution in grams.

    Uses standard calorie conversion: protein 4 kcal/g, carbs 4 kcal/g,
    fat 9 kcal/g.

    Carbs are the remainder after protein and fat, so they can come out
    negative when a heavy body weight meets a low calorie target. The
    value is kept as-is rather than clamped.

    Attributes:
        protein_g: Protein in grams
        carbs_g: Carbohydrates in grams (may be negative)
        fat_g: Fat in grams
    """

    protein_g: int
    carbs_g: int
    fat_g: int

    def __post_init__(self) -> None:
        """Validate protein and fat are non-negative.

        Raises:
            ValueError: If protein or fat is negative
        """
        if self.protein_g < 0:
            raise ValueError(f"Protein must be non-negative, got {self.protein_g}")
        if self.fat_g < 0:
            raise ValueError(f"Fat must be non-negative, got {self.fat_g}")

    def protein_calories(self) -> float:
        return self.protein_g * KCAL_PER_G_PROTEIN

    def carbs_calories(self) -> float:
        return self.carbs_g * KCAL_PER_G_CARBS

    def fat_calories(self) -> float:
        return self.fat_g * KCAL_PER_G_FAT

    def total_calories(self) -> float:
        """Calculate total calories from macronutrients.

        Example:
            >>> MacroSplit(protein_g=140, carbs_g=234, fat_g=62).total_calories()
            2054
        """
        return self.protein_calories() + self.carbs_calories() + self.fat_calories()

    def percentages(self) -> MacroPercentages:
        """Calculate each macro's share of total calories.

        Returns:
            MacroPercentages: Rounded percentages, all zero when the
                split carries no calories
        """
        total = self.total_calories()
        if total == 0:
            return MacroPercentages(protein_percent=0, carb_percent=0, fat_percent=0)
        return MacroPercentages(
            protein_percent=round_half_away(self.protein_calories() * 100 / total),
            carb_percent=round_half_away(self.carbs_calories() * 100 / total),
            fat_percent=round_half_away(self.fat_calories() * 100 / total),
        )

    def __str__(self) -> str:
        return f"{self.protein_g}P / {self.carbs_g}C / {self.fat_g}F"
