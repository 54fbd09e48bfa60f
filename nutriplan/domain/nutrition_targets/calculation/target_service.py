"""TargetService - calorie target and macronutrient split."""

from ..core.constants import (
    FAT_CALORIE_SHARE,
    KCAL_PER_G_CARBS,
    KCAL_PER_G_FAT,
    KCAL_PER_G_PROTEIN,
    KCAL_PER_KG_FAT,
    PROTEIN_G_PER_KG,
)
from ..core.ports.calculators import ITargetCalculator
from ..core.rounding import round_half_away, round_to
from ..core.value_objects.gender import Gender
from ..core.value_objects.macro_split import MacroSplit
from ..core.value_objects.tdee import TDEE


class TargetService(ITargetCalculator):
    """Derive daily calorie target and macro split from TDEE.

    Pipeline (order matters):
        1. Subtract the deficit from TDEE
        2. Clamp to the safety floor (1500 kcal men, 1200 kcal women)
        3. Protein: 2.0 g per kg of body weight
        4. Fat: 27% of the clamped calorie target
        5. Carbs: remaining calories (not clamped, may be negative)

    Calorie conversion:
        - Protein: 4 kcal/g
        - Carbohydrates: 4 kcal/g
        - Fat: 9 kcal/g
    """

    def daily_calorie_target(self, tdee: TDEE, gender: Gender, deficit: float) -> float:
        """Apply the deficit, then the gender-specific floor.

        Example:
            >>> service = TargetService()
            >>> service.daily_calorie_target(TDEE(2000.0), Gender.MALE, 1000)
            1500.0
        """
        target = tdee.value - deficit
        return max(target, Gender.parse(gender).calorie_floor())

    def macro_split(self, daily_calorie_target: float, weight: float) -> MacroSplit:
        """Calculate macro distribution.

        Args:
            daily_calorie_target: Clamped, unrounded calorie target
            weight: Body weight in kg

        Returns:
            MacroSplit: Protein/carbs/fat in grams

        Example:
            >>> TargetService().macro_split(2055.175, 70.0)
            MacroSplit(protein_g=140, carbs_g=234, fat_g=62)
        """
        # Protein comes from body weight, not from the calorie target
        protein_g = round_half_away(weight * PROTEIN_G_PER_KG)

        fat_g = round_half_away(daily_calorie_target * FAT_CALORIE_SHARE / KCAL_PER_G_FAT)

        allocated = protein_g * KCAL_PER_G_PROTEIN + fat_g * KCAL_PER_G_FAT
        carbs_g = round_half_away((daily_calorie_target - allocated) / KCAL_PER_G_CARBS)

        return MacroSplit(protein_g=protein_g, carbs_g=carbs_g, fat_g=fat_g)

    def raw_weekly_weight_loss(self, deficit: float) -> float:
        """Unrounded kg lost per week, for projections built on top of it."""
        return deficit * 7 / KCAL_PER_KG_FAT

    def weekly_weight_loss(self, deficit: float) -> float:
        """Estimate kg lost per week, rounded to two decimals.

        Example:
            >>> TargetService().weekly_weight_loss(500)
            0.45
        """
        return round_to(self.raw_weekly_weight_loss(deficit), 2)
