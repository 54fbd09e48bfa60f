"""NutritionTargets value object - published daily targets."""

from dataclasses import dataclass

from .macro_split import MacroSplit
from .time_to_goal import TimeToGoal


@dataclass(frozen=True)
class NutritionTargets:
    """Daily calorie and macronutrient targets for one calculation.

    Built fresh by every calculation; callers replace the whole record
    rather than patching fields.

    Attributes:
        bmr: Basal metabolic rate (kcal/day, rounded)
        tdee: Total daily energy expenditure (kcal/day, rounded)
        daily_calorie_target: Calorie target after deficit and floor
        protein_target: Protein grams per day
        carb_target: Carbohydrate grams per day (may be negative)
        fat_target: Fat grams per day
        estimated_weekly_weight_loss: Expected loss in kg/week (2 dp)
        estimated_time_to_goal: Projection to the target body fat
    """

    bmr: int
    tdee: int
    daily_calorie_target: int
    protein_target: int
    carb_target: int
    fat_target: int
    estimated_weekly_weight_loss: float
    estimated_time_to_goal: TimeToGoal

    def macro_split(self) -> MacroSplit:
        return MacroSplit(
            protein_g=self.protein_target,
            carbs_g=self.carb_target,
            fat_g=self.fat_target,
        )
