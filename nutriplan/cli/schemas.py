"""
Request/response models for the command line interface.

Parsing and serialization live here so the domain only ever sees
already-typed numbers.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from nutriplan.application.nutrition_targets.orchestrators.profile_orchestrator import (
    ProfileCalculations,
)
from nutriplan.domain.nutrition_targets.core.value_objects.activity_level import (
    ActivityLevel,
)
from nutriplan.domain.nutrition_targets.core.value_objects.gender import Gender
from nutriplan.domain.nutrition_targets.core.value_objects.metric_input import (
    MetricInput,
)


class ProfileMetricsRequest(BaseModel):
    """
    Body metrics as typed on the command line.

    Only types and enums are checked here; ranges are left to the
    domain validator so every violation is reported together.

    Example:
        >>> req = ProfileMetricsRequest(weight=70, height=170, age=25, gender="male")
        >>> req.activity_level
        <ActivityLevel.MODERATE: 'moderate'>
    """

    model_config = ConfigDict(frozen=True)

    weight: float = Field(..., description="Body weight (kg)")
    height: float = Field(..., description="Height (cm)")
    age: int = Field(..., description="Age (years)")
    gender: Gender
    body_fat_percent: float = Field(20.0, description="Body fat (%)")
    activity_level: ActivityLevel = ActivityLevel.MODERATE
    deficit: Optional[float] = Field(None, description="Daily deficit (kcal)")
    target_body_fat: Optional[float] = Field(None, description="Target body fat (%)")

    def to_metric_input(self) -> MetricInput:
        return MetricInput(
            weight=self.weight,
            height=self.height,
            age=self.age,
            gender=self.gender,
            body_fat_percent=self.body_fat_percent,
        )


class ProfileMetricsResponse(BaseModel):
    """Flat JSON view of calculated profile metrics."""

    model_config = ConfigDict(frozen=True)

    bmi: float
    bmi_category: str
    bmr: int
    tdee: int
    daily_calorie_target: int
    protein_target: int
    carb_target: int
    fat_target: int
    protein_percent: int
    carb_percent: int
    fat_percent: int
    estimated_weekly_weight_loss: float
    estimated_time_to_goal_weeks: Optional[int] = Field(
        None, description="None when the goal is unattainable"
    )
    goal_attainable: bool

    @classmethod
    def from_calculations(cls, calculations: ProfileCalculations) -> ProfileMetricsResponse:
        targets = calculations.targets
        percentages = calculations.macro_percentages
        return cls(
            bmi=round(calculations.bmi, 1),
            bmi_category=calculations.bmi_category,
            bmr=targets.bmr,
            tdee=targets.tdee,
            daily_calorie_target=targets.daily_calorie_target,
            protein_target=targets.protein_target,
            carb_target=targets.carb_target,
            fat_target=targets.fat_target,
            protein_percent=percentages.protein_percent,
            carb_percent=percentages.carb_percent,
            fat_percent=percentages.fat_percent,
            estimated_weekly_weight_loss=targets.estimated_weekly_weight_loss,
            estimated_time_to_goal_weeks=targets.estimated_time_to_goal.weeks,
            goal_attainable=targets.estimated_time_to_goal.attainable,
        )
