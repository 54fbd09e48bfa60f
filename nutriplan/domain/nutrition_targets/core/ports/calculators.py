"""Calculator ports - interfaces for BMR/TDEE/target calculations."""

from abc import ABC, abstractmethod
from typing import Optional, Union

from ..value_objects.activity_level import ActivityLevel
from ..value_objects.bmr import BMR
from ..value_objects.gender import Gender
from ..value_objects.macro_split import MacroSplit
from ..value_objects.tdee import TDEE
from ..value_objects.time_to_goal import TimeToGoal


class IBMRCalculator(ABC):
    """Port for BMR calculation."""

    @abstractmethod
    def calculate(self, weight: float, height: float, age: float, gender: Gender) -> BMR:
        """Calculate BMR from body metrics."""
        pass


class ITDEECalculator(ABC):
    """Port for TDEE calculation."""

    @abstractmethod
    def calculate(self, bmr: BMR, activity_level: Union[ActivityLevel, str]) -> TDEE:
        """Calculate TDEE from BMR and activity level.

        Implementations must not fail on an unrecognized activity level.
        """
        pass


class ITargetCalculator(ABC):
    """Port for deriving calorie target and macro split from TDEE."""

    @abstractmethod
    def daily_calorie_target(self, tdee: TDEE, gender: Gender, deficit: float) -> float:
        """Calculate the clamped, unrounded daily calorie target."""
        pass

    @abstractmethod
    def macro_split(self, daily_calorie_target: float, weight: float) -> MacroSplit:
        """Split the daily calorie target into protein/carbs/fat grams."""
        pass

    @abstractmethod
    def raw_weekly_weight_loss(self, deficit: float) -> float:
        """Unrounded kg lost per week for a daily deficit."""
        pass

    @abstractmethod
    def weekly_weight_loss(self, deficit: float) -> float:
        """Published kg lost per week, rounded to two decimals."""
        pass


class IGoalTimeEstimator(ABC):
    """Port for projecting weeks to a body-fat target."""

    @abstractmethod
    def estimate(
        self,
        current_weight: float,
        current_body_fat: float,
        target_body_fat: float,
        weekly_weight_loss: Optional[float],
    ) -> TimeToGoal:
        """Project time to reach target body fat."""
        pass
