"""BMRService - Basal Metabolic Rate calculation."""

from typing import Union

from ..core.ports.calculators import IBMRCalculator
from ..core.value_objects.bmr import BMR
from ..core.value_objects.gender import Gender


class BMRService(IBMRCalculator):
    """Calculate Basal Metabolic Rate using Mifflin-St Jeor equation.

    Formula:
        Men:   BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age + 5
        Women: BMR = 10 × weight(kg) + 6.25 × height(cm) - 5 × age - 161

    References:
        Mifflin MD, St Jeor ST, Hill LA, et al. A new predictive equation
        for resting energy expenditure in healthy individuals.
        Am J Clin Nutr. 1990;51(2):241-247.
    """

    def calculate(
        self,
        weight: float,
        height: float,
        age: float,
        gender: Union[Gender, str],
    ) -> BMR:
        """Calculate BMR from body metrics.

        Args:
            weight: Body weight in kg
            height: Height in cm
            age: Age in years
            gender: Gender enum or its string value

        Returns:
            BMR: Unrounded basal metabolic rate in kcal/day

        Raises:
            UnsupportedGenderError: If gender is not male/female

        Example:
            >>> BMRService().calculate(70, 170, 25, Gender.MALE).value
            1642.5
        """
        gender = Gender.parse(gender)

        base = 10 * weight + 6.25 * height - 5 * age

        return BMR(value=base + gender.bmr_constant())
