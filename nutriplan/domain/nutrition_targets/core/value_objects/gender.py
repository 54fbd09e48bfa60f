"""Gender value object - selects the BMR constant and calorie floor."""

from enum import Enum
from typing import Union

from ..exceptions.domain_errors import UnsupportedGenderError


class Gender(str, Enum):
    """Gender used by the Mifflin-St Jeor equation.

    Closed two-value enum: the equation only defines these two
    constants, so no other value is accepted.
    """

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def parse(cls, value: Union["Gender", str]) -> "Gender":
        """Coerce a string (case-insensitive) into a Gender.

        Raises:
            UnsupportedGenderError: If value is not male/female
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise UnsupportedGenderError(value)

    def bmr_constant(self) -> float:
        """Sex-specific constant added to the Mifflin-St Jeor base.

        Example:
            >>> Gender.FEMALE.bmr_constant()
            -161.0
        """
        constants = {
            Gender.MALE: 5.0,
            Gender.FEMALE: -161.0,
        }
        return constants[self]

    def calorie_floor(self) -> float:
        """Minimum safe daily calorie target (kcal)."""
        floors = {
            Gender.MALE: 1500.0,
            Gender.FEMALE: 1200.0,
        }
        return floors[self]
