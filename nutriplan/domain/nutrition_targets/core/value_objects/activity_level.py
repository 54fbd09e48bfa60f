"""ActivityLevel value object - physical activity level for TDEE."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union


class ActivityLevel(str, Enum):
    """Physical Activity Level (PAL) for TDEE calculation.

    Represents user's typical activity level to multiply BMR:
    - SEDENTARY: Little or no exercise
    - LIGHT: Light exercise 1-3 days/week
    - MODERATE: Moderate exercise 3-5 days/week
    - ACTIVE: Hard exercise 6-7 days/week
    - VERY_ACTIVE: Athlete level training
    """

    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    @classmethod
    def resolve(cls, value: Union["ActivityLevel", str, None]) -> Optional["ActivityLevel"]:
        """Look up an activity level without raising.

        Args:
            value: Enum member or its string value (case-insensitive)

        Returns:
            Optional[ActivityLevel]: Matching level, None if unrecognized

        Example:
            >>> ActivityLevel.resolve("Moderate")
            <ActivityLevel.MODERATE: 'moderate'>
            >>> ActivityLevel.resolve("couch") is None
            True
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return None
        return None

    def pal_multiplier(self) -> float:
        """Get PAL (Physical Activity Level) multiplier.

        Example:
            >>> ActivityLevel.MODERATE.pal_multiplier()
            1.55
        """
        return PAL_MULTIPLIERS[self]

    def description(self) -> str:
        """Get human-readable description."""
        descriptions = {
            ActivityLevel.SEDENTARY: "Little or no exercise",
            ActivityLevel.LIGHT: "Light exercise 1-3 days/week",
            ActivityLevel.MODERATE: "Moderate exercise 3-5 days/week",
            ActivityLevel.ACTIVE: "Hard exercise 6-7 days/week",
            ActivityLevel.VERY_ACTIVE: "Athlete level training",
        }
        return descriptions[self]


# Read-only lookup table
PAL_MULTIPLIERS: Mapping[ActivityLevel, float] = MappingProxyType(
    {
        ActivityLevel.SEDENTARY: 1.2,
        ActivityLevel.LIGHT: 1.375,
        ActivityLevel.MODERATE: 1.55,
        ActivityLevel.ACTIVE: 1.725,
        ActivityLevel.VERY_ACTIVE: 1.9,
    }
)

FALLBACK_ACTIVITY_LEVEL = ActivityLevel.SEDENTARY
