"""BMR value object - Basal Metabolic Rate."""

from dataclasses import dataclass


@dataclass(frozen=True)
class BMR:
    """Basal Metabolic Rate in kcal/day.

    Represents the minimum calories needed for basic bodily functions
    at rest. Kept unrounded; rounding happens when targets are published.

    Attributes:
        value: BMR in kcal/day (must be positive)
    """

    value: float

    def __post_init__(self) -> None:
        """Validate BMR is positive.

        Raises:
            ValueError: If BMR is not positive
        """
        if not self.value > 0:
            raise ValueError(f"BMR must be positive, got {self.value}")

    def __str__(self) -> str:
        return f"{self.value:.0f} kcal/day"
