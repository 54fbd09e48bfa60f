"""MetricInput value object - raw body metrics entered by the user."""

from dataclasses import dataclass

from ..constants import DEFAULT_BODY_FAT_PERCENT
from .gender import Gender


@dataclass(frozen=True)
class MetricInput:
    """User body metrics for nutrition target calculation.

    Unlike most value objects this one does not validate itself:
    ``MetricValidator`` checks it so that every violated range can be
    reported together instead of failing on the first one.

    Attributes:
        weight: Body weight in kilograms (30-300 kg)
        height: Height in centimeters (100-250 cm)
        age: Age in years (15-100)
        gender: Gender (male/female)
        body_fat_percent: Body fat percentage (3-60)
    """

    weight: float
    height: float
    age: int
    gender: Gender
    body_fat_percent: float = DEFAULT_BODY_FAT_PERCENT

    def __post_init__(self) -> None:
        """Normalize gender strings into the enum.

        Raises:
            UnsupportedGenderError: If gender is not male/female
        """
        object.__setattr__(self, "gender", Gender.parse(self.gender))
