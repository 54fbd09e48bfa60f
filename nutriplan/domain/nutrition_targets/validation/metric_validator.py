"""MetricValidator - range checks for raw body metrics."""

from typing import List, Tuple

from ..core.constants import (
    AGE_RANGE_YEARS,
    BODY_FAT_RANGE_PERCENT,
    HEIGHT_RANGE_CM,
    WEIGHT_RANGE_KG,
)
from ..core.value_objects.metric_input import MetricInput
from ..core.value_objects.validation_result import ValidationResult


def _in_range(value: float, bounds: Tuple[float, float]) -> bool:
    low, high = bounds
    # NaN fails both comparisons and is reported as out of range
    return low <= value <= high


class MetricValidator:
    """Validate body metrics before any target is calculated.

    Every field is checked independently and all violations are
    reported, always in the order weight, height, age, body fat.
    Bounds are inclusive. Never raises.
    """

    def validate(self, metrics: MetricInput) -> ValidationResult:
        """Validate body metrics.

        Args:
            metrics: Raw user metrics

        Returns:
            ValidationResult: Empty errors when valid

        Example:
            >>> result = MetricValidator().validate(
            ...     MetricInput(weight=29.9, height=170, age=25, gender="male")
            ... )
            >>> result.errors
            ('Weight must be between 30-300 kg',)
        """
        errors: List[str] = []

        if not _in_range(metrics.weight, WEIGHT_RANGE_KG):
            errors.append("Weight must be between 30-300 kg")

        if not _in_range(metrics.height, HEIGHT_RANGE_CM):
            errors.append("Height must be between 100-250 cm")

        if not _in_range(metrics.age, AGE_RANGE_YEARS):
            errors.append("Age must be between 15-100 years")

        if not _in_range(metrics.body_fat_percent, BODY_FAT_RANGE_PERCENT):
            errors.append("Body fat must be between 3-60%")

        return ValidationResult(errors=tuple(errors))
