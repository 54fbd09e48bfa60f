"""Domain exceptions for nutrition targets."""

from .domain_errors import (
    InvalidMetricsError,
    InvalidTargetError,
    NutritionTargetsError,
    UnsupportedGenderError,
)

__all__ = [
    "NutritionTargetsError",
    "InvalidMetricsError",
    "UnsupportedGenderError",
    "InvalidTargetError",
]
