"""Domain exceptions for nutrition target calculation."""

from typing import Sequence


class NutritionTargetsError(Exception):
    """Base exception for nutrition target domain errors."""

    pass


class InvalidMetricsError(NutritionTargetsError):
    """Raised when body metrics fail validation.

    Carries every violated constraint, in field order, so callers can
    show all of them at once.
    """

    def __init__(self, errors: Sequence[str]):
        self.errors = tuple(errors)
        super().__init__("; ".join(self.errors) or "Invalid body metrics")


class UnsupportedGenderError(NutritionTargetsError):
    """Raised when gender is not one of the supported values."""

    def __init__(self, value: object):
        super().__init__(f"Gender must be 'male' or 'female', got {value!r}")
        self.value = value


class InvalidTargetError(NutritionTargetsError):
    """Raised when a goal target cannot be projected."""

    pass
