"""Body composition helpers: BMI, lean mass and target weight."""

from ..core.constants import BODY_FAT_RANGE_PERCENT
from ..core.exceptions.domain_errors import InvalidTargetError


def calculate_bmi(weight: float, height: float) -> float:
    """Calculate Body Mass Index.

    Args:
        weight: Body weight in kg
        height: Height in cm

    Returns:
        float: BMI = weight (kg) / (height (m))^2

    Example:
        >>> round(calculate_bmi(80.0, 180.0), 2)
        24.69
    """
    height_m = height / 100.0
    return weight / (height_m**2)


def bmi_category(bmi: float) -> str:
    """Get BMI category classification.

    Returns:
        str: underweight, normal, overweight or obese
    """
    if bmi < 18.5:
        return "underweight"
    elif bmi < 25.0:
        return "normal"
    elif bmi < 30.0:
        return "overweight"
    else:
        return "obese"


def fat_mass(weight: float, body_fat_percent: float) -> float:
    return weight * body_fat_percent / 100


def lean_mass(weight: float, body_fat_percent: float) -> float:
    return weight - fat_mass(weight, body_fat_percent)


def target_weight(weight: float, body_fat_percent: float, target_body_fat_percent: float) -> float:
    """Weight at the target body fat, assuming lean mass is unchanged.

    Raises:
        InvalidTargetError: If target body fat is outside 3-60%
    """
    low, high = BODY_FAT_RANGE_PERCENT
    if not (low <= target_body_fat_percent <= high):
        raise InvalidTargetError(
            f"Target body fat must be between {low:g}-{high:g}%, "
            f"got {target_body_fat_percent}"
        )
    return lean_mass(weight, body_fat_percent) / (1 - target_body_fat_percent / 100)
