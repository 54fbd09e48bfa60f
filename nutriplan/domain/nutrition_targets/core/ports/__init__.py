"""Ports (interfaces) for nutrition target domain."""

from .calculators import (
    IBMRCalculator,
    IGoalTimeEstimator,
    ITargetCalculator,
    ITDEECalculator,
)

__all__ = [
    "IBMRCalculator",
    "ITDEECalculator",
    "ITargetCalculator",
    "IGoalTimeEstimator",
]
