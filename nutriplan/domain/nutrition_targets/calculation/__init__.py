"""Calculation services for nutrition targets."""

from .bmr_service import BMRService
from .goal_time_service import GoalTimeService
from .target_service import TargetService
from .tdee_service import TDEEService

__all__ = [
    "BMRService",
    "TDEEService",
    "TargetService",
    "GoalTimeService",
]
