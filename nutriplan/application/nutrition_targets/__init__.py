"""Profile metric use cases."""

from .commands.calculate_profile_metrics import (
    CalculateProfileMetricsCommand,
    CalculateProfileMetricsHandler,
)
from .commands.recalculate_profile_metrics import (
    ProfileSnapshot,
    ProfileUpdate,
    RecalculateProfileMetricsCommand,
    RecalculateProfileMetricsHandler,
    RecalculateProfileMetricsResult,
)
from .orchestrators.profile_orchestrator import ProfileCalculations, ProfileOrchestrator

__all__ = [
    "ProfileOrchestrator",
    "ProfileCalculations",
    "CalculateProfileMetricsCommand",
    "CalculateProfileMetricsHandler",
    "ProfileSnapshot",
    "ProfileUpdate",
    "RecalculateProfileMetricsCommand",
    "RecalculateProfileMetricsHandler",
    "RecalculateProfileMetricsResult",
]
