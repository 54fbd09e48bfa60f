"""TimeToGoal value object - projected weeks to reach a body-fat target."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TimeToGoal:
    """Outcome of a goal-time projection.

    Either attainable with a whole number of weeks, or unattainable
    (no weight is lost under the current plan). An unattainable
    projection never carries a week count.

    Attributes:
        weeks: Whole weeks to goal, None when unattainable
        reason: Why the goal is unattainable, None otherwise
    """

    weeks: Optional[int]
    reason: Optional[str] = None

    def __post_init__(self) -> None:
        if self.weeks is None and not self.reason:
            raise ValueError("Unattainable projection requires a reason")
        if self.weeks is not None and self.weeks < 0:
            raise ValueError(f"Weeks must be non-negative, got {self.weeks}")

    @staticmethod
    def in_weeks(weeks: int) -> "TimeToGoal":
        return TimeToGoal(weeks=weeks)

    @staticmethod
    def unattainable(reason: str) -> "TimeToGoal":
        return TimeToGoal(weeks=None, reason=reason)

    @property
    def attainable(self) -> bool:
        return self.weeks is not None

    def __str__(self) -> str:
        if self.weeks is None:
            return f"unattainable ({self.reason})"
        return f"{self.weeks} weeks"
