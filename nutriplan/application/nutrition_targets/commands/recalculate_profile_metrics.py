"""RecalculateProfileMetricsCommand - refresh targets after a profile update."""

from dataclasses import dataclass, fields, replace
from typing import Optional, Union

import structlog

from nutriplan.domain.nutrition_targets.core.constants import (
    DEFAULT_TARGET_BODY_FAT_PERCENT,
)
from nutriplan.domain.nutrition_targets.core.exceptions.domain_errors import (
    InvalidMetricsError,
)
from nutriplan.domain.nutrition_targets.core.value_objects.activity_level import (
    ActivityLevel,
)
from nutriplan.domain.nutrition_targets.core.value_objects.gender import Gender
from nutriplan.domain.nutrition_targets.core.value_objects.metric_input import (
    MetricInput,
)

from ..orchestrators.profile_orchestrator import (
    ProfileCalculations,
    ProfileOrchestrator,
)

logger = structlog.get_logger(__name__)

# Fields whose change invalidates the stored targets; body fat and target
# body fat feed the time-to-goal projection
RECALCULATION_FIELDS = frozenset(
    {
        "weight",
        "height",
        "age",
        "gender",
        "activity_level",
        "body_fat_percent",
        "target_body_fat",
    }
)


@dataclass(frozen=True)
class ProfileSnapshot:
    """Calculation-relevant part of a stored profile.

    Attributes:
        metrics: Current body metrics
        activity_level: Current activity level
        target_body_fat: Target body fat percentage
    """

    metrics: MetricInput
    activity_level: Union[ActivityLevel, str]
    target_body_fat: float = DEFAULT_TARGET_BODY_FAT_PERCENT


@dataclass(frozen=True)
class ProfileUpdate:
    """Partial update of a profile. Unset fields keep their value.

    Note: At least one field must be provided.
    """

    weight: Optional[float] = None
    height: Optional[float] = None
    age: Optional[int] = None
    gender: Optional[Union[Gender, str]] = None
    activity_level: Optional[Union[ActivityLevel, str]] = None
    body_fat_percent: Optional[float] = None
    target_body_fat: Optional[float] = None

    def __post_init__(self) -> None:
        """Validate update has at least one field."""
        if not self.changed_fields():
            raise ValueError("At least one field must be provided for update")

    def changed_fields(self) -> frozenset:
        return frozenset(f.name for f in fields(self) if getattr(self, f.name) is not None)


@dataclass(frozen=True)
class RecalculateProfileMetricsCommand:
    """Command to apply an update and refresh targets if needed.

    Attributes:
        current: Profile state before the update
        update: Fields to change
        deficit: Optional daily kcal deficit
    """

    current: ProfileSnapshot
    update: ProfileUpdate
    deficit: Optional[float] = None


@dataclass(frozen=True)
class RecalculateProfileMetricsResult:
    """Result of a profile update.

    Attributes:
        profile: Profile state after the update
        calculations: New metrics, None when nothing was recalculated
        recalculated: Whether metrics were recalculated
    """

    profile: ProfileSnapshot
    calculations: Optional[ProfileCalculations]
    recalculated: bool


class RecalculateProfileMetricsHandler:
    """Handler for RecalculateProfileMetricsCommand.

    Updates a profile snapshot by:
    1. Merging the update into the current state
    2. Validating the merged metrics
    3. Recalculating targets only if a field feeding them actually
       changed value; re-sending the stored values is a no-op
    """

    def __init__(self, orchestrator: Optional[ProfileOrchestrator] = None):
        self._orchestrator = orchestrator or ProfileOrchestrator()

    def handle(self, command: RecalculateProfileMetricsCommand) -> RecalculateProfileMetricsResult:
        """
        Handle profile update command.

        Returns:
            RecalculateProfileMetricsResult with merged profile

        Raises:
            InvalidMetricsError: If merged metrics fail validation
            UnsupportedGenderError: If updated gender is not male/female
        """
        profile = self._merge(command.current, command.update)

        validation = self._orchestrator.validate(profile.metrics)
        if not validation.valid:
            logger.info("Profile update rejected", errors=list(validation.errors))
            raise InvalidMetricsError(validation.errors)

        changed = self._changed_fields(command.current, profile)
        if not changed & RECALCULATION_FIELDS:
            return RecalculateProfileMetricsResult(
                profile=profile, calculations=None, recalculated=False
            )

        calculations = self._orchestrator.calculate_profile_metrics(
            profile.metrics,
            profile.activity_level,
            deficit=command.deficit,
            target_body_fat=profile.target_body_fat,
        )
        logger.info(
            "Profile metrics recalculated",
            changed=sorted(changed),
            daily_calorie_target=calculations.targets.daily_calorie_target,
        )
        return RecalculateProfileMetricsResult(
            profile=profile, calculations=calculations, recalculated=True
        )

    @staticmethod
    def _changed_fields(before: ProfileSnapshot, after: ProfileSnapshot) -> frozenset:
        changed = {
            name
            for name in ("weight", "height", "age", "gender", "body_fat_percent")
            if getattr(before.metrics, name) != getattr(after.metrics, name)
        }
        if before.activity_level != after.activity_level:
            changed.add("activity_level")
        if before.target_body_fat != after.target_body_fat:
            changed.add("target_body_fat")
        return frozenset(changed)

    @staticmethod
    def _merge(current: ProfileSnapshot, update: ProfileUpdate) -> ProfileSnapshot:
        metric_changes = {
            name: getattr(update, name)
            for name in ("weight", "height", "age", "gender", "body_fat_percent")
            if getattr(update, name) is not None
        }
        metrics = replace(current.metrics, **metric_changes)

        activity_level = current.activity_level
        if update.activity_level is not None:
            # Unknown values are kept as-is; the TDEE fallback handles them
            activity_level = ActivityLevel.resolve(update.activity_level) or update.activity_level

        target_body_fat = current.target_body_fat
        if update.target_body_fat is not None:
            target_body_fat = update.target_body_fat

        return ProfileSnapshot(
            metrics=metrics,
            activity_level=activity_level,
            target_body_fat=target_body_fat,
        )
