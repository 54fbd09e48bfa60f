"""Unit tests for the nutrition target calculator API."""

import pytest

from nutriplan.domain.nutrition_targets import (
    NutritionTargetCalculator,
    calculate_bmi,
    calculate_bmr,
    calculate_macro_percentages,
    calculate_tdee,
    compute_nutrition_targets,
    estimate_weeks_to_goal,
    validate_metrics,
)
from nutriplan.domain.nutrition_targets.core.exceptions import InvalidTargetError
from nutriplan.domain.nutrition_targets.core.value_objects import (
    ActivityLevel,
    Gender,
    MetricInput,
)


class TestFunctionalAPI:
    """Test the module-level functions."""

    def test_calculate_bmr(self):
        """Test BMR for both genders."""
        assert calculate_bmr(70, 170, 25, "male") == 1642.5
        assert calculate_bmr(70, 170, 25, "female") == 1476.5

    def test_calculate_bmr_rejects_non_positive_result(self):
        """Test absurd metrics outside the validated ranges raise."""
        with pytest.raises(ValueError, match="BMR must be positive"):
            calculate_bmr(1, 1, 100, "female")

    def test_calculate_tdee(self):
        """Test TDEE from a raw BMR value."""
        assert calculate_tdee(1648.5, "moderate") == pytest.approx(2555.175)

    def test_calculate_tdee_unknown_level(self):
        """Test fallback to sedentary multiplier."""
        assert calculate_tdee(1000.0, "unknown") == pytest.approx(1200.0)

    def test_calculate_bmi(self):
        """Test BMI is exported."""
        assert calculate_bmi(70.0, 170.0) == pytest.approx(24.22, abs=0.01)

    def test_validate_metrics(self, male_metrics):
        """Test validation wrapper."""
        assert validate_metrics(male_metrics).valid

    def test_estimate_weeks_to_goal(self):
        """Test goal projection wrapper."""
        assert estimate_weeks_to_goal(80.0, 25.0, 15.0, 0.5).weeks == 27
        assert not estimate_weeks_to_goal(80.0, 25.0, 15.0, 0).attainable

    def test_calculate_macro_percentages(self):
        """Test macro percentage wrapper."""
        percentages = calculate_macro_percentages(140, 234, 62)

        assert percentages.protein_percent == 27
        assert percentages.carb_percent == 46
        assert percentages.fat_percent == 27


class TestComputeNutritionTargets:
    """Test the full target pipeline."""

    def test_male_moderate(self, male_metrics):
        """Test 70 kg / 170 cm / 25 y male, moderate activity."""
        targets = compute_nutrition_targets(male_metrics, ActivityLevel.MODERATE)

        # BMR 1642.5, TDEE 2545.875, daily 2045.875
        assert targets.bmr == 1643
        assert targets.tdee == 2546
        assert targets.daily_calorie_target == 2046
        assert targets.protein_target == 140
        # 2045.875 * 0.27 / 9 = 61.38
        assert targets.fat_target == 61
        # (2045.875 - (560 + 549)) / 4 = 234.22
        assert targets.carb_target == 234
        assert targets.estimated_weekly_weight_loss == 0.45
        assert targets.estimated_time_to_goal.weeks == 18

    def test_female_sedentary_hits_floor(self, female_metrics):
        """Test female target is clamped to 1200 kcal."""
        targets = compute_nutrition_targets(female_metrics, "sedentary")

        # BMR 1320.25, TDEE 1584.3, 1584.3 - 500 < 1200
        assert targets.bmr == 1320
        assert targets.tdee == 1584
        assert targets.daily_calorie_target == 1200
        assert targets.protein_target == 120
        assert targets.fat_target == 36
        assert targets.carb_target == 99
        assert targets.estimated_time_to_goal.weeks == 33

    @pytest.mark.parametrize("deficit", [1500, 5000, 100_000])
    def test_floor_holds_for_large_deficit(self, male_metrics, female_metrics, deficit):
        """Test the calorie floor whatever the deficit."""
        male = compute_nutrition_targets(male_metrics, "moderate", deficit=deficit)
        female = compute_nutrition_targets(female_metrics, "moderate", deficit=deficit)

        assert male.daily_calorie_target == 1500
        assert female.daily_calorie_target == 1200

    def test_weekly_loss_uses_requested_deficit(self, male_metrics):
        """Test weekly loss follows the deficit even when the floor applies."""
        targets = compute_nutrition_targets(male_metrics, "sedentary", deficit=5000)

        # 5000 * 7 / 7700 = 4.545
        assert targets.estimated_weekly_weight_loss == 4.55

    @pytest.mark.parametrize(
        "metrics",
        [
            MetricInput(weight=50.0, height=160.0, age=40, gender=Gender.FEMALE),
            MetricInput(weight=120.0, height=190.0, age=19, gender=Gender.MALE),
        ],
    )
    def test_default_deficit_always_045(self, metrics):
        """Test 500 kcal deficit gives 0.45 kg/week for any body."""
        for level in ActivityLevel:
            assert compute_nutrition_targets(metrics, level).estimated_weekly_weight_loss == 0.45

    def test_negative_carb_target_at_extreme_input(self):
        """Test heavy, short, elderly female on the floor gets negative carbs."""
        metrics = MetricInput(
            weight=150.0, height=100.0, age=100, gender=Gender.FEMALE, body_fat_percent=40.0
        )

        targets = compute_nutrition_targets(metrics, "sedentary", deficit=5000)

        assert targets.daily_calorie_target == 1200
        assert targets.protein_target == 300
        assert targets.carb_target == -81

    def test_zero_deficit_is_unattainable(self, male_metrics):
        """Test maintenance calories never reach the goal."""
        targets = compute_nutrition_targets(male_metrics, "moderate", deficit=0)

        assert targets.estimated_weekly_weight_loss == 0.0
        assert not targets.estimated_time_to_goal.attainable
        assert targets.estimated_time_to_goal.weeks is None

    def test_small_deficit_projects_from_unrounded_rate(self, male_metrics):
        """Test a tiny deficit is attainable though it publishes 0.0 kg/week."""
        targets = compute_nutrition_targets(male_metrics, "moderate", deficit=5)

        assert targets.estimated_weekly_weight_loss == 0.0
        assert targets.estimated_time_to_goal.attainable
        # 8.046 kg at 5 * 7 / 7700 kg/week = 1770.1 weeks
        assert targets.estimated_time_to_goal.weeks == 1771

    def test_week_count_uses_unrounded_rate(self, male_metrics):
        """Test 20 kcal/day projects from 0.01818 kg/week, not 0.02."""
        targets = compute_nutrition_targets(male_metrics, "moderate", deficit=20)

        assert targets.estimated_weekly_weight_loss == 0.02
        # 8.046 / (140 / 7700) = 442.5
        assert targets.estimated_time_to_goal.weeks == 443

    def test_surplus_is_unattainable(self, male_metrics):
        """Test a calorie surplus never reaches a fat-loss goal."""
        targets = compute_nutrition_targets(male_metrics, "moderate", deficit=-300)

        assert targets.daily_calorie_target == 2846
        assert not targets.estimated_time_to_goal.attainable

    def test_unknown_activity_matches_sedentary(self, male_metrics):
        """Test unknown activity level falls back instead of failing."""
        unknown = compute_nutrition_targets(male_metrics, "marathon_monk")
        sedentary = compute_nutrition_targets(male_metrics, ActivityLevel.SEDENTARY)

        assert unknown == sedentary

    def test_default_target_body_fat_is_13(self, male_metrics):
        """Test the goal projection defaults to 13% body fat."""
        default = compute_nutrition_targets(male_metrics, "moderate")
        explicit = compute_nutrition_targets(male_metrics, "moderate", target_body_fat=13.0)

        assert default == explicit

    def test_target_at_current_body_fat(self, male_metrics):
        """Test zero weeks when already at target."""
        targets = compute_nutrition_targets(male_metrics, "moderate", target_body_fat=20.0)

        assert targets.estimated_time_to_goal.weeks == 0

    def test_invalid_target_body_fat(self, male_metrics):
        """Test impossible target body fat raises."""
        with pytest.raises(InvalidTargetError):
            compute_nutrition_targets(male_metrics, "moderate", target_body_fat=100.0)

    def test_idempotent(self, male_metrics):
        """Test identical input gives identical output."""
        first = compute_nutrition_targets(male_metrics, "active", deficit=400)
        second = compute_nutrition_targets(male_metrics, "active", deficit=400)

        assert first == second
        assert first is not second

    def test_macro_split_of_targets(self, male_metrics):
        """Test targets expose their macro split."""
        targets = compute_nutrition_targets(male_metrics, "moderate")

        split = targets.macro_split()
        assert (split.protein_g, split.carbs_g, split.fat_g) == (140, 234, 61)


class TestNutritionTargetCalculator:
    """Test service injection."""

    def test_uses_injected_services(self, male_metrics):
        """Test a custom BMR service flows through the pipeline."""
        from nutriplan.domain.nutrition_targets.calculation.bmr_service import BMRService
        from nutriplan.domain.nutrition_targets.core.value_objects import BMR

        class FixedBMRService(BMRService):
            def calculate(self, weight, height, age, gender):
                return BMR(2000.0)

        calculator = NutritionTargetCalculator(bmr_service=FixedBMRService())

        targets = calculator.compute(male_metrics, ActivityLevel.SEDENTARY)

        assert targets.bmr == 2000
        assert targets.tdee == 2400
        assert targets.daily_calorie_target == 1900
