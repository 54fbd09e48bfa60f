"""Unit tests for MetricValidator."""

import math

import pytest

from nutriplan.domain.nutrition_targets.core.value_objects import Gender, MetricInput
from nutriplan.domain.nutrition_targets.validation import MetricValidator

WEIGHT_ERROR = "Weight must be between 30-300 kg"
HEIGHT_ERROR = "Height must be between 100-250 cm"
AGE_ERROR = "Age must be between 15-100 years"
BODY_FAT_ERROR = "Body fat must be between 3-60%"


def _metrics(**overrides) -> MetricInput:
    values = dict(weight=70.0, height=170.0, age=25, gender=Gender.MALE, body_fat_percent=20.0)
    values.update(overrides)
    return MetricInput(**values)


class TestMetricValidator:
    """Test range checks on body metrics."""

    def setup_method(self):
        """Set up test fixtures."""
        self.validator = MetricValidator()

    def test_valid_metrics(self):
        """Test valid metrics have no errors."""
        result = self.validator.validate(_metrics())

        assert result.valid
        assert result.errors == ()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"weight": 30.0},
            {"weight": 300.0},
            {"height": 100.0},
            {"height": 250.0},
            {"age": 15},
            {"age": 100},
            {"body_fat_percent": 3.0},
            {"body_fat_percent": 60.0},
        ],
    )
    def test_boundaries_are_inclusive(self, overrides):
        """Test range endpoints are accepted."""
        assert self.validator.validate(_metrics(**overrides)).valid

    @pytest.mark.parametrize(
        "overrides, expected",
        [
            ({"weight": 29.999}, WEIGHT_ERROR),
            ({"weight": 300.1}, WEIGHT_ERROR),
            ({"height": 99.9}, HEIGHT_ERROR),
            ({"height": 250.5}, HEIGHT_ERROR),
            ({"age": 14}, AGE_ERROR),
            ({"age": 101}, AGE_ERROR),
            ({"body_fat_percent": 2.9}, BODY_FAT_ERROR),
            ({"body_fat_percent": 60.1}, BODY_FAT_ERROR),
        ],
    )
    def test_single_field_out_of_range(self, overrides, expected):
        """Test one bad field yields exactly its own error."""
        result = self.validator.validate(_metrics(**overrides))

        assert not result.valid
        assert result.errors == (expected,)

    def test_all_errors_reported_in_field_order(self):
        """Test every violation is reported: weight, height, age, body fat."""
        result = self.validator.validate(
            _metrics(weight=10.0, height=300.0, age=5, body_fat_percent=80.0)
        )

        assert result.errors == (WEIGHT_ERROR, HEIGHT_ERROR, AGE_ERROR, BODY_FAT_ERROR)

    def test_order_does_not_depend_on_severity(self):
        """Test order is fixed even when only later fields fail."""
        result = self.validator.validate(_metrics(age=200, body_fat_percent=1.0))

        assert result.errors == (AGE_ERROR, BODY_FAT_ERROR)

    def test_nan_is_out_of_range(self):
        """Test NaN is reported rather than silently accepted."""
        result = self.validator.validate(_metrics(weight=math.nan))

        assert result.errors == (WEIGHT_ERROR,)

    def test_validate_does_not_raise(self):
        """Test absurd values still produce a result."""
        result = self.validator.validate(
            _metrics(weight=-1.0, height=0.0, age=-5, body_fat_percent=math.inf)
        )

        assert len(result.errors) == 4
