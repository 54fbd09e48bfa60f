"""Shared test fixtures.

Tests are pure unit tests: no network, no database.
"""

import os

import pytest
import structlog

from nutriplan.domain.nutrition_targets.core.value_objects import Gender, MetricInput


@pytest.fixture
def male_metrics() -> MetricInput:
    """70 kg, 170 cm, 25 year old male at 20% body fat."""
    return MetricInput(weight=70.0, height=170.0, age=25, gender=Gender.MALE, body_fat_percent=20.0)


@pytest.fixture
def female_metrics() -> MetricInput:
    """60 kg, 165 cm, 30 year old female at 28% body fat."""
    return MetricInput(
        weight=60.0, height=165.0, age=30, gender=Gender.FEMALE, body_fat_percent=28.0
    )


SETTING_NAMES = (
    "NUTRIPLAN_DEFAULT_DEFICIT",
    "NUTRIPLAN_TARGET_BODY_FAT",
    "LOG_LEVEL",
    "LOG_FORMAT",
)


@pytest.fixture(autouse=True)
def _clear_nutriplan_env(monkeypatch: pytest.MonkeyPatch):
    """Keep environment settings from leaking into or out of tests.

    load_dotenv writes os.environ directly, so values it sets are popped
    after the test as well.
    """
    for name in SETTING_NAMES:
        monkeypatch.delenv(name, raising=False)
    yield
    for name in SETTING_NAMES:
        os.environ.pop(name, None)


@pytest.fixture(autouse=True)
def _reset_structlog():
    """Drop logging configuration made by a test (it may bind captured streams)."""
    yield
    structlog.reset_defaults()
