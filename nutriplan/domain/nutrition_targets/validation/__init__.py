"""Input validation for nutrition targets."""

from .metric_validator import MetricValidator

__all__ = ["MetricValidator"]
