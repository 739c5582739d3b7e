"""Configuration for oometrics."""

from .thresholds import ComplexityThresholds, MetricsConfig

__all__ = ["ComplexityThresholds", "MetricsConfig"]
