"""
Domain Services Package

Pure functions implementing the forecasting pipeline: bucketing,
trend/volatility estimation, projection and observation validation.
"""

from .bucketing import bucket
from .forecast_summary import summarize_forecast
from .forecaster import MINIMUM_BUCKETS, forecast
from .observation_validator import validate_observation
from .period_stepper import PeriodStepper, get_period_stepper
from .statistics import trend, volatility

__all__ = [
    "bucket",
    "forecast",
    "summarize_forecast",
    "trend",
    "volatility",
    "validate_observation",
    "PeriodStepper",
    "get_period_stepper",
    "MINIMUM_BUCKETS",
]
