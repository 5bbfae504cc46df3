"""
Domain service - Period steppers

A period stepper owns everything that depends on the calendar width of a
bucket: how a timestamp maps to its bucket key and how a bucket key is
advanced to label future periods. Supporting a new granularity means
writing one stepper and registering it in ``_STEPPERS``.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Union

import pandas as pd

from src.domain.entities.errors import UnsupportedGranularityError
from src.domain.entities.sales import Granularity

DAY_FORMAT = "%Y-%m-%d"
MONTH_FORMAT = "%Y-%m"


class PeriodStepper(ABC):
    """Maps timestamps to bucket keys and steps keys forward in time."""

    @abstractmethod
    def bucket_keys(self, timestamps: pd.Series) -> pd.Series:
        """
        Compute the bucket key of every timestamp.

        Args:
            timestamps: UTC-aware datetime series

        Returns:
            Series of zero-padded keys that sort chronologically as strings
        """

    @abstractmethod
    def advance(self, bucket_key: str, steps: int) -> str:
        """Return the label of the period ``steps`` periods after ``bucket_key``."""


class DailyStepper(PeriodStepper):
    def bucket_keys(self, timestamps: pd.Series) -> pd.Series:
        return timestamps.dt.strftime(DAY_FORMAT)

    def advance(self, bucket_key: str, steps: int) -> str:
        return (pd.Timestamp(bucket_key) + pd.Timedelta(days=steps)).strftime(
            DAY_FORMAT
        )


class WeeklyStepper(PeriodStepper):
    """Weeks run Monday to Sunday and are keyed by their Monday."""

    def bucket_keys(self, timestamps: pd.Series) -> pd.Series:
        mondays = timestamps.dt.normalize() - pd.to_timedelta(
            timestamps.dt.weekday, unit="D"
        )
        return mondays.dt.strftime(DAY_FORMAT)

    def advance(self, bucket_key: str, steps: int) -> str:
        return (pd.Timestamp(bucket_key) + pd.Timedelta(weeks=steps)).strftime(
            DAY_FORMAT
        )


class MonthlyStepper(PeriodStepper):
    def bucket_keys(self, timestamps: pd.Series) -> pd.Series:
        return timestamps.dt.strftime(MONTH_FORMAT)

    def advance(self, bucket_key: str, steps: int) -> str:
        return (pd.Period(bucket_key, freq="M") + steps).strftime(MONTH_FORMAT)


_STEPPERS: Dict[Granularity, PeriodStepper] = {
    Granularity.DAILY: DailyStepper(),
    Granularity.WEEKLY: WeeklyStepper(),
    Granularity.MONTHLY: MonthlyStepper(),
}


def get_period_stepper(granularity: Union[Granularity, str]) -> PeriodStepper:
    """
    Look up the stepper registered for a granularity.

    Raises:
        UnsupportedGranularityError: If the granularity is unknown.
    """
    try:
        return _STEPPERS[Granularity(granularity)]
    except (KeyError, ValueError):
        raise UnsupportedGranularityError(
            str(getattr(granularity, "value", granularity)),
            details={"supported": [item.value for item in _STEPPERS]},
        )
