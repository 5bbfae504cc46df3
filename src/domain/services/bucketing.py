"""Domain service - group raw observations into calendar buckets."""

from __future__ import annotations

from typing import Sequence, Union

import pandas as pd

from src.domain.entities.sales import (
    BucketedPeriod,
    BucketedSeries,
    Granularity,
    Observation,
)
from src.domain.services.period_stepper import get_period_stepper


def _to_utc(timestamp) -> pd.Timestamp:
    stamp = pd.Timestamp(timestamp)
    if stamp.tzinfo is None:
        return stamp.tz_localize("UTC")
    return stamp.tz_convert("UTC")


def bucket(
    observations: Sequence[Observation], granularity: Union[Granularity, str]
) -> BucketedSeries:
    """
    Sum observations per calendar period.

    Timestamps may be datetimes or ISO-8601 strings; naive values are read
    as UTC. Periods with no observations are left out rather than
    zero-filled.

    Args:
        observations: Dated values to aggregate
        granularity: Width of the buckets

    Returns:
        One entry per distinct period, ascending by bucket key
    """
    stepper = get_period_stepper(granularity)
    if not observations:
        return []

    frame = pd.DataFrame(
        {
            "timestamp": pd.Series(
                [_to_utc(item.timestamp) for item in observations],
                dtype="datetime64[ns, UTC]",
            ),
            "value": [float(item.value) for item in observations],
        }
    )
    frame["bucket_key"] = stepper.bucket_keys(frame["timestamp"])

    totals = frame.groupby("bucket_key", sort=True)["value"].sum()
    return [
        BucketedPeriod(bucket_key=str(key), value=float(value))
        for key, value in totals.items()
    ]
