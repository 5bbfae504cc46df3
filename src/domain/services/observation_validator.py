"""Domain service helpers for validating raw observations."""

from __future__ import annotations

import math
from datetime import datetime, timezone
from typing import Any, Union

import pandas as pd

from src.domain.entities.errors import InvalidObservationError
from src.domain.entities.sales import Observation


def _parse_timestamp(raw: Union[datetime, str]) -> datetime:
    if isinstance(raw, datetime):
        parsed = raw
    elif isinstance(raw, str):
        try:
            parsed = datetime.fromisoformat(raw.strip())
        except ValueError:
            raise InvalidObservationError(
                "Observation timestamp is not a valid ISO-8601 date.",
                details={"timestamp": raw},
            )
    else:
        raise InvalidObservationError(
            "Observation timestamp must be a datetime or an ISO-8601 string.",
            details={"timestamp": repr(raw)},
        )

    try:
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        else:
            parsed = parsed.astimezone(timezone.utc)
    except OverflowError:
        raise InvalidObservationError(
            "Observation timestamp is outside the supported range.",
            details={"timestamp": raw if isinstance(raw, str) else repr(raw)},
        )

    # Buckets are computed on nanosecond timestamps.
    if not pd.Timestamp.min <= parsed.replace(tzinfo=None) <= pd.Timestamp.max:
        raise InvalidObservationError(
            "Observation timestamp is outside the supported range.",
            details={"timestamp": parsed.isoformat()},
        )
    return parsed


def _parse_value(raw: Any) -> float:
    if isinstance(raw, bool):
        raise InvalidObservationError(
            "Observation value must be numeric.", details={"value": raw}
        )
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise InvalidObservationError(
            "Observation value must be numeric.", details={"value": repr(raw)}
        )

    if not math.isfinite(value):
        raise InvalidObservationError(
            "Observation value must be finite.", details={"value": raw}
        )
    if value < 0:
        raise InvalidObservationError(
            "Observation value cannot be negative.", details={"value": raw}
        )
    return value


def validate_observation(timestamp: Union[datetime, str], value: Any) -> Observation:
    """Build a UTC observation from raw input.

    Raises:
        InvalidObservationError: If the timestamp cannot be parsed or the
            value is non-numeric, non-finite or negative.
    """

    return Observation(timestamp=_parse_timestamp(timestamp), value=_parse_value(value))
