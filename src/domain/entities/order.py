"""Domain entity for order records read from the record store."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class OrderRecord:
    """A single order placed with a business."""

    id: str
    business_id: str
    created_at: Union[datetime, str]
    total_amount: Any = None
