from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from types import SimpleNamespace
from typing import Any, Dict, Iterator, List, Sequence

import pytest

from src.domain.entities.order import OrderRecord
from src.domain.entities.sales import BucketedPeriod, Observation


def make_series(
    values: Sequence[float], start: date = date(2024, 3, 1)
) -> List[BucketedPeriod]:
    """Daily bucketed series starting at ``start``."""
    return [
        BucketedPeriod(
            bucket_key=(start + timedelta(days=offset)).isoformat(), value=float(value)
        )
        for offset, value in enumerate(values)
    ]


def make_orders(
    amounts: Sequence[Any],
    business_id: str = "biz-1",
    start: datetime = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc),
) -> List[OrderRecord]:
    """One order per day, starting at ``start``."""
    return [
        OrderRecord(
            id=f"order-{index}",
            business_id=business_id,
            created_at=start + timedelta(days=index),
            total_amount=amount,
        )
        for index, amount in enumerate(amounts)
    ]


@pytest.fixture()
def week_of_revenue() -> List[Observation]:
    start = datetime(2024, 3, 1, 18, 30, tzinfo=timezone.utc)
    values = [100, 120, 110, 130, 125, 140, 135]
    return [
        Observation(timestamp=start + timedelta(days=offset), value=value)
        for offset, value in enumerate(values)
    ]


class FakeCursor:
    def __init__(self, documents: Sequence[Dict[str, Any]]):
        self._documents = list(documents)

    def sort(self, key: str, direction: int = 1) -> "FakeCursor":
        self._documents.sort(key=lambda doc: doc.get(key), reverse=direction < 0)
        return self

    def __iter__(self) -> Iterator[Dict[str, Any]]:
        return iter(self._documents)


class FakeCollection:
    def __init__(self) -> None:
        self.documents: List[Dict[str, Any]] = []
        self.last_query: Dict[str, Any] | None = None
        self.last_projection: Dict[str, Any] | None = None
        self.created_indexes: List[tuple[Any, ...]] = []

    def find(
        self, query: Dict[str, Any], projection: Dict[str, Any] | None = None
    ) -> FakeCursor:
        self.last_query = query
        self.last_projection = projection
        return FakeCursor(doc for doc in self.documents if self._matches(doc, query))

    def create_index(self, keys: Any, name: str | None = None, **kwargs: Any) -> Any:
        self.created_indexes.append((keys, name, kwargs))
        return name or keys

    @staticmethod
    def _matches(document: Dict[str, Any], query: Dict[str, Any]) -> bool:
        for key, condition in query.items():
            value = document.get(key)
            if isinstance(condition, dict):
                if "$gte" in condition and value < condition["$gte"]:
                    return False
                if "$lte" in condition and value > condition["$lte"]:
                    return False
            elif value != condition:
                return False
        return True


class FakeMongoDatabase:
    def __init__(self, name: str = "pos_db") -> None:
        self.collections: Dict[str, FakeCollection] = {}
        self.db = SimpleNamespace(name=name)
        self.closed = False

    def get_collection(self, name: str) -> FakeCollection:
        return self.collections.setdefault(name, FakeCollection())

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: str | None = None,
        sort_direction: int = 1,
        projection: Dict[str, Any] | None = None,
    ) -> List[Dict[str, Any]]:
        cursor = self.get_collection(collection_name).find(query, projection)
        if sort_by:
            cursor = cursor.sort(sort_by, sort_direction)
        return list(cursor)

    def ping(self) -> None:
        pass

    async def create_indexes(self) -> None:
        self.get_collection("orders").create_index("business_created_at_idx")

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def fake_mongo_database() -> FakeMongoDatabase:
    return FakeMongoDatabase()
