from __future__ import annotations

from unittest.mock import MagicMock, patch

import pymongo
import pymongo.errors
import pytest

from src.infrastructure.database.mongo_database import ORDERS_INDEX_NAME, MongoDatabase


@pytest.fixture()
def mongo_client():
    with patch("src.infrastructure.database.mongo_database.MongoClient") as client_cls:
        yield client_cls.return_value


@pytest.mark.asyncio
async def test_create_indexes_builds_business_created_at_index(mongo_client) -> None:
    database = MongoDatabase("mongodb://localhost:27017", "pos_db", "orders")

    await database.create_indexes()

    collection = mongo_client["pos_db"]["orders"]
    collection.create_index.assert_called_once_with(
        [("business_id", pymongo.ASCENDING), ("created_at", pymongo.ASCENDING)],
        name=ORDERS_INDEX_NAME,
        background=True,
    )


@pytest.mark.asyncio
async def test_create_indexes_tolerates_operation_failure(mongo_client) -> None:
    database = MongoDatabase("mongodb://localhost:27017", "pos_db")
    mongo_client["pos_db"]["orders"].create_index.side_effect = (
        pymongo.errors.OperationFailure("not authorized")
    )

    await database.create_indexes()


@pytest.mark.asyncio
async def test_find_many_sorts_when_requested(mongo_client) -> None:
    database = MongoDatabase("mongodb://localhost:27017", "pos_db")
    cursor = MagicMock()
    cursor.sort.return_value = [{"id": "o-1"}]
    mongo_client["pos_db"]["orders"].find.return_value = cursor

    documents = await database.find_many(
        "orders", {"business_id": "biz-1"}, sort_by="created_at"
    )

    assert documents == [{"id": "o-1"}]
    cursor.sort.assert_called_once_with("created_at", pymongo.ASCENDING)


def test_ping_and_close_delegate_to_client(mongo_client) -> None:
    database = MongoDatabase("mongodb://localhost:27017", "pos_db")

    database.ping()
    database.close()

    mongo_client.admin.command.assert_called_once_with("ping")
    mongo_client.close.assert_called_once()
