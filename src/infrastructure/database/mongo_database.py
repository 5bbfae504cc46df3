"""
MongoDB Database - Infrastructure Layer

Thin wrapper around a pymongo client used as the order record store.
"""

from typing import Any, Dict, List, Optional

import pymongo
import pymongo.errors
from pymongo import MongoClient
from pymongo.collection import Collection
from pymongo.database import Database

from src.shared import get_logger

logger = get_logger(__name__)

ORDERS_INDEX_NAME = "business_created_at_idx"


class MongoDatabase:
    """MongoDB database client."""

    def __init__(self, mongo_uri: str, db_name: str, orders_collection: str = "orders"):
        """
        Initialize the MongoDB database client.

        Args:
            mongo_uri: MongoDB connection URI
            db_name: Name of the database to use
            orders_collection: Collection holding order records
        """
        self.client: MongoClient = MongoClient(mongo_uri)
        self.db: Database = self.client[db_name]
        self.orders_collection = orders_collection

    def get_collection(self, collection_name: str) -> Collection:
        return self.db[collection_name]

    async def find_many(
        self,
        collection_name: str,
        query: Dict[str, Any],
        sort_by: Optional[str] = None,
        sort_direction: int = pymongo.ASCENDING,
        projection: Optional[Dict[str, Any]] = None,
    ) -> List[Dict[str, Any]]:
        """
        Find every document matching ``query``.

        Args:
            collection_name: Name of the collection
            query: Query to match documents
            sort_by: Field to sort by
            sort_direction: ``pymongo.ASCENDING`` or ``pymongo.DESCENDING``
            projection: Fields to return

        Returns:
            List of documents
        """
        cursor = self.db[collection_name].find(query, projection)
        if sort_by:
            cursor = cursor.sort(sort_by, sort_direction)
        return list(cursor)

    def ping(self) -> None:
        self.client.admin.command("ping")

    def close(self) -> None:
        """Close the database connection."""
        self.client.close()

    async def create_indexes(self) -> None:
        """Create the indexes used by order lookups. Called at startup."""
        try:
            self.db[self.orders_collection].create_index(
                [("business_id", pymongo.ASCENDING), ("created_at", pymongo.ASCENDING)],
                name=ORDERS_INDEX_NAME,
                background=True,
            )
        except pymongo.errors.OperationFailure as exc:
            logger.warning(
                "mongo.create_indexes.failed",
                collection=self.orders_collection,
                error=str(exc),
            )
