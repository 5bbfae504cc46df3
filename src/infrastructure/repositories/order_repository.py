"""
MongoDB Order Repository - Infrastructure Layer

Reads order records from the MongoDB order collection. Values are passed
through as stored; validation happens when orders become observations.
"""

from datetime import datetime
from typing import Any, Dict, List, Optional

import pymongo
import pymongo.errors
from bson.decimal128 import Decimal128

from src.domain.entities.errors import RecordStoreError
from src.domain.entities.order import OrderRecord
from src.domain.repositories.order_repository import IOrderRepository
from src.infrastructure.database import MongoDatabase

ORDER_FIELDS = {"id": 1, "business_id": 1, "created_at": 1, "total_amount": 1}


class OrderRepository(IOrderRepository):
    """MongoDB implementation of the OrderRepository."""

    def __init__(self, mongo_database: MongoDatabase, collection_name: str = "orders"):
        self.db = mongo_database
        self.collection_name = collection_name

    def _build_query(
        self,
        business_id: str,
        start: Optional[datetime],
        end: Optional[datetime],
    ) -> Dict[str, Any]:
        query: Dict[str, Any] = {"business_id": business_id}
        created_at: Dict[str, datetime] = {}
        if start is not None:
            created_at["$gte"] = start
        if end is not None:
            created_at["$lte"] = end
        if created_at:
            query["created_at"] = created_at
        return query

    def _to_entity(self, document: Dict[str, Any]) -> OrderRecord:
        amount = document.get("total_amount")
        if isinstance(amount, Decimal128):
            amount = amount.to_decimal()
        return OrderRecord(
            id=str(document.get("id") or document.get("_id")),
            business_id=document["business_id"],
            created_at=document.get("created_at"),
            total_amount=amount,
        )

    async def find_by_business(
        self,
        business_id: str,
        start: Optional[datetime] = None,
        end: Optional[datetime] = None,
    ) -> List[OrderRecord]:
        query = self._build_query(business_id, start, end)
        try:
            documents = await self.db.find_many(
                self.collection_name,
                query,
                sort_by="created_at",
                sort_direction=pymongo.ASCENDING,
                projection=ORDER_FIELDS,
            )
        except pymongo.errors.PyMongoError as exc:
            raise RecordStoreError(
                f"Failed to read orders from {self.collection_name}",
                details={"business_id": business_id, "error": str(exc)},
            ) from exc

        return [self._to_entity(document) for document in documents]
