"""Record store probe backing the /health and /info endpoints."""

from __future__ import annotations

import asyncio
from time import perf_counter
from typing import Optional

from src.domain.entities.health import DependencyStatus, ServiceStatus, SystemHealth
from src.domain.ports.health_check import IHealthCheckService
from src.infrastructure.database.mongo_database import MongoDatabase
from src.shared import get_logger

logger = get_logger(__name__)

RECORD_STORE = "mongo"


class HealthCheckService(IHealthCheckService):
    """Pings the MongoDB order record store."""

    def __init__(self, mongo_database: Optional[MongoDatabase]) -> None:
        self._mongo_database = mongo_database

    async def evaluate(self) -> SystemHealth:
        return SystemHealth.from_dependencies([await self._ping_record_store()])

    async def _ping_record_store(self) -> DependencyStatus:
        if not self._mongo_database:
            return DependencyStatus(
                name=RECORD_STORE,
                status=ServiceStatus.UNKNOWN,
                message="Mongo database client not configured.",
            )

        database = self._mongo_database.db.name
        start = perf_counter()
        try:
            await asyncio.to_thread(self._mongo_database.ping)
        except Exception as exc:
            logger.warning("health.record_store.ping_failed", error=str(exc))
            return DependencyStatus(
                name=RECORD_STORE,
                status=ServiceStatus.DOWN,
                message=f"MongoDB ping failed: {exc}",
                latency_ms=(perf_counter() - start) * 1000,
                details={"database": database},
            )

        return DependencyStatus(
            name=RECORD_STORE,
            status=ServiceStatus.UP,
            message="MongoDB ping successful",
            latency_ms=(perf_counter() - start) * 1000,
            details={"database": database},
        )
