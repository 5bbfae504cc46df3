from __future__ import annotations

from types import SimpleNamespace

import pytest

from src.domain.entities.health import ServiceStatus
from src.infrastructure.services.health_check_service import HealthCheckService


class _StubMongo:
    def __init__(self, error: Exception | None = None):
        self.error = error
        self.db = SimpleNamespace(name="pos_db")

    def ping(self) -> None:
        if self.error:
            raise self.error


@pytest.mark.asyncio
async def test_evaluate_reports_up_when_ping_succeeds() -> None:
    health = await HealthCheckService(_StubMongo()).evaluate()

    assert health.status is ServiceStatus.UP
    mongo = health.dependencies[0]
    assert mongo.name == "mongo"
    assert mongo.details == {"database": "pos_db"}
    assert mongo.latency_ms is not None


@pytest.mark.asyncio
async def test_evaluate_reports_down_when_ping_fails() -> None:
    health = await HealthCheckService(
        _StubMongo(error=ConnectionError("refused"))
    ).evaluate()

    assert health.status is ServiceStatus.DOWN
    assert "refused" in health.dependencies[0].message


@pytest.mark.asyncio
async def test_evaluate_reports_unknown_without_client() -> None:
    health = await HealthCheckService(None).evaluate()

    assert health.status is ServiceStatus.UNKNOWN
