"""Port for probing the service's external dependencies."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.health import SystemHealth


class IHealthCheckService(Protocol):
    async def evaluate(self) -> SystemHealth:
        """Probe every dependency and aggregate the overall status."""
        ...
