"""
Health entities for the order record store.

The forecast service has one external dependency, the MongoDB collection
holding orders, so the service is serving exactly when the record store
answers a ping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional


class ServiceStatus(str, Enum):
    UP = "up"
    DOWN = "down"
    # No record store client was configured, so nothing was probed.
    UNKNOWN = "unknown"


@dataclass(slots=True)
class DependencyStatus:
    """Outcome of probing one dependency."""

    name: str
    status: ServiceStatus
    message: Optional[str] = None
    checked_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class SystemHealth:
    status: ServiceStatus
    dependencies: List[DependencyStatus] = field(default_factory=list)

    @classmethod
    def from_dependencies(
        cls, dependencies: Iterable[DependencyStatus]
    ) -> "SystemHealth":
        """A single failing probe takes the service down."""
        probes = list(dependencies)
        statuses = {probe.status for probe in probes}
        if ServiceStatus.DOWN in statuses:
            status = ServiceStatus.DOWN
        elif not probes or ServiceStatus.UNKNOWN in statuses:
            status = ServiceStatus.UNKNOWN
        else:
            status = ServiceStatus.UP
        return cls(status=status, dependencies=probes)

    @property
    def is_serving(self) -> bool:
        return self.status is ServiceStatus.UP


@dataclass(frozen=True, slots=True)
class RecordStoreInfo:
    """Where orders are read from; ``uri`` never carries credentials."""

    uri: str
    database: str
    orders_collection: str


@dataclass(slots=True)
class ApplicationInfo:
    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    health: SystemHealth
    record_store: RecordStoreInfo
    max_horizon: int
