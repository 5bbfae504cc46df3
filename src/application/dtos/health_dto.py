"""DTOs for the /health and /info responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.health import (
    ApplicationInfo,
    DependencyStatus,
    RecordStoreInfo,
    ServiceStatus,
    SystemHealth,
)


class DependencyStatusDTO(BaseModel):
    """Result of probing one dependency."""

    name: str = Field(description="Dependency identifier")
    status: ServiceStatus
    message: Optional[str] = Field(default=None, description="Probe outcome")
    checked_at: datetime
    latency_ms: Optional[float] = None
    details: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, status: DependencyStatus) -> "DependencyStatusDTO":
        return cls(
            name=status.name,
            status=status.status,
            message=status.message,
            checked_at=status.checked_at,
            latency_ms=status.latency_ms,
            details=status.details,
        )


class SystemHealthDTO(BaseModel):
    status: ServiceStatus = Field(description="Overall service status")
    dependencies: List[DependencyStatusDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(
            status=health.status,
            dependencies=[
                DependencyStatusDTO.from_domain(dep) for dep in health.dependencies
            ],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "up",
                "dependencies": [
                    {
                        "name": "mongo",
                        "status": "up",
                        "message": "MongoDB ping successful",
                        "checked_at": "2025-03-02T09:00:00Z",
                        "latency_ms": 4.2,
                        "details": {"database": "pos_db"},
                    }
                ],
            }
        }
    }


class RecordStoreInfoDTO(BaseModel):
    uri: str = Field(description="MongoDB URI with credentials removed")
    database: str
    orders_collection: str

    @classmethod
    def from_domain(cls, record_store: RecordStoreInfo) -> "RecordStoreInfoDTO":
        return cls(
            uri=record_store.uri,
            database=record_store.database,
            orders_collection=record_store.orders_collection,
        )


class ApplicationInfoDTO(BaseModel):
    """Service metadata returned by /info."""

    name: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    started_at: datetime
    uptime_seconds: float
    health: SystemHealthDTO
    record_store: RecordStoreInfoDTO
    max_horizon: int = Field(description="Largest forecast horizon accepted")

    @classmethod
    def from_domain(cls, info: ApplicationInfo) -> "ApplicationInfoDTO":
        return cls(
            name=info.name,
            description=info.description,
            version=info.version,
            environment=info.environment,
            git_commit=info.git_commit,
            build_time=info.build_time,
            started_at=info.started_at,
            uptime_seconds=info.uptime_seconds,
            health=SystemHealthDTO.from_domain(info.health),
            record_store=RecordStoreInfoDTO.from_domain(info.record_store),
            max_horizon=info.max_horizon,
        )
