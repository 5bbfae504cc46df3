"""Service metadata handed to the application layer by the container."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SystemInfo:
    """Subset of configuration surfaced by the /info endpoint."""

    title: str
    description: str
    version: str
    environment: str
    git_commit: str
    build_time: str
    mongo_uri: str
    database_name: str
    orders_collection: str
    max_horizon: int
