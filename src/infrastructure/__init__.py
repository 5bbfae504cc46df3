"""
Infrastructure Layer Package

Implementations of domain interfaces backed by MongoDB.
"""

from src.infrastructure import database, repositories, services

__all__ = ["database", "repositories", "services"]
