"""
Domain Layer Package

Entities, repository interfaces and the pure forecasting services.
Nothing here depends on frameworks or infrastructure.
"""

# Re-export submodules
from src.domain import entities, ports, repositories, services

__all__ = ["entities", "repositories", "services", "ports"]
