"""
Repositories Package

Interfaces for data access. Implementations live in the infrastructure
layer.
"""

from .order_repository import IOrderRepository

__all__ = ["IOrderRepository"]
