"""
Repositories Package - Infrastructure Layer

Concrete implementations of the domain repository interfaces.
"""

from .order_repository import OrderRepository

__all__ = ["OrderRepository"]
