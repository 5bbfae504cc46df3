"""
Database package - Infrastructure Layer

MongoDB client used as the order record store.
"""

from src.infrastructure.database.mongo_database import MongoDatabase

__all__ = ["MongoDatabase"]
