"""
Domain Errors

Exceptions raised by domain services. Each carries a human readable
message and a ``details`` mapping suitable for structured logging.
"""

from typing import Any, Dict, Optional


class DomainError(Exception):
    """Base class for domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidObservationError(DomainError):
    """Raised when a raw observation cannot enter the bucketing pipeline."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)


class UnsupportedGranularityError(DomainError):
    """Raised when no period stepper is registered for a granularity."""

    def __init__(self, granularity: str, details: Optional[Dict[str, Any]] = None):
        message = f"Granularity '{granularity}' is not supported"
        super().__init__(message, details)


class RecordStoreError(DomainError):
    """Raised when the order record store cannot be read."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
