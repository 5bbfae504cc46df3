"""
Controllers Package - Presentation Layer

FastAPI routers. Controllers translate HTTP parameters into DTOs, call a
use case and map application errors to HTTP status codes.
"""

from .forecasts_controller import router as forecasts_router
from .system_controller import router as system_router

__all__ = ["forecasts_router", "system_router"]
