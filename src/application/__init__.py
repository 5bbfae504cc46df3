"""
Application Layer Package

Use cases and DTOs sitting between the presentation layer and the domain.
"""

# Re-export submodules
from src.application import dtos, models, use_cases

__all__ = ["dtos", "use_cases", "models"]
