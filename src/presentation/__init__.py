"""
Presentation Layer Package

HTTP routers and their request/response handling.
"""

from src.presentation import controllers

__all__ = ["controllers"]
