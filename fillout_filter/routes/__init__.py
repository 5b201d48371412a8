"""
API routes for the filtered-responses service.

This module provides the filtered submissions endpoint.
"""

from .responses import router

__all__ = [
    "router",
]
