"""
Validation module for the filtered-responses service.

This module provides query parameter checks and pagination helpers.
"""

from .rules import (
    MAX_LIMIT,
    InvalidQueryParameters,
    _parse_filters_param,
    _page_count,
)

__all__ = [
    "MAX_LIMIT",
    "InvalidQueryParameters",
    "_parse_filters_param",
    "_page_count",
]
