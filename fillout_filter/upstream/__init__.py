"""
Upstream access for the filtered-responses service.

This module wraps the Fillout submissions API.
"""

from .client import (
    FilloutClient,
    UpstreamError,
    build_http_client,
    forwarded_params,
)

__all__ = [
    "FilloutClient",
    "UpstreamError",
    "build_http_client",
    "forwarded_params",
]
