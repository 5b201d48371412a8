from __future__ import annotations
import logging
from typing import Any, Dict, Optional

import httpx

from ..config import Settings

log = logging.getLogger("fillout.upstream")


class UpstreamError(RuntimeError):
    """The Fillout API could not be reached or returned an unusable reply."""


def build_http_client(settings: Settings) -> httpx.Client:
    return httpx.Client(
        base_url=settings.fillout_base_url,
        headers={"Authorization": f"Bearer {settings.api_key}"},
        timeout=settings.timeout_seconds,
    )


class FilloutClient:
    """Thin wrapper over the Fillout submissions endpoint."""

    def __init__(self, http: httpx.Client):
        self.http = http

    def get_submissions(self, form_id: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """
        GET /api/forms/{form_id}/submissions with `params` forwarded as the
        query string. One attempt only; any failure raises UpstreamError.
        """
        try:
            r = self.http.get(f"/api/forms/{form_id}/submissions", params=params)
            r.raise_for_status()
            data = r.json()
        except httpx.HTTPError as e:
            log.exception("Fillout call failed for form %s: %s", form_id, e)
            raise UpstreamError(str(e)) from e
        except ValueError as e:
            log.exception("Fillout returned a non-JSON body for form %s", form_id)
            raise UpstreamError(str(e)) from e

        if not isinstance(data, dict):
            log.warning("Unexpected Fillout payload for form %s: %r", form_id, type(data))
            raise UpstreamError("unexpected payload")
        return data

    def close(self) -> None:
        self.http.close()


def _format_param(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if hasattr(value, "isoformat"):
        return value.isoformat()
    return str(value)


def forwarded_params(params: Dict[str, Any]) -> Dict[str, str]:
    """Drop unset parameters and render the rest the way Fillout expects."""
    out: Dict[str, str] = {}
    for k, v in params.items():
        formatted = _format_param(v)
        if formatted is not None:
            out[k] = formatted
    return out
