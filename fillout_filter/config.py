from __future__ import annotations
import os
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_FILLOUT_BASE_URL = "https://api.fillout.com"


@dataclass(frozen=True)
class Settings:
    """
    Runtime configuration, read once at startup and handed to create_app().
    """
    api_key: str
    fillout_base_url: str = DEFAULT_FILLOUT_BASE_URL
    port: int = 3000
    default_form_id: Optional[str] = None
    timeout_seconds: float = 10.0
    cors_origins: List[str] = field(default_factory=list)
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, *, dotenv: bool = True) -> "Settings":
        if dotenv:
            load_dotenv()

        api_key = os.getenv("API_KEY")
        if not api_key:
            # every upstream call carries this bearer token
            raise RuntimeError("API_KEY must be set")

        origins_raw = os.getenv("CORS_ALLOW_ORIGINS", "")

        return cls(
            api_key=api_key,
            fillout_base_url=os.getenv("FILLOUT_BASE_URL", DEFAULT_FILLOUT_BASE_URL),
            port=int(os.getenv("PORT", "3000")),
            default_form_id=os.getenv("FORM_ID") or None,
            timeout_seconds=float(os.getenv("FILLOUT_TIMEOUT_SECONDS", "10")),
            cors_origins=[o.strip() for o in origins_raw.split(",") if o.strip()],
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )
