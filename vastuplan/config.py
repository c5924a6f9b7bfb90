"""Application settings read from environment variables."""

from __future__ import annotations

import os
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import BaseModel


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseModel):
    """Server and logging settings."""
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    @classmethod
    def from_env(cls) -> Settings:
        load_dotenv()
        return cls(
            host=os.getenv("VASTUPLAN_HOST", "0.0.0.0"),
            port=int(os.getenv("VASTUPLAN_PORT", "8000")),
            reload=_env_bool("VASTUPLAN_RELOAD", False),
            log_level=os.getenv("VASTUPLAN_LOG_LEVEL", "INFO").upper(),
            cors_origins=[
                origin.strip()
                for origin in os.getenv("VASTUPLAN_CORS_ORIGINS", "*").split(",")
                if origin.strip()
            ],
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
