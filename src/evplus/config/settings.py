"""Environment-driven settings for the HTTP service and the upstream client."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Mapping, Tuple


logger = logging.getLogger("uvicorn.error")

_PORT_ENV = "PORT"
_HOST_ENV = "EVPLUS_HOST"
_UPSTREAM_URL_ENV = "EVPLUS_UPSTREAM_URL"
_UPSTREAM_TIMEOUT_ENV = "EVPLUS_UPSTREAM_TIMEOUT"
_PER_PAGE_ENV = "EVPLUS_PER_PAGE"
_USER_AGENT_ENV = "EVPLUS_USER_AGENT"
_REFERER_ENV = "EVPLUS_REFERER"
_CORS_ORIGINS_ENV = "EVPLUS_CORS_ORIGINS"

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_UPSTREAM_URL = "https://api.prizepicks.com/projections"
DEFAULT_TIMEOUT = 10.0
DEFAULT_PER_PAGE = 250
# PrizePicks rejects requests that do not look like they come from a browser.
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/125.0.0.0 Safari/537.36"
)
DEFAULT_ACCEPT = "application/json, text/plain, */*"
DEFAULT_REFERER = "https://www.prizepicks.com/"


def _env_str(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def _env_float(name: str, default: float, *, clamp_min: float | None = None) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


@dataclass(frozen=True)
class UpstreamSettings:
    """Outbound call parameters for the projections endpoint."""

    url: str = DEFAULT_UPSTREAM_URL
    timeout: float = DEFAULT_TIMEOUT
    per_page: int = DEFAULT_PER_PAGE
    user_agent: str = DEFAULT_USER_AGENT
    accept: str = DEFAULT_ACCEPT
    referer: str = DEFAULT_REFERER

    @property
    def headers(self) -> Mapping[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": self.accept,
            "Referer": self.referer,
        }

    def params(self, league_id: int) -> dict[str, str | int]:
        return {
            "league_id": league_id,
            "per_page": self.per_page,
            "single_stat": "true",
        }


@dataclass(frozen=True)
class Settings:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    cors_origins: Tuple[str, ...] = ("*",)
    upstream: UpstreamSettings = field(default_factory=UpstreamSettings)


def _parse_origins(raw: str) -> Tuple[str, ...]:
    origins = tuple(part.strip() for part in raw.split(",") if part.strip())
    return origins or ("*",)


def load_settings() -> Settings:
    """Build settings from the process environment."""

    upstream = UpstreamSettings(
        url=_env_str(_UPSTREAM_URL_ENV, DEFAULT_UPSTREAM_URL),
        timeout=_env_float(_UPSTREAM_TIMEOUT_ENV, DEFAULT_TIMEOUT, clamp_min=0.1),
        per_page=_env_int(_PER_PAGE_ENV, DEFAULT_PER_PAGE, min_value=1),
        user_agent=_env_str(_USER_AGENT_ENV, DEFAULT_USER_AGENT),
        referer=_env_str(_REFERER_ENV, DEFAULT_REFERER),
    )
    return Settings(
        host=_env_str(_HOST_ENV, DEFAULT_HOST),
        port=_env_int(_PORT_ENV, DEFAULT_PORT, min_value=1),
        cors_origins=_parse_origins(_env_str(_CORS_ORIGINS_ENV, "*")),
        upstream=upstream,
    )
