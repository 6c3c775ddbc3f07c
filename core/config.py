"""Environment-driven configuration for the proxy and the capture UI."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DEFAULT_GEMINI_MODEL = "gemini-2.5-flash-preview-09-2025"
DEFAULT_GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_TIMEOUT_S = 60.0

# Matches the serverless body parser limit; a phone photo after compression fits easily.
MAX_BODY_BYTES = 4 * 1024 * 1024


def resolve_api_key(explicit: str | None, *env_names: str) -> str:
    """Return the explicit key if given, else the first non-empty env variable."""
    if explicit and explicit.strip():
        return explicit.strip()
    for name in env_names:
        value = os.environ.get(name, "").strip()
        if value:
            return value
    return ""


@dataclass(frozen=True)
class ProxySettings:
    """Per-invocation settings for the analyze proxy.

    The API key has no default: a missing key is a configuration error that
    the handler reports on every request.
    """

    api_key: str
    model: str = DEFAULT_GEMINI_MODEL
    base_url: str = DEFAULT_GEMINI_BASE_URL
    timeout_s: float = DEFAULT_TIMEOUT_S
    max_body_bytes: int = MAX_BODY_BYTES

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> ProxySettings:
        return cls(
            api_key=resolve_api_key(None, "GEMINI_API_KEY"),
            model=os.environ.get("GEMINI_MODEL", "").strip() or DEFAULT_GEMINI_MODEL,
            timeout_s=_timeout_from_env(),
        )


def _timeout_from_env() -> float:
    """GEMINI_TIMEOUT_S as a positive finite number of seconds, else the default."""
    raw = os.environ.get("GEMINI_TIMEOUT_S", "").strip()
    if not raw:
        return DEFAULT_TIMEOUT_S
    try:
        value = float(raw)
    except ValueError:
        value = math.nan
    if not math.isfinite(value) or value <= 0:
        logger.warning("Ignoring invalid GEMINI_TIMEOUT_S=%r, using %ss", raw, DEFAULT_TIMEOUT_S)
        return DEFAULT_TIMEOUT_S
    return value


def backend_url_from_env() -> str:
    """Base URL of a deployed proxy, or "" to call the handler in-process."""
    return os.environ.get("MEDSCAN_BACKEND_URL", "").strip().rstrip("/")
