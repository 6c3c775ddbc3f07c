"""Capture-UI side of the analyze call: one request per analysis action."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx

from core.config import backend_url_from_env
from core.proxy import handle_analyze

logger = logging.getLogger(__name__)

ANALYZE_PATH = "/api/analyze"
GENERIC_BACKEND_ERROR = "Failed to contact backend"


class BackendError(Exception):
    """The proxy answered with an ErrorEnvelope."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


def _envelope_message(body: Any) -> str:
    if isinstance(body, dict):
        message = body.get("error")
        if isinstance(message, str) and message:
            return message
    return GENERIC_BACKEND_ERROR


class BackendClient:
    """Posts ``{prompt, image}`` to the analyze proxy.

    With a ``backend_url`` the call goes over HTTP to a deployed proxy.
    Without one the proxy handler runs in-process, which is how local
    development works; the Gemini key is then read from this process's
    environment and still never leaves the server side.
    """

    def __init__(
        self,
        backend_url: str | None = None,
        timeout: float = 120,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.backend_url = (backend_url if backend_url is not None else backend_url_from_env()).rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def in_process(self) -> bool:
        return not self.backend_url

    def analyze(self, prompt: str, image: str) -> dict[str, Any]:
        """Return the AnalysisResult, or raise ``BackendError``."""
        payload = {"prompt": prompt, "image": image}

        if self.in_process:
            logger.info("Calling analyze handler in-process")
            response = handle_analyze("POST", json.dumps(payload))
            status, body = response.status_code, response.body
        else:
            url = f"{self.backend_url}{ANALYZE_PATH}"
            logger.info("Calling backend: %s", url)
            with httpx.Client(timeout=self.timeout, transport=self._transport) as http:
                resp = http.post(url, json=payload)
            try:
                body = resp.json()
            except ValueError:
                body = None
            status = resp.status_code

        if status >= 400 or not isinstance(body, dict):
            message = _envelope_message(body)
            logger.error("Backend returned HTTP %d: %s", status, message)
            raise BackendError(message, status)
        return body
