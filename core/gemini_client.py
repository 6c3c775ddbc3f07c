"""Thin HTTP client for the Gemini generateContent endpoint."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from core.config import DEFAULT_GEMINI_BASE_URL, DEFAULT_GEMINI_MODEL, DEFAULT_TIMEOUT_S

logger = logging.getLogger(__name__)

GENERIC_UPSTREAM_ERROR = "Failed to fetch from Gemini"
IMAGE_MIME_TYPE = "image/jpeg"


class GeminiAPIError(Exception):
    """Gemini answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int, payload: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload


def extract_error_message(payload: Any) -> str:
    """Pull ``error.message`` out of a Gemini error body."""
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict):
            message = error.get("message")
            if isinstance(message, str) and message.strip():
                return message
    return GENERIC_UPSTREAM_ERROR


class GeminiClient:
    """Sends one prompt + image pair to Gemini and returns the raw JSON reply."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_GEMINI_MODEL,
        base_url: str = DEFAULT_GEMINI_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT_S,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        if not api_key:
            raise ValueError("Gemini API key is required. Set GEMINI_API_KEY or pass api_key.")
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/models/{self.model}:generateContent"

    @staticmethod
    def build_payload(prompt: Any, image: str) -> dict[str, Any]:
        return {
            "contents": [{
                "parts": [
                    {"text": prompt},
                    {"inlineData": {"mimeType": IMAGE_MIME_TYPE, "data": image}},
                ]
            }]
        }

    def generate_content(self, prompt: Any, image: str) -> dict[str, Any]:
        """POST the payload and return Gemini's JSON body unchanged.

        The key travels as the ``key`` query parameter, never in the body.
        Raises ``GeminiAPIError`` when Gemini reports failure; transport and
        JSON decoding errors propagate as-is.
        """
        logger.info("Calling Gemini model=%s", self.model)

        with httpx.Client(timeout=self.timeout, transport=self._transport) as http:
            resp = http.post(
                self.endpoint,
                params={"key": self.api_key},
                headers={"Content-Type": "application/json"},
                json=self.build_payload(prompt, image),
            )

        data = resp.json()

        if not resp.is_success:
            logger.error("Gemini API error (HTTP %d): %s", resp.status_code, data)
            raise GeminiAPIError(extract_error_message(data), resp.status_code, data)

        return data
