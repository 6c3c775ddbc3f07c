"""Secret-holding pass-through between the capture UI and Gemini."""

from __future__ import annotations

import json
import logging

import httpx

from core.config import ProxySettings
from core.gemini_client import GeminiAPIError, GeminiClient
from core.models import AnalysisRequest, InvalidRequestError, MissingImageError, ProxyResponse

logger = logging.getLogger(__name__)

ALLOWED_METHOD = "POST"
MISSING_KEY_MESSAGE = "Server configuration error: API Key missing"
GENERIC_FAILURE_MESSAGE = "Backend processing error"


def handle_analyze(
    method: str,
    body: str | bytes | None,
    settings: ProxySettings | None = None,
    transport: httpx.BaseTransport | None = None,
) -> ProxyResponse:
    """Handle one analyze request; never raises.

    Everything before the Gemini call (method, credential, size, body) is
    checked first so a rejected request costs no external call.
    """
    if (method or "").upper() != ALLOWED_METHOD:
        return ProxyResponse.error(405, "Method not allowed")

    settings = settings or ProxySettings.from_env()
    if not settings.has_api_key:
        logger.error("API Key missing on server")
        return ProxyResponse.error(500, MISSING_KEY_MESSAGE)

    raw = body or b""
    size = len(raw.encode("utf-8", "surrogatepass")) if isinstance(raw, str) else len(raw)
    if size > settings.max_body_bytes:
        logger.warning("Rejected request body of %d bytes (limit %d)", size, settings.max_body_bytes)
        return ProxyResponse.error(
            413, f"Request body too large (limit {settings.max_body_bytes} bytes)"
        )

    try:
        request = AnalysisRequest.from_body(raw)
    except MissingImageError as e:
        return ProxyResponse.error(400, str(e))
    except (json.JSONDecodeError, UnicodeError, InvalidRequestError) as e:
        logger.error("Malformed request body: %s", e)
        return ProxyResponse.error(500, f"Invalid request body: {e}")

    try:
        client = GeminiClient(
            api_key=settings.api_key,
            model=settings.model,
            base_url=settings.base_url,
            timeout=settings.timeout_s,
            transport=transport,
        )
        data = client.generate_content(request.prompt, request.image)
    except GeminiAPIError as e:
        return ProxyResponse.error(500, e.message)
    except Exception as e:
        logger.exception("Backend Processing Error")
        return ProxyResponse.error(500, str(e) or GENERIC_FAILURE_MESSAGE)

    return ProxyResponse.json(200, data)
