"""Vercel serverless entrypoint for ``/api/analyze``.

Holds the Gemini key server-side and forwards ``{prompt, image}`` payloads
from the capture UI. Deploy with ``GEMINI_API_KEY`` set in the project
environment; the key is never sent to the client.
"""

from __future__ import annotations

import base64
import binascii
import logging
import sys
from pathlib import Path

# Serverless bundles run this file directly; make ``core`` importable.
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.proxy import handle_analyze

logger = logging.getLogger(__name__)


def _request_body(request) -> str | bytes:
    body = request.get("body") or ""
    if request.get("isBase64Encoded") and body:
        body = base64.b64decode(body)
    return body


def handler(request):
    """Vercel Python serverless function handler."""
    method = request.get("method") or request.get("httpMethod") or ""
    try:
        body = _request_body(request)
    except (binascii.Error, ValueError) as e:
        logger.error("Could not decode base64 request body: %s", e)
        body = ""

    response = handle_analyze(method, body)
    return response.to_lambda()
