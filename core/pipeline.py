"""Scan pipeline: compress the photo, send one analyze request, parse the reply."""

from __future__ import annotations

import logging
from dataclasses import replace

from core.backend_client import BackendClient
from core.imaging import compress_image, strip_data_uri, to_base64, to_data_uri
from core.models import ScanHistory, ScanResult
from core.prompt_builder import build_scan_prompt, build_translation_prompt
from core.scan import parse_scan_response

logger = logging.getLogger(__name__)


def scan_medicine(
    raw_image: bytes,
    client: BackendClient,
    language: str = "en",
    history: ScanHistory | None = None,
) -> ScanResult:
    """Analyze a freshly captured photo and record it in ``history``.

    Exceptions from compression, the backend call or reply parsing
    propagate; the UI maps them through ``core.scan.friendly_error``.
    """
    image_b64 = to_base64(compress_image(raw_image))

    logger.info("Scanning image (%d base64 chars) language=%s", len(image_b64), language)
    data = client.analyze(build_scan_prompt(language), image_b64)
    record = parse_scan_response(data)

    result = ScanResult.from_sanitized(
        record,
        language_code=language,
        image_uri=to_data_uri(image_b64),
    )
    if history is not None:
        history.add(result)
    return result


def translate_scan(
    result: ScanResult,
    client: BackendClient,
    language: str,
    history: ScanHistory | None = None,
) -> ScanResult:
    """Re-read a stored scan in ``language``, keeping its id."""
    if result.language_code == language:
        return result

    image_b64 = strip_data_uri(result.image_uri)
    logger.info("Translating scan id=%s %s -> %s", result.id, result.language_code, language)
    data = client.analyze(build_translation_prompt(language), image_b64)
    record = parse_scan_response(data)

    translated = replace(
        ScanResult.from_sanitized(record, language_code=language, image_uri=result.image_uri),
        id=result.id,
    )
    if history is not None:
        history.replace(translated)
    return translated
