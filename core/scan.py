"""Turn a raw Gemini reply into a sanitised medicine record."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

import httpx

from core.models import SCAN_LIST_FIELDS, SCAN_TEXT_FIELDS

logger = logging.getLogger(__name__)

_JSON_BLOCK = re.compile(r"\{.*\}", re.DOTALL)

NOT_MEDICINE = "NOT_MEDICINE"

MESSAGE_NOT_MEDICINE = (
    "This doesn't look like a medicine package. Please scan a pill bottle, box, or blister pack."
)
MESSAGE_CONNECTION = "Connection failed. Please check your internet."
MESSAGE_UNSUPPORTED = (
    "This medication is not supported in our search or the image was unclear. Please try again."
)


class ScanError(Exception):
    """The model reply could not be turned into a medicine record."""


class NotMedicineError(ScanError):
    def __init__(self, message: str = "Image does not appear to be a medication.") -> None:
        super().__init__(message)


def reply_text(data: dict[str, Any]) -> str:
    """Text of the first part of the first candidate."""
    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError) as e:
        raise ScanError("Model response contained no text") from e
    if not isinstance(text, str):
        raise ScanError("Model response contained no text")
    return text


def extract_json_object(text: str) -> dict[str, Any]:
    """Parse the outermost ``{...}`` block, tolerating prose or code fences around it."""
    match = _JSON_BLOCK.search(text)
    if not match:
        raise ScanError("Could not parse medicine info from AI response")
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError as e:
        raise ScanError("Could not parse medicine info from AI response") from e
    if not isinstance(parsed, dict):
        raise ScanError("Could not parse medicine info from AI response")
    return parsed


def safe_string(value: Any) -> str:
    if value is None:
        return "N/A"
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, list):
        return ", ".join(safe_string(v) for v in value)
    if isinstance(value, dict):
        return json.dumps(value, ensure_ascii=False)
    return str(value)


def safe_list(value: Any) -> list[str]:
    if not value:
        return []
    if not isinstance(value, list):
        return [safe_string(value)]
    items: list[str] = []
    for item in value:
        if isinstance(item, str):
            text = item
        elif isinstance(item, dict):
            text = (
                item.get("text")
                or item.get("value")
                or item.get("description")
                or json.dumps(item, ensure_ascii=False)
            )
        elif item is None:
            text = ""
        else:
            text = str(item)
        if text:
            items.append(text)
    return items


def sanitize_scan_data(data: dict[str, Any]) -> dict[str, Any]:
    """Coerce the model's fields into plain strings and string lists."""
    clean = dict(data)
    for key in SCAN_TEXT_FIELDS:
        clean[key] = safe_string(data.get(key))
    for key in SCAN_LIST_FIELDS:
        clean[key] = safe_list(data.get(key))
    return clean


def parse_scan_response(data: dict[str, Any]) -> dict[str, Any]:
    """Full path from proxy reply to sanitised record.

    Raises ``NotMedicineError`` when the model flagged the image, and
    ``ScanError`` for any other unusable reply.
    """
    parsed = extract_json_object(reply_text(data))

    error = parsed.get("error")
    if error == NOT_MEDICINE:
        logger.info("Model flagged the image as not a medicine")
        raise NotMedicineError()
    if error:
        raise ScanError(safe_string(error))

    clean = sanitize_scan_data(parsed)
    if not parsed.get("brandName"):
        raise ScanError("Could not identify medication data.")
    return clean


def friendly_error(exc: Exception) -> str:
    """Map a scan failure to the message shown to the user."""
    message = str(exc)
    if isinstance(exc, NotMedicineError) or NOT_MEDICINE in message:
        return MESSAGE_NOT_MEDICINE
    if isinstance(exc, httpx.TransportError):
        return MESSAGE_CONNECTION
    return MESSAGE_UNSUPPORTED


def format_share_text(record: dict[str, Any]) -> str:
    warnings = record.get("warnings")
    warnings_text = ", ".join(warnings) if isinstance(warnings, list) else str(warnings)
    lines = [
        f"💊 *{record.get('brandName')}* ({record.get('strength')})",
        f"🔬 {record.get('genericName')}",
        f"📋 *Purpose:* {record.get('purpose')}",
        f"🕰 *Instructions:* {record.get('howToTake')}",
        f"⚠️ *Warnings:* {warnings_text}",
        "-- Scanned with CocoMed",
    ]
    return "\n".join(lines)
