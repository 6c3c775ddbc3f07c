"""Data models for the MedScan proxy and capture UI."""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

CORS_HEADERS: dict[str, str] = {
    "Access-Control-Allow-Credentials": "true",
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET,OPTIONS,PATCH,DELETE,POST,PUT",
    "Access-Control-Allow-Headers": (
        "X-CSRF-Token, X-Requested-With, Accept, Accept-Version, Content-Length, "
        "Content-MD5, Content-Type, Date, X-Api-Version"
    ),
}


class InvalidRequestError(ValueError):
    """The request body is not a usable AnalysisRequest."""


class MissingImageError(InvalidRequestError):
    pass


@dataclass
class AnalysisRequest:
    prompt: Any
    image: str

    @classmethod
    def from_body(cls, body: str | bytes) -> AnalysisRequest:
        """Parse a JSON request body.

        Raises ``UnicodeError`` for text that is not valid UTF-8,
        ``json.JSONDecodeError`` for unparsable bodies,
        ``InvalidRequestError`` for non-object JSON and ``MissingImageError``
        when the image is absent or empty. ``prompt`` is forwarded as sent.
        """
        if isinstance(body, str):
            body = body.encode("utf-8")
        data = json.loads(body.decode("utf-8"))
        if not isinstance(data, dict):
            raise InvalidRequestError("Request body must be a JSON object")

        image = data.get("image")
        if not isinstance(image, str) or not image:
            raise MissingImageError("No image data provided")

        prompt = data.get("prompt")
        if prompt is None:
            prompt = ""
        return cls(prompt=prompt, image=image)


@dataclass
class ProxyResponse:
    status_code: int
    body: Any
    headers: dict[str, str] = field(default_factory=dict)

    @classmethod
    def json(cls, status_code: int, body: Any) -> ProxyResponse:
        headers = {"Content-Type": "application/json", **CORS_HEADERS}
        return cls(status_code=status_code, body=body, headers=headers)

    @classmethod
    def error(cls, status_code: int, message: str) -> ProxyResponse:
        return cls.json(status_code, {"error": message})

    def to_lambda(self) -> dict[str, Any]:
        """Render in the serverless function response shape."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": json.dumps(self.body),
        }


SCAN_TEXT_FIELDS = (
    "brandName",
    "genericName",
    "manufacturer",
    "dosageForm",
    "strength",
    "purpose",
    "howToTake",
)
SCAN_LIST_FIELDS = ("sideEffects", "warnings")


@dataclass
class ScanResult:
    """A sanitised medicine record extracted from a model reply."""

    brand_name: str
    generic_name: str = "N/A"
    manufacturer: str = "N/A"
    dosage_form: str = "N/A"
    strength: str = "N/A"
    purpose: str = "N/A"
    how_to_take: str = "N/A"
    side_effects: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    language_code: str = "en"
    image_uri: str = ""
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    scanned_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    @classmethod
    def from_sanitized(cls, data: dict[str, Any], **extra: Any) -> ScanResult:
        return cls(
            brand_name=data["brandName"],
            generic_name=data["genericName"],
            manufacturer=data["manufacturer"],
            dosage_form=data["dosageForm"],
            strength=data["strength"],
            purpose=data["purpose"],
            how_to_take=data["howToTake"],
            side_effects=list(data["sideEffects"]),
            warnings=list(data["warnings"]),
            **extra,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "brandName": self.brand_name,
            "genericName": self.generic_name,
            "manufacturer": self.manufacturer,
            "dosageForm": self.dosage_form,
            "strength": self.strength,
            "purpose": self.purpose,
            "howToTake": self.how_to_take,
            "sideEffects": list(self.side_effects),
            "warnings": list(self.warnings),
            "languageCode": self.language_code,
            "scannedAt": self.scanned_at,
        }


@dataclass
class ScanHistory:
    """In-session collection of scans, newest first."""

    entries: list[ScanResult] = field(default_factory=list)

    def add(self, result: ScanResult) -> None:
        self.entries.insert(0, result)

    def replace(self, result: ScanResult) -> bool:
        """Swap in ``result`` for the entry with the same id."""
        for idx, entry in enumerate(self.entries):
            if entry.id == result.id:
                self.entries[idx] = result
                return True
        return False

    def clear(self) -> None:
        self.entries.clear()

    def recent(self, limit: int = 4) -> list[ScanResult]:
        return self.entries[:limit]

    def __len__(self) -> int:
        return len(self.entries)
