from pathlib import Path
import json
import sys

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.scan import (
    MESSAGE_CONNECTION,
    MESSAGE_NOT_MEDICINE,
    MESSAGE_UNSUPPORTED,
    NotMedicineError,
    ScanError,
    format_share_text,
    friendly_error,
    parse_scan_response,
    safe_list,
    safe_string,
    sanitize_scan_data,
)


def _reply(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def test_parse_scan_response_strips_code_fences():
    text = '```json\n{"brandName": "Crocin", "strength": "500mg", "warnings": ["No alcohol"]}\n```'
    record = parse_scan_response(_reply(text))
    assert record["brandName"] == "Crocin"
    assert record["strength"] == "500mg"
    assert record["warnings"] == ["No alcohol"]
    assert record["manufacturer"] == "N/A"
    assert record["sideEffects"] == []


def test_parse_scan_response_flags_non_medicine():
    with pytest.raises(NotMedicineError):
        parse_scan_response(_reply('{ "error": "NOT_MEDICINE" }'))


def test_parse_scan_response_relays_other_model_errors():
    with pytest.raises(ScanError, match="too blurry"):
        parse_scan_response(_reply('{"error": "too blurry"}'))


def test_parse_scan_response_requires_brand_name():
    with pytest.raises(ScanError, match="Could not identify"):
        parse_scan_response(_reply('{"genericName": "Paracetamol"}'))


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"candidates": []},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{"inlineData": {}}]}}]},
    ],
)
def test_parse_scan_response_without_text(data):
    with pytest.raises(ScanError):
        parse_scan_response(data)


def test_parse_scan_response_without_json():
    with pytest.raises(ScanError, match="Could not parse"):
        parse_scan_response(_reply("I can't help with that."))


def test_safe_string_coercions():
    assert safe_string(None) == "N/A"
    assert safe_string(250) == "250"
    assert safe_string(["a", "b"]) == "a, b"
    assert json.loads(safe_string({"mg": 5})) == {"mg": 5}


def test_safe_list_coercions():
    assert safe_list(None) == []
    assert safe_list("single") == ["single"]
    assert safe_list(["a", {"text": "b"}, {"description": "c"}, None, 3]) == ["a", "b", "c", "3"]


def test_sanitize_keeps_unknown_fields():
    clean = sanitize_scan_data({"brandName": "X", "extra": 1})
    assert clean["extra"] == 1
    assert clean["purpose"] == "N/A"


def test_friendly_error_messages():
    assert friendly_error(NotMedicineError()) == MESSAGE_NOT_MEDICINE
    assert friendly_error(ScanError("Backend said NOT_MEDICINE")) == MESSAGE_NOT_MEDICINE
    assert friendly_error(httpx.ConnectError("down")) == MESSAGE_CONNECTION
    assert friendly_error(ScanError("whatever")) == MESSAGE_UNSUPPORTED


def test_format_share_text():
    text = format_share_text({
        "brandName": "Crocin",
        "strength": "500mg",
        "genericName": "Paracetamol",
        "purpose": "Fever",
        "howToTake": "After food",
        "warnings": ["Liver", "Alcohol"],
    })
    assert text.splitlines()[0] == "💊 *Crocin* (500mg)"
    assert "⚠️ *Warnings:* Liver, Alcohol" in text
    assert text.endswith("-- Scanned with CocoMed")
