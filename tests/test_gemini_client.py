from pathlib import Path
import sys

import httpx
import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.gemini_client import GeminiAPIError, GeminiClient, extract_error_message


def test_client_requires_key():
    with pytest.raises(ValueError):
        GeminiClient(api_key="")


def test_endpoint_uses_model_name():
    client = GeminiClient(api_key="k", model="gemini-x", base_url="https://example.test/v1beta/")
    assert client.endpoint == "https://example.test/v1beta/models/gemini-x:generateContent"


def test_build_payload_has_text_then_image_part():
    payload = GeminiClient.build_payload("describe", "Zm9v")
    assert payload == {
        "contents": [{
            "parts": [
                {"text": "describe"},
                {"inlineData": {"mimeType": "image/jpeg", "data": "Zm9v"}},
            ]
        }]
    }


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"error": {"message": "Quota exceeded"}}, "Quota exceeded"),
        ({"error": {"message": ""}}, "Failed to fetch from Gemini"),
        ({"error": "flat string"}, "Failed to fetch from Gemini"),
        ({}, "Failed to fetch from Gemini"),
        (["not", "a", "dict"], "Failed to fetch from Gemini"),
        (None, "Failed to fetch from Gemini"),
    ],
)
def test_extract_error_message(payload, expected):
    assert extract_error_message(payload) == expected


def test_generate_content_raises_with_status_and_payload():
    body = {"error": {"message": "Model overloaded"}}
    transport = httpx.MockTransport(lambda request: httpx.Response(503, json=body))
    client = GeminiClient(api_key="k", transport=transport)

    with pytest.raises(GeminiAPIError) as excinfo:
        client.generate_content("p", "img")

    assert excinfo.value.message == "Model overloaded"
    assert excinfo.value.status_code == 503
    assert excinfo.value.payload == body


def test_generate_content_returns_json():
    transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"candidates": []}))
    client = GeminiClient(api_key="k", transport=transport)
    assert client.generate_content("p", "img") == {"candidates": []}
