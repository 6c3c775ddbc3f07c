from pathlib import Path
import base64
import io
import json
import sys

import pytest
from PIL import Image

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.imaging import compress_image, strip_data_uri, to_data_uri
from core.models import ScanHistory, ScanResult
from core.pipeline import scan_medicine, translate_scan
from core.prompt_builder import build_scan_prompt, build_translation_prompt, language_name, t
from core.scan import NotMedicineError
from prompts.templates import LANGUAGES, UI_TEXT


class FakeClient:
    """Stands in for BackendClient and records every analyze call."""

    def __init__(self, *records):
        self.calls = []
        self._records = list(records)

    def analyze(self, prompt, image):
        self.calls.append((prompt, image))
        text = json.dumps(self._records.pop(0))
        return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def _png_bytes(width=2048, height=1536):
    buf = io.BytesIO()
    Image.new("RGB", (width, height), color=(200, 30, 30)).save(buf, format="PNG")
    return buf.getvalue()


def test_compress_image_scales_to_max_width_as_jpeg():
    out = compress_image(_png_bytes())
    with Image.open(io.BytesIO(out)) as img:
        assert img.format == "JPEG"
        assert img.size == (1024, 768)


def test_data_uri_helpers():
    assert strip_data_uri(to_data_uri("QUJD")) == "QUJD"
    assert strip_data_uri("QUJD") == "QUJD"


def test_prompts_name_the_language():
    assert "RESPOND IN: Tamil language only." in build_scan_prompt("ta")
    assert "NOT_MEDICINE" in build_scan_prompt("en")
    assert "Respond ONLY in Hindi" in build_translation_prompt("hi")
    assert "NOT_MEDICINE" not in build_translation_prompt("hi")
    assert language_name("xx") == "English"


def test_interface_text_covers_every_language():
    assert set(UI_TEXT) == set(LANGUAGES)
    for code, table in UI_TEXT.items():
        assert set(table) == set(UI_TEXT["en"]), code

    assert t("hi", "new_scan") == "नया स्कैन"
    assert t("xx", "new_scan") == "New Scan"
    assert t("ta", "no_such_label") == "no_such_label"


def test_scan_medicine_sends_one_request_and_records_history():
    client = FakeClient({"brandName": "Crocin", "sideEffects": ["Nausea"]})
    history = ScanHistory()

    result = scan_medicine(_png_bytes(), client=client, language="ml", history=history)

    assert len(client.calls) == 1
    prompt, image = client.calls[0]
    assert "Malayalam" in prompt
    with Image.open(io.BytesIO(base64.b64decode(image))) as sent:
        assert sent.format == "JPEG"
    assert result.brand_name == "Crocin"
    assert result.side_effects == ["Nausea"]
    assert result.language_code == "ml"
    assert result.image_uri == to_data_uri(image)
    assert history.entries == [result]


def test_scan_medicine_rejects_non_medicine_without_history():
    client = FakeClient({"error": "NOT_MEDICINE"})
    history = ScanHistory()

    with pytest.raises(NotMedicineError):
        scan_medicine(_png_bytes(64, 64), client=client, history=history)

    assert len(history) == 0


def test_translate_scan_keeps_id_and_replaces_entry():
    client = FakeClient({"brandName": "Crocin"}, {"brandName": "குரோசின்"})
    history = ScanHistory()
    original = scan_medicine(_png_bytes(64, 64), client=client, language="en", history=history)

    translated = translate_scan(original, client=client, language="ta", history=history)

    assert translated.id == original.id
    assert translated.brand_name == "குரோசின்"
    assert translated.language_code == "ta"
    assert history.entries == [translated]
    assert client.calls[1][1] == strip_data_uri(original.image_uri)


def test_translate_scan_same_language_is_a_no_op():
    client = FakeClient()
    history = ScanHistory()
    existing = FakeClient({"brandName": "X"})
    scanned = scan_medicine(_png_bytes(32, 32), client=existing, language="en", history=history)
    assert translate_scan(scanned, client=client, language="en", history=history) is scanned
    assert client.calls == []


def test_history_recent_and_clear():
    client = FakeClient({"brandName": "A"}, {"brandName": "B"})
    history = ScanHistory()
    first = scan_medicine(_png_bytes(16, 16), client=client, history=history)
    second = scan_medicine(_png_bytes(16, 16), client=client, history=history)
    assert history.recent(1) == [second]
    assert history.entries == [second, first]
    history.clear()
    assert len(history) == 0


def test_results_built_back_to_back_get_distinct_ids():
    history = ScanHistory()
    first, second = ScanResult(brand_name="A"), ScanResult(brand_name="B")
    history.add(first)
    history.add(second)
    assert first.id != second.id

    assert history.replace(ScanResult(brand_name="A2", id=first.id)) is True
    assert [entry.brand_name for entry in history.entries] == ["B", "A2"]
