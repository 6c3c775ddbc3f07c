"""Streamlit capture UI for MedScan.

Features:
- Camera capture or gallery upload of a medicine package
- One analyze request per scan, sent to the /api/analyze proxy
- Answers and interface text in English, Tamil, Hindi, Telugu, Kannada or Malayalam
- Switching language re-reads the current scan in the new language
- In-session collection of past scans
- Share text for the current result
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import streamlit as st
from dotenv import load_dotenv

# Ensure project root is on the path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.backend_client import BackendClient
from core.models import ScanHistory, ScanResult
from core.pipeline import scan_medicine, translate_scan
from core.prompt_builder import t
from core.scan import format_share_text, friendly_error
from prompts.templates import LANGUAGES, NATIVE_LANGUAGE_NAMES

load_dotenv()
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# ============================================================================
# Page config
# ============================================================================

st.set_page_config(
    page_title="CocoMed",
    layout="centered",
    initial_sidebar_state="expanded",
)

# ============================================================================
# Session state initialization
# ============================================================================


def init_session_state():
    defaults = {
        "history": ScanHistory(),
        "current": None,
        "api_error": None,
        "language": "en",
        "last_image_id": None,
        # (scan id, language) of the last translation that failed
        "failed_translation": None,
    }
    for key, val in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = val


init_session_state()

# ============================================================================
# Sidebar: preferences
# ============================================================================

with st.sidebar:
    # The selectbox owns the "language" key, so this run already sees a new choice.
    st.markdown(f"### {t(st.session_state['language'], 'preferences')}")
    st.markdown(f"**{t(st.session_state['language'], 'language')}**")
    language = st.selectbox(
        "Language",
        options=list(LANGUAGES.keys()),
        key="language",
        format_func=lambda code: f"{NATIVE_LANGUAGE_NAMES[code]} ({LANGUAGES[code]})",
        label_visibility="collapsed",
    )

    client = BackendClient()
    if client.in_process:
        st.caption("Backend: in-process proxy (uses GEMINI_API_KEY from this server's environment).")
    else:
        st.caption(f"Backend: {client.backend_url}")

    st.divider()
    st.caption(t(language, "sidebar_disclaimer"))


# ============================================================================
# Helpers
# ============================================================================


def run_scan(raw: bytes) -> None:
    st.session_state["api_error"] = None
    try:
        with st.spinner(t(language, "analyzing")):
            result = scan_medicine(
                raw,
                client=client,
                language=language,
                history=st.session_state["history"],
            )
        st.session_state["current"] = result
        st.toast(t(language, "saved"))
    except Exception as e:
        logger.exception("Scan failed")
        st.session_state["api_error"] = friendly_error(e)
        st.session_state["current"] = None


def translate_current(current: ScanResult) -> ScanResult:
    """Re-read ``current`` in the selected language, at most once per (scan, language)."""
    attempt = (current.id, language)
    if st.session_state["failed_translation"] == attempt:
        st.warning(f"Could not translate to {LANGUAGES[language]}; showing the original scan.")
        return current

    try:
        with st.spinner(t(language, "translating")):
            translated = translate_scan(
                current,
                client=client,
                language=language,
                history=st.session_state["history"],
            )
    except Exception as e:
        logger.error("Translation failed: %s", e)
        st.session_state["failed_translation"] = attempt
        st.warning(f"Could not translate to {LANGUAGES[language]}; showing the original scan.")
        return current

    st.session_state["failed_translation"] = None
    st.session_state["current"] = translated
    return translated


def render_result(result: ScanResult) -> None:
    record = result.to_dict()

    st.subheader(f"{result.brand_name}")
    st.caption(f"{result.strength} · {result.dosage_form}")

    col1, col2 = st.columns(2)
    with col1:
        st.markdown(f"**{t(language, 'generic_name')}**  \n{result.generic_name}")
    with col2:
        st.markdown(f"**{t(language, 'manufacturer')}**  \n{result.manufacturer}")

    st.markdown(f"#### {t(language, 'purpose')}")
    st.write(result.purpose)
    st.markdown(f"#### {t(language, 'how_to_take')}")
    st.write(result.how_to_take)

    if result.side_effects:
        st.markdown(f"#### {t(language, 'side_effects')}")
        for item in result.side_effects:
            st.markdown(f"- {item}")

    if result.warnings:
        st.markdown(f"#### {t(language, 'warnings')}")
        for item in result.warnings:
            st.warning(item)

    st.info(t(language, "medical_disclaimer"))

    share_text = format_share_text(record)
    with st.expander(t(language, "share")):
        st.code(share_text, language=None)
        st.download_button(
            "Download as text",
            data=share_text,
            file_name=f"medicine_{result.id}.txt",
            mime="text/plain",
        )


def render_entry(entry: ScanResult, key_prefix: str) -> None:
    with st.expander(f"{entry.brand_name} · {entry.generic_name}"):
        st.caption(
            f"{t(language, 'scanned_on')} {entry.scanned_at[:10]} · "
            f"{LANGUAGES.get(entry.language_code, entry.language_code)}"
        )
        st.write(entry.purpose)
        if st.button("Open", key=f"{key_prefix}_{entry.id}"):
            st.session_state["current"] = entry
            st.rerun()


# ============================================================================
# Main area: Tabs
# ============================================================================

st.title("CocoMed")
st.caption(t(language, "tagline"))

tab_scan, tab_history, tab_guide = st.tabs(
    [t(language, "tab_scan"), t(language, "tab_history"), t(language, "tab_guide")]
)

# ============================================================================
# TAB: Scan
# ============================================================================

with tab_scan:
    st.header(t(language, "scan_title"))

    source = st.radio(
        "Image source",
        options=["capture", "upload"],
        format_func=lambda key: t(language, key),
        horizontal=True,
        key="image_source",
        label_visibility="collapsed",
    )
    if source == "capture":
        image_file = st.camera_input(t(language, "capture"))
    else:
        image_file = st.file_uploader(t(language, "upload"), type=["png", "jpg", "jpeg", "webp"])

    # Streamlit reruns the script on every interaction; only a new file counts
    # as a new analysis action.
    if image_file is not None and image_file.file_id != st.session_state["last_image_id"]:
        st.session_state["last_image_id"] = image_file.file_id
        run_scan(image_file.getvalue())

    if st.session_state["api_error"]:
        st.error(st.session_state["api_error"])
        if st.button("Dismiss"):
            st.session_state["api_error"] = None
            st.rerun()

    current: ScanResult | None = st.session_state["current"]
    if current is not None and current.language_code != language:
        current = translate_current(current)

    if current is not None:
        st.divider()
        render_result(current)
        if st.button(t(language, "new_scan"), type="primary"):
            st.session_state["current"] = None
            st.rerun()
    elif len(st.session_state["history"]) > 0:
        st.divider()
        st.markdown(f"#### {t(language, 'recent_scans')}")
        for entry in st.session_state["history"].recent():
            render_entry(entry, key_prefix="recent")

# ============================================================================
# TAB: Collection
# ============================================================================

with tab_history:
    history: ScanHistory = st.session_state["history"]
    st.header(t(language, "history_title"))

    if len(history) == 0:
        st.info(t(language, "history_empty"))
    else:
        if st.button(t(language, "clear_history")):
            history.clear()
            st.session_state["current"] = None
            st.rerun()

        for entry in history.entries:
            render_entry(entry, key_prefix="open")

# ============================================================================
# TAB: Guide
# ============================================================================

with tab_guide:
    st.header(t(language, "guide_title"))
    for step in ("step1", "step2", "step3"):
        st.markdown(f"**{t(language, step)}**: {t(language, step + '_desc')}")
    st.divider()
    st.markdown(f"#### {t(language, 'safety_title')}")
    st.write(t(language, "safety_desc"))
