"""Turn a UI language choice into an analysis prompt or interface text."""

from __future__ import annotations

import logging

from prompts.templates import LANGUAGES, TEMPLATES, UI_TEXT

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"


def language_name(code: str) -> str:
    """English name of a language code, falling back to English."""
    if code not in LANGUAGES:
        logger.warning("Unknown language code %r, using English", code)
    return LANGUAGES.get(code, LANGUAGES[DEFAULT_LANGUAGE])


def build_prompt(template_name: str, language: str = DEFAULT_LANGUAGE) -> str:
    template = TEMPLATES.get(template_name, TEMPLATES["scan"])
    return template.substitute(language=language_name(language))


def build_scan_prompt(language: str = DEFAULT_LANGUAGE) -> str:
    """Prompt for a fresh scan: reject non-medicine images, then extract."""
    return build_prompt("scan", language)


def build_translation_prompt(language: str = DEFAULT_LANGUAGE) -> str:
    """Prompt for re-reading an already identified package in another language."""
    return build_prompt("translate", language)


def t(language: str, key: str) -> str:
    """Interface text for ``key`` in ``language``; English, then the key itself, as fallbacks."""
    text = UI_TEXT.get(language, {}).get(key) or UI_TEXT[DEFAULT_LANGUAGE].get(key)
    return text or key
