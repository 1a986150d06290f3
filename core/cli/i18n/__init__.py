"""
core/cli/i18n/__init__.py - Internationalization (i18n) Module

English (en) is the default UI language; Korean (ko) is selected with --lang ko.
Messages live in core/cli/i18n/messages, keyed as "<namespace>.<key>".

Usage:
    from core.cli.i18n import t, set_lang

    t("secrets.cancelled")                                  # "Cancelled"
    t("secrets.adding_secret", secret_id="worxco/production/db")

    set_lang("ko")
    t("secrets.cancelled")                                  # "취소됨"
"""

from __future__ import annotations

from contextvars import ContextVar
from typing import Any

SUPPORTED_LANGS = ("en", "ko")
DEFAULT_LANG = "en"

_current_lang: ContextVar[str] = ContextVar("lang", default=DEFAULT_LANG)


def _normalize(lang: str | None) -> str:
    return lang if lang in SUPPORTED_LANGS else DEFAULT_LANG


def get_lang() -> str:
    """Return the active UI language."""
    return _current_lang.get()


def set_lang(lang: str) -> None:
    """Select the UI language; unsupported codes fall back to English."""
    _current_lang.set(_normalize(lang))


def t(key: str, lang: str | None = None, **kwargs: Any) -> str:
    """Translate a message key.

    Args:
        key: "<namespace>.<key>" (e.g., "secrets.cancelled")
        lang: Language override (default: active language)
        **kwargs: Values for the message placeholders

    Returns:
        The translated text. Unknown keys are returned unchanged, and a
        message is left unformatted if a placeholder value is missing.
    """
    from core.cli.i18n.messages import MESSAGES

    entry = MESSAGES.get(key)
    if entry is None:
        return key

    code = _normalize(lang or get_lang())
    text = entry.get(code) or entry.get(DEFAULT_LANG) or key
    if not kwargs:
        return text

    try:
        return text.format(**kwargs)
    except (KeyError, ValueError):
        return text


__all__ = ["t", "get_lang", "set_lang", "SUPPORTED_LANGS", "DEFAULT_LANG"]
