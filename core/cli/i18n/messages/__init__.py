"""
core/cli/i18n/messages/__init__.py - Message Registry

Every namespace module contributes a {key: {"en": ..., "ko": ...}} table,
registered here under "<namespace>.<key>".
"""

from __future__ import annotations

from typing import TypedDict


class MessageDict(TypedDict):
    """One message in every supported language."""

    en: str
    ko: str


MESSAGES: dict[str, MessageDict] = {}


def register_messages(namespace: str, messages: dict[str, MessageDict]) -> None:
    """Add a namespace table to MESSAGES (existing keys are replaced)."""
    MESSAGES.update({f"{namespace}.{key}": value for key, value in messages.items()})


from core.cli.i18n.messages.cli_commands import CLI_MESSAGES  # noqa: E402
from core.cli.i18n.messages.common import COMMON_MESSAGES  # noqa: E402
from core.cli.i18n.messages.secrets import SECRETS_MESSAGES  # noqa: E402

register_messages("common", COMMON_MESSAGES)
register_messages("cli", CLI_MESSAGES)
register_messages("secrets", SECRETS_MESSAGES)

__all__ = ["MESSAGES", "MessageDict", "register_messages"]
