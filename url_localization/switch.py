"""Language switch action."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import NamedTuple

from .catalog import LanguageCatalog

SESSION_KEY = 'language'


class SwitchResult(NamedTuple):
    language: str
    redirect_target: str

    @property
    def routing_base(self) -> str:
        return f'/{self.language}'


def switch_language(
    requested_language: str | None,
    next_url: str | None,
    catalog: LanguageCatalog,
    session: MutableMapping | None = None,
    session_key: str = SESSION_KEY,
) -> SwitchResult:
    """Store the requested language (or the default if unsupported) and pick the redirect target."""
    language = catalog.verify(requested_language)
    if session is not None:
        session[session_key] = language
    return SwitchResult(language, next_url or '/')


__all__ = ['SESSION_KEY', 'SwitchResult', 'switch_language']
