"""Pick the language that governs a request."""

from __future__ import annotations

from typing import List

from .catalog import LanguageCatalog


def parse_accept_language(header: str | None) -> List[str]:
    """Return the language tags of an Accept-Language header in order of appearance.

    Quality values are dropped, not used for sorting.
    """
    if not header:
        return []
    candidates = []
    for entry in header.split(','):
        tag = entry.strip().split(';', 1)[0].strip()
        if tag:
            candidates.append(tag)
    return candidates


def resolve_language(
    session_language: str | None,
    accept_language: str | None,
    catalog: LanguageCatalog,
) -> str:
    """Resolve the user's language: session first, then the browser header, then the default."""
    if session_language is not None:
        return catalog.verify(session_language)

    for candidate in parse_accept_language(accept_language):
        if candidate in catalog:
            return candidate

    return catalog.default


__all__ = ['parse_accept_language', 'resolve_language']
