"""Supported languages and the verification helper every lookup goes through."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Iterable, Iterator, Tuple

from .errors import CatalogError


class LanguageCatalog(Mapping):
    """Ordered, read-only mapping of language code to display name.

    The first code is the default language. Instances are shared between
    requests and never change after construction.
    """

    def __init__(self, languages: Mapping[str, str] | Iterable[Tuple[str, str]]) -> None:
        items = languages.items() if isinstance(languages, Mapping) else languages
        self._languages = {str(code): str(name) for code, name in items}
        if not self._languages:
            raise CatalogError('empty_catalog', 'At least one language is required.')
        self._default = next(iter(self._languages))

    @classmethod
    def from_directory(cls, directory: Path | str, preferred_default: str | None = None) -> 'LanguageCatalog':
        """Load one language per ``<code>.json`` file, using its ``label`` as display name."""
        directory = Path(directory)
        languages = {}
        if directory.is_dir():
            for path in sorted(directory.glob('*.json')):
                with path.open('r', encoding='utf-8') as handle:
                    data = json.load(handle)
                if not isinstance(data, dict):
                    raise CatalogError('invalid_translation', f'{path.name} must contain a JSON object.')
                languages[path.stem] = data.get('label') or path.stem
        if not languages:
            raise CatalogError('no_languages', f'No language files found in {directory}')

        default_lang = preferred_default if preferred_default in languages else next(iter(languages))
        ordered = [(default_lang, languages[default_lang])]
        ordered.extend((code, name) for code, name in languages.items() if code != default_lang)
        return cls(ordered)

    @property
    def default(self) -> str:
        return self._default

    @property
    def codes(self) -> Tuple[str, ...]:
        return tuple(self._languages)

    def verify(self, candidate: str | None) -> str:
        """Return ``candidate`` if supported, otherwise the default language."""
        if isinstance(candidate, str) and candidate in self._languages:
            return candidate
        return self._default

    def __getitem__(self, code: str) -> str:
        return self._languages[code]

    def __iter__(self) -> Iterator[str]:
        return iter(self._languages)

    def __len__(self) -> int:
        return len(self._languages)

    def __contains__(self, code: object) -> bool:
        return code in self._languages

    def __repr__(self) -> str:
        return f'LanguageCatalog({self._languages!r})'


def verify_language(candidate: str | None, catalog: LanguageCatalog) -> str:
    return catalog.verify(candidate)


__all__ = ['LanguageCatalog', 'verify_language']
