"""Errors raised while setting up the language catalog."""

from __future__ import annotations


class CatalogError(Exception):
    """The supported languages could not be determined.

    ``code`` is one of ``empty_catalog`` (no languages given),
    ``no_languages`` (no ``*.json`` files in the translations directory),
    ``invalid_translation`` (a language file is not a JSON object) or
    ``missing_languages`` (``I18n`` found neither an argument nor
    ``I18N_LANGUAGES``). Request handling itself never raises it.
    """

    def __init__(self, code: str, message: str | None = None) -> None:
        super().__init__(message or code)
        self.code = code


__all__ = ['CatalogError']
