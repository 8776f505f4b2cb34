"""Pipeline stage that keeps every request URL prefixed with the user's language."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Callable, Optional
from urllib.parse import quote

from werkzeug.utils import redirect
from werkzeug.wrappers import Request

from .catalog import LanguageCatalog
from .pipeline import Next, WSGIApp
from .rewrite import RewriteResult, rewrite_request
from .switch import SESSION_KEY

LOGGER = logging.getLogger(__name__)

PATH_SAFE_CHARS = "/:@!$&'()*+,;=-._~"

ENVIRON_PREFIX = 'url_localization.'
LANGUAGES_KEY = ENVIRON_PREFIX + 'languages'
LANGUAGE_ID_KEY = ENVIRON_PREFIX + 'language.id'
LANGUAGE_NAME_KEY = ENVIRON_PREFIX + 'language.name'
BASE_SCRIPT_NAME_KEY = ENVIRON_PREFIX + 'script_name'

SessionLoader = Callable[[Request], Optional[Mapping]]


def _wsgi_to_text(value: str) -> str:
    # WSGI strings carry raw bytes as latin-1
    return value.encode('latin-1').decode('utf-8', 'replace')


class LanguageStage:
    """Redirect to the canonical language URL or strip the prefix and continue.

    ``session_loader`` returns the session mapping of a request (or ``None``),
    the stage only reads ``session_key`` from it.
    """

    def __init__(
        self,
        catalog: LanguageCatalog,
        session_loader: SessionLoader | None = None,
        session_key: str = SESSION_KEY,
        redirect_code: int = 302,
    ) -> None:
        self.catalog = catalog
        self.session_loader = session_loader
        self.session_key = session_key
        self.redirect_code = redirect_code

    def session_language(self, request: Request) -> str | None:
        if self.session_loader is None:
            return None
        session = self.session_loader(request)
        if not session:
            return None
        return session.get(self.session_key)

    def handle(self, request: Request, next: Next) -> WSGIApp:
        environ = request.environ
        resource_uri = environ.get('PATH_INFO', '')
        result = rewrite_request(
            resource_uri,
            self.session_language(request),
            request.headers.get('Accept-Language'),
            self.catalog,
        )

        if result.redirect is not None:
            location = request.script_root + quote(_wsgi_to_text(result.redirect), safe=PATH_SAFE_CHARS)
            query = request.query_string.decode('latin-1')
            if query:
                location = f'{location}?{query}'
            LOGGER.debug('Redirecting %r to %r (language %s)', resource_uri, location, result.language)
            return redirect(location, code=self.redirect_code)

        self.apply(environ, result)
        return next(request)

    def apply(self, environ: dict, result: RewriteResult) -> None:
        """Write a proceed result into the WSGI environ for the downstream app."""
        script_name = environ.get('SCRIPT_NAME', '')
        environ[BASE_SCRIPT_NAME_KEY] = script_name
        environ['SCRIPT_NAME'] = script_name + result.routing_base_prefix
        environ['PATH_INFO'] = result.internal_path
        environ[LANGUAGES_KEY] = self.catalog
        environ[LANGUAGE_ID_KEY] = result.language
        environ[LANGUAGE_NAME_KEY] = self.catalog[result.language]


__all__ = [
    'BASE_SCRIPT_NAME_KEY',
    'LANGUAGES_KEY',
    'LANGUAGE_ID_KEY',
    'LANGUAGE_NAME_KEY',
    'LanguageStage',
]
