"""Flask integration: language-prefixed URLs and the ``lang`` switch route."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional
from urllib.parse import urljoin, urlparse

from flask import Flask, current_app, redirect, request, session

from .catalog import LanguageCatalog
from .errors import CatalogError
from .middleware import (
    BASE_SCRIPT_NAME_KEY,
    LANGUAGE_ID_KEY,
    LANGUAGE_NAME_KEY,
    LANGUAGES_KEY,
    LanguageStage,
)
from .pipeline import StagePipeline
from .switch import SESSION_KEY, switch_language

EXTENSION_KEY = 'url_localization'
SWITCH_ENDPOINT = 'lang'


def _catalog() -> LanguageCatalog:
    return current_app.extensions[EXTENSION_KEY].catalog


def get_languages() -> LanguageCatalog:
    return request.environ.get(LANGUAGES_KEY) or _catalog()


def get_language() -> str:
    """Language of the current request, the default one outside the language stage."""
    return request.environ.get(LANGUAGE_ID_KEY) or _catalog().default


def get_language_name() -> str:
    return request.environ.get(LANGUAGE_NAME_KEY) or _catalog()[get_language()]


def is_safe_redirect(target: Optional[str]) -> bool:
    if not target:
        return False
    ref_url = urlparse(request.host_url)
    test_url = urlparse(urljoin(request.host_url, target))
    return (
        test_url.scheme in {'http', 'https'}
        and ref_url.netloc == test_url.netloc
    )


def switch_language_view():
    """Store ``?lang=`` in the session and redirect to ``?next=`` (or the new language's root)."""
    next_url = request.args.get('next')
    if next_url and not is_safe_redirect(next_url):
        current_app.logger.warning('Ignoring off-site language switch target %r', next_url)
        next_url = None

    result = switch_language(
        request.args.get('lang'),
        next_url,
        _catalog(),
        session,
        current_app.config['I18N_SESSION_KEY'],
    )
    current_app.logger.info('Language switched to %s', result.language)

    if next_url:
        return redirect(result.redirect_target)
    base = request.environ.get(BASE_SCRIPT_NAME_KEY, request.script_root)
    # land directly on the new routing base instead of bouncing through '/'
    return redirect(f'{base}{result.routing_base}{result.redirect_target}')


def inject_language_context():
    return {
        'languages': get_languages(),
        'language_id': get_language(),
        'language_name': get_language_name(),
    }


class I18n:
    """Prefix every URL of a Flask app with the user's language.

    Use::

        app = Flask(__name__)
        app.config['I18N_LANGUAGES'] = {'en': 'English', 'fr': 'Français'}
        I18n(app)
    """

    def __init__(self, app: Flask | None = None, languages: Mapping | None = None) -> None:
        self.languages = languages
        self.catalog: LanguageCatalog | None = None
        self.stage: LanguageStage | None = None
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        app.config.setdefault('I18N_SWITCH_PATH', '/language')
        app.config.setdefault('I18N_SESSION_KEY', SESSION_KEY)
        app.config.setdefault('I18N_REDIRECT_CODE', 302)

        languages = self.languages or app.config.get('I18N_LANGUAGES')
        if not languages:
            raise CatalogError('missing_languages', 'Configure I18N_LANGUAGES or pass languages to I18n.')
        self.catalog = languages if isinstance(languages, LanguageCatalog) else LanguageCatalog(languages)

        def load_session(req):
            return app.session_interface.open_session(app, req)

        self.stage = LanguageStage(
            self.catalog,
            session_loader=load_session,
            session_key=app.config['I18N_SESSION_KEY'],
            redirect_code=app.config['I18N_REDIRECT_CODE'],
        )
        app.wsgi_app = StagePipeline(app.wsgi_app, [self.stage])
        app.add_url_rule(app.config['I18N_SWITCH_PATH'], SWITCH_ENDPOINT, switch_language_view)
        app.context_processor(inject_language_context)
        app.extensions[EXTENSION_KEY] = self
        app.logger.debug('Language prefixes enabled for %s', ', '.join(self.catalog))


__all__ = [
    'I18n',
    'get_language',
    'get_language_name',
    'get_languages',
    'inject_language_context',
    'is_safe_redirect',
    'switch_language_view',
]
