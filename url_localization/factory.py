"""Application factory and common setup for the localized demo app."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

from flask import Flask, jsonify, url_for

from .catalog import LanguageCatalog
from .extension import I18n, get_language, get_language_name, get_languages

PACKAGE_ROOT = Path(__file__).resolve().parent
TRANSLATIONS_DIR = PACKAGE_ROOT / 'translations'
FALLBACK_LANGUAGE = 'en'
LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'


def configure_logging(app: Flask) -> None:
    """Apply ``LOG_LEVEL`` to the app logger and the ``url_localization`` loggers.

    The stage logs its redirect decisions on the package loggers, which
    run outside the Flask app context.
    """
    log_level = app.config.get('LOG_LEVEL', 'INFO')
    for logger in (app.logger, logging.getLogger(__package__)):
        logger.setLevel(log_level)
    formatter = logging.Formatter(LOG_FORMAT)
    for handler in app.logger.handlers:
        handler.setFormatter(formatter)


def create_app(config: Dict[str, Any] | None = None) -> Flask:
    """Create and configure Flask application."""
    app = Flask(__name__)
    app.config.setdefault('LOG_LEVEL', 'INFO')
    app.config.setdefault('I18N_TRANSLATIONS_DIR', str(TRANSLATIONS_DIR))
    app.config.setdefault('I18N_DEFAULT_LANGUAGE', FALLBACK_LANGUAGE)
    if config:
        app.config.update(config)
    app.config['SECRET_KEY'] = app.config.get('SECRET_KEY') or 'change-me'

    if not app.config.get('I18N_LANGUAGES'):
        app.config['I18N_LANGUAGES'] = LanguageCatalog.from_directory(
            app.config['I18N_TRANSLATIONS_DIR'],
            app.config['I18N_DEFAULT_LANGUAGE'],
        )

    configure_logging(app)
    I18n(app)

    def _page(name: str):
        return jsonify({
            'page': name,
            'language': get_language(),
            'language_name': get_language_name(),
            'languages': dict(get_languages()),
            'links': {
                'index': url_for('index'),
                'about': url_for('about'),
                'switch': {code: url_for('lang', lang=code) for code in get_languages()},
            },
        })

    @app.get('/')
    def index():
        return _page('index')

    @app.get('/about')
    def about():
        return _page('about')

    return app
