from pathlib import Path
import sys

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from url_localization import LanguageCatalog, create_app


@pytest.fixture
def catalog():
    return LanguageCatalog({'en': 'English', 'fr': 'Français'})


@pytest.fixture
def app(catalog):
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test-secret',
        'I18N_LANGUAGES': catalog,
    })
    yield app


@pytest.fixture
def client(app):
    return app.test_client()
