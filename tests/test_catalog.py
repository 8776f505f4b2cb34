import json

import pytest

from url_localization import CatalogError, LanguageCatalog, verify_language


def test_first_language_is_default(catalog):
    assert catalog.default == 'en'
    assert catalog.codes == ('en', 'fr')
    assert catalog['fr'] == 'Français'


def test_catalog_accepts_pairs():
    catalog = LanguageCatalog([('fr', 'Français'), ('en', 'English')])
    assert catalog.default == 'fr'
    assert list(catalog) == ['fr', 'en']


def test_empty_catalog_is_rejected():
    with pytest.raises(CatalogError) as excinfo:
        LanguageCatalog({})
    assert excinfo.value.code == 'empty_catalog'


@pytest.mark.parametrize('code', ['en', 'fr'])
def test_known_language_is_kept(catalog, code):
    assert verify_language(code, catalog) == code


@pytest.mark.parametrize('code', ['de', '', 'EN', 'en-US', None])
def test_unknown_language_falls_back_to_default(catalog, code):
    assert verify_language(code, catalog) == 'en'


def test_from_directory_orders_preferred_default_first(tmp_path):
    for code, label in (('de', 'Deutsch'), ('en', 'English'), ('fr', 'Français')):
        (tmp_path / f'{code}.json').write_text(json.dumps({'label': label}), encoding='utf-8')

    catalog = LanguageCatalog.from_directory(tmp_path, 'fr')

    assert catalog.codes == ('fr', 'de', 'en')
    assert catalog['de'] == 'Deutsch'


def test_from_directory_without_preferred_default_uses_first_file(tmp_path):
    (tmp_path / 'nl.json').write_text('{}', encoding='utf-8')
    (tmp_path / 'it.json').write_text('{"label": "Italiano"}', encoding='utf-8')

    catalog = LanguageCatalog.from_directory(tmp_path, 'en')

    assert catalog.default == 'it'
    assert catalog['nl'] == 'nl'


def test_from_directory_requires_files(tmp_path):
    with pytest.raises(CatalogError) as excinfo:
        LanguageCatalog.from_directory(tmp_path / 'missing')
    assert excinfo.value.code == 'no_languages'


def test_from_directory_rejects_non_object_files(tmp_path):
    (tmp_path / 'en.json').write_text('["English"]', encoding='utf-8')
    with pytest.raises(CatalogError) as excinfo:
        LanguageCatalog.from_directory(tmp_path)
    assert excinfo.value.code == 'invalid_translation'


@pytest.mark.parametrize('value', [['fr'], {'fr': 1}, 3])
def test_non_string_candidate_falls_back_to_default(catalog, value):
    assert catalog.verify(value) == 'en'
    assert verify_language(value, catalog) == 'en'
