from url_localization import SwitchResult, switch_language


def test_invalid_language_falls_back_to_default(catalog):
    assert switch_language('de', None, catalog) == ('en', '/')


def test_language_is_written_to_session(catalog):
    session = {}
    result = switch_language('fr', '/fr/about', catalog, session)
    assert result == SwitchResult('fr', '/fr/about')
    assert session == {'language': 'fr'}


def test_custom_session_key(catalog):
    session = {'language': 'en'}
    switch_language('fr', '', catalog, session, session_key='lang')
    assert session == {'language': 'en', 'lang': 'fr'}


def test_routing_base(catalog):
    result = switch_language('fr', '', catalog)
    assert result.redirect_target == '/'
    assert result.routing_base == '/fr'
