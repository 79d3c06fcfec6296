from rkeconfig.authentication import (
    AuthnConfig,
    expand_authentication,
    flatten_authentication,
)


def _conf():
    return AuthnConfig(sans=["sans1", "sans2"], strategy="strategy")


def _schema():
    return [{"sans": ["sans1", "sans2"], "strategy": "strategy"}]


def test_flatten_authentication():
    assert flatten_authentication(_conf()) == _schema()


def test_expand_authentication():
    assert expand_authentication(_schema()) == _conf()


def test_flatten_empty_config_gives_empty_map():
    assert flatten_authentication(AuthnConfig()) == [{}]


def test_expand_empty_or_none_gives_default():
    assert expand_authentication([]) == AuthnConfig()
    assert expand_authentication([None]) == AuthnConfig()
    assert expand_authentication(None) == AuthnConfig()


def test_expand_ignores_wrong_types():
    result = expand_authentication([{"sans": "notalist", "strategy": 5}])
    assert result == AuthnConfig()


def test_round_trip():
    conf = _conf()
    assert expand_authentication(flatten_authentication(conf)) == conf