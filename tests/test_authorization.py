from rkeconfig.authorization import (
    AuthzConfig,
    expand_authorization,
    flatten_authorization,
)


def _conf():
    return AuthzConfig(
        mode="rbac", options={"option1": "value1", "option2": "value2"}
    )


def _schema():
    return [
        {
            "mode": "rbac",
            "options": {"option1": "value1", "option2": "value2"},
        }
    ]


def test_flatten_authorization():
    assert flatten_authorization(_conf()) == _schema()


def test_expand_authorization():
    assert expand_authorization(_schema()) == _conf()


def test_flatten_empty_config():
    assert flatten_authorization(AuthzConfig()) == [{}]


def test_expand_empty_gives_default():
    assert expand_authorization([]) == AuthzConfig()
    assert expand_authorization([None]) == AuthzConfig()


def test_flatten_copies_options():
    conf = _conf()
    out = flatten_authorization(conf)
    out[0]["options"]["option3"] = "value3"
    assert "option3" not in conf.options