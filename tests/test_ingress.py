from rkeconfig.ingress import IngressConfig, expand_ingress, flatten_ingress


def _conf():
    return IngressConfig(
        dns_policy="test",
        extra_args={"arg_one": "one", "arg_two": "two"},
        http_port=8080,
        https_port=8443,
        network_mode="network_mode",
        node_selector={"node_one": "one", "node_two": "two"},
        options={"option1": "value1", "option2": "value2"},
        provider="test",
        default_backend=True,
    )


def _schema():
    return [
        {
            "dns_policy": "test",
            "extra_args": {"arg_one": "one", "arg_two": "two"},
            "http_port": 8080,
            "https_port": 8443,
            "network_mode": "network_mode",
            "node_selector": {"node_one": "one", "node_two": "two"},
            "options": {"option1": "value1", "option2": "value2"},
            "provider": "test",
            "default_backend": True,
        }
    ]


def test_flatten_ingress():
    assert flatten_ingress(_conf()) == _schema()


def test_expand_ingress():
    assert expand_ingress(_schema()) == _conf()


def test_flatten_default_omits_unset():
    assert flatten_ingress(IngressConfig()) == [{}]


def test_flatten_keeps_false_default_backend():
    out = flatten_ingress(IngressConfig(default_backend=False))
    assert out == [{"default_backend": False}]


def test_expand_ignores_non_positive_and_bool_ports():
    result = expand_ingress([{"http_port": 0, "https_port": True}])
    assert result.http_port == 0
    assert result.https_port == 0


def test_expand_empty_gives_default():
    assert expand_ingress([]) == IngressConfig()
    assert expand_ingress([None]) == IngressConfig()