from rkeconfig.bastion_host import (
    BastionHost,
    expand_bastion_host,
    flatten_bastion_host,
)


def _conf():
    return BastionHost(
        address="bastion.terraform.test",
        ignore_proxy_env_vars=True,
        ssh_cert="placeholder",
        ssh_cert_path="/home/user/.ssh",
        port="22",
        ssh_agent_auth=True,
        ssh_key="placeholder",
        ssh_key_path="/home/user/.ssh",
        user="test",
    )


def _schema():
    return [
        {
            "address": "bastion.terraform.test",
            "ignore_proxy_env_vars": True,
            "port": "22",
            "ssh_agent_auth": True,
            "ssh_cert": "placeholder",
            "ssh_cert_path": "/home/user/.ssh",
            "ssh_key": "placeholder",
            "ssh_key_path": "/home/user/.ssh",
            "user": "test",
        }
    ]


def test_flatten_bastion_host():
    assert flatten_bastion_host(_conf()) == _schema()


def test_expand_bastion_host():
    assert expand_bastion_host(_schema()) == _conf()


def test_flatten_without_user_is_none():
    assert flatten_bastion_host(BastionHost(address="host")) is None


def test_flatten_without_address_is_none():
    assert flatten_bastion_host(BastionHost(user="test")) is None


def test_flatten_minimal_keeps_booleans():
    out = flatten_bastion_host(BastionHost(address="host", user="test"))
    assert out == [
        {
            "address": "host",
            "user": "test",
            "ignore_proxy_env_vars": False,
            "ssh_agent_auth": False,
        }
    ]


def test_expand_empty_gives_default():
    assert expand_bastion_host([]) == BastionHost()
    assert expand_bastion_host([None]) == BastionHost()