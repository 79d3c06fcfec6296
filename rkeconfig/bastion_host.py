"""Bastion host settings of an RKE cluster and their schema form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class BastionHost:
    """SSH jump host used to reach the cluster nodes."""

    address: str = ""
    port: str = ""
    user: str = ""
    ssh_agent_auth: bool = False
    ssh_key: str = ""
    ssh_key_path: str = ""
    ssh_cert: str = ""
    ssh_cert_path: str = ""
    ignore_proxy_env_vars: bool = False


def flatten_bastion_host(host: BastionHost) -> list[dict[str, Any]] | None:
    """Turn a bastion host into its schema list, or None without address or user."""
    if not host.address or not host.user:
        return None

    obj: dict[str, Any] = {
        "address": host.address,
        "user": host.user,
        "ignore_proxy_env_vars": host.ignore_proxy_env_vars,
    }
    if host.port:
        obj["port"] = host.port
    obj["ssh_agent_auth"] = host.ssh_agent_auth
    for key in ("ssh_cert", "ssh_cert_path", "ssh_key", "ssh_key_path"):
        value = getattr(host, key)
        if value:
            obj[key] = value
    return [obj]


_STRING_FIELDS = (
    "address",
    "port",
    "ssh_cert",
    "ssh_cert_path",
    "ssh_key",
    "ssh_key_path",
    "user",
)
_BOOL_FIELDS = ("ignore_proxy_env_vars", "ssh_agent_auth")


def expand_bastion_host(data: list[Any] | None) -> BastionHost:
    """Build a bastion host from its schema list."""
    host = BastionHost()
    if not data or data[0] is None:
        return host
    item = data[0]

    for key in _STRING_FIELDS:
        value = item.get(key)
        if isinstance(value, str) and value:
            setattr(host, key, value)
    for key in _BOOL_FIELDS:
        value = item.get(key)
        if isinstance(value, bool):
            setattr(host, key, value)
    return host