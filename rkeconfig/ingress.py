"""Ingress controller settings of an RKE cluster and their schema form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class IngressConfig:
    """Ingress controller provider and options."""

    provider: str = ""
    options: dict[str, str] = field(default_factory=dict)
    node_selector: dict[str, str] = field(default_factory=dict)
    extra_args: dict[str, str] = field(default_factory=dict)
    dns_policy: str = ""
    http_port: int = 0
    https_port: int = 0
    network_mode: str = ""
    default_backend: bool | None = None


def flatten_ingress(config: IngressConfig) -> list[dict[str, Any]]:
    """Turn an ingress config into its one-element schema list."""
    obj: dict[str, Any] = {}
    if config.dns_policy:
        obj["dns_policy"] = config.dns_policy
    if config.extra_args:
        obj["extra_args"] = dict(config.extra_args)
    if config.http_port > 0:
        obj["http_port"] = config.http_port
    if config.https_port > 0:
        obj["https_port"] = config.https_port
    if config.network_mode:
        obj["network_mode"] = config.network_mode
    if config.node_selector:
        obj["node_selector"] = dict(config.node_selector)
    if config.options:
        obj["options"] = dict(config.options)
    if config.provider:
        obj["provider"] = config.provider
    if config.default_backend is not None:
        obj["default_backend"] = config.default_backend
    return [obj]


def _positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def expand_ingress(data: list[Any] | None) -> IngressConfig:
    """Build an ingress config from its schema list."""
    config = IngressConfig()
    if not data or data[0] is None:
        return config
    item = data[0]

    for key in ("dns_policy", "network_mode", "provider"):
        value = item.get(key)
        if isinstance(value, str) and value:
            setattr(config, key, value)

    for key in ("extra_args", "node_selector", "options"):
        value = item.get(key)
        if isinstance(value, dict) and value:
            setattr(config, key, dict(value))

    for key in ("http_port", "https_port"):
        value = item.get(key)
        if _positive_int(value):
            setattr(config, key, value)

    default_backend = item.get("default_backend")
    if isinstance(default_backend, bool):
        config.default_backend = default_backend

    return config