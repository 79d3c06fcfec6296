"""DNS settings of an RKE cluster and their schema form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Nodelocal:
    """NodeLocal DNS cache settings."""

    ip_address: str = ""
    node_selector: dict[str, str] = field(default_factory=dict)


@dataclass
class DNSConfig:
    """Cluster DNS provider settings."""

    provider: str = ""
    upstream_nameservers: list[str] = field(default_factory=list)
    reverse_cidrs: list[str] = field(default_factory=list)
    node_selector: dict[str, str] = field(default_factory=dict)
    nodelocal: Nodelocal | None = None


def flatten_dns_nodelocal(nodelocal: Nodelocal | None) -> list[dict[str, Any]] | None:
    """Turn NodeLocal settings into their schema list, or None when absent."""
    if nodelocal is None:
        return None
    obj: dict[str, Any] = {}
    if nodelocal.ip_address:
        obj["ip_address"] = nodelocal.ip_address
    if nodelocal.node_selector:
        obj["node_selector"] = dict(nodelocal.node_selector)
    return [obj]


def flatten_dns(config: DNSConfig | None) -> list[dict[str, Any]]:
    """Turn a DNS config into its schema list; empty when absent."""
    if config is None:
        return []
    obj: dict[str, Any] = {}
    if config.nodelocal is not None:
        obj["nodelocal"] = flatten_dns_nodelocal(config.nodelocal)
    if config.node_selector:
        obj["node_selector"] = dict(config.node_selector)
    if config.provider:
        obj["provider"] = config.provider
    if config.reverse_cidrs:
        obj["reverse_cidrs"] = list(config.reverse_cidrs)
    if config.upstream_nameservers:
        obj["upstream_nameservers"] = list(config.upstream_nameservers)
    return [obj]


def expand_dns_nodelocal(data: list[Any] | None) -> Nodelocal | None:
    """Build NodeLocal settings from their schema list, or None when empty."""
    if not data or data[0] is None:
        return None
    item = data[0]
    nodelocal = Nodelocal()

    ip_address = item.get("ip_address")
    if isinstance(ip_address, str) and ip_address:
        nodelocal.ip_address = ip_address

    selector = item.get("node_selector")
    if isinstance(selector, dict) and selector:
        nodelocal.node_selector = dict(selector)

    return nodelocal


def expand_dns(data: list[Any] | None) -> DNSConfig:
    """Build a DNS config from its schema list."""
    config = DNSConfig()
    if not data or data[0] is None:
        return config
    item = data[0]

    nodelocal = item.get("nodelocal")
    if isinstance(nodelocal, list) and nodelocal:
        config.nodelocal = expand_dns_nodelocal(nodelocal)

    selector = item.get("node_selector")
    if isinstance(selector, dict) and selector:
        config.node_selector = dict(selector)

    provider = item.get("provider")
    if isinstance(provider, str) and provider:
        config.provider = provider

    reverse_cidrs = item.get("reverse_cidrs")
    if isinstance(reverse_cidrs, list) and reverse_cidrs:
        config.reverse_cidrs = list(reverse_cidrs)

    upstream = item.get("upstream_nameservers")
    if isinstance(upstream, list) and upstream:
        config.upstream_nameservers = list(upstream)

    return config