"""AWS cloud provider settings of an RKE cluster and their schema form."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

_GLOBAL_BOOL_FIELDS = ("disable_security_group_ingress", "disable_strict_zone_check")
_GLOBAL_STRING_FIELDS = (
    "elb_security_group",
    "kubernetes_cluster_id",
    "kubernetes_cluster_tag",
    "role_arn",
    "route_table_id",
    "subnet_id",
    "vpc",
    "zone",
)
_OVERRIDE_FIELDS = (
    "region",
    "service",
    "signing_method",
    "signing_name",
    "signing_region",
    "url",
)


@dataclass
class GlobalAwsOpts:
    """Global options of the AWS cloud provider."""

    zone: str = ""
    vpc: str = ""
    subnet_id: str = ""
    route_table_id: str = ""
    role_arn: str = ""
    kubernetes_cluster_tag: str = ""
    kubernetes_cluster_id: str = ""
    disable_security_group_ingress: bool = False
    elb_security_group: str = ""
    disable_strict_zone_check: bool = False


@dataclass
class ServiceOverride:
    """Endpoint override for one AWS service."""

    service: str = ""
    region: str = ""
    url: str = ""
    signing_region: str = ""
    signing_method: str = ""
    signing_name: str = ""


@dataclass
class AWSCloudProvider:
    """AWS cloud provider settings."""

    global_opts: GlobalAwsOpts = field(default_factory=GlobalAwsOpts)
    service_override: dict[str, ServiceOverride] = field(default_factory=dict)


def flatten_aws_global(opts: GlobalAwsOpts) -> list[dict[str, Any]]:
    """Turn AWS global options into their one-element schema list."""
    obj: dict[str, Any] = {key: getattr(opts, key) for key in _GLOBAL_BOOL_FIELDS}
    for key in _GLOBAL_STRING_FIELDS:
        value = getattr(opts, key)
        if value:
            obj[key] = value
    return [obj]


def flatten_aws_service_override(
    overrides: Mapping[str, ServiceOverride] | None,
) -> list[dict[str, Any]]:
    """Turn service overrides into a schema list, one entry per service."""
    if not overrides:
        return []
    out = []
    for override in overrides.values():
        obj: dict[str, Any] = {}
        for key in _OVERRIDE_FIELDS:
            value = getattr(override, key)
            if value:
                obj[key] = value
        out.append(obj)
    return out


def flatten_aws(provider: AWSCloudProvider | None) -> list[dict[str, Any]]:
    """Turn AWS provider settings into their schema list; empty when absent."""
    if provider is None:
        return []
    obj: dict[str, Any] = {"global": flatten_aws_global(provider.global_opts)}
    if provider.service_override:
        obj["service_override"] = flatten_aws_service_override(provider.service_override)
    return [obj]


def expand_aws_global(data: list[Any] | None) -> GlobalAwsOpts:
    """Build AWS global options from their schema list."""
    opts = GlobalAwsOpts()
    if not data or data[0] is None:
        return opts
    item = data[0]
    for key in _GLOBAL_BOOL_FIELDS:
        value = item.get(key)
        if isinstance(value, bool):
            setattr(opts, key, value)
    for key in _GLOBAL_STRING_FIELDS:
        value = item.get(key)
        if isinstance(value, str) and value:
            setattr(opts, key, value)
    return opts


def expand_aws_service_override(data: list[Any] | None) -> dict[str, ServiceOverride]:
    """Build service overrides keyed by service name from their schema list.

    Raises KeyError when an entry has no service and TypeError when it is not a string.
    """
    if not data or data[0] is None:
        return {}
    overrides: dict[str, ServiceOverride] = {}
    for item in data:
        key = item["service"]
        if not isinstance(key, str):
            raise TypeError(f"service override key must be a string, got {type(key).__name__}")
        override = ServiceOverride()
        for name in _OVERRIDE_FIELDS:
            value = item.get(name)
            if isinstance(value, str) and value:
                setattr(override, name, value)
        overrides[key] = override
    return overrides


def expand_aws(data: list[Any] | None) -> AWSCloudProvider:
    """Build AWS provider settings from their schema list."""
    provider = AWSCloudProvider()
    if not data or data[0] is None:
        return provider
    item = data[0]

    global_data = item.get("global")
    if isinstance(global_data, list) and global_data:
        provider.global_opts = expand_aws_global(global_data)

    overrides = item.get("service_override")
    if isinstance(overrides, list) and overrides:
        provider.service_override = expand_aws_service_override(overrides)

    return provider