"""Azure cloud provider settings of an RKE cluster and their schema form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

_STRING_FIELDS = (
    "aad_client_id",
    "aad_client_secret",
    "subscription_id",
    "tenant_id",
    "aad_client_cert_password",
    "aad_client_cert_path",
    "cloud",
    "location",
    "primary_availability_set_name",
    "primary_scale_set_name",
    "resource_group",
    "route_table_name",
    "security_group_name",
    "subnet_name",
    "vm_type",
    "vnet_name",
    "vnet_resource_group",
)
_BOOL_FIELDS = (
    "cloud_provider_backoff",
    "cloud_provider_rate_limit",
    "use_instance_metadata",
    "use_managed_identity_extension",
)
_INT_FIELDS = (
    "cloud_provider_backoff_duration",
    "cloud_provider_backoff_exponent",
    "cloud_provider_backoff_jitter",
    "cloud_provider_backoff_retries",
    "cloud_provider_rate_limit_bucket",
    "cloud_provider_rate_limit_qps",
    "maximum_load_balancer_rule_count",
)


@dataclass
class AzureCloudProvider:
    """Azure cloud provider settings."""

    cloud: str = ""
    tenant_id: str = ""
    subscription_id: str = ""
    resource_group: str = ""
    location: str = ""
    vnet_name: str = ""
    vnet_resource_group: str = ""
    subnet_name: str = ""
    security_group_name: str = ""
    route_table_name: str = ""
    primary_availability_set_name: str = ""
    vm_type: str = ""
    primary_scale_set_name: str = ""
    aad_client_id: str = ""
    aad_client_secret: str = ""
    aad_client_cert_path: str = ""
    aad_client_cert_password: str = ""
    cloud_provider_backoff: bool = False
    cloud_provider_backoff_retries: int = 0
    cloud_provider_backoff_exponent: int = 0
    cloud_provider_backoff_duration: int = 0
    cloud_provider_backoff_jitter: int = 0
    cloud_provider_rate_limit: bool = False
    cloud_provider_rate_limit_qps: int = 0
    cloud_provider_rate_limit_bucket: int = 0
    use_instance_metadata: bool = False
    use_managed_identity_extension: bool = False
    maximum_load_balancer_rule_count: int = 0


def _positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def flatten_azure(
    provider: AzureCloudProvider | None, state: list[Any] | None
) -> list[dict[str, Any]]:
    """Merge Azure settings into the first entry of the prior schema list.

    Keys the provider leaves empty keep their prior value. Returns an empty
    list when the provider is absent.
    """
    obj: dict[str, Any] = state[0] if state and state[0] is not None else {}
    if provider is None:
        return []

    for key in _STRING_FIELDS:
        value = getattr(provider, key)
        if value:
            obj[key] = value
    for key in _BOOL_FIELDS:
        obj[key] = getattr(provider, key)
    for key in _INT_FIELDS:
        value = getattr(provider, key)
        if value > 0:
            obj[key] = value
    return [obj]


def expand_azure(data: list[Any] | None) -> AzureCloudProvider:
    """Build Azure settings from their schema list."""
    provider = AzureCloudProvider()
    if not data or data[0] is None:
        return provider
    item = data[0]

    for key in _STRING_FIELDS:
        value = item.get(key)
        if isinstance(value, str) and value:
            setattr(provider, key, value)
    for key in _BOOL_FIELDS:
        value = item.get(key)
        if isinstance(value, bool):
            setattr(provider, key, value)
    for key in _INT_FIELDS:
        value = item.get(key)
        if _positive_int(value):
            setattr(provider, key, value)
    return provider