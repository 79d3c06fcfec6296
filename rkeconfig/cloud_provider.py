"""Cloud provider settings of an RKE cluster and their schema form."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from rkeconfig.cloud_provider_aws import AWSCloudProvider, expand_aws, flatten_aws
from rkeconfig.cloud_provider_azure import AzureCloudProvider, expand_azure, flatten_azure
from rkeconfig.cloud_provider_openstack import (
    OpenstackCloudProvider,
    expand_openstack,
    flatten_openstack,
)
from rkeconfig.cloud_provider_vsphere import (
    VsphereCloudProvider,
    expand_vsphere,
    flatten_vsphere,
)


@dataclass
class CloudProvider:
    """Named cloud provider with the settings of the provider in use."""

    name: str = ""
    aws_cloud_provider: AWSCloudProvider | None = None
    azure_cloud_provider: AzureCloudProvider | None = None
    openstack_cloud_provider: OpenstackCloudProvider | None = None
    vsphere_cloud_provider: VsphereCloudProvider | None = None
    custom_cloud_provider: str = ""


def _prior_list(obj: dict[str, Any], key: str) -> list[Any]:
    value = obj.get(key)
    return value if isinstance(value, list) else []


def flatten_cloud_provider(
    provider: CloudProvider, state: list[Any] | None
) -> list[dict[str, Any]] | None:
    """Merge cloud provider settings into the first entry of the prior schema list.

    Returns None when the provider has no name.
    """
    if not provider.name:
        return None

    obj: dict[str, Any] = state[0] if state and state[0] is not None else {}
    obj["name"] = provider.name

    if provider.aws_cloud_provider is not None:
        obj["aws_cloud_provider"] = flatten_aws(provider.aws_cloud_provider)

    if provider.azure_cloud_provider is not None:
        obj["azure_cloud_provider"] = flatten_azure(
            provider.azure_cloud_provider, _prior_list(obj, "azure_cloud_provider")
        )

    if provider.custom_cloud_provider:
        obj["custom_cloud_provider"] = provider.custom_cloud_provider

    if provider.openstack_cloud_provider is not None:
        obj["openstack_cloud_provider"] = flatten_openstack(
            provider.openstack_cloud_provider, _prior_list(obj, "openstack_cloud_provider")
        )

    if provider.vsphere_cloud_provider is not None:
        obj["vsphere_cloud_provider"] = flatten_vsphere(
            provider.vsphere_cloud_provider, _prior_list(obj, "vsphere_cloud_provider")
        )

    return [obj]


def expand_cloud_provider(data: list[Any] | None) -> CloudProvider:
    """Build cloud provider settings from their schema list."""
    provider = CloudProvider()
    if not data or data[0] is None:
        return provider
    item = data[0]

    aws = item.get("aws_cloud_provider")
    if isinstance(aws, list) and aws:
        provider.aws_cloud_provider = expand_aws(aws)

    azure = item.get("azure_cloud_provider")
    if isinstance(azure, list) and azure:
        provider.azure_cloud_provider = expand_azure(azure)

    custom = item.get("custom_cloud_provider")
    if isinstance(custom, str) and custom:
        provider.custom_cloud_provider = custom

    name = item.get("name")
    if isinstance(name, str) and name:
        provider.name = name

    openstack = item.get("openstack_cloud_provider")
    if isinstance(openstack, list) and openstack:
        provider.openstack_cloud_provider = expand_openstack(openstack)

    vsphere = item.get("vsphere_cloud_provider")
    if isinstance(vsphere, list) and vsphere:
        provider.vsphere_cloud_provider = expand_vsphere(vsphere)

    return provider