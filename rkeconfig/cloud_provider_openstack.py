"""OpenStack cloud provider settings of an RKE cluster and their schema form."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

_GLOBAL_FIELDS = (
    "auth_url",
    "password",
    "ca_file",
    "domain_id",
    "domain_name",
    "region",
    "tenant_id",
    "tenant_name",
    "trust_id",
    "username",
    "user_id",
)
_LB_STRING_FIELDS = (
    "floating_network_id",
    "lb_method",
    "lb_provider",
    "lb_version",
    "monitor_delay",
    "monitor_timeout",
    "subnet_id",
)
_LB_BOOL_FIELDS = ("create_monitor", "manage_security_groups", "use_octavia")
_BLOCK_STORAGE_BOOL_FIELDS = ("ignore_volume_az", "trust_device_path")


@dataclass
class BlockStorageOpenstackOpts:
    """Block storage options of the OpenStack cloud provider."""

    bs_version: str = ""
    trust_device_path: bool = False
    ignore_volume_az: bool = False


@dataclass
class GlobalOpenstackOpts:
    """Global options of the OpenStack cloud provider."""

    auth_url: str = ""
    username: str = ""
    user_id: str = ""
    password: str = ""
    tenant_id: str = ""
    tenant_name: str = ""
    trust_id: str = ""
    domain_id: str = ""
    domain_name: str = ""
    region: str = ""
    ca_file: str = ""


@dataclass
class LoadBalancerOpenstackOpts:
    """Load balancer options of the OpenStack cloud provider."""

    lb_version: str = ""
    use_octavia: bool = False
    subnet_id: str = ""
    floating_network_id: str = ""
    lb_method: str = ""
    lb_provider: str = ""
    create_monitor: bool = False
    monitor_delay: str = ""
    monitor_timeout: str = ""
    monitor_max_retries: int = 0
    manage_security_groups: bool = False


@dataclass
class MetadataOpenstackOpts:
    """Metadata service options of the OpenStack cloud provider."""

    search_order: str = ""
    request_timeout: int = 0


@dataclass
class RouteOpenstackOpts:
    """Routing options of the OpenStack cloud provider."""

    router_id: str = ""


@dataclass
class OpenstackCloudProvider:
    """OpenStack cloud provider settings."""

    global_opts: GlobalOpenstackOpts = field(default_factory=GlobalOpenstackOpts)
    load_balancer: LoadBalancerOpenstackOpts = field(default_factory=LoadBalancerOpenstackOpts)
    block_storage: BlockStorageOpenstackOpts = field(default_factory=BlockStorageOpenstackOpts)
    route: RouteOpenstackOpts = field(default_factory=RouteOpenstackOpts)
    metadata: MetadataOpenstackOpts = field(default_factory=MetadataOpenstackOpts)


def _positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _first_item(data: list[Any] | None) -> dict[str, Any] | None:
    if not data or data[0] is None:
        return None
    return data[0]


def _state_object(state: list[Any] | None) -> dict[str, Any]:
    return state[0] if state and state[0] is not None else {}


def _copy_strings(item: dict[str, Any], target: Any, keys: tuple[str, ...]) -> None:
    for key in keys:
        value = item.get(key)
        if isinstance(value, str) and value:
            setattr(target, key, value)


def _copy_bools(item: dict[str, Any], target: Any, keys: tuple[str, ...]) -> None:
    for key in keys:
        value = item.get(key)
        if isinstance(value, bool):
            setattr(target, key, value)


def flatten_openstack_block_storage(opts: BlockStorageOpenstackOpts) -> list[dict[str, Any]]:
    """Turn block storage options into their one-element schema list."""
    obj: dict[str, Any] = {}
    if opts.bs_version:
        obj["bs_version"] = opts.bs_version
    for key in _BLOCK_STORAGE_BOOL_FIELDS:
        obj[key] = getattr(opts, key)
    return [obj]


def flatten_openstack_global(
    opts: GlobalOpenstackOpts, state: list[Any] | None
) -> list[dict[str, Any]]:
    """Merge global options into the first entry of the prior schema list."""
    obj = _state_object(state)
    for key in _GLOBAL_FIELDS:
        value = getattr(opts, key)
        if value:
            obj[key] = value
    return [obj]


def flatten_openstack_load_balancer(opts: LoadBalancerOpenstackOpts) -> list[dict[str, Any]]:
    """Turn load balancer options into their one-element schema list."""
    obj: dict[str, Any] = {key: getattr(opts, key) for key in _LB_BOOL_FIELDS}
    for key in _LB_STRING_FIELDS:
        value = getattr(opts, key)
        if value:
            obj[key] = value
    if opts.monitor_max_retries > 0:
        obj["monitor_max_retries"] = opts.monitor_max_retries
    return [obj]


def flatten_openstack_metadata(opts: MetadataOpenstackOpts) -> list[dict[str, Any]]:
    """Turn metadata options into their one-element schema list."""
    obj: dict[str, Any] = {}
    if opts.request_timeout > 0:
        obj["request_timeout"] = opts.request_timeout
    if opts.search_order:
        obj["search_order"] = opts.search_order
    return [obj]


def flatten_openstack_route(opts: RouteOpenstackOpts) -> list[dict[str, Any]]:
    """Turn route options into their one-element schema list."""
    obj: dict[str, Any] = {}
    if opts.router_id:
        obj["router_id"] = opts.router_id
    return [obj]


def flatten_openstack(
    provider: OpenstackCloudProvider | None, state: list[Any] | None
) -> list[dict[str, Any]]:
    """Merge OpenStack settings into the prior schema list; empty when absent."""
    obj = _state_object(state)
    if provider is None:
        return []

    obj["block_storage"] = flatten_openstack_block_storage(provider.block_storage)
    prior_global = obj.get("global")
    if not isinstance(prior_global, list):
        prior_global = []
    obj["global"] = flatten_openstack_global(provider.global_opts, prior_global)
    obj["load_balancer"] = flatten_openstack_load_balancer(provider.load_balancer)
    obj["metadata"] = flatten_openstack_metadata(provider.metadata)
    obj["route"] = flatten_openstack_route(provider.route)
    return [obj]


def expand_openstack_block_storage(data: list[Any] | None) -> BlockStorageOpenstackOpts:
    """Build block storage options from their schema list."""
    opts = BlockStorageOpenstackOpts()
    item = _first_item(data)
    if item is None:
        return opts
    _copy_strings(item, opts, ("bs_version",))
    _copy_bools(item, opts, _BLOCK_STORAGE_BOOL_FIELDS)
    return opts


def expand_openstack_global(data: list[Any] | None) -> GlobalOpenstackOpts:
    """Build global options from their schema list."""
    opts = GlobalOpenstackOpts()
    item = _first_item(data)
    if item is None:
        return opts
    _copy_strings(item, opts, _GLOBAL_FIELDS)
    return opts


def expand_openstack_load_balancer(data: list[Any] | None) -> LoadBalancerOpenstackOpts:
    """Build load balancer options from their schema list."""
    opts = LoadBalancerOpenstackOpts()
    item = _first_item(data)
    if item is None:
        return opts
    _copy_strings(item, opts, _LB_STRING_FIELDS)
    _copy_bools(item, opts, _LB_BOOL_FIELDS)
    retries = item.get("monitor_max_retries")
    if _positive_int(retries):
        opts.monitor_max_retries = retries
    return opts


def expand_openstack_metadata(data: list[Any] | None) -> MetadataOpenstackOpts:
    """Build metadata options from their schema list."""
    opts = MetadataOpenstackOpts()
    item = _first_item(data)
    if item is None:
        return opts
    timeout = item.get("request_timeout")
    if _positive_int(timeout):
        opts.request_timeout = timeout
    _copy_strings(item, opts, ("search_order",))
    return opts


def expand_openstack_route(data: list[Any] | None) -> RouteOpenstackOpts:
    """Build route options from their schema list."""
    opts = RouteOpenstackOpts()
    item = _first_item(data)
    if item is None:
        return opts
    _copy_strings(item, opts, ("router_id",))
    return opts


def expand_openstack(data: list[Any] | None) -> OpenstackCloudProvider:
    """Build OpenStack settings from their schema list."""
    provider = OpenstackCloudProvider()
    item = _first_item(data)
    if item is None:
        return provider

    sections = (
        ("block_storage", "block_storage", expand_openstack_block_storage),
        ("global", "global_opts", expand_openstack_global),
        ("load_balancer", "load_balancer", expand_openstack_load_balancer),
        ("metadata", "metadata", expand_openstack_metadata),
        ("route", "route", expand_openstack_route),
    )
    for key, attr, expand in sections:
        value = item.get(key)
        if isinstance(value, list) and value:
            setattr(provider, attr, expand(value))
    return provider