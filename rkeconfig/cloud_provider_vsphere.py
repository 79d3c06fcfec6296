"""vSphere cloud provider settings of an RKE cluster and their schema form."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

# (schema key, attribute name)
_GLOBAL_STRING_FIELDS = (
    ("datacenters", "datacenters"),
    ("datastore", "default_datastore"),
    ("password", "password"),
    ("port", "vcenter_port"),
    ("user", "user"),
    ("vm_name", "vm_name"),
    ("vm_uuid", "vm_uuid"),
    ("working_dir", "working_dir"),
)
_CENTER_STRING_FIELDS = (
    ("datacenters", "datacenters"),
    ("password", "password"),
    ("port", "vcenter_port"),
    ("user", "user"),
)
_WORKSPACE_FIELDS = (
    ("datacenter", "datacenter"),
    ("folder", "folder"),
    ("server", "vcenter_ip"),
    ("default_datastore", "default_datastore"),
    ("resourcepool_path", "resource_pool_path"),
)


@dataclass
class DiskVsphereOpts:
    """Disk options of the vSphere cloud provider."""

    scsi_controller_type: str = ""


@dataclass
class GlobalVsphereOpts:
    """Global options of the vSphere cloud provider."""

    user: str = ""
    password: str = ""
    vcenter_ip: str = ""
    vcenter_port: str = ""
    insecure_flag: bool = False
    datacenters: str = ""
    datacenter: str = ""
    default_datastore: str = ""
    working_dir: str = ""
    round_tripper_count: int = 0
    vm_uuid: str = ""
    vm_name: str = ""


@dataclass
class NetworkVsphereOpts:
    """Network options of the vSphere cloud provider."""

    public_network: str = ""


@dataclass
class VirtualCenterConfig:
    """Connection settings of one vCenter server."""

    user: str = ""
    password: str = ""
    vcenter_port: str = ""
    datacenters: str = ""
    round_tripper_count: int = 0


@dataclass
class WorkspaceVsphereOpts:
    """Workspace options of the vSphere cloud provider."""

    vcenter_ip: str = ""
    datacenter: str = ""
    folder: str = ""
    default_datastore: str = ""
    resource_pool_path: str = ""


@dataclass
class VsphereCloudProvider:
    """vSphere cloud provider settings."""

    global_opts: GlobalVsphereOpts = field(default_factory=GlobalVsphereOpts)
    virtual_center: dict[str, VirtualCenterConfig] = field(default_factory=dict)
    network: NetworkVsphereOpts = field(default_factory=NetworkVsphereOpts)
    disk: DiskVsphereOpts = field(default_factory=DiskVsphereOpts)
    workspace: WorkspaceVsphereOpts = field(default_factory=WorkspaceVsphereOpts)


def _positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _first_item(data: list[Any] | None) -> dict[str, Any] | None:
    if not data or data[0] is None:
        return None
    return data[0]


def _state_object(state: list[Any] | None) -> dict[str, Any]:
    return state[0] if state and state[0] is not None else {}


def _flatten_strings(obj: dict[str, Any], source: Any, pairs: tuple[tuple[str, str], ...]) -> None:
    for key, attr in pairs:
        value = getattr(source, attr)
        if value:
            obj[key] = value


def _expand_strings(item: dict[str, Any], target: Any, pairs: tuple[tuple[str, str], ...]) -> None:
    for key, attr in pairs:
        value = item.get(key)
        if isinstance(value, str) and value:
            setattr(target, attr, value)


def flatten_vsphere_disk(opts: DiskVsphereOpts) -> list[dict[str, Any]]:
    """Turn disk options into their one-element schema list."""
    obj: dict[str, Any] = {}
    if opts.scsi_controller_type:
        obj["scsi_controller_type"] = opts.scsi_controller_type
    return [obj]


def flatten_vsphere_global(
    opts: GlobalVsphereOpts, state: list[Any] | None
) -> list[dict[str, Any]]:
    """Merge global options into the first entry of the prior schema list."""
    obj = _state_object(state)
    _flatten_strings(obj, opts, _GLOBAL_STRING_FIELDS)
    obj["insecure_flag"] = opts.insecure_flag
    if opts.round_tripper_count > 0:
        obj["soap_roundtrip_count"] = opts.round_tripper_count
    return [obj]


def flatten_vsphere_network(opts: NetworkVsphereOpts) -> list[dict[str, Any]]:
    """Turn network options into their one-element schema list."""
    obj: dict[str, Any] = {}
    if opts.public_network:
        obj["public_network"] = opts.public_network
    return [obj]


def flatten_vsphere_virtual_center(
    centers: Mapping[str, VirtualCenterConfig] | None, state: list[Any] | None
) -> list[dict[str, Any]]:
    """Turn vCenter settings into a schema list, merging into prior entries by position."""
    if not centers:
        return []
    prior = state or []
    out = []
    for index, (name, center) in enumerate(centers.items()):
        obj: dict[str, Any] = prior[index] if index < len(prior) else {}
        obj["name"] = name
        _flatten_strings(obj, center, _CENTER_STRING_FIELDS)
        if center.round_tripper_count > 0:
            obj["soap_roundtrip_count"] = center.round_tripper_count
        out.append(obj)
    return out


def flatten_vsphere_workspace(opts: WorkspaceVsphereOpts) -> list[dict[str, Any]]:
    """Turn workspace options into their one-element schema list."""
    obj: dict[str, Any] = {}
    _flatten_strings(obj, opts, _WORKSPACE_FIELDS)
    return [obj]


def flatten_vsphere(
    provider: VsphereCloudProvider | None, state: list[Any] | None
) -> list[dict[str, Any]]:
    """Merge vSphere settings into the prior schema list; empty when absent."""
    obj = _state_object(state)
    if provider is None:
        return []

    obj["disk"] = flatten_vsphere_disk(provider.disk)
    prior_global = obj.get("global")
    if not isinstance(prior_global, list):
        prior_global = []
    obj["global"] = flatten_vsphere_global(provider.global_opts, prior_global)
    obj["network"] = flatten_vsphere_network(provider.network)
    prior_centers = obj.get("virtual_center")
    if not isinstance(prior_centers, list):
        prior_centers = []
    obj["virtual_center"] = flatten_vsphere_virtual_center(provider.virtual_center, prior_centers)
    obj["workspace"] = flatten_vsphere_workspace(provider.workspace)
    return [obj]


def expand_vsphere_disk(data: list[Any] | None) -> DiskVsphereOpts:
    """Build disk options from their schema list."""
    opts = DiskVsphereOpts()
    item = _first_item(data)
    if item is None:
        return opts
    _expand_strings(item, opts, (("scsi_controller_type", "scsi_controller_type"),))
    return opts


def expand_vsphere_global(data: list[Any] | None) -> GlobalVsphereOpts:
    """Build global options from their schema list."""
    opts = GlobalVsphereOpts()
    item = _first_item(data)
    if item is None:
        return opts
    _expand_strings(item, opts, _GLOBAL_STRING_FIELDS)
    insecure = item.get("insecure_flag")
    if isinstance(insecure, bool):
        opts.insecure_flag = insecure
    count = item.get("soap_roundtrip_count")
    if _positive_int(count):
        opts.round_tripper_count = count
    return opts


def expand_vsphere_network(data: list[Any] | None) -> NetworkVsphereOpts:
    """Build network options from their schema list."""
    opts = NetworkVsphereOpts()
    item = _first_item(data)
    if item is None:
        return opts
    _expand_strings(item, opts, (("public_network", "public_network"),))
    return opts


def expand_vsphere_virtual_center(data: list[Any] | None) -> dict[str, VirtualCenterConfig]:
    """Build vCenter settings keyed by name from their schema list.

    Raises KeyError when an entry has no name and TypeError when it is not a string.
    """
    if not data or data[0] is None:
        return {}
    centers: dict[str, VirtualCenterConfig] = {}
    for item in data:
        name = item["name"]
        if not isinstance(name, str):
            raise TypeError(f"virtual center name must be a string, got {type(name).__name__}")
        center = VirtualCenterConfig()
        _expand_strings(item, center, _CENTER_STRING_FIELDS)
        count = item.get("soap_roundtrip_count")
        if _positive_int(count):
            center.round_tripper_count = count
        centers[name] = center
    return centers


def expand_vsphere_workspace(data: list[Any] | None) -> WorkspaceVsphereOpts:
    """Build workspace options from their schema list."""
    opts = WorkspaceVsphereOpts()
    item = _first_item(data)
    if item is None:
        return opts
    _expand_strings(item, opts, _WORKSPACE_FIELDS)
    return opts


def expand_vsphere(data: list[Any] | None) -> VsphereCloudProvider:
    """Build vSphere settings from their schema list."""
    provider = VsphereCloudProvider()
    item = _first_item(data)
    if item is None:
        return provider

    sections = (
        ("disk", "disk", expand_vsphere_disk),
        ("global", "global_opts", expand_vsphere_global),
        ("network", "network", expand_vsphere_network),
        ("virtual_center", "virtual_center", expand_vsphere_virtual_center),
        ("workspace", "workspace", expand_vsphere_workspace),
    )
    for key, attr, expand in sections:
        value = item.get(key)
        if isinstance(value, list) and value:
            setattr(provider, attr, expand(value))
    return provider