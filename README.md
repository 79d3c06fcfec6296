# rkeconfig

`rkeconfig` converts sections of an RKE cluster configuration between typed
dataclasses and plain schema data. Schema data is a list holding one
dictionary (or, for keyed collections, one dictionary per entry) of strings,
numbers, booleans, string lists, string maps and nested schema lists.

Each section module has two kinds of function:

* `flatten_*` takes a dataclass and returns schema data. Empty strings, empty
  lists and maps, and numbers that are not positive are left out; most
  booleans are always written.
* `expand_*` takes schema data and returns a dataclass. Missing, empty or
  wrongly typed entries leave the field at its default.

## Installation

```
pip install rkeconfig
```

## Example

```python
from rkeconfig.authorization import AuthzConfig, expand_authorization, flatten_authorization

config = AuthzConfig(mode="rbac", options={"option1": "value1"})
data = flatten_authorization(config)
# [{"mode": "rbac", "options": {"option1": "value1"}}]

assert expand_authorization(data) == config
```

## Sections

| Module | Classes | Functions |
| --- | --- | --- |
| `rkeconfig.authentication` | `AuthnConfig` | `flatten_authentication`, `expand_authentication` |
| `rkeconfig.authorization` | `AuthzConfig` | `flatten_authorization`, `expand_authorization` |
| `rkeconfig.bastion_host` | `BastionHost` | `flatten_bastion_host`, `expand_bastion_host` |
| `rkeconfig.certificates` | `CertificatePKI` | `flatten_certificates` |
| `rkeconfig.dns` | `DNSConfig`, `Nodelocal` | `flatten_dns`, `expand_dns`, `flatten_dns_nodelocal`, `expand_dns_nodelocal` |
| `rkeconfig.ingress` | `IngressConfig` | `flatten_ingress`, `expand_ingress` |
| `rkeconfig.monitoring` | `MonitoringConfig` | `flatten_monitoring`, `expand_monitoring` |
| `rkeconfig.cloud_provider` | `CloudProvider` | `flatten_cloud_provider`, `expand_cloud_provider` |
| `rkeconfig.cloud_provider_aws` | `AWSCloudProvider`, `GlobalAwsOpts`, `ServiceOverride` | `flatten_aws`, `expand_aws`, `flatten_aws_global`, `expand_aws_global`, `flatten_aws_service_override`, `expand_aws_service_override` |
| `rkeconfig.cloud_provider_azure` | `AzureCloudProvider` | `flatten_azure`, `expand_azure` |
| `rkeconfig.cloud_provider_openstack` | `OpenstackCloudProvider`, `GlobalOpenstackOpts`, `LoadBalancerOpenstackOpts`, `BlockStorageOpenstackOpts`, `MetadataOpenstackOpts`, `RouteOpenstackOpts` | `flatten_openstack`, `expand_openstack`, and a `flatten_openstack_*` / `expand_openstack_*` pair for each part |
| `rkeconfig.cloud_provider_vsphere` | `VsphereCloudProvider`, `GlobalVsphereOpts`, `VirtualCenterConfig`, `NetworkVsphereOpts`, `DiskVsphereOpts`, `WorkspaceVsphereOpts` | `flatten_vsphere`, `expand_vsphere`, and a `flatten_vsphere_*` / `expand_vsphere_*` pair for each part |

## Details worth knowing

### Absent sections

* `flatten_bastion_host` returns `None` unless both `address` and `user` are set.
* `flatten_cloud_provider` returns `None` when the provider has no `name`.
* `flatten_dns_nodelocal` returns `None` for `None`; `flatten_dns`,
  `flatten_aws`, `flatten_azure`, `flatten_openstack` and `flatten_vsphere`
  return `[]` for `None`.
* `expand_dns_nodelocal` returns `None` for empty data.
* `IngressConfig.default_backend` is `None` until set, and is only written
  when it is not `None`.

### Keyed collections

AWS service overrides and vSphere virtual centers are dictionaries in the
dataclasses and lists in schema data. `expand_aws_service_override` keys each
entry by its `service` value and `expand_vsphere_virtual_center` by its `name`
value; an entry without that key raises `KeyError`, and a key that is not a
string raises `TypeError`. `flatten_vsphere_virtual_center` writes the
dictionary key back as `name`.

### Field names that differ from schema keys

The `global` schema key maps to the `global_opts` attribute of
`AWSCloudProvider`, `OpenstackCloudProvider` and `VsphereCloudProvider`. In the
vSphere section, `port` maps to `vcenter_port`, `datastore` to
`default_datastore`, `soap_roundtrip_count` to `round_tripper_count`, and in
the workspace `server` maps to `vcenter_ip` and `resourcepool_path` to
`resource_pool_path`.

### Certificates

`flatten_certificates` takes a mapping from certificate id to
`CertificatePKI` and returns a tuple: the certificate of the `kube-ca` entry,
the certificate and key of the `kube-admin` entry, and a list of certificate
entries sorted by id. The two ids are available as `CA_CERT_NAME` and
`KUBE_ADMIN_CERT_NAME`. Missing entries give empty strings.

### Keeping existing state

`flatten_cloud_provider`, `flatten_azure`, `flatten_openstack`,
`flatten_openstack_global`, `flatten_vsphere`, `flatten_vsphere_global` and
`flatten_vsphere_virtual_center` also take the schema data already stored.
They update its dictionaries in place (for virtual centers, by position), so
keys the dataclass leaves empty, such as secrets that are never read back,
keep their stored values:

```python
from rkeconfig.cloud_provider_azure import AzureCloudProvider, flatten_azure

state = [{"aad_client_secret": "secret"}]
result = flatten_azure(AzureCloudProvider(location="westeurope"), state)
# [{"aad_client_secret": "secret", "location": "westeurope",
#   "cloud_provider_backoff": False, "cloud_provider_rate_limit": False,
#   "use_instance_metadata": False, "use_managed_identity_extension": False}]
assert result[0] is state[0]
```

## What this package does not do

It handles the sections listed above only. It has no model of a whole
cluster (nodes, network, services, system images, upgrade strategy), does not
read or write cluster YAML, does not talk to any host or cloud, and has no
command-line tool.

## Running the tests

```
pip install rkeconfig[test]
pytest
```