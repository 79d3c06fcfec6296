import pytest

from rkeconfig.cloud_provider_vsphere import (
    DiskVsphereOpts,
    GlobalVsphereOpts,
    NetworkVsphereOpts,
    VirtualCenterConfig,
    VsphereCloudProvider,
    WorkspaceVsphereOpts,
    expand_vsphere,
    expand_vsphere_disk,
    expand_vsphere_global,
    expand_vsphere_network,
    expand_vsphere_virtual_center,
    expand_vsphere_workspace,
    flatten_vsphere,
    flatten_vsphere_disk,
    flatten_vsphere_global,
    flatten_vsphere_network,
    flatten_vsphere_virtual_center,
    flatten_vsphere_workspace,
)

PASSWORD = "password"


def disk_conf():
    return DiskVsphereOpts(scsi_controller_type="test")


def disk_data():
    return [{"scsi_controller_type": "test"}]


def global_conf():
    password = PASSWORD
    return GlobalVsphereOpts(
        datacenters="auth.terraform.test",
        insecure_flag=True,
        password=password,
        vcenter_port="123",
        user="user",
        round_tripper_count=10,
    )


def global_data():
    return [
        {
            "datacenters": "auth.terraform.test",
            "insecure_flag": True,
            "password": PASSWORD,
            "port": "123",
            "user": "user",
            "soap_roundtrip_count": 10,
        }
    ]


def network_conf():
    return NetworkVsphereOpts(public_network="test")


def network_data():
    return [{"public_network": "test"}]


def virtual_center_conf():
    password = PASSWORD
    return {
        "test": VirtualCenterConfig(
            datacenters="auth.terraform.test",
            password=password,
            vcenter_port="123",
            user="user",
            round_tripper_count=10,
        )
    }


def virtual_center_data():
    return [
        {
            "name": "test",
            "datacenters": "auth.terraform.test",
            "password": PASSWORD,
            "port": "123",
            "user": "user",
            "soap_roundtrip_count": 10,
        }
    ]


def workspace_conf():
    return WorkspaceVsphereOpts(
        datacenter="test",
        folder="folder",
        vcenter_ip="vcenter",
        default_datastore="datastore",
        resource_pool_path="resourcepool",
    )


def workspace_data():
    return [
        {
            "datacenter": "test",
            "folder": "folder",
            "server": "vcenter",
            "default_datastore": "datastore",
            "resourcepool_path": "resourcepool",
        }
    ]


def provider_conf():
    return VsphereCloudProvider(
        disk=disk_conf(),
        global_opts=global_conf(),
        network=network_conf(),
        virtual_center=virtual_center_conf(),
        workspace=workspace_conf(),
    )


def provider_data():
    return [
        {
            "disk": disk_data(),
            "global": global_data(),
            "network": network_data(),
            "virtual_center": virtual_center_data(),
            "workspace": workspace_data(),
        }
    ]


def test_flatten_disk():
    assert flatten_vsphere_disk(disk_conf()) == disk_data()


def test_flatten_global():
    assert flatten_vsphere_global(global_conf(), global_data()) == global_data()


def test_flatten_network():
    assert flatten_vsphere_network(network_conf()) == network_data()


def test_flatten_virtual_center():
    assert flatten_vsphere_virtual_center(virtual_center_conf(), virtual_center_data()) == virtual_center_data()


def test_flatten_virtual_center_empty():
    assert flatten_vsphere_virtual_center({}, virtual_center_data()) == []


def test_flatten_virtual_center_keeps_prior_keys():
    out = flatten_vsphere_virtual_center({"vc": VirtualCenterConfig(user="u")}, [{"extra": "x"}])
    assert out == [{"extra": "x", "name": "vc", "user": "u"}]


def test_flatten_workspace():
    assert flatten_vsphere_workspace(workspace_conf()) == workspace_data()


def test_flatten_vsphere():
    assert flatten_vsphere(provider_conf(), provider_data()) == provider_data()


def test_flatten_vsphere_without_state():
    assert flatten_vsphere(provider_conf(), None) == provider_data()


def test_flatten_vsphere_absent_provider():
    assert flatten_vsphere(None, provider_data()) == []


def test_expand_disk():
    assert expand_vsphere_disk(disk_data()) == disk_conf()


def test_expand_global():
    assert expand_vsphere_global(global_data()) == global_conf()


def test_expand_network():
    assert expand_vsphere_network(network_data()) == network_conf()


def test_expand_virtual_center():
    assert expand_vsphere_virtual_center(virtual_center_data()) == virtual_center_conf()


def test_expand_virtual_center_requires_name():
    with pytest.raises(KeyError):
        expand_vsphere_virtual_center([{"user": "user"}])


def test_expand_workspace():
    assert expand_vsphere_workspace(workspace_data()) == workspace_conf()


def test_expand_vsphere():
    assert expand_vsphere(provider_data()) == provider_conf()


@pytest.mark.parametrize("data", [None, [], [None]])
def test_expand_vsphere_empty(data):
    assert expand_vsphere(data) == VsphereCloudProvider()


def test_round_trip():
    conf = provider_conf()
    assert expand_vsphere(flatten_vsphere(conf, None)) == conf