import copy

import pytest

from rkeconfig.cloud_provider_aws import (
    AWSCloudProvider,
    GlobalAwsOpts,
    ServiceOverride,
    expand_aws,
    expand_aws_global,
    expand_aws_service_override,
    flatten_aws,
    flatten_aws_global,
    flatten_aws_service_override,
)


def global_conf():
    return GlobalAwsOpts(
        disable_security_group_ingress=True,
        disable_strict_zone_check=True,
        elb_security_group="elb_group",
        kubernetes_cluster_id="k8s_id",
        kubernetes_cluster_tag="k8s_tag",
        role_arn="role_arn",
        route_table_id="route_table_id",
        subnet_id="subnet_id",
        vpc="vpc",
        zone="zone",
    )


GLOBAL_DATA = [
    {
        "disable_security_group_ingress": True,
        "disable_strict_zone_check": True,
        "elb_security_group": "elb_group",
        "kubernetes_cluster_id": "k8s_id",
        "kubernetes_cluster_tag": "k8s_tag",
        "role_arn": "role_arn",
        "route_table_id": "route_table_id",
        "subnet_id": "subnet_id",
        "vpc": "vpc",
        "zone": "zone",
    }
]


def override_conf():
    return {
        "service": ServiceOverride(
            region="region",
            service="service",
            signing_method="signing_method",
            signing_name="signing_name",
            signing_region="signing_region",
            url="url",
        )
    }


OVERRIDE_DATA = [
    {
        "region": "region",
        "service": "service",
        "signing_method": "signing_method",
        "signing_name": "signing_name",
        "signing_region": "signing_region",
        "url": "url",
    }
]


def aws_conf():
    return AWSCloudProvider(global_opts=global_conf(), service_override=override_conf())


AWS_DATA = [{"global": GLOBAL_DATA, "service_override": OVERRIDE_DATA}]


def test_flatten_global():
    assert flatten_aws_global(global_conf()) == GLOBAL_DATA


def test_flatten_service_override():
    assert flatten_aws_service_override(override_conf()) == OVERRIDE_DATA


def test_flatten_aws():
    assert flatten_aws(aws_conf()) == AWS_DATA


def test_expand_global():
    assert expand_aws_global(copy.deepcopy(GLOBAL_DATA)) == global_conf()


def test_expand_service_override():
    assert expand_aws_service_override(copy.deepcopy(OVERRIDE_DATA)) == override_conf()


def test_expand_aws():
    assert expand_aws(copy.deepcopy(AWS_DATA)) == aws_conf()


def test_flatten_none_provider_is_empty():
    assert flatten_aws(None) == []


def test_flatten_default_global_keeps_only_bools():
    assert flatten_aws_global(GlobalAwsOpts()) == [
        {"disable_security_group_ingress": False, "disable_strict_zone_check": False}
    ]


def test_flatten_without_overrides_omits_key():
    assert flatten_aws(AWSCloudProvider()) == [
        {
            "global": [
                {
                    "disable_security_group_ingress": False,
                    "disable_strict_zone_check": False,
                }
            ]
        }
    ]


def test_flatten_empty_overrides():
    assert flatten_aws_service_override({}) == []
    assert flatten_aws_service_override(None) == []


@pytest.mark.parametrize("data", [None, [], [None]])
def test_expand_empty_inputs(data):
    assert expand_aws(data) == AWSCloudProvider()
    assert expand_aws_global(data) == GlobalAwsOpts()
    assert expand_aws_service_override(data) == {}


def test_expand_override_without_service_raises():
    with pytest.raises(KeyError):
        expand_aws_service_override([{"region": "region"}])


def test_expand_override_keys_by_service():
    result = expand_aws_service_override(
        [{"service": "ec2", "url": "u1"}, {"service": "elb", "region": "r2"}]
    )
    assert result == {
        "ec2": ServiceOverride(service="ec2", url="u1"),
        "elb": ServiceOverride(service="elb", region="r2"),
    }