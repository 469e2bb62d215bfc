import pytest

from tf_aws_handlers.ecs_capacity_provider import SCHEMA as CAPACITY_PROVIDER_SCHEMA
from tf_aws_handlers.errors import ConfigValidationError
from tf_aws_handlers.route53_vpc_association_authorization import SCHEMA as AUTHORIZATION_SCHEMA
from tf_aws_handlers.schema import decode_config

ASG_ARN = 'arn:aws:autoscaling:us-east-1:123456789012:autoScalingGroup:a1b2c3d4:autoScalingGroupName/x'


def provider_config(**block):
    block.setdefault('auto_scaling_group_arn', ASG_ARN)
    return {'name': 'cp1', 'auto_scaling_group_provider': [block]}


def test_decode_keeps_only_supplied_fields():
    decoded = decode_config(CAPACITY_PROVIDER_SCHEMA, provider_config(managed_scaling=[{'status': 'ENABLED'}]))

    assert decoded == {
        'name': 'cp1',
        'auto_scaling_group_provider': [{
            'auto_scaling_group_arn': ASG_ARN,
            'managed_scaling': [{'status': 'ENABLED'}],
        }],
    }


def test_decode_treats_none_as_unset():
    decoded = decode_config(AUTHORIZATION_SCHEMA, {'zone_id': 'Z1', 'vpc_id': 'V1', 'vpc_region': None})

    assert decoded == {'zone_id': 'Z1', 'vpc_id': 'V1'}


@pytest.mark.parametrize('config,path', [
    ({'vpc_id': 'V1'}, 'zone_id'),
    ({'zone_id': 'Z1', 'vpc_id': 7}, 'vpc_id'),
    ({'zone_id': 'Z1', 'vpc_id': 'V1', 'vpc': 'x'}, 'vpc'),
])
def test_decode_rejects_bad_authorization_config(config, path):
    with pytest.raises(ConfigValidationError) as excinfo:
        decode_config(AUTHORIZATION_SCHEMA, config)
    assert excinfo.value.path == path


@pytest.mark.parametrize('config,path', [
    ({'auto_scaling_group_provider': [{'auto_scaling_group_arn': ASG_ARN}]}, 'name'),
    ({'name': 'cp1', 'arn': 'arn:aws:ecs:us-east-1:123456789012:capacity-provider/cp1',
      'auto_scaling_group_provider': [{'auto_scaling_group_arn': ASG_ARN}]}, 'arn'),
    ({'name': 'cp1', 'auto_scaling_group_provider': {'auto_scaling_group_arn': ASG_ARN}},
     'auto_scaling_group_provider'),
    ({'name': 'cp1', 'auto_scaling_group_provider': [{'auto_scaling_group_arn': ASG_ARN}] * 2},
     'auto_scaling_group_provider'),
    ({'name': 'cp1', 'auto_scaling_group_provider': [{'auto_scaling_group_arn': 'not-an-arn'}]},
     'auto_scaling_group_provider.0.auto_scaling_group_arn'),
    ({'name': 'cp1', 'auto_scaling_group_provider': [None]},
     'auto_scaling_group_provider.0.auto_scaling_group_arn'),
    (provider_config(managed_termination_protection='enabled'),
     'auto_scaling_group_provider.0.managed_termination_protection'),
    (provider_config(managed_scaling=[{'target_capacity': 0}]),
     'auto_scaling_group_provider.0.managed_scaling.0.target_capacity'),
    (provider_config(managed_scaling=[{'maximum_scaling_step_size': 10001}]),
     'auto_scaling_group_provider.0.managed_scaling.0.maximum_scaling_step_size'),
    (provider_config(managed_scaling=[{'minimum_scaling_step_size': True}]),
     'auto_scaling_group_provider.0.managed_scaling.0.minimum_scaling_step_size'),
    (provider_config(managed_scaling=[{'status': 'ON'}]),
     'auto_scaling_group_provider.0.managed_scaling.0.status'),
    ({'name': 'cp1', 'auto_scaling_group_provider': [{'auto_scaling_group_arn': ASG_ARN}], 'tags': {'a': 1}},
     'tags.a'),
])
def test_decode_rejects_bad_capacity_provider_config(config, path):
    with pytest.raises(ConfigValidationError) as excinfo:
        decode_config(CAPACITY_PROVIDER_SCHEMA, config)
    assert excinfo.value.path == path


def test_decode_error_echoes_value():
    with pytest.raises(ConfigValidationError) as excinfo:
        decode_config(CAPACITY_PROVIDER_SCHEMA, provider_config(managed_scaling=[{'target_capacity': 101}]))
    assert excinfo.value.value == 101
    assert '101' in str(excinfo.value)
    assert '(1 - 100)' in str(excinfo.value)


def test_decode_rejects_non_block_root():
    with pytest.raises(ConfigValidationError):
        decode_config(AUTHORIZATION_SCHEMA, ['zone_id'])
