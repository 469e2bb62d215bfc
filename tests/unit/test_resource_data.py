import pytest

from tf_aws_handlers.ecs_capacity_provider import SCHEMA
from tf_aws_handlers.resource_data import ResourceData

ASG_ARN = 'arn:aws:autoscaling:us-east-1:123456789012:autoScalingGroup:a1b2c3d4:autoScalingGroupName/x'
CONFIG = {'name': 'cp1', 'auto_scaling_group_provider': [{'auto_scaling_group_arn': ASG_ARN}]}


def test_get_prefers_config_then_state_then_zero():
    data = ResourceData(SCHEMA, id='x', config=CONFIG, state={'name': 'old', 'arn': 'arn-from-state'})

    assert data.get('name') == 'cp1'
    assert data.get('arn') == 'arn-from-state'
    assert data.get('tags') == {}


def test_get_omitted_optional_attribute_is_zero_not_prior_state():
    data = ResourceData(SCHEMA, id='x', config=CONFIG, state={'tags': {'team': 'infra'}})

    assert data.get('tags') == {}
    assert data.get_change('tags') == ({'team': 'infra'}, {})
    assert data.has_change('tags')


def test_get_without_config_reads_state():
    data = ResourceData(SCHEMA, id='x', state={'tags': {'team': 'infra'}})

    assert data.get('tags') == {'team': 'infra'}


def test_get_ok():
    data = ResourceData(SCHEMA, config=dict(CONFIG, tags={'a': 'b'}))

    assert data.get_ok('tags') == ({'a': 'b'}, True)
    assert data.get_ok('arn') == ('', False)


def test_get_change_and_has_change():
    data = ResourceData(SCHEMA, id='x', config=dict(CONFIG, tags={'a': 'c'}), state={'tags': {'a': 'b'}})

    assert data.get_change('tags') == ({'a': 'b'}, {'a': 'c'})
    assert data.has_change('tags')
    assert not data.has_change('arn')


def test_set_overrides_config_value():
    data = ResourceData(SCHEMA, id='x', config=CONFIG)

    data.set('name', 'remote-name')

    assert data.get('name') == 'remote-name'

    data.set('tags', {'team': 'infra'})

    assert data.to_state()['tags'] == {'team': 'infra'}


def test_set_rejects_unknown_attribute():
    data = ResourceData(SCHEMA)

    with pytest.raises(KeyError):
        data.set('nope', 1)


def test_values_are_copied():
    state = {'tags': {'a': 'b'}}
    data = ResourceData(SCHEMA, id='x', state=state)

    data.get('tags')['a'] = 'changed'
    state['tags']['a'] = 'changed'

    assert data.get('tags') == {'a': 'b'}


def test_to_state():
    data = ResourceData(SCHEMA, id='x', state={'id': 'ignored', 'name': 'cp1'})

    assert data.to_state() == {
        'id': 'x',
        'name': 'cp1',
        'arn': '',
        'auto_scaling_group_provider': [],
        'tags': {},
    }

    data.set_id('')
    assert data.to_state() == {}
