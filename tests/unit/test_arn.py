import pytest

from tf_aws_handlers.arn import build_arn, parse_arn


def test_build_arn():
    assert build_arn('aws', 'ecs', 'us-east-1', '123456789012', 'capacity-provider/cp1') == \
        'arn:aws:ecs:us-east-1:123456789012:capacity-provider/cp1'


def test_parse_arn():
    assert parse_arn('arn:aws-us-gov:autoscaling:us-gov-west-1:123456789012:autoScalingGroup:id:autoScalingGroupName/x') == {
        'partition': 'aws-us-gov',
        'service': 'autoscaling',
        'region': 'us-gov-west-1',
        'account_id': '123456789012',
        'resource': 'autoScalingGroup:id:autoScalingGroupName/x',
    }


def test_parse_global_arn():
    parsed = parse_arn('arn:aws:iam::123456789012:role/r')
    assert parsed['region'] == ''
    assert parsed['resource'] == 'role/r'


@pytest.mark.parametrize('value', [
    '',
    'not-an-arn',
    'arn:aws:ecs',
    'arn:aws:ecs:us-east-1:123:capacity-provider/cp1',
    'arn:aws:ecs:us-east-1:123456789012:',
    None,
])
def test_parse_arn_rejects_malformed(value):
    with pytest.raises(ValueError):
        parse_arn(value)
