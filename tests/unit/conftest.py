from unittest import mock

import pytest

from tf_aws_handlers.context import ExecutionContext


@pytest.fixture
def route53_client():
    return mock.MagicMock()


@pytest.fixture
def ecs_client():
    return mock.MagicMock()


@pytest.fixture
def context(route53_client, ecs_client):
    return ExecutionContext(
        region='us-east-1',
        partition='aws',
        account_id='123456789012',
        clients={'route53': route53_client, 'ecs': ecs_client},
    )
