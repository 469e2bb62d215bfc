import json

from tf_aws_handlers.__main__ import main


def test_cli_import(tmp_path, context, ecs_client, capsys):
    ecs_client.describe_capacity_providers.return_value = {'capacityProviders': [{
        'capacityProviderArn': 'arn:aws:ecs:us-east-1:123456789012:capacity-provider/cp1',
        'name': 'cp1',
    }]}

    exit_code = main(['aws_ecs_capacity_provider', 'import', '--id', 'cp1'], execution_context=context)

    assert exit_code == 0
    output = json.loads(capsys.readouterr().out)
    assert output['outcome'] == 'imported'
    assert output['id'] == 'arn:aws:ecs:us-east-1:123456789012:capacity-provider/cp1'


def test_cli_reads_config_and_state_files(tmp_path, context, route53_client, capsys):
    state_file = tmp_path / 'state.json'
    state_file.write_text(json.dumps({'id': 'Z1:V1', 'zone_id': 'Z1', 'vpc_id': 'V1', 'vpc_region': 'us-west-2'}))

    exit_code = main(
        ['aws_route53_vpc_association_authorization', 'delete', '--state', str(state_file)],
        execution_context=context
    )

    assert exit_code == 0
    route53_client.delete_vpc_association_authorization.assert_called_once_with(
        HostedZoneId='Z1', VPC={'VPCRegion': 'us-west-2', 'VPCId': 'V1'}
    )
    assert json.loads(capsys.readouterr().out)['outcome'] == 'deleted'


def test_cli_failure_exit_code(context, capsys):
    exit_code = main(['aws_route53_vpc_association_authorization', 'read', '--id', 'bad'], execution_context=context)

    assert exit_code == 1
    assert json.loads(capsys.readouterr().out)['error']['type'] == 'IdentifierFormatError'


def test_cli_missing_config_file(tmp_path, context):
    exit_code = main(
        ['aws_ecs_capacity_provider', 'create', '--config', str(tmp_path / 'missing.json')],
        execution_context=context
    )

    assert exit_code == 1
