import re

ARN_PATTERN = re.compile(
    r'^arn:(?P<partition>[\w-]+):(?P<service>[a-zA-Z0-9\-]+):'
    r'(?P<region>[a-z]{2}(-gov)?-[a-z]+-\d{1})?:(?P<account_id>\d{12})?:(?P<resource>.+)$'
)


def build_arn(partition, service, region, account_id, resource):
    """
    Build an ARN string.

    Args:
        partition (str): AWS partition, e.g. 'aws'
        service (str): Service namespace, e.g. 'ecs'
        region (str): Region, may be empty for global services
        account_id (str): Account id, may be empty
        resource (str): Resource part, e.g. 'capacity-provider/cp1'

    Returns:
        str: The ARN
    """
    return f"arn:{partition}:{service}:{region}:{account_id}:{resource}"


def parse_arn(arn):
    """
    Split an ARN into its components.

    Args:
        arn (str): ARN to parse

    Returns:
        dict: partition, service, region, account_id and resource

    Raises:
        ValueError: If the string is not a well-formed ARN
    """
    if not isinstance(arn, str) or not arn.startswith('arn:'):
        raise ValueError(f"{arn!r} does not start with 'arn:'")
    match = ARN_PATTERN.match(arn)
    if match is None:
        raise ValueError(f"{arn!r} is not a valid ARN")
    return {
        'partition': match.group('partition'),
        'service': match.group('service'),
        'region': match.group('region') or '',
        'account_id': match.group('account_id') or '',
        'resource': match.group('resource'),
    }
