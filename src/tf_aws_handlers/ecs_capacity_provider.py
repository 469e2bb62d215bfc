"""
aws_ecs_capacity_provider

Binds an Auto Scaling group to ECS cluster capacity management. The
capacity provider ARN is the stored id. Only tags can change in place and
the ECS API has no call to delete a capacity provider, so delete only stops
tracking the resource.
"""

from tf_aws_handlers.arn import build_arn
from tf_aws_handlers.common import logger
from tf_aws_handlers.ecs_service import ECSService
from tf_aws_handlers.errors import AwsApiError, IdentifierFormatError, ResourceError
from tf_aws_handlers.result import (
    OUTCOME_CREATED,
    OUTCOME_DETACHED,
    OUTCOME_IMPORTED,
    OUTCOME_READ,
    OUTCOME_REMOVED,
    OUTCOME_UPDATED,
)
from tf_aws_handlers.schema import (
    TYPE_INT,
    TYPE_LIST,
    TYPE_MAP,
    TYPE_STRING,
    Field,
    int_between,
    string_in_slice,
    validate_arn,
)
from tf_aws_handlers.tags import ecs_update_tags, from_ecs_tags, ignore_aws, to_ecs_tags

TYPE_NAME = 'aws_ecs_capacity_provider'

ENABLED_DISABLED = ['ENABLED', 'DISABLED']

MANAGED_SCALING_SCHEMA = {
    'maximum_scaling_step_size': Field(TYPE_INT, optional=True, computed=True, validate=int_between(1, 10000)),
    'minimum_scaling_step_size': Field(TYPE_INT, optional=True, computed=True, validate=int_between(1, 10000)),
    'status': Field(TYPE_STRING, optional=True, computed=True, validate=string_in_slice(ENABLED_DISABLED)),
    'target_capacity': Field(TYPE_INT, optional=True, computed=True, validate=int_between(1, 100)),
}

AUTO_SCALING_GROUP_PROVIDER_SCHEMA = {
    'auto_scaling_group_arn': Field(TYPE_STRING, required=True, validate=validate_arn),
    'managed_termination_protection': Field(
        TYPE_STRING, optional=True, computed=True, validate=string_in_slice(ENABLED_DISABLED)
    ),
    'managed_scaling': Field(TYPE_LIST, optional=True, computed=True, max_items=1, elem=MANAGED_SCALING_SCHEMA),
}

SCHEMA = {
    'name': Field(TYPE_STRING, required=True, force_new=True),
    'arn': Field(TYPE_STRING, computed=True),
    'auto_scaling_group_provider': Field(
        TYPE_LIST, required=True, force_new=True, max_items=1, elem=AUTO_SCALING_GROUP_PROVIDER_SCHEMA
    ),
    'tags': Field(TYPE_MAP, optional=True),
}

# state key -> ManagedScaling request key
_MANAGED_SCALING_FIELDS = [
    ('maximum_scaling_step_size', 'maximumScalingStepSize', 0),
    ('minimum_scaling_step_size', 'minimumScalingStepSize', 0),
    ('status', 'status', ''),
    ('target_capacity', 'targetCapacity', 0),
]


def expand_auto_scaling_group_provider(configured):
    """
    Build the autoScalingGroupProvider request structure.

    Zero or empty leaves are left out so that ECS picks its own defaults,
    and a managed_scaling block without any set leaf is left out entirely.

    Args:
        configured (list): Decoded auto_scaling_group_provider block list

    Returns:
        dict: autoScalingGroupProvider structure for create_capacity_provider
    """
    p = configured[0] if configured else {}
    provider = {'autoScalingGroupArn': p.get('auto_scaling_group_arn', '')}

    mtp = p.get('managed_termination_protection', '')
    if mtp:
        provider['managedTerminationProtection'] = mtp

    scaling_blocks = p.get('managed_scaling') or []
    if scaling_blocks and scaling_blocks[0]:
        ms = scaling_blocks[0]
        managed_scaling = {}
        for key, api_key, zero in _MANAGED_SCALING_FIELDS:
            value = ms.get(key, zero)
            if value != zero:
                managed_scaling[api_key] = value
        if managed_scaling:
            provider['managedScaling'] = managed_scaling

    return provider


def flatten_auto_scaling_group_provider(provider):
    """
    Turn an autoScalingGroupProvider structure into state.

    Every leaf is present, defaulted to its zero value when ECS did not
    return it.

    Args:
        provider (dict): autoScalingGroupProvider from describe_capacity_providers

    Returns:
        list: auto_scaling_group_provider block list
    """
    if not provider:
        return []

    p = {
        'auto_scaling_group_arn': provider.get('autoScalingGroupArn', ''),
        'managed_termination_protection': provider.get('managedTerminationProtection', ''),
        'managed_scaling': [],
    }

    managed_scaling = provider.get('managedScaling')
    if managed_scaling is not None:
        p['managed_scaling'] = [
            {key: managed_scaling.get(api_key, zero) for key, api_key, zero in _MANAGED_SCALING_FIELDS}
        ]

    return [p]


def create(data, context):
    ecs = ECSService(context)

    name = data.get('name')
    tags, _ = data.get_ok('tags')
    tags = ignore_aws(tags, context.ignore_tag_prefix)

    logger.info(f"[CAPACITY_PROVIDER_CREATE] Creating ECS Capacity Provider {name}")
    try:
        provider = ecs.create_capacity_provider(
            name,
            expand_auto_scaling_group_provider(data.get('auto_scaling_group_provider')),
            tags=to_ecs_tags(tags) if tags else None
        )
    except AwsApiError as e:
        raise ResourceError(f"error creating capacity provider: {e}") from e

    logger.debug(f"[CAPACITY_PROVIDER_CREATED] ECS Capacity Provider created: {provider.get('capacityProviderArn')}")
    data.set_id(provider.get('capacityProviderArn', ''))

    if read(data, context) == OUTCOME_REMOVED:
        return OUTCOME_REMOVED
    return OUTCOME_CREATED


def read(data, context):
    ecs = ECSService(context)

    try:
        providers = ecs.describe_capacity_providers([data.id])
    except AwsApiError as e:
        raise ResourceError(f"error reading ECS Capacity Provider ({data.id}): {e}", data.id) from e

    provider = None
    for cp in providers:
        if cp.get('capacityProviderArn') == data.id:
            provider = cp
            break

    if provider is None:
        logger.warning(f"[CAPACITY_PROVIDER_NOT_FOUND] ECS Capacity Provider ({data.id}) not found, removing from state")
        data.set_id('')
        return OUTCOME_REMOVED

    data.set('arn', provider.get('capacityProviderArn', ''))
    data.set('name', provider.get('name', ''))
    data.set('tags', ignore_aws(from_ecs_tags(provider.get('tags')), context.ignore_tag_prefix))
    data.set('auto_scaling_group_provider', flatten_auto_scaling_group_provider(provider.get('autoScalingGroupProvider')))
    return OUTCOME_READ


def update(data, context):
    ecs = ECSService(context)

    if data.has_change('tags'):
        old, new = data.get_change('tags')
        try:
            ecs_update_tags(ecs, data.id, old, new, context.ignore_tag_prefix)
        except AwsApiError as e:
            raise ResourceError(f"error updating ECS Capacity Provider ({data.id}) tags: {e}", data.id) from e

    if read(data, context) == OUTCOME_REMOVED:
        return OUTCOME_REMOVED
    return OUTCOME_UPDATED


def delete(data, context):
    # ECS offers no API to delete a capacity provider; stop tracking it only
    logger.warning(
        f"[CAPACITY_PROVIDER_DETACHED] ECS Capacity Provider ({data.id}) cannot be deleted through the API, "
        f"removing from state only"
    )
    data.set_id('')
    return OUTCOME_DETACHED


def import_state(data, context):
    """
    Import a capacity provider by name.

    Args:
        data (ResourceData): Resource data whose id is the capacity provider name
        context (ExecutionContext): Execution context providing partition, region and account

    Returns:
        str: OUTCOME_IMPORTED, or OUTCOME_REMOVED if the provider does not exist

    Raises:
        IdentifierFormatError: If no name is given
    """
    name = data.id
    if not name:
        raise IdentifierFormatError("capacity provider name is required to import, got ''")
    data.set('name', name)
    data.set_id(build_arn(
        partition=context.partition,
        service='ecs',
        region=context.region,
        account_id=context.account_id,
        resource=f"capacity-provider/{name}",
    ))
    logger.info(f"[CAPACITY_PROVIDER_IMPORT] Importing ECS Capacity Provider {name} as {data.id}")

    if read(data, context) == OUTCOME_REMOVED:
        return OUTCOME_REMOVED
    return OUTCOME_IMPORTED
