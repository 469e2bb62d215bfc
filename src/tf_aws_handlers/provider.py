from tf_aws_handlers import ecs_capacity_provider, route53_vpc_association_authorization
from tf_aws_handlers.common import logger
from tf_aws_handlers.errors import HandlerError, UnsupportedOperationError
from tf_aws_handlers.resource_data import ResourceData
from tf_aws_handlers.result import OUTCOME_REMOVED, OperationResult

OPERATIONS = ('create', 'read', 'update', 'delete', 'import')


class Resource:
    """A resource type: its schema and lifecycle handlers."""

    def __init__(self, type_name, schema, create, read, update=None, delete=None, importer=None):
        """
        Initialize resource definition.

        Args:
            type_name (str): Resource type name, e.g. 'aws_ecs_capacity_provider'
            schema (dict): Field declarations
            create, read (callable): Required handlers taking (data, context)
            update, delete, importer (callable, optional): Optional handlers
        """
        self.type_name = type_name
        self.schema = schema
        self.handlers = {
            'create': create,
            'read': read,
            'update': update,
            'delete': delete,
            'import': importer,
        }

    def supports(self, operation):
        return self.handlers.get(operation) is not None

    def requires_replacement(self, data):
        """
        List force-new attributes whose configured value differs from state.

        Args:
            data (ResourceData): Resource data holding prior state and new config

        Returns:
            list: Names of changed force-new attributes
        """
        return [name for name, field in self.schema.items() if field.force_new and data.has_change(name)]

    def run(self, operation, data, context):
        handler = self.handlers.get(operation)
        if handler is None:
            raise UnsupportedOperationError(f"{self.type_name} does not support {operation}")
        return handler(data, context)


RESOURCES = {
    route53_vpc_association_authorization.TYPE_NAME: Resource(
        route53_vpc_association_authorization.TYPE_NAME,
        route53_vpc_association_authorization.SCHEMA,
        create=route53_vpc_association_authorization.create,
        read=route53_vpc_association_authorization.read,
        delete=route53_vpc_association_authorization.delete,
    ),
    ecs_capacity_provider.TYPE_NAME: Resource(
        ecs_capacity_provider.TYPE_NAME,
        ecs_capacity_provider.SCHEMA,
        create=ecs_capacity_provider.create,
        read=ecs_capacity_provider.read,
        update=ecs_capacity_provider.update,
        delete=ecs_capacity_provider.delete,
        importer=ecs_capacity_provider.import_state,
    ),
}


def get_resource(type_name):
    try:
        return RESOURCES[type_name]
    except KeyError:
        raise UnsupportedOperationError(f"unknown resource type {type_name!r}") from None


def run_operation(type_name, operation, context, id='', config=None, state=None):
    """
    Run one lifecycle operation of a resource.

    Handler errors never escape: they are returned as a failed result that
    still carries whatever id and state the handler had set, so a resource
    created remotely stays tracked even if the follow-up read failed.

    Args:
        type_name (str): Resource type name
        operation (str): One of OPERATIONS
        context (ExecutionContext): Execution context
        id (str): Stored identifier (the short name for import)
        config (dict, optional): Raw configuration
        state (dict, optional): Prior state

    Returns:
        OperationResult: The outcome of the operation
    """
    data = None
    try:
        if operation not in OPERATIONS:
            raise UnsupportedOperationError(f"unknown operation {operation!r}")
        resource = get_resource(type_name)
        if not resource.supports(operation):
            raise UnsupportedOperationError(f"{type_name} does not support {operation}")

        data = ResourceData(resource.schema, id=id, config=config, state=state)
        if operation in ('read', 'delete') and not data.id:
            # already dropped from state
            logger.info(f"[OPERATION_SKIPPED] {operation} {type_name}: resource is not tracked")
            return OperationResult.success(operation, data, OUTCOME_REMOVED)

        logger.info(f"[OPERATION_START] {operation} {type_name} {data.id}")
        outcome = resource.run(operation, data, context)
    except HandlerError as e:
        logger.error(f"[OPERATION_FAILED] {operation} {type_name}: {e}")
        return OperationResult.failure(operation, e, data)

    logger.info(f"[OPERATION_COMPLETE] {operation} {type_name}: {outcome}")
    return OperationResult.success(operation, data, outcome)
