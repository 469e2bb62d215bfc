import json
from tf_aws_handlers.common import logger
from tf_aws_handlers.config import Config
from tf_aws_handlers.context import ExecutionContext
from tf_aws_handlers.errors import AwsApiError, HandlerError, ResourceError
from tf_aws_handlers.provider import OPERATIONS, RESOURCES, run_operation
from tf_aws_handlers.result import OperationResult

def validate_operation_event(event):
    """
    Validates that the event describes a resource operation.

    Args:
        event (dict): The event to validate

    Returns:
        bool: True if valid event, False otherwise
    """
    logger.info("[EVENT_VALIDATION] Validating resource type and operation")
    if event.get('resource_type') not in RESOURCES:
        logger.error(f"[EVENT_VALIDATION_FAILED] Unsupported resource type: {event.get('resource_type')}")
        return False

    if event.get('operation') not in OPERATIONS:
        logger.error(f"[EVENT_VALIDATION_FAILED] Unsupported operation: {event.get('operation')}")
        return False

    for key in ('config', 'state'):
        if event.get(key) is not None and not isinstance(event[key], dict):
            logger.error(f"[EVENT_VALIDATION_FAILED] {key} must be an object")
            return False

    logger.info("[EVENT_VALIDATION_SUCCESS] Resource type and operation are valid")
    return True

def lambda_handler(event, context, execution_context=None):
    """
    Lambda handler running one resource operation.

    Args:
        event (dict): {'resource_type', 'operation', 'id', 'config', 'state'}
        context (LambdaContext): Lambda context
        execution_context (ExecutionContext, optional): AWS context, built from
            Config when not given

    Returns:
        dict: Response with the serialized OperationResult as body
    """
    logger.info('[LAMBDA_START] Resource handler invoked')
    logger.info(f"[EVENT_RECEIVED] {event.get('operation')} {event.get('resource_type')} {event.get('id', '')}")

    if not validate_operation_event(event):
        return {
            'statusCode': 400,
            'body': json.dumps({'ok': False, 'error': {'type': 'InvalidEvent', 'message': 'Unsupported resource type or operation'}})
        }

    if execution_context is None:
        config = Config.get_config()
        logger.setLevel(config['LOG_LEVEL'].upper())
        try:
            execution_context = ExecutionContext.from_config(config)
        except HandlerError as e:
            logger.error(f"[CONTEXT_FAILED] Could not resolve the AWS execution context: {e}")
            result = OperationResult.failure(event['operation'], e)
            return {
                'statusCode': 500,
                'body': json.dumps(result.to_dict())
            }

    result = run_operation(
        event['resource_type'],
        event['operation'],
        execution_context,
        id=event.get('id') or '',
        config=event.get('config'),
        state=event.get('state')
    )

    if result.ok:
        status_code = 200
    elif isinstance(result.error, (AwsApiError, ResourceError)):
        status_code = 500
    else:
        status_code = 400

    logger.info(f"[LAMBDA_COMPLETE] Resource handler completed with status {status_code}")
    return {
        'statusCode': status_code,
        'body': json.dumps(result.to_dict())
    }
