# AWS resource handlers
# Create/read/update/delete/import handlers mapping resource configuration to AWS API calls

from tf_aws_handlers.config import Config
from tf_aws_handlers.context import ExecutionContext
from tf_aws_handlers.handler import lambda_handler
from tf_aws_handlers.provider import RESOURCES, Resource, run_operation
from tf_aws_handlers.resource_data import ResourceData
from tf_aws_handlers.result import OperationResult

__all__ = [
    'lambda_handler',
    'Config',
    'ExecutionContext',
    'RESOURCES',
    'Resource',
    'ResourceData',
    'OperationResult',
    'run_operation'
]
