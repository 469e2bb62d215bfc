import os
import logging
from functools import wraps
from botocore.exceptions import BotoCoreError, ClientError
from tf_aws_handlers.errors import AwsApiError

# Configure logging
logger = logging.getLogger()
logger.setLevel(os.environ.get('LOG_LEVEL', 'INFO').upper())

def error_handler(func=None, expected_codes=()):
    """
    Decorator for consistent error handling across AWS service calls.

    botocore errors are logged and re-raised as AwsApiError carrying the
    name of the wrapped call, so callers never see raw SDK exceptions.
    Error codes listed in expected_codes are ones the caller handles as a
    normal outcome; they are logged as warnings instead of errors.

    Usable bare (@error_handler) or with arguments
    (@error_handler(expected_codes=(...))).

    Args:
        func: The function to wrap with error handling
        expected_codes (tuple): AWS error codes the caller handles

    Returns:
        The wrapped function with error handling
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (ClientError, BotoCoreError) as e:
                error = AwsApiError(func.__name__, e)
                if error.is_code(*expected_codes):
                    logger.warning(f"[EXPECTED_ERROR] {func.__name__} returned {error.code}: {str(e)}")
                else:
                    logger.error(f"[ERROR] Error in {func.__name__}: {str(e)}")
                raise error from e
        return wrapper

    if func is not None:
        return decorator(func)
    return decorator
