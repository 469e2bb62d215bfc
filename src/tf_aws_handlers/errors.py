class HandlerError(Exception):
    """Base exception for resource handler errors."""
    pass


class IdentifierFormatError(HandlerError):
    """Raised when a stored resource identifier cannot be parsed."""
    pass


class ConfigValidationError(HandlerError):
    """Raised when a configuration tree does not match the resource schema."""

    def __init__(self, path, message, value=None):
        self.path = path
        self.value = value
        super().__init__(f"{path}: {message} (got {value!r})")


class RequestValidationError(HandlerError):
    """Raised when a locally built API request fails validation."""

    def __init__(self, operation, request, message):
        self.operation = operation
        self.request = request
        super().__init__(f"Bad input {request!r} for {operation}: {message}")


class UnsupportedOperationError(HandlerError):
    """Raised when a resource does not implement the requested operation."""
    pass


class AwsApiError(HandlerError):
    """
    Raised when an AWS API call fails.

    Wraps botocore's ClientError/BotoCoreError and keeps the name of the
    failed operation and the AWS error code, if any.
    """

    def __init__(self, operation, error):
        self.operation = operation
        self.error = error
        self.code = ''
        response = getattr(error, 'response', None)
        if isinstance(response, dict):
            self.code = response.get('Error', {}).get('Code', '') or ''
        super().__init__(f"{operation} failed: {error}")

    def is_code(self, *codes):
        """
        Check the AWS error code.

        Args:
            *codes (str): Error codes to compare against

        Returns:
            bool: True if the error carries one of the codes
        """
        return self.code in codes


class ResourceError(HandlerError):
    """Raised when a lifecycle operation fails for a specific resource."""

    def __init__(self, message, identifier=None):
        self.identifier = identifier
        super().__init__(message)
