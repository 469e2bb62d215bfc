from botocore.exceptions import ClientError


def client_error(code, operation, message='error'):
    return ClientError({'Error': {'Code': code, 'Message': message}}, operation)
