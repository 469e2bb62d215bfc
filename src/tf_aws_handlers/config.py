import os
from typing import Dict, Any

class Config:
    """
    Centralized configuration for the resource handlers.
    Configuration can be overridden using environment variables.
    """

    # AWS context. Empty values are resolved from the boto3 session.
    AWS_REGION = ""
    AWS_PARTITION = ""
    AWS_ACCOUNT_ID = ""

    # Logging
    LOG_LEVEL = "INFO"

    # Tags with this key prefix are managed by AWS and never written to state
    IGNORE_TAG_PREFIX = "aws:"

    @classmethod
    def get_config(cls) -> Dict[str, Any]:
        """
        Returns the configuration with environment variable overrides.

        Environment variables take precedence over default values.
        AWS_REGION falls back to AWS_DEFAULT_REGION.
        """
        config = {}

        # Get all class variables (excluding methods and private variables)
        for key in dir(cls):
            if not key.startswith('_') and not callable(getattr(cls, key)):
                # Check if environment variable override exists
                env_value = os.environ.get(key)
                if env_value is not None:
                    config[key] = env_value
                else:
                    config[key] = getattr(cls, key)

        if not config['AWS_REGION']:
            config['AWS_REGION'] = os.environ.get('AWS_DEFAULT_REGION', '')

        return config
