import os
from typing import Dict, Any

class Config:
    """
    Centralized configuration for the ECS Auto Draining CDK Stack.
    Configuration can be overridden using environment variables.
    """

    # Lambda Configuration
    LAMBDA_TIMEOUT_SECONDS = 60
    LAMBDA_MEMORY_SIZE = 128
    VERBOSE = "true"
    LOG_RETENTION = "ONE_YEAR"

    # Step Functions Configuration
    POLL_INTERVAL_SECONDS = 30
    STATE_MACHINE_TIMEOUT_SECONDS = 7200

    @classmethod
    def get_config(cls) -> Dict[str, Any]:
        """
        Returns the configuration with environment variable overrides.

        Environment variables take precedence over default values.
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

        return config
