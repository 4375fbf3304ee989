import os
import logging
from utils import logger

SDK_LOGGERS = ('boto3', 'botocore')


def _is_true(value):
    return (value or '').strip().lower() == 'true'


class Config:
    """Centralized configuration management"""

    def __init__(self):
        """Initialize configuration from environment variables"""
        # SAM local runs are always verbose
        self.verbose = _is_true(os.environ.get('VERBOSE')) or _is_true(os.environ.get('AWS_SAM_LOCAL'))
        self.log_level = logging.DEBUG if self.verbose else logging.INFO

    def configure_logging(self):
        """Apply the log level to the function logger and the AWS SDK loggers."""
        logger.setLevel(self.log_level)
        if self.verbose:
            for name in SDK_LOGGERS:
                logging.getLogger(name).setLevel(logging.DEBUG)
            logger.debug("[CONFIG] Verbose logging enabled")
