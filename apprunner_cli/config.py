"""
AWS configuration and logging setup.

Region and credential resolution is left to the standard boto3 chain
(AWS_REGION, AWS_DEFAULT_REGION, AWS_PROFILE, ~/.aws/config); the
provider below only adds optional per-run overrides.
"""

import logging
import os
import sys
from typing import Optional

import boto3
from botocore.exceptions import BotoCoreError

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_LOG_LEVEL = "APPRUNNER_CLI_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
SDK_LOGGERS = ("boto3", "botocore")


class AwsConfigProvider:
    """Supplies the ambient AWS region and SDK clients."""

    def __init__(self, profile: Optional[str] = None, region: Optional[str] = None, session=None):
        if session is None:
            try:
                session = boto3.session.Session(profile_name=profile, region_name=region)
            except BotoCoreError as e:
                raise ConfigurationError(f"Could not load AWS configuration: {e}") from e
        self.session = session

    @property
    def region_name(self) -> Optional[str]:
        return self.session.region_name

    def client(self, service_name: str, region: str):
        """Create an SDK client for a service in the given region."""
        logger.debug(f"Creating {service_name} client in {region}")
        try:
            return self.session.client(service_name, region_name=region)
        except BotoCoreError as e:
            raise ConfigurationError(f"Could not create {service_name} client: {e}") from e


def get_log_level(verbose: bool = False) -> int:
    """
    Determine the log level for this run.

    Args:
        verbose: Force debug logging

    Returns:
        Numeric logging level
    """
    if verbose:
        return logging.DEBUG

    name = os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


def configure_logging(level: int, sdk: bool = False) -> logging.Logger:
    """
    Send package logs to stderr, keeping stdout for command output.

    Args:
        level: Numeric logging level
        sdk: Also route boto3/botocore logs to the same handler

    Returns:
        The package logger
    """
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, "%Y-%m-%d %H:%M:%S"))
    handler.setLevel(level)

    names = ["apprunner_cli"]
    if sdk:
        names.extend(SDK_LOGGERS)

    for name in names:
        log = logging.getLogger(name)
        for old in list(log.handlers):
            log.removeHandler(old)
        log.addHandler(handler)
        log.setLevel(level)
        log.propagate = False

    return logging.getLogger("apprunner_cli")
