"""
Exceptions raised by apprunner-cli.
"""

from typing import Optional


class AppRunnerCliError(Exception):
    """Base class for every error the CLI reports to the user."""


class ConfigurationError(AppRunnerCliError):
    """The AWS profile or region configuration could not be loaded."""


class RemoteCallError(AppRunnerCliError):
    """An App Runner API call failed."""

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"{operation} failed: {message}")


class MalformedResponseError(AppRunnerCliError):
    """A field required by the CLI is missing from an API response."""

    def __init__(self, operation: str, field: str, detail: Optional[str] = None):
        self.operation = operation
        self.field = field
        message = f"Malformed {operation} response: missing {field}"
        if detail:
            message = f"Malformed {operation} response: {field} {detail}"
        super().__init__(message)
