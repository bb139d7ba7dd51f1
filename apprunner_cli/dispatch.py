"""
Command dispatch for the App Runner CLI.

Each command path is a row in COMMANDS: the flag that selects it, the
preconditions it needs, and the action that produces its exit code.
Rows are checked in order and the first selected one runs.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

import click

from . import present
from .regions import SUPPORTED_REGIONS, is_supported, resolve_region
from .services import ServiceDirectory

logger = logging.getLogger(__name__)

# Exit codes
EXIT_SUCCESS = 0
EXIT_UNSUPPORTED_REGION = 1
EXIT_NO_SERVICES = 2
EXIT_MISSING_NAME = 3
# A describe/delete target that does not exist is reported but not an error
EXIT_NOT_FOUND = EXIT_SUCCESS


@dataclass(frozen=True)
class Options:
    """Parsed command-line options."""
    list: bool = False
    list_regions: bool = False
    describe: bool = False
    delete: bool = False
    name: Optional[str] = None
    yes: bool = False
    region: Optional[str] = None
    profile: Optional[str] = None
    verbose: bool = False


class RunContext:
    """State shared by the command actions of a single run."""

    def __init__(self, options: Options, provider, region: str,
                 directory_factory=ServiceDirectory, confirm: Callable[[str], bool] = click.confirm):
        self.options = options
        self.provider = provider
        self.region = region
        self.directory_factory = directory_factory
        self.confirm = confirm
        self._directory = None

    @property
    def directory(self) -> ServiceDirectory:
        """The service directory, created on first use."""
        if self._directory is None:
            self._directory = self.directory_factory(self.provider, self.region)
        return self._directory


def list_regions(ctx: RunContext) -> int:
    present.print_regions(SUPPORTED_REGIONS, ctx.region)
    return EXIT_SUCCESS


def list_services(ctx: RunContext) -> int:
    services = ctx.directory.list_services()
    if not services:
        present.print_no_services()
        return EXIT_NO_SERVICES

    present.print_services(ctx.region, services)
    return EXIT_SUCCESS


def describe_service(ctx: RunContext) -> int:
    name = ctx.options.name
    service = ctx.directory.find_service(name)
    if service is None:
        present.print_not_found(name, ctx.region)
        return EXIT_NOT_FOUND

    detail = ctx.directory.describe_service(service.require_arn())
    present.print_detail(detail)
    return EXIT_SUCCESS


def delete_service(ctx: RunContext) -> int:
    name = ctx.options.name
    service = ctx.directory.find_service(name)
    if service is None:
        present.print_not_found(name, ctx.region)
        return EXIT_NOT_FOUND

    arn = service.require_arn()
    if not ctx.options.yes and not ctx.confirm(f"Delete App Runner service {name} in {ctx.region}?"):
        present.print_delete_cancelled()
        return EXIT_SUCCESS

    operation_id = ctx.directory.delete_service(arn)
    present.print_deleting(service, operation_id)
    return EXIT_SUCCESS


@dataclass(frozen=True)
class Command:
    """One row of the decision table."""
    flag: str
    action: Callable[[RunContext], int]
    requires_supported_region: bool = True
    requires_name: bool = False


COMMANDS: Tuple[Command, ...] = (
    Command("list_regions", list_regions, requires_supported_region=False),
    Command("list", list_services),
    Command("describe", describe_service, requires_name=True),
    Command("delete", delete_service, requires_name=True),
)


def select_command(options: Options) -> Optional[Command]:
    """Return the first command whose flag is set, or None."""
    for command in COMMANDS:
        if getattr(options, command.flag):
            return command
    return None


def run(options: Options, provider, directory_factory=ServiceDirectory,
        confirm: Callable[[str], bool] = click.confirm) -> int:
    """
    Run one CLI invocation.

    Args:
        options: Parsed options
        provider: Configuration provider (region and SDK clients)
        directory_factory: Builds the service directory from (provider, region)
        confirm: Asks the user a yes/no question

    Returns:
        Process exit code
    """
    region = resolve_region(provider)
    ctx = RunContext(options, provider, region, directory_factory, confirm)
    command = select_command(options)

    if command is not None and not command.requires_supported_region:
        return command.action(ctx)

    if not is_supported(region):
        present.print_unsupported_region(region)
        return EXIT_UNSUPPORTED_REGION

    if command is None:
        logger.debug("No command flag given")
        return EXIT_SUCCESS

    if command.requires_name and options.name is None:
        present.print_missing_name()
        return EXIT_MISSING_NAME

    logger.debug(f"Running {command.flag} in {region}")
    return command.action(ctx)
