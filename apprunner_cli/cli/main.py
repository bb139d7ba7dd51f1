"""Main CLI entrypoint for apprunner-cli."""

import logging
import sys

import click

from .. import __version__
from ..config import AwsConfigProvider, configure_logging, get_log_level
from ..dispatch import Options, run
from ..errors import AppRunnerCliError

logger = logging.getLogger(__name__)


@click.command()
@click.option('-l', '--list', 'list_', is_flag=True, help='List App Runner services')
@click.option('-L', '--list-regions', is_flag=True, help='List supported AWS Regions for App Runner')
@click.option('-d', '--desc', 'describe', is_flag=True, help='Describe App Runner service')
@click.option('--delete', is_flag=True, help='Delete App Runner service')
@click.option('-n', '--name', help='App Runner service name')
@click.option('-y', '--yes', is_flag=True, help='Skip the delete confirmation prompt')
@click.option('-r', '--region', help='AWS region (overrides the configured region)')
@click.option('-p', '--profile', help='AWS named profile')
@click.option('-v', '--verbose', is_flag=True, help='Enable debug logging on stderr')
@click.version_option(version=__version__)
@click.pass_context
def main(ctx, list_, list_regions, describe, delete, name, yes, region, profile, verbose):
    """Query and manage AWS App Runner services."""
    ctx.ensure_object(dict)
    configure_logging(get_log_level(verbose), sdk=verbose)

    options = Options(
        list=list_,
        list_regions=list_regions,
        describe=describe,
        delete=delete,
        name=name,
        yes=yes,
        region=region,
        profile=profile,
        verbose=verbose,
    )

    try:
        provider = ctx.obj.get('provider') or AwsConfigProvider(profile=profile, region=region)
        exit_code = run(options, provider)
    except AppRunnerCliError as e:
        logger.debug("Command failed", exc_info=True)
        raise click.ClickException(str(e))

    sys.exit(exit_code)


if __name__ == '__main__':
    main()
