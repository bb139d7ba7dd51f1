"""
Human-readable output for App Runner commands.
"""

import re
from datetime import datetime, timezone
from typing import List

import click

from .services.models import ServiceDetail, ServiceSummary

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
CPU_UNITS_PER_CORE = 1024

_VCPU_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)\s*vCPU$", re.I)


def format_cpus(cpu) -> int:
    """
    Convert an App Runner CPU value to whole cores.

    Accepts provider units ("2048") or the vCPU form ("2 vCPU");
    anything else counts as 0.
    """
    text = str(cpu).strip()
    if text.isdigit():
        return int(text) // CPU_UNITS_PER_CORE

    match = _VCPU_PATTERN.match(text)
    if match:
        return int(float(match.group(1)))
    return 0


def format_timestamp(created_at: datetime) -> str:
    """Format a datetime in UTC as YYYY-MM-DD HH:MM:SS."""
    if created_at.tzinfo is not None:
        created_at = created_at.astimezone(timezone.utc)
    return created_at.strftime(TIMESTAMP_FORMAT)


def service_line(service: ServiceSummary) -> str:
    return f"{service.name} - https://{service.require_url()}"


def detail_lines(detail: ServiceDetail) -> List[str]:
    """Render a service description, one field per line."""
    lines = [
        f"Service Name: {detail.name}",
        f"Service ARN: {detail.arn}",
    ]
    if detail.status:
        lines.append(f"Status: {detail.status}")
    lines.extend([
        f"Service URL: https://{detail.url}:{detail.port}",
        f"System Resources: {format_cpus(detail.cpu)} CPUs / {detail.memory}MB RAM",
        f"Service created at: {format_timestamp(detail.created_at)} UTC",
    ])
    return lines


def print_regions(supported: List[str], current: str) -> None:
    click.echo("Supported Regions for AWS AppRunner are:")
    for region in supported:
        click.echo(region)
    click.echo("---")
    click.echo(f"Your current profile is configured to use {current}")


def print_unsupported_region(region: str) -> None:
    click.echo(f"{region} is not currently supported by AWS AppRunner")


def print_services(region: str, services: List[ServiceSummary]) -> None:
    lines = [service_line(service) for service in services]
    click.echo(f"AWS App Runner services currently running in {region}")
    click.echo("---")
    for line in lines:
        click.echo(line)


def print_no_services() -> None:
    click.echo("No AWS App Runner services found")


def print_missing_name() -> None:
    click.echo("You must provide a Service Name")


def print_not_found(name: str, region: str) -> None:
    click.echo(f"Service {name} not found in Region {region}")


def print_detail(detail: ServiceDetail) -> None:
    for line in detail_lines(detail):
        click.echo(line)


def print_deleting(service: ServiceSummary, operation_id) -> None:
    click.echo(f"Deleting service {service.name} ({service.arn})")
    if operation_id:
        click.echo(f"Operation ID: {operation_id}")


def print_delete_cancelled() -> None:
    click.echo("Deletion cancelled")
