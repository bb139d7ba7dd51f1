"""
Shared fixtures: a fake configuration provider and App Runner payloads.
"""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest

DEFAULT_CREATED_AT = datetime(2022, 3, 4, 5, 6, 7, tzinfo=timezone.utc)


class FakeProvider:
    """Stands in for AwsConfigProvider without touching AWS."""

    def __init__(self, region_name="us-west-2", client=None):
        self.region_name = region_name
        self.apprunner = client if client is not None else MagicMock()
        self.client_calls = []

    def client(self, service_name, region):
        self.client_calls.append((service_name, region))
        return self.apprunner


def summary_item(name, url=None, arn=None):
    return {
        "ServiceName": name,
        "ServiceId": f"{name}-id",
        "ServiceArn": arn or f"arn:aws:apprunner:us-west-2:123456789012:service/{name}/{name}-id",
        "ServiceUrl": url or f"{name}.us-west-2.awsapprunner.com",
        "Status": "RUNNING",
    }


def service_payload(name="web", cpu="2048", memory="4096", port="8080", created_at=None):
    return {
        "ServiceName": name,
        "ServiceId": f"{name}-id",
        "ServiceArn": f"arn:aws:apprunner:us-west-2:123456789012:service/{name}/{name}-id",
        "ServiceUrl": f"{name}.us-west-2.awsapprunner.com",
        "CreatedAt": DEFAULT_CREATED_AT if created_at is None else created_at,
        "Status": "RUNNING",
        "SourceConfiguration": {
            "ImageRepository": {
                "ImageIdentifier": "public.ecr.aws/example/web:latest",
                "ImageRepositoryType": "ECR_PUBLIC",
                "ImageConfiguration": {"Port": port},
            },
        },
        "InstanceConfiguration": {"Cpu": cpu, "Memory": memory},
    }


@pytest.fixture
def provider():
    return FakeProvider()


@pytest.fixture
def make_provider():
    return FakeProvider
