"""
App Runner service directory backed by the boto3 apprunner client.
"""

import logging
from typing import Any, Dict, List, Optional

from botocore.exceptions import BotoCoreError, ClientError

from ..errors import MalformedResponseError, RemoteCallError
from .models import ServiceDetail, ServiceSummary

logger = logging.getLogger(__name__)


class ServiceDirectory:
    """Lists, describes and deletes App Runner services in one region."""

    def __init__(self, provider, region: str):
        self.provider = provider
        self.region = region
        self.apprunner_client = None

    def _get_client(self):
        """Lazy initialization of the App Runner client."""
        if self.apprunner_client is None:
            self.apprunner_client = self.provider.client("apprunner", self.region)
        return self.apprunner_client

    def _call(self, operation: str, method: str, **kwargs) -> Dict[str, Any]:
        client = self._get_client()
        logger.debug(f"Calling {operation} in {self.region}")
        try:
            return getattr(client, method)(**kwargs)
        except ClientError as e:
            error = e.response.get("Error", {})
            message = f"{error.get('Code', 'Unknown')}: {error.get('Message', str(e))}"
            raise RemoteCallError(operation, message) from e
        except BotoCoreError as e:
            raise RemoteCallError(operation, str(e)) from e

    def list_services(self) -> List[ServiceSummary]:
        """
        List every service in the region.

        Follows NextToken until the last page; order is preserved.

        Returns:
            Service summaries in the order returned by the API
        """
        services = []
        kwargs: Dict[str, Any] = {}

        while True:
            response = self._call("ListServices", "list_services", **kwargs)
            for item in response.get("ServiceSummaryList") or []:
                services.append(ServiceSummary.from_api(item))

            next_token = response.get("NextToken")
            if not next_token:
                break
            kwargs["NextToken"] = next_token

        logger.info(f"Found {len(services)} App Runner services in {self.region}")
        return services

    def find_service(self, name: str) -> Optional[ServiceSummary]:
        """Return the first service whose name matches exactly, or None."""
        for service in self.list_services():
            if service.name == name:
                return service
        logger.info(f"Service {name} not found in {self.region}")
        return None

    def describe_service(self, arn: str) -> ServiceDetail:
        """Fetch the full description of a service by ARN."""
        response = self._call("DescribeService", "describe_service", ServiceArn=arn)
        service = response.get("Service")
        if not service:
            raise MalformedResponseError("DescribeService", "Service")
        return ServiceDetail.from_api(service)

    def delete_service(self, arn: str) -> Optional[str]:
        """
        Delete a service by ARN.

        Args:
            arn: Service ARN

        Returns:
            The asynchronous operation ID, when the API returns one
        """
        logger.info(f"Deleting App Runner service {arn}")
        response = self._call("DeleteService", "delete_service", ServiceArn=arn)
        if not response.get("Service"):
            logger.warning(f"DeleteService response for {arn} has no Service description")
        return response.get("OperationId")
