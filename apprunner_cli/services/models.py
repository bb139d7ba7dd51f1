"""
Data models for App Runner services.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..errors import MalformedResponseError


def _require(data: Dict[str, Any], key: str, operation: str, path: str = "") -> Any:
    """Return ``data[key]``, raising MalformedResponseError when it is absent."""
    field = f"{path}.{key}" if path else key
    if not isinstance(data, dict):
        raise MalformedResponseError(operation, field)
    value = data.get(key)
    if value is None or value == "":
        raise MalformedResponseError(operation, field)
    return value


def to_utc(value: Any, operation: str = "DescribeService") -> datetime:
    """
    Convert an API timestamp to an aware UTC datetime.

    boto3 returns datetimes; raw epoch seconds are accepted too.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, tz=timezone.utc)
    raise MalformedResponseError(operation, "CreatedAt", f"has unexpected value {value!r}")


@dataclass(frozen=True)
class ServiceSummary:
    """A service as returned by ListServices."""
    name: str
    url: Optional[str] = None
    arn: Optional[str] = None
    service_id: Optional[str] = None
    status: Optional[str] = None

    @classmethod
    def from_api(cls, item: Dict[str, Any]) -> "ServiceSummary":
        # URL and ARN are checked only where a command uses them
        return cls(
            name=_require(item, "ServiceName", "ListServices"),
            url=item.get("ServiceUrl") or None,
            arn=item.get("ServiceArn") or None,
            service_id=item.get("ServiceId"),
            status=item.get("Status"),
        )

    def require_url(self) -> str:
        if not self.url:
            raise MalformedResponseError("ListServices", "ServiceUrl")
        return self.url

    def require_arn(self) -> str:
        if not self.arn:
            raise MalformedResponseError("ListServices", "ServiceArn")
        return self.arn


@dataclass(frozen=True)
class ServiceDetail:
    """Full description of one service as returned by DescribeService."""
    name: str
    arn: str
    url: str
    port: str
    cpu: str  # "2048" (1024 per vCPU) or "2 vCPU"
    memory: str  # MB
    created_at: datetime
    status: Optional[str] = None

    @classmethod
    def from_api(cls, service: Dict[str, Any]) -> "ServiceDetail":
        operation = "DescribeService"
        source = _require(service, "SourceConfiguration", operation)
        resources = _require(service, "InstanceConfiguration", operation)

        return cls(
            name=_require(service, "ServiceName", operation),
            arn=_require(service, "ServiceArn", operation),
            url=_require(service, "ServiceUrl", operation),
            port=_service_port(source, operation),
            cpu=str(_require(resources, "Cpu", operation, "InstanceConfiguration")),
            memory=str(_require(resources, "Memory", operation, "InstanceConfiguration")),
            created_at=to_utc(_require(service, "CreatedAt", operation), operation),
            status=service.get("Status"),
        )


def _service_port(source: Dict[str, Any], operation: str) -> str:
    """Find the container port for image- or code-sourced services."""
    image_repository = source.get("ImageRepository")
    if image_repository is not None:
        path = "SourceConfiguration.ImageRepository"
        image_config = _require(image_repository, "ImageConfiguration", operation, path)
        return str(_require(image_config, "Port", operation, f"{path}.ImageConfiguration"))

    code_repository = source.get("CodeRepository")
    if code_repository is not None:
        path = "SourceConfiguration.CodeRepository"
        code_config = _require(code_repository, "CodeConfiguration", operation, path)
        path = f"{path}.CodeConfiguration"
        values = _require(code_config, "CodeConfigurationValues", operation, path)
        return str(_require(values, "Port", operation, f"{path}.CodeConfigurationValues"))

    raise MalformedResponseError(operation, "SourceConfiguration.ImageRepository")
