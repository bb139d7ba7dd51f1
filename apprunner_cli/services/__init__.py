"""
App Runner service access: models and the service directory client.
"""

from .directory import ServiceDirectory
from .models import ServiceDetail, ServiceSummary

__all__ = [
    "ServiceDirectory",
    "ServiceDetail",
    "ServiceSummary",
]
