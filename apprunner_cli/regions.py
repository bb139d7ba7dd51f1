"""
Region resolution and App Runner region support.
"""

import logging
import re
from typing import List

logger = logging.getLogger(__name__)

# Regions where App Runner is available
SUPPORTED_REGIONS: List[str] = [
    "us-east-1",
    "us-east-2",
    "eu-west-1",
    "us-west-2",
    "ap-northeast-1",
]

# Used when no region is configured anywhere in the AWS chain
DEFAULT_REGION = "us-east-1"

_REGION_PATTERN = re.compile(r"[a-z]{2}(?:-[a-z]+)+-\d+")


def normalize_region(descriptor) -> str:
    """
    Extract a bare region code from a region descriptor.

    The descriptor may be a plain code ("us-west-2") or a wrapper whose
    text ends with the code, e.g. 'Region("us-west-2")'.

    Args:
        descriptor: Region descriptor (anything with a string form)

    Returns:
        Bare region code, or the stripped descriptor text when no code is found
    """
    text = str(descriptor).strip()
    matches = _REGION_PATTERN.findall(text)
    if not matches:
        logger.debug(f"No region code found in descriptor {text!r}")
        return text
    return matches[-1]


def resolve_region(provider) -> str:
    """
    Resolve the effective region from a configuration provider.

    Args:
        provider: Object exposing the configured ``region_name``

    Returns:
        Normalized region code
    """
    descriptor = provider.region_name
    if not descriptor:
        logger.info(f"No region configured, falling back to {DEFAULT_REGION}")
        descriptor = DEFAULT_REGION

    region = normalize_region(descriptor)
    logger.debug(f"Resolved region {region}")
    return region


def is_supported(region: str) -> bool:
    """Check a region code against the App Runner allow-list."""
    for supported in SUPPORTED_REGIONS:
        if region == supported:
            return True
    return False
