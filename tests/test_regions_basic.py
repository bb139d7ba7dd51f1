"""
Basic tests for region resolution and support checks.
"""

from apprunner_cli.regions import (
    DEFAULT_REGION,
    SUPPORTED_REGIONS,
    is_supported,
    normalize_region,
    resolve_region,
)
from conftest import FakeProvider


class TestNormalizeRegion:
    """Test region descriptor normalization."""

    def test_wrapped_descriptor(self):
        """Test extracting the code from a Region("...") descriptor."""
        assert normalize_region('Region("us-west-2")') == "us-west-2"

    def test_bare_code_unchanged(self):
        assert normalize_region("ap-northeast-1") == "ap-northeast-1"

    def test_whitespace_stripped(self):
        assert normalize_region("  eu-west-1\n") == "eu-west-1"

    def test_trailing_code_wins(self):
        """Test that the last code in the descriptor is used."""
        assert normalize_region('Chain(us-east-1) -> Region("eu-west-1")') == "eu-west-1"

    def test_gov_region(self):
        assert normalize_region('Region("us-gov-west-1")') == "us-gov-west-1"

    def test_unrecognized_descriptor(self):
        """Test that text without a region code is returned as-is."""
        assert normalize_region(" moon-base ") == "moon-base"


class TestResolveRegion:
    """Test region resolution through a provider."""

    def test_configured_region(self):
        assert resolve_region(FakeProvider(region_name="us-east-2")) == "us-east-2"

    def test_descriptor_region(self):
        assert resolve_region(FakeProvider(region_name='Region("us-west-2")')) == "us-west-2"

    def test_missing_region_falls_back(self):
        assert resolve_region(FakeProvider(region_name=None)) == DEFAULT_REGION
        assert DEFAULT_REGION == "us-east-1"


class TestIsSupported:
    """Test the App Runner region allow-list."""

    def test_allow_list(self):
        assert SUPPORTED_REGIONS == [
            "us-east-1",
            "us-east-2",
            "eu-west-1",
            "us-west-2",
            "ap-northeast-1",
        ]

    def test_supported_regions(self):
        for region in SUPPORTED_REGIONS:
            assert is_supported(region)

    def test_unsupported_regions(self):
        assert not is_supported("sa-east-1")
        assert not is_supported("")
        assert not is_supported("US-EAST-1")
