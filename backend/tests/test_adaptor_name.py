"""
Tests for adaptor specifier parsing.
"""

import pytest

from adaptor_metadata.utils.adaptor_name import (
    UNKNOWN_ADAPTOR,
    extract_adaptor_name,
    parse_adaptor_specifier,
)


class TestExtractAdaptorName:
    """Tests for extract_adaptor_name."""

    def test_dotted_specifier(self):
        """Test the dotted form returns the name."""
        assert extract_adaptor_name("@openfn.language-dhis2@1.2.3") == "dhis2"

    def test_npm_specifier(self):
        """Test the scoped npm form returns the name."""
        assert extract_adaptor_name("@openfn/language-salesforce@4.0.1") == "salesforce"

    def test_latest_tag(self):
        """Test a dist-tag version is accepted."""
        assert extract_adaptor_name("@openfn/language-http@latest") == "http"

    @pytest.mark.parametrize(
        "specifier",
        ["garbage", "", "@openfn/language-http", "@openfn/language-@1.0.0", "language-http@1"],
    )
    def test_unmatched_returns_unknown(self, specifier):
        """Test specifiers without an adaptor reference fall back to unknown."""
        assert extract_adaptor_name(specifier) == UNKNOWN_ADAPTOR == "unknown"

    def test_first_match_wins(self):
        """Test only the first adaptor reference is used."""
        specifier = "@openfn/language-common@1.0.0 @openfn/language-http@2.0.0"
        assert extract_adaptor_name(specifier) == "common"

    def test_name_stops_at_at_sign(self):
        """Test the name never contains an at sign."""
        assert extract_adaptor_name("x @openfn/language-a-b@@c") == "a-b"


class TestParseAdaptorSpecifier:
    """Tests for parse_adaptor_specifier."""

    def test_name_and_version(self):
        """Test name and version are both extracted."""
        parsed = parse_adaptor_specifier("@openfn/language-dhis2@1.2.3")
        assert parsed is not None
        assert parsed.name == "dhis2"
        assert parsed.version == "1.2.3"
        assert parsed.package == "@openfn/language-dhis2"

    def test_missing_version(self):
        """Test an empty version is reported as None."""
        parsed = parse_adaptor_specifier("@openfn.language-http@")
        assert parsed is not None
        assert parsed.version is None

    def test_no_match(self):
        """Test None is returned when there is no adaptor reference."""
        assert parse_adaptor_specifier("garbage") is None
