"""
Tests for vsfinder.core.exceptions module.
"""

from vsfinder.core.exceptions import (
    ConfigError,
    InstallationRecordsError,
    InvalidVersionRequestError,
    VSFinderError,
)


class TestExceptionHierarchy:
    def test_all_derive_from_base(self):
        """Test every exception is a VSFinderError."""
        for exc_type in (ConfigError, InstallationRecordsError, InvalidVersionRequestError):
            assert issubclass(exc_type, VSFinderError)

    def test_records_error_without_source(self):
        error = InstallationRecordsError("Invalid JSON")

        assert str(error) == "Invalid JSON"
        assert error.source == ""

    def test_invalid_version_request_message(self):
        error = InvalidVersionRequestError("latest")

        assert error.value == "latest"
        assert "'latest'" in str(error)
