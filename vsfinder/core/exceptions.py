"""
Centralized exception hierarchy for vsfinder.

The selection core never raises for bad installation data; these exceptions
belong to the layers around it (records input, configuration, CLI options).
"""


# ============================================================================
# Base Exceptions
# ============================================================================


class VSFinderError(Exception):
    """Base exception for all vsfinder errors."""

    pass


# ============================================================================
# Input Exceptions
# ============================================================================


class InstallationRecordsError(VSFinderError):
    """Raised when installation records cannot be read or decoded."""

    def __init__(self, message: str, source: str = ""):
        self.source = source
        if source:
            message = f"{message} ({source})"
        super().__init__(message)


class InvalidVersionRequestError(VSFinderError):
    """Raised when a requested msvs_version is neither a year nor a path."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(
            f"Invalid msvs_version: {value!r} (expected 2017, 2019, 2022 or an "
            "installation path)"
        )


# ============================================================================
# Configuration Exceptions
# ============================================================================


class ConfigError(VSFinderError):
    """Configuration parsing or validation error."""

    pass
