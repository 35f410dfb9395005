"""Exception hierarchy for configuration resolution.

Resolution failures inherit from ConfigResolutionError and carry an
error_code naming the failed check category. Failures raised by source
implementations (unreadable or malformed files, missing registry entries)
inherit from ConfigSourceError and reach the caller unchanged.
"""

from enum import Enum


class ResolutionErrorCode(str, Enum):
    """Category of a resolution failure."""

    INVALID_INPUT = "INVALID_INPUT"
    CHAIN_NOT_FOUND = "CHAIN_NOT_FOUND"
    CHAIN_MISMATCH = "CHAIN_MISMATCH"


class ConfigResolutionError(Exception):
    """Base exception for all resolution validation errors."""

    error_code: ResolutionErrorCode = ResolutionErrorCode.INVALID_INPUT

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class InvalidChainInputError(ConfigResolutionError):
    """Raised when the caller-supplied inputs have an unusable shape."""

    error_code = ResolutionErrorCode.INVALID_INPUT


class ChainNotFoundError(ConfigResolutionError):
    """Raised when a chain id is absent from a config, registry or chains map."""

    error_code = ResolutionErrorCode.CHAIN_NOT_FOUND


class ChainMismatchError(ConfigResolutionError):
    """Raised when two loaded sources disagree about a chain id."""

    error_code = ResolutionErrorCode.CHAIN_MISMATCH


class ConfigSourceError(Exception):
    """Base exception for failures inside a config source."""

    def __init__(self, message: str, path: str | None = None) -> None:
        self.message = message
        self.path = path
        super().__init__(message)


class ConfigFileNotFoundError(ConfigSourceError):
    """Raised when a config file or registry entry does not exist."""


class InvalidConfigFileError(ConfigSourceError):
    """Raised when a config file cannot be parsed into its model."""
