"""
ABOUTME: Custom exception classes for environment validation
ABOUTME: Provides error types for configuration problems and failed validation passes
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .validator import ErrorRecord


class ConfigError(Exception):
    """Configuration validation error."""

    pass


class EnvValidationError(ConfigError):
    """One or more environment variables failed validation.

    The individual failures are kept on ``errors`` as ErrorRecord instances
    so callers can inspect them without parsing the message.
    """

    def __init__(self, message: str = "", errors: list["ErrorRecord"] | None = None):
        super().__init__(message)
        self.errors: list["ErrorRecord"] = list(errors) if errors else []
