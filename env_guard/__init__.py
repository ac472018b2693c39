"""
ABOUTME: Environment variable validation against a declared type schema
ABOUTME: Provides typed parsing of string, number, boolean, and JSON variables with aggregated errors
"""

__version__ = "0.1.0"

from .coercion import SUPPORTED_TYPES, Coercion, TypeSpec, parse_type_string, validate_value
from .exceptions import ConfigError, EnvValidationError
from .validator import (
    ErrorRecord,
    ValidationResult,
    create_env_validator,
    define_env,
    format_errors,
    validate_env,
)

__all__ = [
    "create_env_validator",
    "define_env",
    "validate_env",
    "format_errors",
    "parse_type_string",
    "validate_value",
    "ErrorRecord",
    "ValidationResult",
    "Coercion",
    "TypeSpec",
    "SUPPORTED_TYPES",
    "ConfigError",
    "EnvValidationError",
]
