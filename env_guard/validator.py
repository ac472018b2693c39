"""
ABOUTME: Schema-driven validation of environment variables
ABOUTME: Offers a raising validator for startup checks and a result-returning one for inspection
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional

from .coercion import parse_type_string, validate_value
from .config import snapshot_environment
from .exceptions import EnvValidationError

ERROR_HEADER = "Environment validation failed:"

_RAISING_MISSING_REASON = 'Required environment variable "{key}" is missing'
_RESULT_MISSING_REASON = 'Required: "{key}" is missing'


@dataclass
class ErrorRecord:
    """A single variable that failed validation."""

    key: str
    expected: str
    received: Optional[str]
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass
class ValidationResult:
    """Aggregate outcome of one validation pass."""

    valid: bool
    errors: List[ErrorRecord] = field(default_factory=list)
    values: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [error.to_dict() for error in self.errors],
            "values": dict(self.values),
        }


def format_errors(errors: List[ErrorRecord]) -> str:
    """Build the multi-line failure message listing every failing variable."""
    lines = [f"  • {error.key}: {error.reason}" for error in errors]
    return "\n".join([ERROR_HEADER, *lines])


def _validate_schema(
    schema: Mapping[str, str],
    env: Mapping[str, str],
    missing_reason: str,
) -> tuple[List[ErrorRecord], Dict[str, Any]]:
    """
    Run every schema entry through coercion in schema order.

    Returns the ordered error records and the values of all keys that did
    not fail. Absent optional keys map to None.
    """
    errors: List[ErrorRecord] = []
    values: Dict[str, Any] = {}

    for key, type_str in schema.items():
        spec = parse_type_string(type_str)
        value = env.get(key)

        if not value:
            if spec.optional:
                values[key] = None
            else:
                errors.append(
                    ErrorRecord(
                        key=key,
                        expected=type_str,
                        received=value,
                        reason=missing_reason.format(key=key),
                    )
                )
            continue

        coercion = validate_value(value, spec.base_type)
        if coercion.valid:
            values[key] = coercion.parsed
        else:
            errors.append(
                ErrorRecord(
                    key=key,
                    expected=type_str,
                    received=value,
                    reason=coercion.reason or "Validation failed",
                )
            )

    for error in errors:
        logging.debug(f"Environment variable {error.key} invalid: {error.reason}")
    logging.debug(
        f"Validated {len(schema)} environment variable(s), {len(errors)} error(s)"
    )
    return errors, values


def create_env_validator(
    schema: Mapping[str, str],
    *,
    throw_on_error: bool = True,
    env: Optional[Mapping[str, str]] = None,
    on_error: Optional[Callable[[List[ErrorRecord]], None]] = None,
) -> Dict[str, Any]:
    """
    Validate environment variables against a schema and return their typed values.

    Parameters:
        schema (Mapping[str, str]): Variable name to type descriptor, e.g.
            {"DATABASE_URL": "string", "PORT": "number", "DEBUG": "boolean?"}.
        throw_on_error (bool): Raise EnvValidationError when any variable fails. Defaults to True.
        env (Mapping[str, str], optional): Environment to read from. Defaults to a
            snapshot of os.environ taken at call time.
        on_error (callable, optional): Called once with the full list of ErrorRecord
            before raising, whenever at least one variable failed.

    Returns:
        dict: Parsed values. With throw_on_error=False only the keys that validated are present.

    Raises:
        EnvValidationError: If validation failed and throw_on_error is True.
    """
    if env is None:
        env = snapshot_environment()

    errors, values = _validate_schema(schema, env, _RAISING_MISSING_REASON)

    if errors:
        if on_error is not None:
            on_error(errors)
        if throw_on_error:
            raise EnvValidationError(format_errors(errors), errors)

    return values


def define_env(schema: Mapping[str, str], **options) -> Dict[str, Any]:
    """Declare the environment a module needs; raises on invalid configuration by default."""
    return create_env_validator(schema, **options)


def validate_env(
    schema: Mapping[str, str], env: Optional[Mapping[str, str]] = None
) -> ValidationResult:
    """
    Validate environment variables without raising.

    Parameters:
        schema (Mapping[str, str]): Variable name to type descriptor.
        env (Mapping[str, str], optional): Environment to read from. Defaults to os.environ.

    Returns:
        ValidationResult: valid flag, ordered errors, and values for every key that did not fail.
    """
    if env is None:
        env = snapshot_environment()

    errors, values = _validate_schema(schema, env, _RESULT_MISSING_REASON)
    return ValidationResult(valid=not errors, errors=errors, values=values)
