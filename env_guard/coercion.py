"""
ABOUTME: Type descriptor parsing and raw value coercion for environment variables
ABOUTME: Turns raw strings into typed values, reporting bad input as data instead of raising
"""

import json
import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

SUPPORTED_TYPES = ("string", "number", "boolean", "json")

_RADIX_RE = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_DECIMAL_RE = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


@dataclass(frozen=True)
class TypeSpec:
    """Base type tag of a descriptor and whether it was marked optional."""

    base_type: str
    optional: bool


@dataclass(frozen=True)
class Coercion:
    """Outcome of coercing one raw value."""

    valid: bool
    parsed: Any = None
    reason: Optional[str] = None


def parse_type_string(type_str: str) -> TypeSpec:
    """
    Split a type descriptor into its base type and optionality flag.

    Examples:
        'string'  -> TypeSpec('string', False)
        'number?' -> TypeSpec('number', True)
    """
    optional = type_str.endswith("?")
    base_type = type_str[:-1] if optional else type_str
    return TypeSpec(base_type=base_type, optional=optional)


def _parse_number(value: str) -> int | float:
    """Parse a numeric string the way JavaScript's Number() does, raising ValueError if it is not one."""
    text = value.strip()
    if not text:
        return 0
    if _RADIX_RE.fullmatch(text):
        return int(text, 0)
    if _INTEGER_RE.fullmatch(text):
        return int(text)
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    raise ValueError(f"not a numeric literal: {value!r}")


def _coerce_string(value: str) -> Coercion:
    return Coercion(valid=True, parsed=value)


def _coerce_number(value: str) -> Coercion:
    try:
        return Coercion(valid=True, parsed=_parse_number(value))
    except ValueError:
        return Coercion(valid=False, reason=f'"{value}" is not a valid number')


def _coerce_boolean(value: str) -> Coercion:
    lowered = value.lower()
    if lowered == "true" or value == "1":
        return Coercion(valid=True, parsed=True)
    if lowered == "false" or value == "0":
        return Coercion(valid=True, parsed=False)
    return Coercion(
        valid=False,
        reason=f"\"{value}\" is not a valid boolean (use 'true', 'false', '1', or '0')",
    )


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _coerce_json(value: str) -> Coercion:
    try:
        return Coercion(
            valid=True, parsed=json.loads(value, parse_constant=_reject_constant)
        )
    except (ValueError, RecursionError):
        return Coercion(valid=False, reason=f'"{value}" is not valid JSON')


_COERCERS: Dict[str, Callable[[str], Coercion]] = {
    "string": _coerce_string,
    "number": _coerce_number,
    "boolean": _coerce_boolean,
    "json": _coerce_json,
}


def validate_value(value: Optional[str], expected_type: str) -> Coercion:
    """
    Coerce a raw environment value to the given base type.

    An absent or empty value always fails here; treating an absent optional
    variable as a non-error is left to the caller.

    Parameters:
        value (str | None): Raw value as found in the environment, or None if unset.
        expected_type (str): Base type tag without the optional marker.

    Returns:
        Coercion: valid with the parsed value, or invalid with a human-readable reason.
    """
    if value is None or value == "":
        return Coercion(valid=False, reason="Value is empty or undefined")

    coercer = _COERCERS.get(expected_type)
    if coercer is None:
        return Coercion(valid=False, reason=f"Unknown type: {expected_type}")
    return coercer(value)
