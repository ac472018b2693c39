"""
ABOUTME: Command-line interface for the environment validator
ABOUTME: Handles argument parsing, rich reporting, and exit codes for startup checks
"""

import argparse
import json
import logging
import math
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .config import get_env_var, load_schema
from .exceptions import ConfigError
from .validator import ValidationResult, validate_env

console = Console()

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def cli(argv: list[str] | None = None) -> argparse.Namespace:
    """
    Parse and return command-line arguments for the environment validator.

    Returns:
        argparse.Namespace: Parsed arguments selecting the schema file, output format, and log level.
    """
    p = argparse.ArgumentParser(
        description="Validate environment variables against a JSON type schema"
    )
    p.add_argument(
        "schema",
        nargs="?",
        default=get_env_var("ENV_GUARD_SCHEMA"),
        help="Path to a JSON object mapping variable names to types "
        "(string, number, boolean, json; append ? for optional). "
        "Defaults to $ENV_GUARD_SCHEMA",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Output the validation result as JSON instead of rich console tables",
    )
    p.add_argument(
        "--show-values",
        action="store_true",
        help="Also print the parsed values of valid variables",
    )
    p.add_argument(
        "--log-level",
        default=get_env_var("ENV_GUARD_LOG_LEVEL", "WARNING").upper(),
        choices=LOG_LEVELS,
        type=str.upper,
        help="Log level",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"env-guard {__version__}",
    )
    return p.parse_args(argv)


def to_json_safe(value):
    """Replace non-finite floats, which JSON cannot represent, with their JavaScript names."""
    if isinstance(value, float) and not math.isfinite(value):
        if math.isnan(value):
            return "NaN"
        return "Infinity" if value > 0 else "-Infinity"
    if isinstance(value, dict):
        return {key: to_json_safe(item) for key, item in value.items()}
    if isinstance(value, list):
        return [to_json_safe(item) for item in value]
    return value


def render_result(result: ValidationResult, show_values: bool = False) -> None:
    """Print a validation result as rich tables."""
    if result.valid:
        console.print(
            f"✅ All {len(result.values)} environment variable(s) are valid"
        )
    else:
        error_table = Table(
            title=f"Invalid Environment ({len(result.errors)} error(s))",
            show_header=True,
            header_style="bold red",
        )
        error_table.add_column("Variable", style="cyan")
        error_table.add_column("Expected")
        error_table.add_column("Reason")
        for error in result.errors:
            error_table.add_row(error.key, error.expected, error.reason)
        console.print(error_table)

    if show_values and result.values:
        values_table = Table(
            title="Parsed Values", show_header=True, header_style="bold magenta"
        )
        values_table.add_column("Variable", style="cyan")
        values_table.add_column("Value")
        values_table.add_column("Type")
        for key, value in result.values.items():
            values_table.add_row(key, repr(value), type(value).__name__)
        console.print(values_table)


def main(argv: list[str] | None = None) -> None:
    """
    Execute the environment validator CLI.

    Loads the schema, validates the current process environment, reports the
    outcome, and exits with status 0 when every variable is valid or 1 otherwise.
    """
    a = cli(argv)

    logging.basicConfig(
        level=getattr(logging, a.log_level, logging.WARNING),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )

    try:
        if not a.schema:
            raise ConfigError(
                "No schema given: pass a schema file or set ENV_GUARD_SCHEMA"
            )
        schema = load_schema(a.schema)
        logging.info(f"Loaded {len(schema)} schema entries from {a.schema}")

        result = validate_env(schema)

        if a.json:
            payload = to_json_safe(result.to_dict())
            print(json.dumps(payload, indent=2, allow_nan=False, default=str))
        else:
            render_result(result, a.show_values)
    except ConfigError as e:
        console.print(f"❌ Configuration error: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        console.print("\n❌ Interrupted by user")
        sys.exit(1)

    sys.exit(0 if result.valid else 1)


if __name__ == "__main__":
    main()
