"""
ABOUTME: Environment and schema file configuration utilities
ABOUTME: Provides environment snapshots, settings lookup, and JSON schema loading
"""

import json
import os
from pathlib import Path
from typing import Dict, Optional

from .exceptions import ConfigError


def get_env_var(
    key: str, default: Optional[str] = None, required: bool = False
) -> Optional[str]:
    """Get environment variable with validation."""
    value = os.getenv(key, default)
    if required and not value:
        raise ConfigError(f"Required environment variable '{key}' not set")
    return value


def snapshot_environment() -> Dict[str, str]:
    """Copy of the process environment as it is right now."""
    return dict(os.environ)


def load_schema(path: str | Path) -> Dict[str, str]:
    """
    Load a schema from a JSON file mapping variable names to type descriptors.

    Parameters:
        path (str | Path): Location of the schema file.

    Returns:
        dict[str, str]: Variable name to descriptor, in file order.

    Raises:
        ConfigError: If the file cannot be read, is not valid JSON, or is not an
            object of string descriptors.
    """
    schema_path = Path(path)
    try:
        with open(schema_path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"Schema file not found: {schema_path}") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"Schema file {schema_path} is not valid UTF-8: {e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Invalid JSON in schema file {schema_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read schema file {schema_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"Schema file {schema_path} must contain a JSON object, got {type(data).__name__}"
        )

    for key, type_str in data.items():
        if not isinstance(type_str, str):
            raise ConfigError(
                f"Type descriptor for '{key}' must be a string, got {type(type_str).__name__}"
            )
    return data
