"""
ABOUTME: Pytest configuration and shared fixtures
ABOUTME: Provides sample schemas, environments, and temporary schema files for all tests
"""

import json
import tempfile
from pathlib import Path
from unittest.mock import MagicMock

import pytest
from rich.console import Console


@pytest.fixture
def temp_dir():
    """Provide a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as temp_dir:
        yield Path(temp_dir)


@pytest.fixture
def mock_console():
    """Provide a mock Rich console for testing."""
    return MagicMock(spec=Console)


@pytest.fixture
def sample_schema():
    """Provide a schema covering every supported type."""
    return {
        "DATABASE_URL": "string",
        "PORT": "number",
        "DEBUG": "boolean",
        "CONFIG": "json?",
        "API_KEY": "string?",
    }


@pytest.fixture
def sample_env():
    """Provide an environment that satisfies sample_schema."""
    return {
        "DATABASE_URL": "postgres://localhost",
        "PORT": "3000",
        "DEBUG": "true",
        "CONFIG": '{"version":"1"}',
    }


@pytest.fixture
def schema_file(temp_dir, sample_schema):
    """Write sample_schema to a JSON file and return its path."""
    path = temp_dir / "env.schema.json"
    path.write_text(json.dumps(sample_schema))
    return path
