"""Test configuration and fixtures for env_reader tests.

This module provides shared fixtures and configuration for all tests.
"""

import pytest

from env_reader.tools.builtin import register_builtin_tools
from env_reader.tools.builtin.system import MappingEnvironment, ReadEnvVarTool


@pytest.fixture(scope="function")
def sample_environment():
    """Create a fixed environment with plain and credential-like variables."""
    return MappingEnvironment(
        {
            "TEST_READ_ENV_VAR_FOO": "test_value_123",
            "API_KEY_TEST_VAR": "super_secret_api_key_value",
            "SECRET_PASSWORD": "hunter2",
            "MY_TOKEN_VALUE": "tok",
            "DATABASE_USER": "admin",
            "EMPTY_VALUE": "",
        }
    )


@pytest.fixture(scope="function")
def read_env_var_tool(sample_environment):
    """Create a read_env_var tool over the sample environment."""
    return ReadEnvVarTool(environment=sample_environment)


@pytest.fixture(scope="function")
def sample_registry(sample_environment):
    """Create a registry with all builtin tools over the sample environment."""
    return register_builtin_tools(environment=sample_environment)


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests (no external dependencies)"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers based on test location."""
    for item in items:
        if "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)

        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
