"""Pytest configuration and shared fixtures for devcheck tests.

This module provides reusable fixtures for:
- Check configuration
- Temporary directory creation
- Fake environments
- Environment variables
"""

from __future__ import annotations

import os
import shutil
import sys
import tempfile
from pathlib import Path
from typing import Any, Dict, Generator
from unittest.mock import patch

import pytest

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from devcheck.testing.fixtures import FakeEnvironment, create_test_config


VALID_PRIMARY_KEY = "sk-ant-api03-" + "a" * 60
VALID_SECONDARY_KEY = "AIzaSy" + "b" * 34


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture
def check_config() -> Dict[str, Any]:
    """Provide the default check configuration."""
    return create_test_config()


# =============================================================================
# Temporary Directory Fixtures
# =============================================================================

@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory that is cleaned up after test."""
    temp_path = Path(tempfile.mkdtemp(prefix="devcheck_test_"))
    yield temp_path
    shutil.rmtree(temp_path, ignore_errors=True)


# =============================================================================
# Environment Fixtures
# =============================================================================

@pytest.fixture
def healthy_env() -> FakeEnvironment:
    """Provide an environment in which every check passes."""
    return FakeEnvironment(
        variables={
            "ANTHROPIC_API_KEY": VALID_PRIMARY_KEY,
            "GEMINI_API_KEY": VALID_SECONDARY_KEY,
        },
        runtime_version="v20.11.1",
    )


@pytest.fixture
def mock_env_no_api_keys():
    """Mock process environment with no API keys set."""
    env_copy = os.environ.copy()
    for key in ["ANTHROPIC_API_KEY", "GEMINI_API_KEY"]:
        env_copy.pop(key, None)
    with patch.dict(os.environ, env_copy, clear=True):
        yield


# =============================================================================
# Skip Markers
# =============================================================================

def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests")
