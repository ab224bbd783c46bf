"""
Pytest configuration and shared fixtures for redact-core tests.
"""

import sys
from collections.abc import Generator
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from redact_core.logging import reset_loggers  # noqa: E402
from redact_core.redaction import Redactor  # noqa: E402


# =============================================================================
# Path Fixtures
# =============================================================================


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


# =============================================================================
# Redaction Fixtures
# =============================================================================


@pytest.fixture
def redactor() -> Redactor:
    """Redactor with default configuration."""
    return Redactor()


@pytest.fixture(autouse=True)
def _reset_logger_state() -> Generator[None, None, None]:
    """Reset logger cache before and after each test."""
    reset_loggers()
    yield
    reset_loggers()


# =============================================================================
# Markers Configuration
# =============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "property: Property-based tests")
    config.addinivalue_line("markers", "fuzz: Fuzz tests")
    config.addinivalue_line("markers", "security: Security tests")
