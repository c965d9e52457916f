"""pytest plugin for classdeps.

Provides fixtures for dependency testing:
    classdeps_config: Classpath configuration (override in conftest.py)
    classdeps_provider: ClasspathProvider over the configured classpath
    classdeps: DependencyExtractor entry point

Configuration (pytest.ini or pyproject.toml):
    classdeps_classpath: Classpath entries, relative to rootdir
    classdeps_include_self: Keep self-references (default: false)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

# Register fixtures from fixtures module
from classdeps.presentation.pytest_plugin.fixtures import (
    CLASSPATH_INI,
    INCLUDE_SELF_INI,
    classdeps,
    classdeps_config,
    classdeps_provider,
)

if TYPE_CHECKING:
    import pytest

# Export fixtures for pytest discovery
__all__ = [
    "classdeps",
    "classdeps_config",
    "classdeps_provider",
]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        CLASSPATH_INI,
        type="paths",
        help="classdeps: classpath entries (directories, .jar/.zip), relative to rootdir",
    )
    parser.addini(
        INCLUDE_SELF_INI,
        type="bool",
        default=False,
        help="classdeps: keep the analyzed class in its own dependencies",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "classdeps: mark test as class dependency test",
    )
