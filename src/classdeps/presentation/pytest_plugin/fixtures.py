"""pytest fixtures for dependency assertions.

Provides fixtures for class dependency analysis in tests.
User overrides classdeps_config in their conftest.py.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pytest

from classdeps.application.services import DependencyExtractor
from classdeps.domain.configuration import ClasspathConfig, ExtractorConfig
from classdeps.infrastructure.adapters.classpath_provider import ClasspathProvider

if TYPE_CHECKING:
    from collections.abc import Iterator

CLASSPATH_INI = "classdeps_classpath"
INCLUDE_SELF_INI = "classdeps_include_self"


def classpath_from_ini(config: pytest.Config) -> ClasspathConfig:
    """Build classpath from ini option, entries relative to rootdir.

    Args:
        config: pytest Config object

    Returns:
        ClasspathConfig

    Raises:
        pytest.UsageError: If classdeps_classpath is not configured
    """
    value = config.getini(CLASSPATH_INI)
    entries = [str(v) for v in value] if isinstance(value, list) else str(value or "").split()
    if not any(entry.strip() for entry in entries):
        raise pytest.UsageError(
            f"{CLASSPATH_INI} is not configured. Set it in pytest.ini or pyproject.toml."
        )

    # Note: rootdir exists on pytest.Config but type stubs may not include it
    root_dir = Path(str(getattr(config, "rootpath", getattr(config, "rootdir", "."))))
    return ClasspathConfig(
        entries=tuple(
            path if path.is_absolute() else root_dir / path
            for path in (Path(entry.strip()) for entry in entries if entry.strip())
        )
    )


@pytest.fixture(scope="session")
def classdeps_config(request: pytest.FixtureRequest) -> ClasspathConfig:
    """Classpath configuration from ini.

    User overrides this fixture in their conftest.py to provide
    a classpath without ini configuration.

    Returns:
        ClasspathConfig built from classdeps_classpath
    """
    return classpath_from_ini(request.config)


@pytest.fixture(scope="session")
def classdeps_provider(classdeps_config: ClasspathConfig) -> Iterator[ClasspathProvider]:
    """Classpath provider, closed at session end."""
    with ClasspathProvider(classdeps_config) as provider:
        yield provider


@pytest.fixture(scope="session")
def classdeps(
    request: pytest.FixtureRequest,
    classdeps_provider: ClasspathProvider,
) -> DependencyExtractor:
    """DependencyExtractor over the configured classpath.

    Example:
        def test_service_has_no_web_deps(classdeps):
            deps = classdeps.get_all_dependency("com.acme.OrderService")
            assert not any(d.startswith("javax.servlet.") for d in deps)
    """
    include_self = bool(request.config.getini(INCLUDE_SELF_INI))
    return DependencyExtractor(classdeps_provider, ExtractorConfig(include_self=include_self))
