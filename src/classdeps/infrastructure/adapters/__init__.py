"""Infrastructure adapters for external interfaces."""

from classdeps.infrastructure.adapters.classpath_provider import ClasspathProvider
from classdeps.infrastructure.adapters.leases import LeaseRegistry
from classdeps.infrastructure.adapters.memory_provider import InMemoryClassProvider

__all__ = [
    "ClasspathProvider",
    "InMemoryClassProvider",
    "LeaseRegistry",
]
