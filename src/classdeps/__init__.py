"""classdeps - type dependency extraction from compiled JVM classes."""

__version__ = "0.1.0"

from classdeps.application.services import DependencyExtractor, all_dependencies, extract_batch
from classdeps.domain.configuration import ClasspathConfig, ExtractorConfig
from classdeps.domain.dependencies import DependencyCategory, DependencySet
from classdeps.domain.exceptions import (
    ClassDepsError,
    ClassNotFoundError,
    DescriptorParseError,
)
from classdeps.infrastructure.adapters import ClasspathProvider, InMemoryClassProvider
from classdeps.infrastructure.analyzers import decode

__all__ = [
    "ClassDepsError",
    "ClassNotFoundError",
    "ClasspathConfig",
    "ClasspathProvider",
    "DependencyCategory",
    "DependencyExtractor",
    "DependencySet",
    "DescriptorParseError",
    "ExtractorConfig",
    "InMemoryClassProvider",
    "__version__",
    "all_dependencies",
    "decode",
    "extract_batch",
]
