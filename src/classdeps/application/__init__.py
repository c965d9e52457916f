"""Application layer for dependency extraction.

Components:
- services: DependencyExtractor facade, batch extraction
- reporters: Output formatting (rich console, JSON)
"""

from classdeps.application.reporters import (
    ConsoleConfig,
    ConsoleReporter,
    JsonReporter,
    ReporterProtocol,
)
from classdeps.application.services import (
    BatchResult,
    DependencyExtractor,
    all_dependencies,
    extract_batch,
    extract_from,
)

__all__ = [
    # Services
    "DependencyExtractor",
    "BatchResult",
    "all_dependencies",
    "extract_batch",
    "extract_from",
    # Reporters
    "ConsoleConfig",
    "ConsoleReporter",
    "JsonReporter",
    "ReporterProtocol",
]
