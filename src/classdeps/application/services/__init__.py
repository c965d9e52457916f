"""Application services for dependency extraction.

DependencyExtractor is the main facade; extract_batch runs it over many classes.
"""

from classdeps.application.services.batch import BatchResult, extract_batch
from classdeps.application.services.extractor import (
    CATEGORY_ANALYZERS,
    DependencyExtractor,
    all_dependencies,
    extract_from,
)

__all__ = [
    "BatchResult",
    "CATEGORY_ANALYZERS",
    "DependencyExtractor",
    "all_dependencies",
    "extract_batch",
    "extract_from",
]
