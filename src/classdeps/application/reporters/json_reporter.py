"""JSON reporter: DependencySet / BatchResult → JSON string."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from classdeps.domain.dependencies import ALL_CATEGORIES

if TYPE_CHECKING:
    from classdeps.application.services.batch import BatchResult
    from classdeps.domain.dependencies import DependencySet


class JsonReporter:
    """JSON reporter: outputs machine-readable JSON.

    Names are sorted so output is stable across runs.
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, dependencies: DependencySet) -> str:
        """Format one class's dependencies as JSON string."""
        return json.dumps(_dependencies_to_dict(dependencies), indent=self._indent)

    def report_batch(self, result: BatchResult) -> str:
        """Format batch result as JSON string."""
        data = {
            "classes": [_dependencies_to_dict(deps) for deps in result.succeeded.values()],
            "errors": [_error_to_dict(name, error) for name, error in result.failed.items()],
            "summary": {
                "total": len(result.outcomes),
                "succeeded": len(result.succeeded),
                "failed": len(result.failed),
            },
        }
        return json.dumps(data, indent=self._indent)


def _dependencies_to_dict(dependencies: DependencySet) -> dict[str, object]:
    """Convert DependencySet to dict. Categories in declaration order."""
    return {
        "class": dependencies.class_name,
        "categories": {
            category.value: sorted(dependencies[category])
            for category in ALL_CATEGORIES
            if category in dependencies.categories
        },
        "all": sorted(dependencies.merged),
    }


def _error_to_dict(class_name: str, error: Exception) -> dict[str, object]:
    """Convert failure to dict."""
    return {
        "class": class_name,
        "error": type(error).__name__,
        "message": str(error),
    }
