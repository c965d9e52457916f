"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from classdeps.application.services.batch import BatchResult
    from classdeps.domain.dependencies import DependencySet


class ReporterProtocol(Protocol):
    """Protocol for dependency reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, dependencies: DependencySet) -> str:
        """Format one class's dependencies.

        Args:
            dependencies: Extraction result to format.

        Returns:
            Formatted string representation.
        """
        ...

    def report_batch(self, result: BatchResult) -> str:
        """Format a batch of extractions, failures included.

        Args:
            result: Batch result to format.

        Returns:
            Formatted string representation.
        """
        ...
