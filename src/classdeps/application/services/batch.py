"""Batch extraction over many classes.

Each class is extracted independently: no shared mutable state beyond the
provider's own lease bookkeeping. No transitive graph is built.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from classdeps.domain.dependencies import DependencySet, Extracted, Failed

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from classdeps.application.services.extractor import DependencyExtractor
    from classdeps.domain.dependencies import DependencyCategory

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BatchResult:
    """Outcomes keyed by requested class name, in request order.

    Attributes:
        outcomes: Class name → Extracted[DependencySet] or Failed
    """

    outcomes: Mapping[str, Extracted[DependencySet] | Failed]

    def __post_init__(self) -> None:
        """Freeze mapping."""
        object.__setattr__(self, "outcomes", MappingProxyType(dict(self.outcomes)))

    @property
    def succeeded(self) -> Mapping[str, DependencySet]:
        """Successful extractions."""
        return MappingProxyType(
            {
                name: outcome.value
                for name, outcome in self.outcomes.items()
                if isinstance(outcome, Extracted)
            }
        )

    @property
    def failed(self) -> Mapping[str, Exception]:
        """Failed extractions with their errors."""
        return MappingProxyType(
            {
                name: outcome.error
                for name, outcome in self.outcomes.items()
                if isinstance(outcome, Failed)
            }
        )

    @property
    def passed(self) -> bool:
        """Every class extracted."""
        return not self.failed

    def edges(self) -> frozenset[tuple[str, str]]:
        """(class, dependency) pairs of successful extractions."""
        return frozenset(
            (deps.class_name, dependency)
            for deps in self.succeeded.values()
            for dependency in deps.merged
        )


def extract_batch(
    extractor: DependencyExtractor,
    class_names: Iterable[str],
    *,
    categories: Iterable[DependencyCategory] | None = None,
    max_workers: int | None = None,
) -> BatchResult:
    """Extract dependencies of many classes in parallel.

    Failures are kept per class as Failed outcomes, never dropped.

    Args:
        extractor: Configured extractor
        class_names: Classes to analyze (duplicates collapsed)
        categories: Categories to compute. None = all.
        max_workers: Thread pool size. None = executor default. 1 = sequential order.

    Returns:
        BatchResult in request order

    Raises:
        ValueError: If max_workers < 1
    """
    if max_workers is not None and max_workers < 1:
        raise ValueError(f"max_workers must be >= 1, got {max_workers}")

    names = tuple(dict.fromkeys(class_names))
    selected = None if categories is None else tuple(categories)

    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {name: executor.submit(extractor.try_extract, name, selected) for name in names}
        outcomes = {name: future.result() for name, future in futures.items()}

    result = BatchResult(outcomes)
    logger.debug(
        "batch extracted %d classes, %d failed",
        len(result.succeeded),
        len(result.failed),
    )
    return result
