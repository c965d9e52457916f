"""Domain layer: dependency sets and extraction outcomes.

Immutable value objects with invariant validation.
FAIL-FIRST: invalid input raises immediately.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Generic, NoReturn, TypeVar

from classdeps.domain.exceptions import InvalidDependencyNameError

if TYPE_CHECKING:
    from collections.abc import Mapping

T = TypeVar("T")


class DependencyCategory(Enum):
    """Where a dependency was found in the compiled class."""

    ANNOTATION = "annotation"
    SUPER_CLASS = "super_class"
    INTERFACE = "interface"
    FIELD_TYPE = "field_type"
    METHOD_SIGNATURE = "method_signature"
    BODY_REFERENCE = "body_reference"


ALL_CATEGORIES: tuple[DependencyCategory, ...] = tuple(DependencyCategory)


def validate_dependency_name(name: str) -> None:
    """Check a single dotted type name. FAIL-FIRST.

    Raises:
        InvalidDependencyNameError: Empty, slashed, or array-form name.
    """
    if not name:
        raise InvalidDependencyNameError(name, "must not be empty")
    if "/" in name:
        raise InvalidDependencyNameError(name, "must be dotted, not internal form")
    if name.startswith("["):
        raise InvalidDependencyNameError(name, "array types are not dependencies")


@dataclass(frozen=True, slots=True)
class DependencySet:
    """Dependencies of one class, grouped by category.

    Only computed categories are present. A category mapped to an empty
    set was computed and found nothing.

    Examples:
        DependencySet("com.acme.Foo", {SUPER_CLASS: {"java.lang.Object"}})
          .merged → frozenset({"java.lang.Object"})

    Invariants (FAIL-FIRST):
        - every name is non-empty, dotted, not an array form
    """

    class_name: str
    by_category: Mapping[DependencyCategory, frozenset[str]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        """Validate invariants and freeze mapping."""
        if not self.class_name:
            raise ValueError("class_name must not be empty")

        frozen: dict[DependencyCategory, frozenset[str]] = {}
        for category, names in self.by_category.items():
            if not isinstance(category, DependencyCategory):
                raise TypeError(f"category must be DependencyCategory, got {category!r}")
            names = frozenset(names)
            for name in names:
                validate_dependency_name(name)
            frozen[category] = names
        object.__setattr__(self, "by_category", MappingProxyType(frozen))

    @property
    def categories(self) -> frozenset[DependencyCategory]:
        """Categories that were computed."""
        return frozenset(self.by_category)

    @property
    def merged(self) -> frozenset[str]:
        """Union of every computed category."""
        result: set[str] = set()
        for names in self.by_category.values():
            result.update(names)
        return frozenset(result)

    def __getitem__(self, category: DependencyCategory) -> frozenset[str]:
        """Names for one category. KeyError if not computed."""
        return self.by_category[category]

    def get(self, category: DependencyCategory) -> frozenset[str]:
        """Names for one category, empty if not computed."""
        return self.by_category.get(category, frozenset())

    def __len__(self) -> int:
        """Number of distinct dependencies across categories."""
        return len(self.merged)

    def __contains__(self, name: object) -> bool:
        """Name present in any category."""
        return any(name in names for names in self.by_category.values())

    def union(self, other: DependencySet) -> DependencySet:
        """Category-wise union with another set of the same class."""
        if other.class_name != self.class_name:
            raise ValueError(
                f"cannot union dependencies of {self.class_name!r} and {other.class_name!r}"
            )
        combined: dict[DependencyCategory, frozenset[str]] = dict(self.by_category)
        for category, names in other.by_category.items():
            combined[category] = combined.get(category, frozenset()) | names
        return DependencySet(self.class_name, combined)


# =============================================================================
# OUTCOME - tagged success/failure
# =============================================================================


@dataclass(frozen=True, slots=True)
class Extracted(Generic[T]):
    """Successful outcome."""

    value: T

    @property
    def ok(self) -> bool:
        """Always True."""
        return True

    def unwrap(self) -> T:
        """Return value."""
        return self.value


@dataclass(frozen=True, slots=True)
class Failed:
    """Failed outcome. Keeps the original exception with its traceback."""

    error: Exception

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.error, Exception):
            raise TypeError(f"error must be Exception, got {type(self.error).__name__}")

    @property
    def ok(self) -> bool:
        """Always False."""
        return False

    def unwrap(self) -> NoReturn:
        """Re-raise the captured error."""
        raise self.error


Outcome = Extracted[T] | Failed


@dataclass(frozen=True, slots=True)
class PartialExtraction:
    """Per-category outcomes for one class.

    Returned only when the caller opts into partial results.
    """

    class_name: str
    outcomes: Mapping[DependencyCategory, Extracted[frozenset[str]] | Failed]

    def __post_init__(self) -> None:
        """Freeze mapping."""
        if not self.class_name:
            raise ValueError("class_name must not be empty")
        object.__setattr__(self, "outcomes", MappingProxyType(dict(self.outcomes)))

    @property
    def dependencies(self) -> DependencySet:
        """DependencySet built from successful categories only."""
        return DependencySet(
            self.class_name,
            {
                category: outcome.value
                for category, outcome in self.outcomes.items()
                if isinstance(outcome, Extracted)
            },
        )

    @property
    def errors(self) -> Mapping[DependencyCategory, Exception]:
        """Failed categories with their errors."""
        return MappingProxyType(
            {
                category: outcome.error
                for category, outcome in self.outcomes.items()
                if isinstance(outcome, Failed)
            }
        )

    @property
    def complete(self) -> bool:
        """Every requested category succeeded."""
        return not self.errors
