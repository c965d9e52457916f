"""Dependency extractor: main facade over a class provider.

Acquires one CompiledClass per call, runs the requested category
analyzers over it, and releases it on every exit path.
FAIL-FIRST: first category failure propagates unless the caller opts
into partial results.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING

from classdeps.domain.configuration import ExtractorConfig
from classdeps.domain.dependencies import (
    ALL_CATEGORIES,
    DependencyCategory,
    DependencySet,
    Extracted,
    Failed,
    PartialExtraction,
)
from classdeps.domain.exceptions import ClassDepsError
from classdeps.infrastructure.analyzers import (
    body_references,
    class_annotations,
    field_types,
    interfaces,
    method_signature_types,
    superclass,
)

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from classdeps.domain.compiled_class import CompiledClass
    from classdeps.domain.dependencies import Outcome
    from classdeps.domain.ports.class_provider import ClassProviderPort


def _superclass_names(cls: CompiledClass) -> frozenset[str]:
    name = superclass(cls)
    return frozenset() if name is None else frozenset({name})


CATEGORY_ANALYZERS: dict[DependencyCategory, Callable[[CompiledClass], frozenset[str]]] = {
    DependencyCategory.ANNOTATION: class_annotations,
    DependencyCategory.SUPER_CLASS: _superclass_names,
    DependencyCategory.INTERFACE: interfaces,
    DependencyCategory.FIELD_TYPE: field_types,
    DependencyCategory.METHOD_SIGNATURE: method_signature_types,
    DependencyCategory.BODY_REFERENCE: body_references,
}


def extract_from(
    cls: CompiledClass,
    categories: Iterable[DependencyCategory] | None = None,
    config: ExtractorConfig | None = None,
) -> DependencySet:
    """Compute categories over an already acquired class.

    Args:
        cls: Compiled class
        categories: Categories to compute. None = all six.
        config: Extraction options. None = defaults (self-references dropped).

    Returns:
        DependencySet holding exactly the requested categories

    Raises:
        DescriptorParseError: First malformed descriptor encountered
    """
    config = config or ExtractorConfig()
    selected = _select(categories)
    return DependencySet(
        cls.dotted_name,
        {category: _run(category, cls, config) for category in selected},
    )


def all_dependencies(cls: CompiledClass, config: ExtractorConfig | None = None) -> frozenset[str]:
    """Merged dependencies of every category."""
    return extract_from(cls, ALL_CATEGORIES, config).merged


class DependencyExtractor:
    """Main facade for dependency extraction.

    Composition-based: the provider is an explicit dependency, so the
    resolution scope is configuration, not ambient state.
    Stateless between calls; safe to share across threads if the provider is.

    Example:
        provider = ClasspathProvider(ClasspathConfig.from_string("build/classes"))
        extractor = DependencyExtractor(provider)
        deps = extractor.extract("com.acme.OrderService")
        deps.merged               # every dependency
        deps[DependencyCategory.FIELD_TYPE]
    """

    def __init__(
        self,
        provider: ClassProviderPort,
        config: ExtractorConfig | None = None,
    ) -> None:
        """Initialize extractor.

        Args:
            provider: Source of compiled classes
            config: Extraction options (default: ExtractorConfig())

        Raises:
            TypeError: If provider is None
        """
        if provider is None:
            raise TypeError("provider must not be None")

        self._provider = provider
        self._config = config or ExtractorConfig()

    @property
    def provider(self) -> ClassProviderPort:
        """Class provider in use."""
        return self._provider

    @property
    def config(self) -> ExtractorConfig:
        """Extraction options."""
        return self._config

    @contextmanager
    def acquire(self, class_name: str) -> Iterator[CompiledClass]:
        """Scoped class acquisition. Released on every exit path.

        Raises:
            ClassNotFoundError: If provider cannot resolve name
        """
        compiled = self._provider.resolve(class_name)
        try:
            yield compiled
        finally:
            self._provider.release(compiled)

    # =========================================================================
    # Aggregate operations
    # =========================================================================

    def extract(
        self,
        class_name: str,
        categories: Iterable[DependencyCategory] | None = None,
    ) -> DependencySet:
        """Extract requested categories (all by default).

        Raises:
            ClassNotFoundError: If class cannot be resolved
            DescriptorParseError: First malformed descriptor encountered
        """
        with self.acquire(class_name) as compiled:
            return extract_from(compiled, categories, self._config)

    def extract_partial(
        self,
        class_name: str,
        categories: Iterable[DependencyCategory] | None = None,
    ) -> PartialExtraction:
        """Extract categories independently, capturing per-category failures.

        Resolution failure still raises: there is nothing to extract from.

        Raises:
            ClassNotFoundError: If class cannot be resolved
        """
        outcomes: dict[DependencyCategory, Extracted[frozenset[str]] | Failed] = {}
        with self.acquire(class_name) as compiled:
            for category in _select(categories):
                try:
                    outcomes[category] = Extracted(_run(category, compiled, self._config))
                except ClassDepsError as e:
                    outcomes[category] = Failed(e)
            return PartialExtraction(compiled.dotted_name, outcomes)

    def try_extract(
        self,
        class_name: str,
        categories: Iterable[DependencyCategory] | None = None,
    ) -> Outcome[DependencySet]:
        """Tagged outcome instead of raising library errors.

        Failed means resolution or decoding failed; Extracted with an empty
        set means the class really has no dependencies.
        """
        try:
            return Extracted(self.extract(class_name, categories))
        except ClassDepsError as e:
            return Failed(e)

    # =========================================================================
    # Per-category operations (by class name)
    # =========================================================================

    def get_all_dependency(self, class_name: str) -> frozenset[str]:
        """Every dependency: annotations, superclass, interfaces, fields, signatures, bodies."""
        return self.extract(class_name).merged

    def get_class_annotations(self, class_name: str) -> frozenset[str]:
        """Runtime-visible class annotation types."""
        return self._category(class_name, DependencyCategory.ANNOTATION)

    def get_super_class(self, class_name: str) -> str | None:
        """Superclass name, None for the root object type."""
        with self.acquire(class_name) as compiled:
            return superclass(compiled)

    def get_interfaces(self, class_name: str) -> frozenset[str]:
        """Directly implemented interfaces."""
        return self._category(class_name, DependencyCategory.INTERFACE)

    def get_fields_type(self, class_name: str) -> frozenset[str]:
        """Types of declared fields."""
        return self._category(class_name, DependencyCategory.FIELD_TYPE)

    def get_method_signature_class(
        self,
        class_name: str,
        method_name: str | None = None,
        descriptor: str | None = None,
    ) -> frozenset[str]:
        """Parameter and return types of declared methods.

        Args:
            class_name: Class to analyze
            method_name: Only overloads with this name. None = every method.
            descriptor: With method_name, exactly one overload.

        Raises:
            ClassNotFoundError: If class cannot be resolved
            MethodNotFoundError: If no declared method matches
        """
        with self.acquire(class_name) as compiled:
            names = method_signature_types(compiled, method_name, descriptor)
            return _drop_self(compiled, names, self._config)

    def get_class_rely_class(self, class_name: str) -> frozenset[str]:
        """Types referenced from the constant pool (method bodies included)."""
        return self._category(class_name, DependencyCategory.BODY_REFERENCE)

    def _category(self, class_name: str, category: DependencyCategory) -> frozenset[str]:
        return self.extract(class_name, (category,))[category]


def _select(categories: Iterable[DependencyCategory] | None) -> tuple[DependencyCategory, ...]:
    """Validate and deduplicate requested categories, keeping order."""
    if categories is None:
        return ALL_CATEGORIES

    selected: dict[DependencyCategory, None] = {}
    for category in categories:
        if not isinstance(category, DependencyCategory):
            raise TypeError(f"category must be DependencyCategory, got {category!r}")
        selected.setdefault(category, None)
    return tuple(selected)


def _run(
    category: DependencyCategory,
    cls: CompiledClass,
    config: ExtractorConfig,
) -> frozenset[str]:
    return _drop_self(cls, CATEGORY_ANALYZERS[category](cls), config)


def _drop_self(
    cls: CompiledClass,
    names: frozenset[str],
    config: ExtractorConfig,
) -> frozenset[str]:
    """Remove the analyzed class unless configured to keep it."""
    if config.include_self:
        return names
    return names - {cls.dotted_name}
