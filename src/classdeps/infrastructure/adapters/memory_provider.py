"""In-memory class provider.

Serves classes from a mapping. Values may be CompiledClass objects or raw
class file bytes (parsed on resolve).
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING

from classdeps.domain.compiled_class import CompiledClass
from classdeps.domain.exceptions import ClassFormatError, ClassNotFoundError
from classdeps.domain.ports.class_provider import ClassProviderPort
from classdeps.infrastructure.adapters.leases import LeaseRegistry
from classdeps.infrastructure.analyzers.descriptor import dotted_to_internal
from classdeps.infrastructure.classfile.reader import read_class

if TYPE_CHECKING:
    from collections.abc import Mapping

logger = logging.getLogger(__name__)


class InMemoryClassProvider(ClassProviderPort):
    """Provider over a fixed name → class mapping.

    Keys may be dotted or internal names.
    """

    def __init__(self, classes: Mapping[str, CompiledClass | bytes]) -> None:
        """Initialize with classes.

        Args:
            classes: Name → CompiledClass or class file bytes

        Raises:
            TypeError: If classes is None or holds unsupported values
        """
        if classes is None:
            raise TypeError("classes must not be None")

        normalized: dict[str, CompiledClass | bytes] = {}
        for name, value in classes.items():
            if not isinstance(value, CompiledClass | bytes):
                raise TypeError(
                    f"class {name!r} must be CompiledClass or bytes, got {type(value).__name__}"
                )
            normalized[dotted_to_internal(name)] = value

        self._classes = MappingProxyType(normalized)
        self._leases = LeaseRegistry()

    @classmethod
    def of(cls, *compiled: CompiledClass) -> InMemoryClassProvider:
        """Provider keyed by each class's own name."""
        return cls({c.name: c for c in compiled})

    def resolve(self, class_name: str) -> CompiledClass:
        """Look up class by dotted or internal name.

        Raises:
            ClassNotFoundError: If name is not in the mapping
            ClassFormatError: If stored bytes are malformed
        """
        internal_name = dotted_to_internal(class_name)
        if internal_name not in self._classes:
            raise ClassNotFoundError(class_name, ("<memory>",))

        compiled = self._leases.acquire(internal_name, lambda: self._load(internal_name))
        logger.debug("resolved %s from memory", internal_name)
        return compiled

    def release(self, compiled: CompiledClass) -> None:
        """End lease. Idempotent."""
        if self._leases.release(compiled):
            logger.debug("released %s", compiled.name)

    @property
    def leased(self) -> frozenset[str]:
        """Internal names with open leases."""
        return self._leases.leased_names

    @property
    def class_names(self) -> frozenset[str]:
        """Internal names this provider can resolve."""
        return frozenset(self._classes)

    def _load(self, internal_name: str) -> CompiledClass:
        source = f"<memory>/{internal_name}.class"
        value = self._classes[internal_name]
        compiled = value if isinstance(value, CompiledClass) else read_class(value, source=source)
        if compiled.name != internal_name:
            raise ClassFormatError(source, f"declares class {compiled.name!r}")
        return compiled
