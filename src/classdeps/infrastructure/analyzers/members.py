"""Field and method signature extraction.

Methods are keyed by (name, descriptor). A name-only query covers every
overload with that name, never an arbitrary one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from classdeps.domain.exceptions import MethodNotFoundError
from classdeps.infrastructure.analyzers.descriptor import decode

if TYPE_CHECKING:
    from collections.abc import Iterable

    from classdeps.domain.compiled_class import CompiledClass, MethodInfo


def field_types(cls: CompiledClass) -> frozenset[str]:
    """Types named by declared field descriptors (static and instance).

    Raises:
        DescriptorParseError: If a field descriptor is malformed
    """
    return _decode_all(field.descriptor for field in cls.fields)


def method_signature_types(
    cls: CompiledClass,
    name: str | None = None,
    descriptor: str | None = None,
) -> frozenset[str]:
    """Parameter and return types of declared methods.

    Args:
        cls: Compiled class
        name: Restrict to methods with this name (every overload). None = all methods.
        descriptor: With name, restrict to exactly one overload.

    Returns:
        Dotted type names

    Raises:
        MethodNotFoundError: If name (and descriptor) match no declared method
        DescriptorParseError: If a method descriptor is malformed
        ValueError: If descriptor given without name
    """
    methods = select_methods(cls, name, descriptor)
    return _decode_all(method.descriptor for method in methods)


def select_methods(
    cls: CompiledClass,
    name: str | None = None,
    descriptor: str | None = None,
) -> tuple[MethodInfo, ...]:
    """Pick declared methods by optional (name, descriptor) key."""
    if name is None:
        if descriptor is not None:
            raise ValueError("descriptor requires method name")
        return cls.methods

    if descriptor is not None:
        method = cls.method(name, descriptor)
        if method is None:
            raise MethodNotFoundError(cls.dotted_name, name, descriptor)
        return (method,)

    overloads = cls.methods_named(name)
    if not overloads:
        raise MethodNotFoundError(cls.dotted_name, name)
    return overloads


def _decode_all(descriptors: Iterable[str]) -> frozenset[str]:
    """Union of names decoded from each descriptor."""
    names: set[str] = set()
    for descriptor in descriptors:
        names.update(decode(descriptor))
    return frozenset(names)
