"""Superclass and interface extraction.

Names are read straight off the class structure. They are internal
names, not descriptors: only slash-to-dot conversion applies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from classdeps.infrastructure.analyzers.descriptor import internal_to_dotted

if TYPE_CHECKING:
    from classdeps.domain.compiled_class import CompiledClass


def superclass(cls: CompiledClass) -> str | None:
    """Dotted superclass name.

    Returns:
        None for the root object type (no superclass recorded)
    """
    if not cls.super_name:
        return None
    return internal_to_dotted(cls.super_name)


def interfaces(cls: CompiledClass) -> frozenset[str]:
    """Dotted names of directly implemented interfaces."""
    return frozenset(internal_to_dotted(name) for name in cls.interfaces)
