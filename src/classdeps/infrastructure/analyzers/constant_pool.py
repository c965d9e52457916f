"""Constant pool class reference scanner.

Covers types used only inside method bodies: instantiations, casts,
instanceof checks, static member owners and class literals.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from classdeps.infrastructure.analyzers.descriptor import ARRAY_MARKER, decode, internal_to_dotted

if TYPE_CHECKING:
    from classdeps.domain.compiled_class import CompiledClass


def body_references(cls: CompiledClass) -> frozenset[str]:
    """Types named by constant pool class entries.

    Rules:
        [Ljava/lang/Object;   → java.lang.Object (element type)
        [[Ljava/lang/String;  → java.lang.String (any dimension)
        [I                    → discarded (primitive array)
        java/util/List        → java.util.List

    Raises:
        DescriptorParseError: If an array entry is malformed
    """
    names: set[str] = set()
    for entry in cls.class_references:
        if entry.startswith(ARRAY_MARKER):
            names.update(decode(entry))
        else:
            names.add(internal_to_dotted(entry))
    return frozenset(names)
