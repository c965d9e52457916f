"""Class annotation extraction."""

from __future__ import annotations

from typing import TYPE_CHECKING

from classdeps.infrastructure.analyzers.descriptor import decode_object_type

if TYPE_CHECKING:
    from classdeps.domain.compiled_class import CompiledClass


def class_annotations(cls: CompiledClass) -> frozenset[str]:
    """Types of runtime-visible annotations on the class.

    Absent annotations attribute means no annotations, not an error.

    Raises:
        DescriptorParseError: If an annotation type is not a single object type
    """
    if cls.annotations is None:
        return frozenset()
    return frozenset(decode_object_type(descriptor) for descriptor in cls.annotations)
