"""Dependency analyzers over compiled classes.

Each analyzer is a pure function of an immutable CompiledClass.
No ordering dependency between them.
"""

from classdeps.infrastructure.analyzers.annotations import class_annotations
from classdeps.infrastructure.analyzers.constant_pool import body_references
from classdeps.infrastructure.analyzers.descriptor import (
    decode,
    decode_object_type,
    dotted_to_internal,
    internal_to_dotted,
)
from classdeps.infrastructure.analyzers.members import (
    field_types,
    method_signature_types,
    select_methods,
)
from classdeps.infrastructure.analyzers.structure import interfaces, superclass

__all__ = [
    # Descriptor decoding
    "decode",
    "decode_object_type",
    "dotted_to_internal",
    "internal_to_dotted",
    # Category analyzers
    "body_references",
    "class_annotations",
    "field_types",
    "interfaces",
    "method_signature_types",
    "select_methods",
    "superclass",
]
