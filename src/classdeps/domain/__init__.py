"""classdeps domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, types, collections.abc
"""

from classdeps.domain.compiled_class import CompiledClass, FieldInfo, MethodInfo
from classdeps.domain.dependencies import (
    ALL_CATEGORIES,
    DependencyCategory,
    DependencySet,
    Extracted,
    Failed,
    Outcome,
    PartialExtraction,
)
from classdeps.domain.exceptions import (
    ClassDepsError,
    ClassFormatError,
    ClassNotFoundError,
    DescriptorParseError,
    InvalidDependencyNameError,
    MethodNotFoundError,
)
from classdeps.domain.ports import ClassProviderPort

__all__ = [
    # Exceptions
    "ClassDepsError",
    "ClassNotFoundError",
    "DescriptorParseError",
    "ClassFormatError",
    "MethodNotFoundError",
    "InvalidDependencyNameError",
    # Compiled class
    "CompiledClass",
    "FieldInfo",
    "MethodInfo",
    # Dependencies
    "ALL_CATEGORIES",
    "DependencyCategory",
    "DependencySet",
    # Outcomes
    "Extracted",
    "Failed",
    "Outcome",
    "PartialExtraction",
    # Ports
    "ClassProviderPort",
]
