"""Domain exceptions: all public errors of classdeps.

Hexagonal architecture: all exceptions visible to users defined in domain.
Infrastructure/Application use these, not define their own public exceptions.
"""

from __future__ import annotations

from collections.abc import Sequence


class ClassDepsError(Exception):
    """Base for all classdeps error exceptions.

    Allows: except ClassDepsError to catch all library errors.
    """


class ClassNotFoundError(ClassDepsError, LookupError):
    """Class name cannot be resolved by the provider.

    Non-recoverable for the call that raised it. Never converted to an
    empty result.

    Attributes:
        class_name: Name as requested by the caller.
        search_scope: Locations the provider searched (may be empty).
    """

    def __init__(self, class_name: str, search_scope: Sequence[str] = ()) -> None:
        """Initialize with class name and searched locations."""
        self.class_name = class_name
        self.search_scope = tuple(search_scope)
        if self.search_scope:
            scope = ", ".join(self.search_scope)
            super().__init__(f"class {class_name!r} not found in [{scope}]")
        else:
            super().__init__(f"class {class_name!r} not found")


class DescriptorParseError(ClassDepsError, ValueError):
    """Type descriptor violates the descriptor grammar.

    Attributes:
        descriptor: Offending descriptor string.
        position: Zero-based index where decoding failed.
        reason: What was wrong at that position.
    """

    def __init__(self, descriptor: str, position: int, reason: str) -> None:
        """Initialize with descriptor, failing position and reason."""
        self.descriptor = descriptor
        self.position = position
        self.reason = reason
        super().__init__(f"invalid descriptor {descriptor!r} at {position}: {reason}")


class ClassFormatError(ClassDepsError, ValueError):
    """Class file bytes are malformed or truncated.

    Attributes:
        source: Where the bytes came from (path, archive member, or name).
        reason: Why parsing failed.
    """

    def __init__(self, source: str, reason: str) -> None:
        """Initialize with source and reason."""
        self.source = source
        self.reason = reason
        super().__init__(f"{source}: {reason}")


class MethodNotFoundError(ClassDepsError, LookupError):
    """No declared method matches the requested name (and descriptor).

    Attributes:
        class_name: Class that was searched.
        method_name: Requested method name.
        descriptor: Requested descriptor, None for name-only lookup.
    """

    def __init__(self, class_name: str, method_name: str, descriptor: str | None = None) -> None:
        """Initialize with lookup key."""
        self.class_name = class_name
        self.method_name = method_name
        self.descriptor = descriptor
        key = method_name if descriptor is None else f"{method_name}{descriptor}"
        super().__init__(f"method {key!r} not declared in {class_name!r}")


class InvalidDependencyNameError(ClassDepsError, ValueError):
    """Dependency name violates DependencySet invariants.

    Attributes:
        name: Offending name.
        reason: Which invariant it breaks.
    """

    def __init__(self, name: str, reason: str) -> None:
        """Initialize with name and reason."""
        self.name = name
        self.reason = reason
        super().__init__(f"invalid dependency name {name!r}: {reason}")
