"""Class provider port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from classdeps.domain.compiled_class import CompiledClass


class ClassProviderPort(ABC):
    """Port for obtaining compiled classes by name.

    Infrastructure layer must provide implementation.
    Resolution scope is explicit provider configuration, never global state.
    """

    @abstractmethod
    def resolve(self, class_name: str) -> CompiledClass:
        """Locate and parse a class.

        Args:
            class_name: Dotted (java.lang.String) or internal (java/lang/String) name

        Returns:
            Parsed CompiledClass, leased until release()

        Raises:
            ClassNotFoundError: If name cannot be located
            ClassFormatError: If located bytes are not a valid class file
        """
        ...

    @abstractmethod
    def release(self, compiled: CompiledClass) -> None:
        """End the lease on a resolved class.

        Idempotent: releasing twice or releasing an unknown class is a no-op.

        Args:
            compiled: Class previously returned by resolve()
        """
        ...
