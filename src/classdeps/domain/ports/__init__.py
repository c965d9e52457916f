"""Domain ports (interfaces/protocols)."""

from classdeps.domain.ports.class_provider import ClassProviderPort

__all__ = [
    "ClassProviderPort",
]
