"""Configuration DTOs.

Immutable configuration objects with FAIL-FIRST validation.
All fields have defaults where a sensible default exists.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ClasspathConfig:
    """Resolution scope for ClasspathProvider.

    Entries are searched in order; first match wins.
    Directory entries hold package trees, file entries are .jar/.zip archives.

    Attributes:
        entries: Search locations (must not be empty)
    """

    entries: tuple[Path, ...]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.entries:
            raise ValueError("classpath must have at least one entry")
        for entry in self.entries:
            if not isinstance(entry, Path):
                raise TypeError(f"classpath entry must be Path, got {type(entry).__name__}")

    @classmethod
    def from_string(
        cls,
        classpath: str,
        *,
        sep: str = os.pathsep,
        base: Path | None = None,
    ) -> ClasspathConfig:
        """Build from a separator-joined classpath string.

        Args:
            classpath: e.g. "build/classes:lib/guava.jar"
            sep: Entry separator (default: os.pathsep)
            base: Directory that relative entries are resolved against

        Returns:
            ClasspathConfig with blank entries dropped

        Raises:
            ValueError: If no non-blank entry remains
        """
        entries: list[Path] = []
        for raw in classpath.split(sep):
            raw = raw.strip()
            if not raw:
                continue
            path = Path(raw)
            if base is not None and not path.is_absolute():
                path = base / path
            entries.append(path)
        return cls(entries=tuple(entries))


@dataclass(frozen=True, slots=True)
class ExtractorConfig:
    """Options for DependencyExtractor.

    Attributes:
        include_self: Keep the analyzed class's own name in its dependencies.
            Default False: self-references are noise for dependency graphs.
    """

    include_self: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.include_self, bool):
            raise TypeError("include_self must be bool")
