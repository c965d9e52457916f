"""Classpath-based class provider.

Resolves class names against explicit search locations: directories of
.class files and .jar/.zip archives. No global class loader state.
"""

from __future__ import annotations

import logging
import threading
import zipfile
import zlib
from typing import TYPE_CHECKING

from classdeps.domain.exceptions import ClassFormatError, ClassNotFoundError
from classdeps.domain.ports.class_provider import ClassProviderPort
from classdeps.infrastructure.adapters.leases import LeaseRegistry
from classdeps.infrastructure.analyzers.descriptor import dotted_to_internal
from classdeps.infrastructure.classfile.reader import read_class

if TYPE_CHECKING:
    from pathlib import Path
    from types import TracebackType

    from classdeps.domain.compiled_class import CompiledClass
    from classdeps.domain.configuration import ClasspathConfig

logger = logging.getLogger(__name__)

ARCHIVE_SUFFIXES = frozenset({".jar", ".zip"})
CLASS_SUFFIX = ".class"

# Errors ZipFile.read raises for a damaged member
_ARCHIVE_READ_ERRORS = (zipfile.BadZipFile, zlib.error, EOFError, OSError, NotImplementedError)


class ClasspathProvider(ClassProviderPort):
    """Provider searching configured classpath entries in order.

    Archives are opened lazily on first lookup and kept open until close().
    Leased classes are cached until released (same object for nested leases).

    Usage:
        with ClasspathProvider(ClasspathConfig.from_string("build/classes:lib/a.jar")) as p:
            compiled = p.resolve("com.acme.Service")
            ...
            p.release(compiled)
    """

    def __init__(self, config: ClasspathConfig) -> None:
        """Initialize provider.

        Args:
            config: Search scope

        Raises:
            TypeError: If config is None
        """
        if config is None:
            raise TypeError("config must not be None")

        self._config = config
        self._leases = LeaseRegistry()
        self._archives: dict[Path, zipfile.ZipFile] = {}
        self._archive_lock = threading.Lock()
        self._closed = False

    @property
    def config(self) -> ClasspathConfig:
        """Search scope."""
        return self._config

    @property
    def leased(self) -> frozenset[str]:
        """Internal names with open leases."""
        return self._leases.leased_names

    def resolve(self, class_name: str) -> CompiledClass:
        """Find, read and parse a class.

        Args:
            class_name: Dotted or internal name

        Returns:
            Parsed CompiledClass

        Raises:
            ClassNotFoundError: If no entry holds the class
            ClassFormatError: If found bytes are malformed or declare another class
            RuntimeError: If provider was closed
        """
        if self._closed:
            raise RuntimeError("provider is closed")
        if not class_name:
            raise ClassNotFoundError(class_name, self._scope())

        internal_name = dotted_to_internal(class_name)
        return self._leases.acquire(internal_name, lambda: self._load(class_name, internal_name))

    def release(self, compiled: CompiledClass) -> None:
        """End lease. Idempotent."""
        if self._leases.release(compiled):
            logger.debug("released %s", compiled.name)

    def close(self) -> None:
        """Close opened archives. Idempotent."""
        with self._archive_lock:
            for path, archive in self._archives.items():
                logger.debug("closing archive %s", path)
                archive.close()
            self._archives.clear()
            self._closed = True

    def __enter__(self) -> ClasspathProvider:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _load(self, class_name: str, internal_name: str) -> CompiledClass:
        """Search entries in order, parse first hit."""
        member = internal_name + CLASS_SUFFIX

        for entry in self._config.entries:
            found = self._read_entry(entry, member)
            if found is None:
                continue

            data, source = found
            compiled = read_class(data, source=source)
            if compiled.name != internal_name:
                raise ClassFormatError(source, f"declares class {compiled.name!r}")
            logger.debug("resolved %s from %s", internal_name, source)
            return compiled

        raise ClassNotFoundError(class_name, self._scope())

    def _read_entry(self, entry: Path, member: str) -> tuple[bytes, str] | None:
        """Read member from one classpath entry, None if absent."""
        if entry.is_dir():
            path = entry / member
            if not path.is_file():
                return None
            try:
                return path.read_bytes(), str(path)
            except OSError as e:
                raise ClassFormatError(str(path), f"cannot read class file: {e}") from e

        if entry.is_file() and entry.suffix.lower() in ARCHIVE_SUFFIXES:
            source = f"{entry}!/{member}"
            with self._archive_lock:
                archive = self._open_archive(entry)
            # ZipFile serializes access to its shared file handle itself
            try:
                data = archive.read(member)
            except KeyError:
                return None
            except _ARCHIVE_READ_ERRORS as e:
                raise ClassFormatError(source, f"corrupt archive member: {e}") from e
            return data, source

        logger.debug("skipping classpath entry %s: not a directory or archive", entry)
        return None

    def _open_archive(self, path: Path) -> zipfile.ZipFile:
        """Open archive once. Caller holds _archive_lock."""
        archive = self._archives.get(path)
        if archive is None:
            try:
                archive = zipfile.ZipFile(path)
            except (zipfile.BadZipFile, OSError) as e:
                raise ClassFormatError(str(path), f"not a valid archive: {e}") from e
            logger.debug("opened archive %s", path)
            self._archives[path] = archive
        return archive

    def _scope(self) -> tuple[str, ...]:
        return tuple(str(entry) for entry in self._config.entries)
