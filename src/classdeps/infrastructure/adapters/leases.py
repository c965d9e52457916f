"""Lease registry shared by class providers.

Tracks classes handed out by resolve() until release(). A class leased
twice is kept until released twice; releasing more often is a no-op.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from classdeps.domain.compiled_class import CompiledClass


class LeaseRegistry:
    """Thread-safe internal name → (CompiledClass, lease count) mapping."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._leases: dict[str, tuple[CompiledClass, int]] = {}

    def acquire(self, internal_name: str, load: Callable[[], CompiledClass]) -> CompiledClass:
        """Lease a class, loading it only if not currently leased.

        load() runs outside the lock, so different classes load in parallel.
        When two threads load the same class at once, the first to finish
        wins and the other result is discarded.

        Args:
            internal_name: Key (slash-separated name)
            load: Called without the lock when no lease is open

        Returns:
            Leased CompiledClass (same object for every open lease)
        """
        with self._lock:
            leased = self._bump(internal_name)
        if leased is not None:
            return leased

        loaded = load()

        with self._lock:
            leased = self._bump(internal_name)
            if leased is not None:
                return leased
            self._leases[internal_name] = (loaded, 1)
            return loaded

    def _bump(self, internal_name: str) -> CompiledClass | None:
        """Add a lease to an open entry. Caller holds _lock."""
        entry = self._leases.get(internal_name)
        if entry is None:
            return None
        compiled, count = entry
        self._leases[internal_name] = (compiled, count + 1)
        return compiled

    def release(self, compiled: CompiledClass) -> bool:
        """Drop one lease.

        Returns:
            True if a lease was dropped, False if class was not leased
        """
        with self._lock:
            entry = self._leases.get(compiled.name)
            if entry is None or entry[0] is not compiled:
                return False

            _, count = entry
            if count > 1:
                self._leases[compiled.name] = (compiled, count - 1)
            else:
                del self._leases[compiled.name]
            return True

    def is_leased(self, internal_name: str) -> bool:
        """Class currently has at least one lease."""
        with self._lock:
            return internal_name in self._leases

    @property
    def leased_names(self) -> frozenset[str]:
        """Internal names with open leases."""
        with self._lock:
            return frozenset(self._leases)

    def __len__(self) -> int:
        """Number of leased classes."""
        with self._lock:
            return len(self._leases)
