"""Append-only namespace prefix to base directory registry."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator

logger = logging.getLogger(__name__)


class NamespaceRegistry:
    """Maps namespace prefixes to the ordered directories registered for them.

    Entries are only ever appended. Prefixes keep their registration order,
    and so do the directories of each prefix. Matching is exact on the prefix
    string as registered.
    """

    def __init__(self) -> None:
        self._bindings: dict[str, list[str]] = {}
        self._lock = threading.Lock()

    def register_namespace_path(self, prefix: str, base_directory: str) -> None:
        """Append a base directory to the bindings of a prefix."""
        if not isinstance(prefix, str):
            raise TypeError(f"prefix must be a str, not {type(prefix).__name__}")
        if not isinstance(base_directory, str):
            raise TypeError(
                f"base_directory must be a str, not {type(base_directory).__name__}"
            )

        with self._lock:
            if prefix not in self._bindings:
                self._bindings[prefix] = []
            self._bindings[prefix].append(base_directory)
        logger.debug(f"Registered namespace {prefix!r} -> {base_directory!r}")

    def bindings_for(self, prefix: str) -> tuple[str, ...]:
        """Directories registered for exactly this prefix, or an empty tuple."""
        with self._lock:
            return tuple(self._bindings.get(prefix, ()))

    def all_bindings(self) -> Iterator[tuple[str, tuple[str, ...]]]:
        """Yield (prefix, directories) pairs in registration order.

        Iterates over a snapshot, so registering while iterating is safe.
        """
        with self._lock:
            snapshot = [(p, tuple(dirs)) for p, dirs in self._bindings.items()]
        yield from snapshot

    def __contains__(self, prefix: object) -> bool:
        with self._lock:
            return prefix in self._bindings

    def __len__(self) -> int:
        with self._lock:
            return len(self._bindings)
