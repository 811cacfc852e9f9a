"""Protocol for autoloading strategies."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, runtime_checkable


@runtime_checkable
class AutoloadingStrategy(Protocol):
    """Protocol that all autoloading strategies must implement."""

    name: str

    def register_namespace_path(self, prefix: str, path: str) -> None:
        """Bind a namespace prefix to a base directory."""
        ...

    def resolve(self, symbol_name: str) -> str | None:
        """Return the file that defines the symbol, or None when unresolved."""
        ...

    def candidates(self, symbol_name: str) -> Iterator[str]:
        """Return the candidate paths that ``resolve`` checks, in order."""
        ...
