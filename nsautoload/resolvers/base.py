"""Resolver protocol and the text helpers both conventions use."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Protocol, runtime_checkable

from nsautoload.config import ResolverSettings
from nsautoload.registry.namespace_registry import NamespaceRegistry


@runtime_checkable
class PathResolver(Protocol):
    """Protocol that all namespace-to-path resolvers must implement."""

    convention: str

    def candidate_paths(
        self, symbol_name: str, registry: NamespaceRegistry, settings: ResolverSettings
    ) -> Iterator[str]:
        """Lazily yield candidate file paths for a symbol, most preferred first."""
        ...


def normalize_symbol(symbol_name: str, separator: str) -> str:
    """Strip one leading namespace separator (``\\Vendor\\X`` -> ``Vendor\\X``)."""
    if symbol_name.startswith(separator):
        return symbol_name[len(separator):]
    return symbol_name


def normalize_base_directory(base_directory: str) -> str:
    """Drop trailing path separators, keeping a bare filesystem root intact."""
    stripped = base_directory.rstrip("/\\")
    if not stripped:
        return base_directory[:1]
    return stripped


def build_candidate(
    base_directory: str, segments: Sequence[str], settings: ResolverSettings
) -> str:
    """Join path segments under a base directory and append the source extension."""
    relative = settings.directory_separator.join(segments) + settings.file_extension
    base = normalize_base_directory(base_directory)
    if not base:
        return relative
    if base in ("/", "\\"):
        return base + relative
    return base + settings.directory_separator + relative
