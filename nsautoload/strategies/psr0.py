"""PSR-0 autoloading strategy (namespaces plus legacy underscore class names)."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator

from nsautoload.config import ResolverSettings
from nsautoload.existence import ExistenceChecker
from nsautoload.registry.namespace_registry import NamespaceRegistry
from nsautoload.resolvers.psr0 import Psr0PathResolver

logger = logging.getLogger(__name__)


class Psr0AutoloadingStrategy:
    name = "psr-0"

    def __init__(
        self,
        settings: ResolverSettings | None = None,
        is_file: Callable[[str], bool] | None = None,
    ) -> None:
        self.settings = settings or ResolverSettings()
        self.registry = NamespaceRegistry()
        self.resolver = Psr0PathResolver()
        self.checker = ExistenceChecker(is_file)

    def register_namespace_path(self, prefix: str, path: str) -> None:
        self.registry.register_namespace_path(prefix, path)

    def candidates(self, symbol_name: str) -> Iterator[str]:
        if not isinstance(symbol_name, str):
            raise TypeError(f"symbol_name must be a str, not {type(symbol_name).__name__}")
        return self.resolver.candidate_paths(symbol_name, self.registry, self.settings)

    def resolve(self, symbol_name: str) -> str | None:
        path = self.checker.first_existing(self.candidates(symbol_name))
        if path is None:
            logger.debug(f"psr-0: {symbol_name!r} unresolved")
        else:
            logger.debug(f"psr-0: {symbol_name!r} -> {path}")
        return path
