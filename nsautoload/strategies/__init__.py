"""Strategy registry - maps convention names to autoloading strategies."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from nsautoload.config import NamespacePathBinding, ResolverSettings

if TYPE_CHECKING:
    from nsautoload.strategies.base import AutoloadingStrategy

_REGISTRY: dict[str, type] = {}
_INITIALISED = False


def _init_registry() -> None:
    global _INITIALISED
    if _INITIALISED:
        return

    from nsautoload.strategies.psr0 import Psr0AutoloadingStrategy
    from nsautoload.strategies.psr4 import Psr4AutoloadingStrategy

    for strategy_cls in (Psr0AutoloadingStrategy, Psr4AutoloadingStrategy):
        _REGISTRY[strategy_cls.name] = strategy_cls

    _INITIALISED = True


def get_strategy(
    name: str,
    settings: ResolverSettings | None = None,
    is_file: Callable[[str], bool] | None = None,
) -> AutoloadingStrategy:
    """Build a fresh strategy for a convention name (e.g. 'psr-4')."""
    _init_registry()
    strategy_cls = _REGISTRY.get(name)
    if strategy_cls is None:
        raise ValueError(
            f"Unknown autoloading strategy {name!r}; "
            f"expected one of {', '.join(supported_strategies())}"
        )
    return strategy_cls(settings=settings, is_file=is_file)


def supported_strategies() -> list[str]:
    """Return all registered convention names, sorted."""
    _init_registry()
    return sorted(_REGISTRY)


def configure_strategy(
    strategy: AutoloadingStrategy, bindings: Iterable[NamespacePathBinding]
) -> AutoloadingStrategy:
    """Register every directory of every binding, preserving order."""
    for binding in bindings:
        for directory in binding.directories:
            strategy.register_namespace_path(binding.prefix, directory)
    return strategy
