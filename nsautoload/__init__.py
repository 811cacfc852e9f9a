"""nsautoload - PSR-0 and PSR-4 style namespace-to-file resolution."""

from nsautoload.config import NamespacePathBinding, ResolverSettings
from nsautoload.strategies import configure_strategy, get_strategy, supported_strategies
from nsautoload.strategies.psr0 import Psr0AutoloadingStrategy
from nsautoload.strategies.psr4 import Psr4AutoloadingStrategy

__version__ = "0.1.0"
__all__ = [
    "NamespacePathBinding",
    "Psr0AutoloadingStrategy",
    "Psr4AutoloadingStrategy",
    "ResolverSettings",
    "configure_strategy",
    "get_strategy",
    "supported_strategies",
]
