"""PSR-4 style resolution: longest registered prefix wins, remainder maps to dirs."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from nsautoload.config import ResolverSettings
from nsautoload.registry.namespace_registry import NamespaceRegistry
from nsautoload.resolvers.base import build_candidate, normalize_symbol

logger = logging.getLogger(__name__)


class Psr4PathResolver:
    """Resolve ``Vendor\\Package\\Sub\\Name`` against prefix bindings.

    The leading segments are shortened one at a time, from the full namespace
    down to the empty prefix. The first prefix with registered directories
    wins and the segments after it become the relative path, e.g. with
    ``Vendor\\Package`` -> ``src``::

        Vendor\\Package\\Dummy\\Core\\Component -> src/Dummy/Core/Component.php
    """

    convention = "psr-4"

    def candidate_paths(
        self, symbol_name: str, registry: NamespaceRegistry, settings: ResolverSettings
    ) -> Iterator[str]:
        separator = settings.namespace_separator
        segments = normalize_symbol(symbol_name, separator).split(separator)
        if "" in segments:
            return

        for length in range(len(segments) - 1, -1, -1):
            prefix = separator.join(segments[:length])
            directories = registry.bindings_for(prefix)
            if not directories:
                continue

            logger.debug(f"{symbol_name!r} matched prefix {prefix!r}")
            relative = segments[length:]
            for directory in directories:
                yield build_candidate(directory, relative, settings)
            return
