"""PSR-0 style resolution: prefix matching plus underscore-as-directory segments."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from nsautoload.config import ResolverSettings
from nsautoload.registry.namespace_registry import NamespaceRegistry
from nsautoload.resolvers.base import build_candidate, normalize_symbol

logger = logging.getLogger(__name__)


class Psr0PathResolver:
    """Resolve namespaced and legacy ``Vendor_Package_Name`` symbols.

    Namespaced symbols match prefixes on whole namespace segments, longest
    first. Every segment after the matched prefix, the type name included, is
    split again on underscores::

        Acme\\Log\\Writer\\File_Writer  (Acme\\Log\\Writer -> lib)  -> lib/File/Writer.php

    Symbols without any namespace separator are matched on their leading
    underscore-delimited segments instead::

        Zend_Acl  (Zend -> includes/Zend)  -> includes/Zend/Acl.php
    """

    convention = "psr-0"

    def candidate_paths(
        self, symbol_name: str, registry: NamespaceRegistry, settings: ResolverSettings
    ) -> Iterator[str]:
        separator = settings.namespace_separator
        name = normalize_symbol(symbol_name, separator)
        if any(
            not part
            for segment in name.split(separator)
            for part in segment.split(settings.legacy_separator)
        ):
            return

        namespace, _, type_name = name.rpartition(separator)

        if namespace:
            yield from self._namespaced_candidates(
                symbol_name, namespace.split(separator), type_name, registry, settings
            )
        else:
            yield from self._legacy_candidates(symbol_name, type_name, registry, settings)

    def _namespaced_candidates(
        self,
        symbol_name: str,
        ns_segments: list[str],
        type_name: str,
        registry: NamespaceRegistry,
        settings: ResolverSettings,
    ) -> Iterator[str]:
        separator = settings.namespace_separator
        for length in range(len(ns_segments), -1, -1):
            prefix = separator.join(ns_segments[:length])
            directories = registry.bindings_for(prefix)
            if not directories:
                continue

            logger.debug(f"{symbol_name!r} matched prefix {prefix!r}")
            relative = []
            for segment in ns_segments[length:] + [type_name]:
                relative.extend(segment.split(settings.legacy_separator))
            for directory in directories:
                yield build_candidate(directory, relative, settings)
            return

    def _legacy_candidates(
        self,
        symbol_name: str,
        type_name: str,
        registry: NamespaceRegistry,
        settings: ResolverSettings,
    ) -> Iterator[str]:
        legacy = settings.legacy_separator
        parts = type_name.split(legacy)
        for length in range(len(parts) - 1, -1, -1):
            prefix = legacy.join(parts[:length])
            directories = registry.bindings_for(prefix)
            if not directories:
                continue

            logger.debug(f"{symbol_name!r} matched legacy prefix {prefix!r}")
            for directory in directories:
                yield build_candidate(directory, parts[length:], settings)
            return
