"""Core data types and configuration for namespace autoloading."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class ResolutionStatus(str, Enum):
    RESOLVED = "resolved"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class ResolverSettings:
    """Separator and extension rules shared by both conventions."""
    namespace_separator: str = "\\"
    legacy_separator: str = "_"
    file_extension: str = ".php"
    directory_separator: str = os.sep


@dataclass
class NamespacePathBinding:
    prefix: str
    directories: tuple[str, ...] = ()


@dataclass
class AutoloadConfig:
    psr0: list[NamespacePathBinding] = field(default_factory=list)
    psr4: list[NamespacePathBinding] = field(default_factory=list)
    settings: ResolverSettings = field(default_factory=ResolverSettings)

    def bindings_for_strategy(self, strategy_name: str) -> list[NamespacePathBinding]:
        if strategy_name == "psr-0":
            return self.psr0
        if strategy_name == "psr-4":
            return self.psr4
        raise ValueError(f"Unknown autoloading strategy: {strategy_name!r}")


def load_autoload_config(path: str) -> AutoloadConfig:
    """Load namespace mappings from a composer-style JSON file.

    Reads the ``autoload`` section (or the document root when there is none)::

        {"autoload": {"psr-4": {"Vendor\\\\Package\\\\": "src/"},
                      "psr-0": {"Acme_": ["lib/", "legacy/"]}}}

    Relative directories are resolved against the config file's directory.
    """
    config_path = Path(path)
    try:
        document = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ValueError(f"Cannot read autoload config {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise ValueError(f"Malformed autoload config {path}: {e}") from e

    if not isinstance(document, dict):
        raise ValueError(f"Autoload config {path} must contain a JSON object")

    section = document.get("autoload", document)
    if not isinstance(section, dict):
        raise ValueError("'autoload' must be a JSON object")

    settings = ResolverSettings()
    extension = section.get("extension", document.get("extension"))
    if extension is not None:
        if not isinstance(extension, str):
            raise ValueError("'extension' must be a string")
        settings = ResolverSettings(file_extension=extension)

    base_dir = config_path.parent
    config = AutoloadConfig(
        psr0=_parse_bindings(section.get("psr-0", {}), "psr-0", base_dir, settings),
        psr4=_parse_bindings(section.get("psr-4", {}), "psr-4", base_dir, settings),
        settings=settings,
    )
    logger.debug(
        f"Loaded {len(config.psr0)} psr-0 and {len(config.psr4)} psr-4 "
        f"bindings from {path}"
    )
    return config


def _parse_bindings(
    raw: Any, key: str, base_dir: Path, settings: ResolverSettings,
) -> list[NamespacePathBinding]:
    """Turn a ``{prefix: dir | [dirs]}`` mapping into bindings, in file order."""
    if not isinstance(raw, dict):
        raise ValueError(f"'{key}' must map namespace prefixes to directories")

    bindings = []
    for prefix, dirs in raw.items():
        if isinstance(dirs, str):
            dirs = [dirs]
        if not isinstance(dirs, list) or not all(isinstance(d, str) for d in dirs):
            raise ValueError(f"'{key}' entry {prefix!r} must be a directory or list of directories")

        # Composer writes prefixes with a trailing separator; the registry matches exactly.
        trailing = settings.namespace_separator
        if key == "psr-0":
            trailing += settings.legacy_separator
        prefix = prefix.rstrip(trailing)
        resolved = tuple(
            d if os.path.isabs(d) else str(base_dir / d)
            for d in dirs
        )
        bindings.append(NamespacePathBinding(prefix=prefix, directories=resolved))
    return bindings
