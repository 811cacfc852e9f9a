"""Tests for candidate path generation (no filesystem access)."""

from __future__ import annotations

from nsautoload.config import ResolverSettings
from nsautoload.existence import ExistenceChecker
from nsautoload.registry.namespace_registry import NamespaceRegistry
from nsautoload.resolvers.base import (
    PathResolver,
    build_candidate,
    normalize_base_directory,
    normalize_symbol,
)
from nsautoload.resolvers.psr0 import Psr0PathResolver
from nsautoload.resolvers.psr4 import Psr4PathResolver

SETTINGS = ResolverSettings(directory_separator="/")


def _registry(*pairs: tuple[str, str]) -> NamespaceRegistry:
    reg = NamespaceRegistry()
    for prefix, directory in pairs:
        reg.register_namespace_path(prefix, directory)
    return reg


class TestHelpers:
    def test_normalize_symbol_strips_one_leading_separator(self):
        assert normalize_symbol("\\Vendor\\X", "\\") == "Vendor\\X"
        assert normalize_symbol("Vendor\\X", "\\") == "Vendor\\X"
        assert normalize_symbol("\\\\X", "\\") == "\\X"

    def test_normalize_base_directory(self):
        assert normalize_base_directory("/srv/lib/") == "/srv/lib"
        assert normalize_base_directory("lib\\\\") == "lib"
        assert normalize_base_directory("/") == "/"
        assert normalize_base_directory("") == ""

    def test_build_candidate(self):
        assert build_candidate("/srv/lib/", ["A", "B"], SETTINGS) == "/srv/lib/A/B.php"
        assert build_candidate("/", ["A"], SETTINGS) == "/A.php"
        assert build_candidate("", ["A"], SETTINGS) == "A.php"

    def test_resolvers_satisfy_protocol(self):
        assert isinstance(Psr4PathResolver(), PathResolver)
        assert isinstance(Psr0PathResolver(), PathResolver)


class TestPsr4PathResolver:
    def _candidates(self, reg: NamespaceRegistry, symbol: str) -> list[str]:
        return list(Psr4PathResolver().candidate_paths(symbol, reg, SETTINGS))

    def test_remaining_segments_become_path(self):
        reg = _registry(("Vendor\\Package", "src"))
        assert self._candidates(reg, "\\Vendor\\Package\\Dummy\\Core\\Nested") == [
            "src/Dummy/Core/Nested.php"
        ]

    def test_longest_prefix_wins(self):
        reg = _registry(("Vendor", "short"), ("Vendor\\Package", "long"))
        assert self._candidates(reg, "Vendor\\Package\\Thing") == ["long/Thing.php"]
        assert self._candidates(reg, "Vendor\\Other\\Thing") == ["short/Other/Thing.php"]

    def test_directories_in_registration_order(self):
        reg = _registry(("Aura\\Web", "a"), ("Aura\\Web", "b"))
        assert self._candidates(reg, "Aura\\Web\\Status") == ["a/Status.php", "b/Status.php"]

    def test_prefix_must_match_whole_segments(self):
        reg = _registry(("Vendor\\Pack", "src"))
        assert self._candidates(reg, "Vendor\\Package\\Thing") == []

    def test_prefix_longer_than_namespace_never_matches(self):
        reg = _registry(("Vendor\\Package\\Dummy", "src"))
        assert self._candidates(reg, "Vendor\\Package\\Dummy") == []

    def test_underscores_are_kept(self):
        reg = _registry(("Acme\\Log\\Writer", "lib"))
        assert self._candidates(reg, "Acme\\Log\\Writer\\File_Writer") == ["lib/File_Writer.php"]

    def test_empty_prefix_is_global_fallback(self):
        reg = _registry(("", "global"), ("Vendor", "vendor"))
        assert self._candidates(reg, "Other\\Thing") == ["global/Other/Thing.php"]
        assert self._candidates(reg, "Vendor\\Thing") == ["vendor/Thing.php"]

    def test_unregistered_namespace(self):
        reg = _registry(("Vendor\\Package", "src"))
        assert self._candidates(reg, "Unregistered\\Dummy\\Component") == []

    def test_empty_type_name(self):
        reg = _registry(("", "global"), ("Vendor", "src"))
        assert self._candidates(reg, "") == []
        assert self._candidates(reg, "\\") == []
        assert self._candidates(reg, "Vendor\\") == []

    def test_empty_segment_yields_nothing(self):
        reg = _registry(("", "global"), ("Vendor", "src"), ("A", "a"))
        assert self._candidates(reg, "Vendor\\\\X") == []
        assert self._candidates(reg, "A\\\\B") == []
        assert self._candidates(reg, "\\\\X") == []

    def test_underscore_edges_are_plain_text(self):
        reg = _registry(("Vendor", "src"))
        assert self._candidates(reg, "Vendor\\X_") == ["src/X_.php"]
        assert self._candidates(reg, "Vendor\\_X") == ["src/_X.php"]

    def test_dot_separator(self):
        reg = _registry(("vendor.package", "src"))
        settings = ResolverSettings(namespace_separator=".", directory_separator="/")
        resolver = Psr4PathResolver()
        assert list(resolver.candidate_paths(".vendor.package.core.Thing", reg, settings)) == [
            "src/core/Thing.php"
        ]
        assert list(resolver.candidate_paths("vendor..Thing", reg, settings)) == []

    def test_candidates_are_restartable(self):
        reg = _registry(("Vendor", "a"), ("Vendor", "b"))
        resolver = Psr4PathResolver()
        first = list(resolver.candidate_paths("Vendor\\X", reg, SETTINGS))
        second = list(resolver.candidate_paths("Vendor\\X", reg, SETTINGS))
        assert first == second == ["a/X.php", "b/X.php"]

    def test_candidates_are_lazy(self):
        reg = _registry(*[("Vendor", f"dir{i}") for i in range(5)])
        checked = []

        def is_file(path: str) -> bool:
            checked.append(path)
            return path == "dir1/X.php"

        candidates = Psr4PathResolver().candidate_paths("Vendor\\X", reg, SETTINGS)
        assert ExistenceChecker(is_file).first_existing(candidates) == "dir1/X.php"
        assert checked == ["dir0/X.php", "dir1/X.php"]

    def test_custom_extension(self):
        reg = _registry(("Vendor", "src"))
        settings = ResolverSettings(file_extension=".inc", directory_separator="/")
        assert list(Psr4PathResolver().candidate_paths("Vendor\\X", reg, settings)) == [
            "src/X.inc"
        ]


class TestPsr0PathResolver:
    def _candidates(self, reg: NamespaceRegistry, symbol: str) -> list[str]:
        return list(Psr0PathResolver().candidate_paths(symbol, reg, SETTINGS))

    def test_type_name_underscores_become_directories(self):
        reg = _registry(("Acme\\Log\\Writer", "lib"))
        assert self._candidates(reg, "\\Acme\\Log\\Writer\\File_Writer") == ["lib/File/Writer.php"]

    def test_namespace_segment_underscores_become_directories(self):
        reg = _registry(("Vendor\\Package", "src"))
        assert self._candidates(reg, "Vendor\\Package\\Dummy\\Additional_Package\\Nested") == [
            "src/Dummy/Additional/Package/Nested.php"
        ]

    def test_underscores_do_not_split_prefix_matching(self):
        reg = _registry(("Vendor", "src"))
        assert self._candidates(reg, "Vendor_Package\\Thing") == []

    def test_longest_prefix_wins(self):
        reg = _registry(("Aura", "short"), ("Aura\\Web", "long"))
        assert self._candidates(reg, "Aura\\Web\\Response\\Status") == ["long/Response/Status.php"]

    def test_plain_namespaced_symbol(self):
        reg = _registry(("Zend", "zend"))
        assert self._candidates(reg, "Zend\\Acl") == ["zend/Acl.php"]

    def test_legacy_name_matches_leading_segment(self):
        reg = _registry(("Zend", "zend"))
        assert self._candidates(reg, "Zend_Acl_Role") == ["zend/Acl/Role.php"]

    def test_legacy_name_longest_prefix_wins(self):
        reg = _registry(("Zend", "zend"), ("Zend_Acl", "acl"))
        assert self._candidates(reg, "Zend_Acl_Role") == ["acl/Role.php"]

    def test_legacy_name_without_match(self):
        reg = _registry(("Zend", "zend"))
        assert self._candidates(reg, "Symfony_Request") == []
        assert self._candidates(reg, "Zend") == []

    def test_legacy_name_global_fallback(self):
        reg = _registry(("", "global"))
        assert self._candidates(reg, "Zend_Acl") == ["global/Zend/Acl.php"]
        assert self._candidates(reg, "Acl") == ["global/Acl.php"]

    def test_unregistered_namespace(self):
        reg = _registry(("Vendor\\Package", "src"))
        assert self._candidates(reg, "Unregistered\\Dummy\\Component") == []

    def test_empty_type_name(self):
        reg = _registry(("", "global"))
        assert self._candidates(reg, "") == []
        assert self._candidates(reg, "Vendor\\") == []

    def test_empty_segment_yields_nothing(self):
        reg = _registry(("", "global"), ("Vendor", "src"), ("A", "a"))
        assert self._candidates(reg, "A\\\\B") == []
        assert self._candidates(reg, "\\\\X") == []

    def test_empty_underscore_part_yields_nothing(self):
        reg = _registry(("", "global"), ("Vendor", "src"), ("X", "x"))
        assert self._candidates(reg, "Vendor\\X_") == []
        assert self._candidates(reg, "Vendor\\_X") == []
        assert self._candidates(reg, "X_") == []
        assert self._candidates(reg, "_X") == []
        assert self._candidates(reg, "X__Y") == []
        assert self._candidates(reg, "Vendor_\\Thing") == []

    def test_dot_separator(self):
        reg = _registry(("acme.log", "lib"))
        settings = ResolverSettings(namespace_separator=".", directory_separator="/")
        resolver = Psr0PathResolver()
        assert list(resolver.candidate_paths("acme.log.File_Writer", reg, settings)) == [
            "lib/File/Writer.php"
        ]
        assert list(resolver.candidate_paths("acme.log.", reg, settings)) == []
