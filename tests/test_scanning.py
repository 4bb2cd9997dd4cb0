"""Tests for directory scanning and export extraction."""

from __future__ import annotations

from pathlib import Path

import pytest

from autoimports.config import ImportEntry, ScanDir
from autoimports.phases.scanning import (
    expand_braces,
    matches_any,
    module_path,
    scan_dir,
    scan_dirs,
    scan_file,
)

FIXTURES = Path(__file__).parent / "fixtures" / "ts_exports"


@pytest.fixture(scope="module")
def scanned() -> list[ImportEntry]:
    return scan_dir(ScanDir(path=str(FIXTURES)))


def _by_name(entries: list[ImportEntry]) -> dict[str, ImportEntry]:
    return {e.local_name: e for e in entries}


class TestExportExtraction:
    def test_value_exports(self, scanned):
        names = _by_name(scanned)
        for name in ("testFunction", "testLet", "testVar", "TestClass", "Color", "fetchData"):
            assert name in names
            assert names[name].type is False

    def test_multiple_declarators(self, scanned):
        names = _by_name(scanned)
        assert "first" in names
        assert "second" in names

    def test_type_exports(self, scanned):
        names = _by_name(scanned)
        assert names["TestType"].type is True
        assert names["TestInterface"].type is True

    def test_non_exported_names_skipped(self, scanned):
        names = _by_name(scanned)
        assert "hidden" not in names
        assert "helper" not in names
        assert "original" not in names

    def test_aliased_exports(self, scanned):
        names = _by_name(scanned)
        assert {"aliased", "multipleAliased1", "multipleAliased2"} <= set(names)

    def test_default_export(self, scanned):
        entry = _by_name(scanned)["defaultFn"]
        assert entry.name == "default"
        assert entry.alias == "defaultFn"

    def test_reexports(self, scanned):
        names = _by_name(scanned)
        assert names["formatDate"].type is False
        assert names["Shape"].type is True

    def test_unicode_file(self, scanned):
        assert {"hello", "cafe", "pi"} <= set(_by_name(scanned))

    def test_nested_directories(self, scanned):
        entry = _by_name(scanned)["nestedExport"]
        assert entry.source.endswith("nested/very/deep/nested")

    def test_javascript_and_tsx(self, scanned):
        names = _by_name(scanned)
        assert "renderWidget" in names
        assert "Button" in names

    def test_declaration_files_excluded(self, scanned):
        assert "fromDeclarationFile" not in _by_name(scanned)

    def test_non_matching_files_ignored(self, scanned):
        assert "fromMarkdown" not in _by_name(scanned)

    def test_source_is_extensionless_absolute_path(self, scanned):
        entry = _by_name(scanned)["testFunction"]
        assert entry.source == (FIXTURES / "basic").resolve().as_posix()


class TestScanFile:
    def test_empty_file(self):
        assert scan_file(FIXTURES / "empty.ts") == []

    def test_comment_only_file(self):
        assert scan_file(FIXTURES / "comments.ts") == []

    def test_malformed_file_does_not_raise(self):
        assert isinstance(scan_file(FIXTURES / "malformed.ts"), list)

    def test_types_disabled(self):
        names = _by_name(scan_file(FIXTURES / "basic.ts", types=False))
        assert "testFunction" in names
        assert "TestType" not in names
        assert "TestInterface" not in names

    def test_unsupported_extension(self):
        assert scan_file(FIXTURES / "notes.md") == []

    def test_missing_file(self, tmp_path):
        assert scan_file(tmp_path / "gone.ts") == []


class TestScanDir:
    def test_missing_directory(self, caplog):
        assert scan_dir(ScanDir(path="/nonexistent/dir")) == []
        assert "not found" in caplog.text

    def test_node_modules_skipped(self, tmp_path):
        (tmp_path / "node_modules" / "pkg").mkdir(parents=True)
        (tmp_path / "node_modules" / "pkg" / "index.ts").write_text("export const vendored = 1\n")
        (tmp_path / "app.ts").write_text("export const mine = 1\n")
        names = _by_name(scan_dir(ScanDir(path=str(tmp_path))))
        assert "mine" in names
        assert "vendored" not in names

    def test_custom_include(self, tmp_path):
        (tmp_path / "a.ts").write_text("export const a = 1\n")
        (tmp_path / "b.js").write_text("export const b = 1\n")
        names = _by_name(scan_dir(ScanDir(path=str(tmp_path), include=["**/*.js"])))
        assert set(names) == {"b"}

    def test_custom_exclude(self, tmp_path):
        (tmp_path / "a.ts").write_text("export const a = 1\n")
        (tmp_path / "a.test.ts").write_text("export const spec = 1\n")
        names = _by_name(scan_dir(ScanDir(path=str(tmp_path), exclude=["**/*.test.ts"])))
        assert set(names) == {"a"}

    def test_file_size_limit(self, tmp_path):
        (tmp_path / "big.ts").write_text("export const big = 1\n" + "// pad\n" * 100)
        assert scan_dir(ScanDir(path=str(tmp_path)), max_file_size=10) == []

    def test_scan_dirs_accepts_strings_and_keeps_order(self, tmp_path):
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.mkdir()
        second.mkdir()
        (first / "x.ts").write_text("export const one = 1\n")
        (second / "y.ts").write_text("export const two = 2\n")
        entries = scan_dirs([str(first), ScanDir(path=str(second)), "/nonexistent"])
        assert [e.name for e in entries] == ["one", "two"]


class TestPatterns:
    def test_expand_braces(self):
        assert expand_braces("**/*.{ts,js}") == ["**/*.ts", "**/*.js"]
        assert expand_braces("*.ts") == ["*.ts"]

    def test_nested_alternatives(self):
        assert expand_braces("{a,b}/{c,d}") == ["a/c", "a/d", "b/c", "b/d"]

    def test_leading_globstar_matches_top_level(self):
        assert matches_any("index.ts", ["**/*.ts"])
        assert matches_any("src/deep/index.ts", ["**/*.ts"])

    def test_no_match(self):
        assert not matches_any("index.ts", ["**/*.js"])
        assert not matches_any("index.ts", [])

    def test_module_path(self, tmp_path):
        path = tmp_path / "utils" / "dates.ts"
        assert module_path(path) == (tmp_path / "utils" / "dates").resolve().as_posix()
