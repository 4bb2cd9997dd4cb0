"""Tests for the provider registry and the two generators."""

from __future__ import annotations

import re

from autoimports.config import ImportEntry
from autoimports.engine.codegen import (
    GENERATED_COMMENT,
    generate_import_statements,
    generate_type_declarations,
)
from autoimports.engine.registry import ProviderRegistry


class TestProviderRegistry:
    def test_keyed_by_local_name(self):
        reg = ProviderRegistry([ImportEntry(name="ref", source="vue", alias="vueRef")])
        assert "vueRef" in reg
        assert "ref" not in reg
        assert reg.get("vueRef").name == "ref"

    def test_first_registration_wins(self):
        reg = ProviderRegistry([
            ImportEntry(name="ref", source="custom"),
            ImportEntry(name="ref", source="vue"),
        ])
        assert len(reg) == 1
        assert reg.get("ref").source == "custom"

    def test_add_reports_conflicts(self):
        reg = ProviderRegistry()
        assert reg.add(ImportEntry(name="ref", source="vue")) is True
        assert reg.add(ImportEntry(name="ref", source="other")) is False

    def test_alias_does_not_collide_with_original_name(self):
        reg = ProviderRegistry([
            ImportEntry(name="ref", source="vue"),
            ImportEntry(name="ref", source="stx", alias="stxRef"),
        ])
        assert reg.names() == frozenset({"ref", "stxRef"})

    def test_iteration_keeps_registration_order(self):
        reg = ProviderRegistry([
            ImportEntry(name="z", source="m"),
            ImportEntry(name="a", source="m"),
        ])
        assert list(reg) == ["z", "a"]
        assert [e.name for e in reg.entries()] == ["z", "a"]

    def test_lookup_missing(self):
        assert ProviderRegistry().get("nope") is None


class TestGenerateImportStatements:
    def test_values_grouped_by_source(self):
        registry = {
            "foo": ImportEntry(name="foo", source="module-a"),
            "bar": ImportEntry(name="bar", source="module-a"),
        }
        result = generate_import_statements({"foo", "bar"}, registry)
        assert result == "import { foo, bar } from 'module-a'"

    def test_types_on_separate_line(self):
        registry = {
            "foo": ImportEntry(name="foo", source="module-a"),
            "MyType": ImportEntry(name="MyType", source="module-a", type=True),
        }
        result = generate_import_statements({"foo", "MyType"}, registry)
        lines = result.split("\n")
        assert "import { foo } from 'module-a'" in lines
        assert "import type { MyType } from 'module-a'" in lines
        assert len(lines) == 2

    def test_multiple_sources(self):
        registry = ProviderRegistry([
            ImportEntry(name="foo", source="module-a"),
            ImportEntry(name="bar", source="module-b"),
        ])
        result = generate_import_statements({"foo", "bar"}, registry)
        assert "import { foo } from 'module-a'" in result
        assert "import { bar } from 'module-b'" in result

    def test_aliased(self):
        registry = {"myFoo": ImportEntry(name="foo", source="module-a", alias="myFoo")}
        result = generate_import_statements({"myFoo"}, registry)
        assert result == "import { foo as myFoo } from 'module-a'"

    def test_aliased_type(self):
        registry = {"VRef": ImportEntry(name="Ref", source="vue", alias="VRef", type=True)}
        result = generate_import_statements({"VRef"}, registry)
        assert result == "import type { Ref as VRef } from 'vue'"

    def test_unknown_names_skipped(self):
        registry = {"foo": ImportEntry(name="foo", source="module-a")}
        assert generate_import_statements({"foo", "ghost"}, registry) == "import { foo } from 'module-a'"
        assert generate_import_statements({"ghost"}, registry) == ""

    def test_empty_used_set(self):
        registry = {"foo": ImportEntry(name="foo", source="module-a")}
        assert generate_import_statements(set(), registry) == ""


class TestGenerateTypeDeclarations:
    def test_exact_shape(self):
        reg = ProviderRegistry([
            ImportEntry(name="ref", source="vue"),
            ImportEntry(name="Ref", source="vue", type=True),
        ])
        expected = (
            f"{GENERATED_COMMENT}\n"
            "export {}\n"
            "\n"
            "declare global {\n"
            "  type Ref = import('vue')['Ref']\n"
            "  const ref: typeof import('vue')['ref']\n"
            "}\n"
        )
        assert generate_type_declarations(reg) == expected

    def test_aliased_value(self):
        reg = ProviderRegistry([ImportEntry(name="ref", source="vue", alias="vueRef")])
        assert "const vueRef: typeof import('vue')['ref']" in generate_type_declarations(reg)

    def test_sorted_by_local_name(self):
        reg = ProviderRegistry([
            ImportEntry(name="z", source="mod"),
            ImportEntry(name="a", source="mod"),
            ImportEntry(name="m", source="mod"),
        ])
        dts = generate_type_declarations(reg)
        assert dts.index("const a:") < dts.index("const m:") < dts.index("const z:")

    def test_empty_registry_keeps_skeleton(self):
        dts = generate_type_declarations(ProviderRegistry())
        assert "export {}" in dts
        assert "declare global {\n}" in dts
        assert "const " not in dts
        assert not re.search(r"\btype\s+\w+\s*=", dts)

    def test_quotes_escaped_in_module(self):
        reg = ProviderRegistry([ImportEntry(name="x", source="it's")])
        assert "typeof import('it\\'s')['x']" in generate_type_declarations(reg)

    def test_accepts_plain_dict(self):
        dts = generate_type_declarations({"ref": ImportEntry(name="ref", source="vue")})
        assert "const ref: typeof import('vue')['ref']" in dts
