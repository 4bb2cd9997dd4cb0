"""TypeScript/JavaScript export extractor."""

from __future__ import annotations

import tree_sitter
import tree_sitter_javascript as ts_javascript
import tree_sitter_typescript as ts_typescript

from autoimports.config import ImportEntry

_VALUE_DECLARATIONS = {
    "function_declaration",
    "generator_function_declaration",
    "class_declaration",
    "abstract_class_declaration",
    "enum_declaration",
    # anonymous when used as ``export default function () {}``
    "function_expression",
    "function",
    "class",
}

_TYPE_DECLARATIONS = {"interface_declaration", "type_alias_declaration"}

_VARIABLE_DECLARATIONS = {"lexical_declaration", "variable_declaration"}


def _text(node) -> str:
    return node.text.decode("utf-8")


class TypeScriptExtractor:
    extensions = [".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs"]
    language_name = "ts"

    def get_language(self) -> tree_sitter.Language:
        return tree_sitter.Language(ts_typescript.language_typescript())

    def get_language_for_ext(self, ext: str) -> tree_sitter.Language:
        if ext == ".tsx":
            return tree_sitter.Language(ts_typescript.language_tsx())
        if ext in (".js", ".jsx", ".mjs", ".cjs"):
            return tree_sitter.Language(ts_javascript.language())
        return self.get_language()

    def extract_exports(
        self, tree: tree_sitter.Tree, module: str, types: bool = True
    ) -> list[ImportEntry]:
        entries: list[ImportEntry] = []
        for child in tree.root_node.children:
            if child.type == "export_statement":
                self._handle_export(child, module, types, entries)
        return entries

    def _handle_export(self, node, module, types, entries):
        is_default = any(c.type == "default" for c in node.children)
        type_only = any(c.type == "type" for c in node.children)

        for child in node.children:
            # export [type] { a, type B, c as d } [from './x']
            if child.type == "export_clause":
                for spec in child.children:
                    if spec.type != "export_specifier":
                        continue
                    exported = spec.child_by_field_name("alias") or spec.child_by_field_name("name")
                    if exported is None or exported.type not in ("identifier", "type_identifier"):
                        continue
                    is_type = type_only or any(c.type == "type" for c in spec.children)
                    if is_type and not types:
                        continue
                    entries.append(ImportEntry(name=_text(exported), source=module, type=is_type))
                continue

            decl = child
            if decl.type == "ambient_declaration":
                decl = next((c for c in decl.named_children), decl)

            if decl.type in _VARIABLE_DECLARATIONS:
                for vc in decl.children:
                    if vc.type == "variable_declarator":
                        target = vc.child_by_field_name("name")
                        for name in self._pattern_names(target):
                            entries.append(ImportEntry(name=name, source=module))

            elif decl.type in _VALUE_DECLARATIONS:
                name = self._get_name(decl)
                if not name:
                    continue
                if is_default:
                    entries.append(ImportEntry(name="default", source=module, alias=name))
                else:
                    entries.append(ImportEntry(name=name, source=module))

            elif decl.type in _TYPE_DECLARATIONS and types:
                name = self._get_name(decl)
                if name:
                    entries.append(ImportEntry(name=name, source=module, type=True))

    def _get_name(self, node) -> str | None:
        name = node.child_by_field_name("name")
        if name is not None:
            return _text(name)
        for child in node.children:
            if child.type in ("identifier", "type_identifier"):
                return _text(child)
        return None

    def _pattern_names(self, node) -> list[str]:
        """Names bound by a declarator target, including destructuring patterns."""
        if node is None:
            return []
        if node.type in ("identifier", "shorthand_property_identifier_pattern"):
            return [_text(node)]
        if node.type == "pair_pattern":
            return self._pattern_names(node.child_by_field_name("value"))
        if node.type in ("assignment_pattern", "object_assignment_pattern"):
            return self._pattern_names(node.child_by_field_name("left"))
        if node.type in ("object_pattern", "array_pattern", "rest_pattern"):
            names = []
            for child in node.named_children:
                names.extend(self._pattern_names(child))
            return names
        return []
