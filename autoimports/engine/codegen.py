"""Code generation: injected import statements and the ambient .d.ts block."""

from __future__ import annotations

from collections.abc import Set
from typing import Union

from autoimports.config import ImportEntry
from autoimports.engine.registry import ProviderRegistry

GENERATED_COMMENT = "// Generated by autoimports. Do not edit."

Registry = Union[ProviderRegistry, dict[str, ImportEntry]]


def _quote(module: str) -> str:
    return "'" + module.replace("\\", "\\\\").replace("'", "\\'") + "'"


def _specifier(local: str, entry: ImportEntry) -> str:
    if local != entry.name:
        return f"{entry.name} as {local}"
    return local


def generate_import_statements(used: Set[str], registry: Registry) -> str:
    """Build the import block for ``used`` names.

    One ``import { ... }`` line per module for values and a separate
    ``import type { ... }`` line for types. Modules appear in the order they
    were first registered and names keep registration order. Names the
    registry does not know are skipped.
    """
    if not used:
        return ""

    # module -> (values, types)
    groups: dict[str, tuple[list[str], list[str]]] = {}
    for local, entry in registry.items():
        if local not in used:
            continue
        values, types = groups.setdefault(entry.source, ([], []))
        (types if entry.type else values).append(_specifier(local, entry))

    lines = []
    for module, (values, types) in groups.items():
        if values:
            lines.append(f"import {{ {', '.join(values)} }} from {_quote(module)}")
        if types:
            lines.append(f"import type {{ {', '.join(types)} }} from {_quote(module)}")
    return "\n".join(lines)


def generate_type_declarations(registry: Registry) -> str:
    """Render the ambient ``declare global`` file for every registered name.

    Declarations are sorted by local name in code-point order, so ``Ref``
    comes before ``ref``.
    """
    body = []
    for local in sorted(registry):
        entry = registry.get(local)
        target = f"import({_quote(entry.source)})[{_quote(entry.name)}]"
        if entry.type:
            body.append(f"  type {local} = {target}")
        else:
            body.append(f"  const {local}: typeof {target}")

    lines = [GENERATED_COMMENT, "export {}", "", "declare global {", *body, "}"]
    return "\n".join(lines) + "\n"
