"""Declaration suppressor: drop candidates that the source already binds.

Both passes work on the raw (unmasked) source and only ever remove names, so
they can run in either order.
"""

from __future__ import annotations

import re

_ID = r"[\w$]+"

# import Default from 'x' / import Default, { a, b as c } from 'x'
_DEFAULT_IMPORT_RE = re.compile(
    rf"\bimport\s+(?:type\s+)?({_ID})\s*(?:,\s*\{{([^}}]*)\}})?\s*from\s*['\"]"
)
# import Default, * as ns from 'x'
_DEFAULT_NAMESPACE_IMPORT_RE = re.compile(
    rf"\bimport\s+(?:type\s+)?({_ID})\s*,\s*\*\s*as\s+({_ID})"
)
# import { a, type B, c as d } from 'x' / import type { A } from 'x'
_NAMED_IMPORT_RE = re.compile(r"\bimport\s+(?:type\s+)?\{([^}]*)\}\s*from\b")
# import * as ns from 'x'
_NAMESPACE_IMPORT_RE = re.compile(rf"\bimport\s+(?:type\s+)?\*\s*as\s+({_ID})")
# export { a, b as c } from 'x' / export type { A } from 'x'
_REEXPORT_RE = re.compile(r"\bexport\s+(?:type\s+)?\{([^}]*)\}\s*from\b")

_DECLARATION_RES = [
    re.compile(rf"\bfunction\b\s*\*?\s*({_ID})"),
    re.compile(rf"\b(?:const|let|var)\s+({_ID})"),
    re.compile(rf"\bclass\s+({_ID})"),
    re.compile(rf"\btype\s+({_ID})\s*[<=]"),
    re.compile(rf"\binterface\s+({_ID})"),
    re.compile(rf"\benum\s+({_ID})"),
]


def _specifier_locals(clause: str) -> list[str]:
    """Local names bound by an import/export brace clause body."""
    names = []
    for part in clause.split(","):
        part = part.strip()
        if part.startswith("type "):
            part = part[len("type "):].strip()
        if not part:
            continue
        pieces = part.split()
        if len(pieces) >= 3 and pieces[-2] == "as":
            names.append(pieces[-1])
        else:
            names.append(pieces[0])
    return names


def remove_already_imported(code: str, used: set[str]) -> None:
    """Remove every name bound by an import or re-export statement in ``code``."""
    if not used:
        return

    bound: set[str] = set()
    for m in _DEFAULT_IMPORT_RE.finditer(code):
        bound.add(m.group(1))
        if m.group(2):
            bound.update(_specifier_locals(m.group(2)))
    for m in _DEFAULT_NAMESPACE_IMPORT_RE.finditer(code):
        bound.add(m.group(1))
        bound.add(m.group(2))
    for m in _NAMED_IMPORT_RE.finditer(code):
        bound.update(_specifier_locals(m.group(1)))
    for m in _NAMESPACE_IMPORT_RE.finditer(code):
        bound.add(m.group(1))
    for m in _REEXPORT_RE.finditer(code):
        bound.update(_specifier_locals(m.group(1)))

    used.difference_update(bound)


def remove_locally_defined(code: str, used: set[str]) -> None:
    """Remove every name that ``code`` declares itself.

    Covers functions (including ``async`` and generators), ``const``/``let``/
    ``var``, classes, type aliases, interfaces and enums, exported or not.
    """
    if not used:
        return

    for pattern in _DECLARATION_RES:
        for m in pattern.finditer(code):
            used.discard(m.group(1))
