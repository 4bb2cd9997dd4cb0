"""Identifier matcher: find free references to known names in masked code."""

from __future__ import annotations

import re
from collections.abc import Set

_IDENT_RE = re.compile(r"[\w$]+")


def _is_property_access(code: str, start: int) -> bool:
    """True if the identifier at ``start`` follows ``.`` or ``?.`` (but not a spread)."""
    if start == 0 or code[start - 1] != ".":
        return False
    return code[max(0, start - 3):start] != "..."


def detect_used_identifiers(code: str, known: Set[str]) -> set[str]:
    """Return the names from ``known`` that ``code`` references as free identifiers.

    ``code`` is expected to be masked already (see ``strip_literals``). A match
    must be a whole identifier run, so ``ref`` never matches inside
    ``preference``; runs directly after ``.`` or ``?.`` are property accesses
    and are skipped.
    """
    if not code or not known:
        return set()

    found: set[str] = set()
    for match in _IDENT_RE.finditer(code):
        name = match.group()
        if name in known and name not in found:
            if not _is_property_access(code, match.start()):
                found.add(name)
    return found
