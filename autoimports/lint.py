"""Linter globals from generated declaration text."""

from __future__ import annotations

import json
import logging
import re

logger = logging.getLogger(__name__)

_GLOBAL_BLOCK_RE = re.compile(r"declare\s+global\s*\{([^}]*)\}")
_CONST_RE = re.compile(r"const\s+([\w$]+):")
_TYPE_RE = re.compile(r"type\s+([\w$]+)\s*=")


def _global_block(dts_content: str) -> str | None:
    m = _GLOBAL_BLOCK_RE.search(dts_content)
    if not m or not m.group(1):
        return None
    return m.group(1)


def _declared_names(block: str) -> list[str]:
    names = _CONST_RE.findall(block)
    names.extend(_TYPE_RE.findall(block))
    return names


def _check_content(dts_content: str) -> None:
    if not isinstance(dts_content, str):
        raise TypeError("dts_content must be a string")
    if not dts_content.strip():
        raise ValueError("dts_content cannot be empty")


def _globals_json(dts_content: str, value: bool | str) -> str:
    _check_content(dts_content)

    block = _global_block(dts_content)
    if block is None:
        logger.warning("No global declarations found in dts content")
        return json.dumps({"globals": {}}, indent=2)

    globals_ = {name: value for name in _declared_names(block)}
    return json.dumps({"globals": globals_}, indent=2)


def generate_eslint_globals(dts_content: str, globals_prop_value: bool | str = True) -> str:
    """Build an ESLint ``{"globals": {...}}`` JSON document from a .d.ts text.

    Raises:
        TypeError: ``dts_content`` is not a string.
        ValueError: ``dts_content`` is empty.
    """
    return _globals_json(dts_content, globals_prop_value)


def generate_pickier_globals(dts_content: str, globals_prop_value: bool | str = "readonly") -> str:
    """Same as ``generate_eslint_globals`` with Pickier's ``readonly`` default."""
    return _globals_json(dts_content, globals_prop_value)


def get_auto_imported_identifiers(dts_content: str) -> list[str]:
    """Names declared in the global block: consts first, then types."""
    if not isinstance(dts_content, str) or not dts_content.strip():
        return []
    block = _global_block(dts_content)
    if block is None:
        return []
    return _declared_names(block)


def generate_globals(dts_content: str, fmt: str = "eslint", globals_prop_value: bool | str | None = None) -> str:
    """Dispatch to the ESLint or Pickier generator by name."""
    if fmt == "pickier":
        value = "readonly" if globals_prop_value is None else globals_prop_value
        return generate_pickier_globals(dts_content, value)
    if fmt != "eslint":
        raise ValueError(f"Unknown globals format: {fmt}")
    value = True if globals_prop_value is None else globals_prop_value
    return generate_eslint_globals(dts_content, value)
