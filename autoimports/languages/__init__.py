"""Extractor registry - maps file extensions to export extractors."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from autoimports.languages.base import ExportExtractor

_REGISTRY: dict[str, ExportExtractor] = {}
_INITIALISED = False


def _init_registry() -> None:
    global _INITIALISED
    if _INITIALISED:
        return

    from autoimports.languages.typescript import TypeScriptExtractor

    extractors: list[ExportExtractor] = [
        TypeScriptExtractor(),
    ]

    for extractor in extractors:
        for ext in extractor.extensions:
            _REGISTRY[ext] = extractor

    _INITIALISED = True


def get_extractor(extension: str) -> ExportExtractor | None:
    """Get the export extractor for a file extension (e.g. '.ts')."""
    _init_registry()
    return _REGISTRY.get(extension)


def supported_extensions() -> set[str]:
    """Return all supported file extensions."""
    _init_registry()
    return set(_REGISTRY.keys())
