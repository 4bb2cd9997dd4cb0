"""Preset registry - maps preset names to inline presets."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from autoimports.config import ImportEntry, InlinePreset

if TYPE_CHECKING:
    from autoimports.config import PresetImport

logger = logging.getLogger(__name__)

_REGISTRY: dict[str, InlinePreset] = {}
_INITIALISED = False


def _init_registry() -> None:
    global _INITIALISED
    if _INITIALISED:
        return

    from autoimports.presets.stacksjs_browser import STACKSJS_BROWSER
    from autoimports.presets.stx import STX

    _REGISTRY["stx"] = STX
    _REGISTRY["@stacksjs/browser"] = STACKSJS_BROWSER
    _REGISTRY["stacksjs-browser"] = STACKSJS_BROWSER

    _INITIALISED = True


def get_preset(name: str) -> InlinePreset | None:
    """Get a built-in preset by name (e.g. 'stx')."""
    _init_registry()
    return _REGISTRY.get(name)


def available_presets() -> set[str]:
    """Return all built-in preset names."""
    _init_registry()
    return set(_REGISTRY.keys())


def _preset_entry(item: PresetImport, source: str) -> ImportEntry:
    if isinstance(item, str):
        return ImportEntry(name=item, source=source)
    if isinstance(item, dict):
        return ImportEntry.from_dict(item, source=source)
    name, alias = item
    return ImportEntry(name=name, source=source, alias=alias)


def expand_preset(preset: InlinePreset) -> list[ImportEntry]:
    return [_preset_entry(item, preset.source) for item in preset.imports]


def resolve_presets(presets: Iterable[str | InlinePreset]) -> list[ImportEntry]:
    """Expand named and inline presets into entries, preserving order."""
    entries: list[ImportEntry] = []
    for preset in presets:
        if isinstance(preset, str):
            found = get_preset(preset)
            if found is None:
                logger.warning(f"Unknown preset '{preset}', skipping")
                continue
            preset = found
        entries.extend(expand_preset(preset))
    return entries
