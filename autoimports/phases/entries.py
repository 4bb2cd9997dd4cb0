"""Entry resolution: merge explicit imports, presets and scanned exports."""

from __future__ import annotations

import logging

from autoimports.config import AutoImportsConfig, ImportEntry
from autoimports.phases.scanning import scan_dirs
from autoimports.presets import resolve_presets

logger = logging.getLogger(__name__)


def resolve_entries(config: AutoImportsConfig) -> list[ImportEntry]:
    """Return all provider entries in priority order.

    Explicit imports come first, then presets, then directory exports. The
    registry keeps the first entry per local name, so this order decides
    every conflict.
    """
    preset_entries = resolve_presets(config.presets)
    scanned = scan_dirs(config.dirs, config.max_file_size)

    logger.debug(
        f"Resolved {len(config.imports)} explicit, {len(preset_entries)} preset "
        f"and {len(scanned)} scanned entries"
    )
    return [*config.imports, *preset_entries, *scanned]
