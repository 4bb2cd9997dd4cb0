"""Sequential phase orchestrator with timing."""

from __future__ import annotations

import logging
import time

from autoimports.config import AutoImportsConfig, ImportEntry, RunResult
from autoimports.engine.context import AutoImportContext
from autoimports.lint import generate_globals
from autoimports.output import build_result, write_text_file
from autoimports.phases.entries import resolve_entries

logger = logging.getLogger(__name__)


_PHASE_LABELS = {
    "entries": "Resolving imports, presets and directories",
    "registry": "Building provider registry",
    "declarations": "Writing type declarations",
    "lint": "Writing linter globals",
}


class SetupError(RuntimeError):
    """Generated files could not be written."""


def build_context(config: AutoImportsConfig) -> AutoImportContext:
    """Resolve every entry for ``config`` and build a context from them."""
    return AutoImportContext(resolve_entries(config))


def run_pipeline(
    config: AutoImportsConfig,
    progress_callback=None,
) -> RunResult:
    """Resolve entries, build the registry and write the generated files.

    Args:
        config: Generation configuration.
        progress_callback: Optional callable(phase_name, label) invoked
            when each phase starts. Used by the CLI for Rich progress.

    Raises:
        SetupError: the declaration or globals file could not be written.
    """
    entries: list[ImportEntry] = []
    ctx: AutoImportContext | None = None
    declarations = ""
    globals_json: str | None = None
    timings: dict[str, float] = {}
    total_start = time.monotonic()

    def _entries():
        entries.extend(resolve_entries(config))

    def _registry():
        nonlocal ctx
        ctx = AutoImportContext(entries)

    def _declarations():
        nonlocal declarations
        declarations = ctx.generate_type_declarations()
        write_text_file(config.dts, declarations)

    def _lint():
        nonlocal globals_json
        if not config.lint.enabled:
            return
        globals_json = generate_globals(
            declarations, config.lint.format, config.lint.globals_prop_value,
        )
        write_text_file(config.lint.filepath, globals_json)

    phases = [
        ("entries", _entries),
        ("registry", _registry),
        ("declarations", _declarations),
        ("lint", _lint),
    ]

    for name, phase_fn in phases:
        if progress_callback:
            progress_callback(name, _PHASE_LABELS.get(name, name))
        start = time.monotonic()
        try:
            phase_fn()
        except OSError as e:
            raise SetupError(f"Failed to set up auto-imports: {e}") from e
        timings[name] = time.monotonic() - start

    total_ms = (time.monotonic() - total_start) * 1000
    logger.debug(f"Generated {len(ctx.registry)} declaration(s) in {total_ms:.1f}ms")

    return build_result(config, entries, ctx.registry, declarations, globals_json, timings, total_ms)
