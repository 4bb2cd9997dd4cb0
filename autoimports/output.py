"""Writing generated files and building the run summary."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path

from autoimports import __version__
from autoimports.config import AutoImportsConfig, ImportEntry, RunResult
from autoimports.engine.registry import ProviderRegistry


def write_text_file(path: str, content: str) -> None:
    """Write ``content`` to ``path``, creating parent directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")


def _entry_dict(entry: ImportEntry) -> dict:
    return {
        "name": entry.name,
        "as": entry.alias,
        "from": entry.source,
        "type": entry.type,
    }


def build_result(
    config: AutoImportsConfig,
    entries: list[ImportEntry],
    registry: ProviderRegistry,
    declarations: str,
    globals_json: str | None,
    timings: dict[str, float],
    total_ms: float,
) -> RunResult:
    """Build the RunResult for one generation run."""
    modules = {e.source for e in registry.entries()}

    return RunResult(
        version="1.0",
        metadata={
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "autoimports_version": __version__,
            "dts_path": config.dts,
            "lint_path": config.lint.filepath if config.lint.enabled else None,
            "duration_ms": round(total_ms, 1),
            "phase_timings": timings,
        },
        stats={
            "entries": len(entries),
            "registered": len(registry),
            "discarded": len(entries) - len(registry),
            "values": sum(1 for e in registry.entries() if not e.type),
            "types": sum(1 for e in registry.entries() if e.type),
            "modules": len(modules),
        },
        entries=[_entry_dict(e) for e in registry.entries()],
        declarations=declarations,
        globals=globals_json,
    )


def write_output(result: RunResult, output_path: str) -> None:
    """Write the run summary to a JSON file."""
    write_text_file(output_path, json.dumps(asdict(result), indent=2, default=str))
