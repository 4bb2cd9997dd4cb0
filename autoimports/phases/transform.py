"""Source transformation: inject imports into project files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from autoimports.config import TransformResult
from autoimports.engine.context import AutoImportContext

logger = logging.getLogger(__name__)

TRANSFORM_EXTENSIONS = {".ts", ".tsx", ".js", ".jsx", ".mjs", ".cjs"}


def should_transform(path: Path) -> bool:
    """True for script files outside node_modules that are not declaration files."""
    if "node_modules" in path.parts:
        return False
    if path.name.endswith(".d.ts"):
        return False
    return path.suffix.lower() in TRANSFORM_EXTENSIONS


def _read_source(path: Path) -> str:
    with open(path, encoding="utf-8", newline="") as f:
        return f.read()


def _write_source(path: Path, content: str) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def transform_file(ctx: AutoImportContext, path: Path) -> TransformResult:
    """Inject imports into one file, keeping its line endings."""
    code = _read_source(path)
    result = ctx.inject_imports(code)
    if result.injected and "\r\n" in code:
        block = result.code[:len(result.code) - len(code)]
        result.code = block.replace("\n", "\r\n") + code
    return result


def _collect_files(paths: list[Path]) -> list[tuple[Path, Path]]:
    """Expand inputs to (file, base) pairs; base anchors the output layout."""
    files: list[tuple[Path, Path]] = []
    for p in paths:
        if p.is_dir():
            for dirpath, dirnames, filenames in os.walk(p):
                dirnames[:] = sorted(d for d in dirnames if d != "node_modules" and not d.startswith("."))
                for filename in sorted(filenames):
                    full = Path(dirpath) / filename
                    if should_transform(full):
                        files.append((full, p))
        elif should_transform(p):
            files.append((p, p.parent))
        else:
            logger.debug(f"Skipping {p}: not a transformable file")
    return files


def transform_paths(
    ctx: AutoImportContext,
    paths: list[Path],
    output_dir: Path | None = None,
    dry_run: bool = False,
) -> dict[str, list[str]]:
    """Transform files and directories, in place or mirrored under ``output_dir``.

    Returns the injected local names per file. Files that cannot be read are
    logged and skipped.
    """
    report: dict[str, list[str]] = {}
    for file_path, base in _collect_files(paths):
        try:
            result = transform_file(ctx, file_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Failed to read {file_path}: {e}")
            continue

        report[file_path.as_posix()] = result.injected
        if dry_run:
            continue

        if output_dir is not None:
            target = output_dir / file_path.relative_to(base)
            target.parent.mkdir(parents=True, exist_ok=True)
            _write_source(target, result.code)
        elif result.injected:
            _write_source(file_path, result.code)

    return report
