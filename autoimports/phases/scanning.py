"""Directory scanning: discover exports from project files."""

from __future__ import annotations

import logging
import os
import re
from fnmatch import fnmatchcase
from pathlib import Path

import tree_sitter

from autoimports.config import ImportEntry, ScanDir
from autoimports.languages import get_extractor

logger = logging.getLogger(__name__)

DEFAULT_IGNORE = {
    ".git", "node_modules", "dist", "build", "coverage", "__pycache__",
    ".venv", "venv", ".next", ".nuxt", ".output",
}

_BRACE_RE = re.compile(r"\{([^{}]*)\}")

# Cache parsers per extension to avoid re-creating
_parsers: dict[str, tree_sitter.Parser] = {}


def _get_parser(extractor, ext: str) -> tree_sitter.Parser | None:
    """Get or create a parser for the given extractor and extension."""
    if ext not in _parsers:
        try:
            _parsers[ext] = tree_sitter.Parser(extractor.get_language_for_ext(ext))
        except Exception as e:
            logger.warning(f"Failed to initialise parser for {ext}: {e}")
            return None
    return _parsers[ext]


def _should_ignore(name: str) -> bool:
    return name in DEFAULT_IGNORE or name.startswith(".")


def expand_braces(pattern: str) -> list[str]:
    """Expand ``{a,b}`` alternatives: ``*.{ts,js}`` -> ``['*.ts', '*.js']``."""
    m = _BRACE_RE.search(pattern)
    if not m:
        return [pattern]
    head, tail = pattern[:m.start()], pattern[m.end():]
    expanded = []
    for option in m.group(1).split(","):
        expanded.extend(expand_braces(f"{head}{option}{tail}"))
    return expanded


def matches_any(rel_path: str, patterns: list[str]) -> bool:
    """Glob match against a relative POSIX path; a leading ``**/`` may match nothing."""
    for pattern in patterns:
        for p in expand_braces(pattern):
            if fnmatchcase(rel_path, p):
                return True
            if p.startswith("**/") and fnmatchcase(rel_path, p[3:]):
                return True
    return False


def module_path(path: Path) -> str:
    """Import specifier for a scanned file: absolute POSIX path without extension."""
    return path.resolve().with_suffix("").as_posix()


def _as_scan_dir(d: str | ScanDir) -> ScanDir:
    return ScanDir(path=d) if isinstance(d, str) else d


def scan_file(path: Path, types: bool = True) -> list[ImportEntry]:
    """Extract the exports of one file. Unreadable or unparsable files yield nothing."""
    ext = path.suffix.lower()
    extractor = get_extractor(ext)
    if extractor is None:
        return []

    parser = _get_parser(extractor, ext)
    if parser is None:
        return []

    try:
        source = path.read_bytes()
    except OSError as e:
        logger.warning(f"Failed to read {path}: {e}")
        return []

    try:
        tree = parser.parse(source)
    except Exception as e:
        logger.warning(f"Failed to parse {path}: {e}")
        return []

    try:
        return extractor.extract_exports(tree, module_path(path), types=types)
    except Exception as e:
        logger.warning(f"Failed to extract exports from {path}: {e}")
        return []


def scan_dir(scan: ScanDir, max_file_size: int = 1_000_000) -> list[ImportEntry]:
    """Walk one directory and collect exports from every matching file."""
    root = Path(scan.path)
    if not root.is_dir():
        logger.warning(f"Scan directory not found: {scan.path}")
        return []

    entries: list[ImportEntry] = []
    for dirpath, dirnames, filenames in os.walk(root):
        # Filter ignored directories in-place
        dirnames[:] = [d for d in sorted(dirnames) if not _should_ignore(d)]

        for filename in sorted(filenames):
            full_path = Path(dirpath) / filename
            rel_path = full_path.relative_to(root).as_posix()

            if not matches_any(rel_path, scan.include):
                continue
            if matches_any(rel_path, scan.exclude):
                continue

            try:
                size = full_path.stat().st_size
            except OSError:
                continue
            if size > max_file_size:
                logger.debug(f"Skipping {rel_path}: {size} bytes exceeds limit")
                continue

            found = scan_file(full_path, types=scan.types)
            logger.debug(f"{rel_path}: {len(found)} export(s)")
            entries.extend(found)

    return entries


def scan_dirs(dirs: list[str | ScanDir], max_file_size: int = 1_000_000) -> list[ImportEntry]:
    """Scan every directory in order; failures in one never stop the others."""
    entries: list[ImportEntry] = []
    for d in dirs:
        entries.extend(scan_dir(_as_scan_dir(d), max_file_size))
    return entries
