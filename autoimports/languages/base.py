"""Abstract base for export extractors."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import tree_sitter

from autoimports.config import ImportEntry


@runtime_checkable
class ExportExtractor(Protocol):
    """Protocol that all export extractors must implement."""

    extensions: list[str]
    language_name: str

    def get_language_for_ext(self, ext: str) -> tree_sitter.Language:
        """Return the tree-sitter Language object for a file extension."""
        ...

    def extract_exports(
        self, tree: tree_sitter.Tree, module: str, types: bool = True
    ) -> list[ImportEntry]:
        """Extract the names a module exports as entries sourced from ``module``."""
        ...
