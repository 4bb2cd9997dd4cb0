"""Auto-import context: mask -> detect -> suppress -> generate -> prepend."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from autoimports.config import ImportEntry, TransformResult
from autoimports.engine.codegen import generate_import_statements, generate_type_declarations
from autoimports.engine.identifiers import detect_used_identifiers
from autoimports.engine.literals import strip_literals
from autoimports.engine.registry import ProviderRegistry
from autoimports.engine.suppress import remove_already_imported, remove_locally_defined

logger = logging.getLogger(__name__)


class AutoImportContext:
    """Holds one provider registry and rewrites source text against it.

    The registry is built once at construction and only read afterwards, so a
    context can serve many files, including from several threads.
    """

    def __init__(self, entries: Iterable[ImportEntry] = ()) -> None:
        self.registry = ProviderRegistry(entries)
        self._known = self.registry.names()

    def inject_imports(self, code: str) -> TransformResult:
        """Prepend imports for every registered name ``code`` uses but does not bind."""
        if not code.strip():
            return TransformResult(code=code)

        used = detect_used_identifiers(strip_literals(code), self._known)
        if not used:
            return TransformResult(code=code)

        remove_already_imported(code, used)
        remove_locally_defined(code, used)

        block = generate_import_statements(used, self.registry)
        if not block:
            return TransformResult(code=code)

        injected = [name for name in self.registry if name in used]
        logger.debug(f"Injecting {len(injected)} import(s): {', '.join(injected)}")
        return TransformResult(code=f"{block}\n{code}", injected=injected)

    def generate_type_declarations(self) -> str:
        return generate_type_declarations(self.registry)


def create_auto_import_context(entries: Iterable[ImportEntry] = ()) -> AutoImportContext:
    return AutoImportContext(entries)
