"""autoimports - Inject imports for globally available names and emit ambient declarations."""

__version__ = "0.1.0"

from autoimports.config import ImportEntry, InlinePreset, ScanDir, TransformResult
from autoimports.engine.codegen import (
    GENERATED_COMMENT,
    generate_import_statements,
    generate_type_declarations,
)
from autoimports.engine.context import AutoImportContext, create_auto_import_context
from autoimports.engine.identifiers import detect_used_identifiers
from autoimports.engine.literals import strip_literals
from autoimports.engine.registry import ProviderRegistry
from autoimports.engine.suppress import remove_already_imported, remove_locally_defined
from autoimports.lint import (
    generate_eslint_globals,
    generate_pickier_globals,
    get_auto_imported_identifiers,
)

__all__ = [
    "GENERATED_COMMENT",
    "AutoImportContext",
    "ImportEntry",
    "InlinePreset",
    "ProviderRegistry",
    "ScanDir",
    "TransformResult",
    "create_auto_import_context",
    "detect_used_identifiers",
    "generate_eslint_globals",
    "generate_import_statements",
    "generate_pickier_globals",
    "generate_type_declarations",
    "get_auto_imported_identifiers",
    "remove_already_imported",
    "remove_locally_defined",
    "strip_literals",
]
