"""Core data types and configuration for autoimports."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class LintGlobalsValue(str, Enum):
    READONLY = "readonly"
    READABLE = "readable"
    WRITABLE = "writable"
    WRITEABLE = "writeable"


@dataclass(frozen=True)
class ImportEntry:
    """A provider entry: one exported name, where it comes from, how code refers to it."""
    name: str
    source: str
    alias: str | None = None
    type: bool = False

    @property
    def local_name(self) -> str:
        return self.alias or self.name

    @classmethod
    def from_dict(cls, data: dict[str, Any], source: str | None = None) -> ImportEntry:
        """Build an entry from the ``{name, as, from, type}`` wire shape."""
        name = data.get("name")
        source = data.get("from", source)
        if not name or not source:
            raise ValueError(f"Import entry needs both 'name' and 'from': {data!r}")
        return cls(
            name=name,
            source=source,
            alias=data.get("as") or None,
            type=bool(data.get("type", False)),
        )


PresetImport = Union[str, tuple[str, str], list[str], dict[str, Any]]


@dataclass
class InlinePreset:
    source: str
    imports: list[PresetImport] = field(default_factory=list)


@dataclass
class ScanDir:
    path: str
    types: bool = True
    include: list[str] = field(default_factory=lambda: ["**/*.{ts,tsx,js,jsx}"])
    exclude: list[str] = field(default_factory=lambda: ["**/*.d.ts", "**/node_modules/**"])


@dataclass
class LintOptions:
    enabled: bool = False
    filepath: str = "./.eslint-auto-import.json"
    globals_prop_value: bool | str | None = None
    format: str = "eslint"


@dataclass
class AutoImportsConfig:
    imports: list[ImportEntry] = field(default_factory=list)
    presets: list[str | InlinePreset] = field(default_factory=list)
    dirs: list[str | ScanDir] = field(default_factory=list)
    dts: str = "./auto-imports.d.ts"
    lint: LintOptions = field(default_factory=LintOptions)
    debug: bool = False
    verbose: bool = False
    quiet: bool = False
    max_file_size: int = 1_000_000  # 1MB

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AutoImportsConfig:
        """Parse the JSON configuration file shape."""
        presets: list[str | InlinePreset] = []
        for preset in data.get("presets", []):
            if isinstance(preset, str):
                presets.append(preset)
            else:
                presets.append(InlinePreset(
                    source=preset["from"],
                    imports=list(preset.get("imports", [])),
                ))

        dirs: list[str | ScanDir] = []
        for d in data.get("dirs", []):
            if isinstance(d, str):
                dirs.append(d)
            else:
                scan = ScanDir(path=d["path"], types=d.get("types", True))
                if "include" in d:
                    scan.include = list(d["include"])
                if "exclude" in d:
                    scan.exclude = list(d["exclude"])
                dirs.append(scan)

        eslint = data.get("eslint", {})
        lint = LintOptions(
            enabled=eslint.get("enabled", False),
            filepath=eslint.get("filepath", LintOptions.filepath),
            globals_prop_value=eslint.get("globalsPropValue"),
            format=eslint.get("format", "eslint"),
        )

        return cls(
            imports=[ImportEntry.from_dict(i) for i in data.get("imports", [])],
            presets=presets,
            dirs=dirs,
            dts=data.get("dts", cls.dts),
            lint=lint,
            debug=data.get("debug", False),
        )


@dataclass
class TransformResult:
    code: str
    injected: list[str] = field(default_factory=list)


@dataclass
class RunResult:
    version: str = "1.0"
    metadata: dict[str, Any] = field(default_factory=dict)
    stats: dict[str, Any] = field(default_factory=dict)
    entries: list[dict] = field(default_factory=list)
    declarations: str = ""
    globals: str | None = None
