"""autoimports CLI - generate declarations and inject imports."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from autoimports.config import AutoImportsConfig, ImportEntry


@click.group()
def cli() -> None:
    """autoimports - Use globally available names without writing imports."""
    pass


def _configure_logging(debug: bool) -> None:
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def parse_import_spec(spec: str) -> ImportEntry:
    """Parse ``[type:]name[@alias]:module`` into an ImportEntry."""
    is_type = False
    if spec.startswith("type:") and spec.count(":") >= 2:
        is_type = True
        spec = spec[len("type:"):]

    name_part, sep, module = spec.partition(":")
    if not sep or not name_part or not module:
        raise click.BadParameter(f"expected [type:]name[@alias]:module, got '{spec}'")

    name, _, alias = name_part.partition("@")
    return ImportEntry(name=name, source=module, alias=alias or None, type=is_type)


def _load_config(
    config_file: str | None,
    dirs: tuple[str, ...],
    presets: tuple[str, ...],
    imports: tuple[str, ...],
    dts: str | None,
) -> AutoImportsConfig:
    if config_file:
        data = json.loads(Path(config_file).read_text(encoding="utf-8"))
        config = AutoImportsConfig.from_dict(data)
    else:
        config = AutoImportsConfig()

    config.imports.extend(parse_import_spec(s) for s in imports)
    config.presets.extend(presets)
    config.dirs.extend(dirs)
    if dts:
        config.dts = dts
    return config


def _entry_options(fn):
    """Options shared by commands that build a provider registry."""
    options = [
        click.option("-c", "--config", "config_file", type=click.Path(exists=True, dir_okay=False),
                     default=None, help="JSON configuration file"),
        click.option("-d", "--dir", "dirs", multiple=True, help="Directory to scan for exports"),
        click.option("-p", "--preset", "presets", multiple=True, help="Preset name (e.g. stx)"),
        click.option("-i", "--import", "imports", multiple=True,
                     help="Explicit import as [type:]name[@alias]:module"),
        click.option("--debug", is_flag=True, help="Enable debug logging"),
    ]
    for option in reversed(options):
        fn = option(fn)
    return fn


def _run_with_progress(config: AutoImportsConfig):
    """Run the pipeline with Rich progress display."""
    from rich.console import Console
    from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
    from rich.table import Table

    from autoimports.pipeline import run_pipeline

    console = Console()

    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    ) as progress:
        task = progress.add_task("Initialising...", total=None)

        def on_phase(name, label):
            progress.update(task, description=label)

        result = run_pipeline(config, progress_callback=on_phase)

    stats = result.stats
    timings = result.metadata.get("phase_timings", {})

    table = Table(title=f"Auto-imports: {Path(config.dts).name}", show_edge=False)
    table.add_column("Metric", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Entries", str(stats.get("entries", 0)))
    table.add_row("Registered", str(stats.get("registered", 0)))
    table.add_row("Discarded (conflicts)", str(stats.get("discarded", 0)))
    table.add_row("Values", str(stats.get("values", 0)))
    table.add_row("Types", str(stats.get("types", 0)))
    table.add_row("Modules", str(stats.get("modules", 0)))
    table.add_row("Duration", f"{result.metadata.get('duration_ms', 0):.1f}ms")

    console.print(table)

    if config.verbose and timings:
        timing_table = Table(title="Phase Timings", show_edge=False)
        timing_table.add_column("Phase", style="bold")
        timing_table.add_column("Time (ms)", justify="right")
        for phase, seconds in timings.items():
            timing_table.add_row(phase, f"{seconds * 1000:.1f}")
        console.print(timing_table)

    return result


@cli.command("generate")
@_entry_options
@click.option("--dts", default=None, help="Declaration file path [default: ./auto-imports.d.ts]")
@click.option("--eslint", "eslint_enabled", is_flag=True, help="Also write linter globals")
@click.option("--eslint-file", default=None, help="Linter globals output path")
@click.option("--globals-format", type=click.Choice(["eslint", "pickier"]), default=None,
              help="Linter globals flavour")
@click.option("--globals-value", default=None, help="Value for each global (true, readonly, ...)")
@click.option("-o", "--summary", "summary_path", default=None, help="Write a JSON run summary")
@click.option("--verbose", is_flag=True, help="Show per-phase timing breakdown")
@click.option("--quiet", is_flag=True, help="Suppress all output except errors")
def generate_cmd(
    config_file: str | None,
    dirs: tuple[str, ...],
    presets: tuple[str, ...],
    imports: tuple[str, ...],
    debug: bool,
    dts: str | None,
    eslint_enabled: bool,
    eslint_file: str | None,
    globals_format: str | None,
    globals_value: str | None,
    summary_path: str | None,
    verbose: bool,
    quiet: bool,
) -> None:
    """Write the ambient declaration file (and optionally linter globals)."""
    from autoimports.output import write_output
    from autoimports.pipeline import SetupError, run_pipeline

    _configure_logging(debug)
    config = _load_config(config_file, dirs, presets, imports, dts)
    config.verbose = verbose
    config.quiet = quiet
    config.debug = config.debug or debug

    if eslint_enabled or eslint_file:
        config.lint.enabled = True
    if eslint_file:
        config.lint.filepath = eslint_file
    if globals_format:
        config.lint.format = globals_format
    if globals_value is not None:
        config.lint.globals_prop_value = _parse_globals_value(globals_value)

    try:
        if quiet:
            result = run_pipeline(config)
        else:
            result = _run_with_progress(config)
    except SetupError as e:
        raise click.ClickException(str(e)) from e

    if summary_path:
        write_output(result, summary_path)

    if not quiet:
        from rich.console import Console
        console = Console()
        console.print(f"[green]Declarations written to:[/green] {config.dts}")
        if config.lint.enabled:
            console.print(f"[green]Globals written to:[/green] {config.lint.filepath}")


def _parse_globals_value(value: str) -> bool | str:
    lowered = value.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return value


@cli.command("transform")
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True))
@_entry_options
@click.option("-o", "--output", "output_dir", default=None, help="Write results under this directory")
@click.option("--dry-run", is_flag=True, help="Only report which imports would be injected")
def transform_cmd(
    paths: tuple[str, ...],
    config_file: str | None,
    dirs: tuple[str, ...],
    presets: tuple[str, ...],
    imports: tuple[str, ...],
    debug: bool,
    output_dir: str | None,
    dry_run: bool,
) -> None:
    """Inject missing imports into source files."""
    from rich.console import Console

    from autoimports.phases.transform import transform_paths
    from autoimports.pipeline import build_context

    _configure_logging(debug)
    config = _load_config(config_file, dirs, presets, imports, None)
    ctx = build_context(config)

    report = transform_paths(
        ctx,
        [Path(p) for p in paths],
        output_dir=Path(output_dir) if output_dir else None,
        dry_run=dry_run,
    )

    console = Console()
    changed = 0
    for file_path, injected in report.items():
        if injected:
            changed += 1
            console.print(f"{file_path}: {', '.join(injected)}", highlight=False)
    verb = "would change" if dry_run else "changed"
    console.print(f"[green]{changed} of {len(report)} file(s) {verb}[/green]")


@cli.command("globals")
@click.argument("dts_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--format", "fmt", type=click.Choice(["eslint", "pickier"]), default="eslint")
@click.option("--value", "value", default=None, help="Value for each global")
def globals_cmd(dts_file: str, fmt: str, value: str | None) -> None:
    """Print linter globals for a generated declaration file."""
    from autoimports.lint import generate_globals

    content = Path(dts_file).read_text(encoding="utf-8")
    parsed = _parse_globals_value(value) if value is not None else None
    try:
        click.echo(generate_globals(content, fmt, parsed))
    except ValueError as e:
        raise click.ClickException(str(e)) from e


if __name__ == "__main__":
    cli()
