"""Typer-based command line interface for document_converter."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer
import yaml

from ..config import CONFIG_ENV_VAR, Config, load_config
from ..domain import ConversionMode
from ..pipeline import ConversionOrchestrator, ConversionRequest, ConversionResult, discover_sources

app = typer.Typer(
    help="Convert tabular data between Excel workbooks, SQLite database files and JSON.",
    no_args_is_help=True,
)

MENU_MODES: List[ConversionMode] = [
    ConversionMode.EXCEL_TO_JSON,
    ConversionMode.RELATIONAL_TO_JSON,
    ConversionMode.JSON_TO_EXCEL,
    ConversionMode.JSON_TO_RELATIONAL,
]
EXIT_CHOICE = len(MENU_MODES) + 1


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        envvar=CONFIG_ENV_VAR,
        help="Path to a YAML configuration file.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress at DEBUG level."),
) -> None:
    """Load configuration and set up logging for every command."""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        ctx.obj = load_config(config)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        typer.secho(f"ERROR: Cannot load configuration: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command()
def convert(
    ctx: typer.Context,
    mode: ConversionMode = typer.Argument(..., help="Conversion direction."),
    source: str = typer.Argument(..., help="Input file, relative to the input directory."),
    output: str = typer.Argument(..., help="Output file name inside the output directory."),
) -> None:
    """Run a single conversion."""

    orchestrator = ConversionOrchestrator(ctx.obj)
    result = orchestrator.convert(ConversionRequest(mode=mode, source=source, output_name=output))
    _report(result)
    if not result.success:
        raise typer.Exit(code=1)


@app.command("list")
def list_files(
    ctx: typer.Context,
    mode: ConversionMode = typer.Argument(..., help="Conversion direction."),
) -> None:
    """Display input files eligible for a conversion mode."""

    config: Config = ctx.obj
    files = discover_sources(config.input_directory, mode)
    if not files:
        typer.echo(f"No compatible files found in {config.input_directory}")
        raise typer.Exit()
    for index, path in enumerate(files, start=1):
        typer.echo(f"{index}. {path.name}")


@app.command()
def menu(ctx: typer.Context) -> None:
    """Interactive menu: pick a mode, a file and an output name until Exit."""

    config: Config = ctx.obj
    if not config.input_directory.is_dir():
        typer.secho(f"ERROR: Input directory not found: {config.input_directory}", fg=typer.colors.RED, err=True)
        typer.echo("Please create it and add your files there.")
        raise typer.Exit(code=1)
    try:
        config.output_directory.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        typer.secho(f"ERROR: Cannot create output directory: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    orchestrator = ConversionOrchestrator(config)
    while True:
        mode = _prompt_mode()
        if mode is None:
            break
        request = _prompt_request(config, mode)
        if request is None:
            continue
        _report(orchestrator.convert(request))
    typer.echo("Goodbye!")


def _prompt_mode() -> Optional[ConversionMode]:
    while True:
        typer.echo("\nDocument Converter Menu:")
        for index, mode in enumerate(MENU_MODES, start=1):
            typer.echo(f"{index}. {mode.label}")
        typer.echo(f"{EXIT_CHOICE}. Exit")

        choice = typer.prompt(f"Enter your choice (1-{EXIT_CHOICE})", type=int)
        if choice == EXIT_CHOICE:
            return None
        if 1 <= choice <= len(MENU_MODES):
            return MENU_MODES[choice - 1]
        typer.secho("Invalid choice!", fg=typer.colors.YELLOW)


def _prompt_request(config: Config, mode: ConversionMode) -> Optional[ConversionRequest]:
    files = discover_sources(config.input_directory, mode)
    if not files:
        typer.secho("No compatible files found in the input directory!", fg=typer.colors.YELLOW)
        return None

    typer.echo("\nAvailable files in input directory:")
    for index, path in enumerate(files, start=1):
        typer.echo(f"{index}. {path.name}")

    file_choice = typer.prompt("Select file number", type=int)
    if file_choice < 1 or file_choice > len(files):
        typer.secho("Invalid file selection!", fg=typer.colors.YELLOW)
        return None

    selected = files[file_choice - 1]
    output = typer.prompt(
        "Enter output filename (with appropriate extension)",
        default=f"{selected.stem}{mode.output_extension}",
    )
    return ConversionRequest(mode=mode, source=selected.name, output_name=output)


def _report(result: ConversionResult) -> None:
    for warning in result.warnings:
        typer.secho(f"  WARNING: {warning}", fg=typer.colors.YELLOW)
    if result.success:
        typer.secho("Conversion completed successfully!", fg=typer.colors.GREEN)
        typer.echo(f"Output file saved as: {result.destination}")
        typer.echo(f"  Tables: {result.stats.tables}  Rows: {result.stats.total_rows}")
        return
    for error in result.errors:
        typer.secho(f"Error during conversion: {error.describe()}", fg=typer.colors.RED, err=True)


__all__ = ["app", "convert", "list_files", "menu"]
