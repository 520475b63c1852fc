#!/usr/bin/env python3
"""
testscribe CLI - Test Run Report Tool

Usage:
    testscribe show <report.json>
    testscribe convert <report.json> --format XML [OPTIONS]
    testscribe validate <settings.yaml>
    testscribe --version
"""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from . import __version__
from .config import load_report_config
from .reporting import (
    ReportFormat,
    SuiteReport,
    UnsupportedFormatError,
    get_serializer,
    load_report,
    report_file_path,
    save_report,
)

app = typer.Typer(
    name="testscribe",
    help="📝 testscribe - Test Run Report Tool",
    add_completion=False,
)
console = Console()


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def version_callback(value: bool):
    if value:
        console.print(f"📝 testscribe v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None, "--version", "-v", callback=version_callback, is_eager=True,
        help="Show version and exit"
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.WARNING, "--log-level", "-l",
        case_sensitive=False,
        help="Logging verbosity"
    ),
):
    """
    📝 testscribe - Test Run Report Tool

    Inspect and convert test suite reports.
    """
    logging.basicConfig(
        level=log_level.value,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _load_or_exit(report_file: Path) -> SuiteReport:
    """Load a JSON report, exiting with code 1 if it cannot be read."""
    try:
        return load_report(report_file)
    except json.JSONDecodeError as e:
        console.print(f"[red]❌ Not a JSON report:[/red] {e}")
        raise typer.Exit(code=1)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        console.print(f"[red]❌ Malformed report:[/red] {type(e).__name__}: {e}")
        raise typer.Exit(code=1)


@app.command()
def show(
    report_file: Path = typer.Argument(
        ...,
        help="Path to a JSON suite report",
        exists=True,
        readable=True,
    ),
):
    """
    Show a summary of a saved suite report.
    """
    report = _load_or_exit(report_file)
    console.print(report.summary())

    if not report.reports:
        return

    table = Table(title="Tests")
    table.add_column("Name", style="cyan")
    table.add_column("Namespace", style="magenta")
    table.add_column("Time (s)", justify="right")
    table.add_column("Steps", justify="right")
    table.add_column("Failure")

    for test in report.reports:
        failure = f"{test.failure.type}: {test.failure.message}" if test.failure else ""
        table.add_row(
            test.name,
            test.namespace,
            test.time or "-",
            str(len(test.steps)),
            failure,
        )

    console.print()
    console.print(table)


@app.command()
def convert(
    report_file: Path = typer.Argument(
        ...,
        help="Path to a JSON suite report",
        exists=True,
        readable=True,
    ),
    report_format: Optional[str] = typer.Option(
        None, "--format", "-f",
        help="Output format: JSON or XML"
    ),
    name: Optional[str] = typer.Option(
        None, "--name", "-n",
        help="Base name of the output file (defaults to the input file name)"
    ),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o",
        help="Directory for the output file"
    ),
    config_file: Optional[Path] = typer.Option(
        None, "--config", "-c",
        help="Report settings YAML file",
        exists=True,
        readable=True,
    ),
):
    """
    Re-write a saved JSON report in another format.

    Format, name and directory fall back to the settings file when one
    is given, then to JSON and the input file name.
    """
    fmt: ReportFormat | str = ReportFormat.JSON
    base_name = report_file.stem
    directory: Path | str | None = None

    if config_file is not None:
        settings, validation = load_report_config(config_file)
        if not validation.is_valid:
            console.print(f"\n[red]❌ Invalid settings:[/red]")
            console.print(str(validation))
            raise typer.Exit(code=1)
        fmt = settings.report.format
        base_name = settings.report.name
        directory = settings.report.path

    if report_format is not None:
        fmt = report_format
    if name is not None:
        base_name = name
    if output_dir is not None:
        directory = output_dir

    try:
        serializer = get_serializer(fmt)
        destination = report_file_path(base_name, fmt, directory)
    except UnsupportedFormatError as e:
        console.print(f"[red]❌ {e}[/red]")
        raise typer.Exit(code=1)

    report = _load_or_exit(report_file)
    try:
        save_report(report, serializer, destination)
    except OSError as e:
        console.print(f"[red]❌ Could not write report:[/red] {e}")
        raise typer.Exit(code=1)

    console.print(f"📁 Report saved: {destination}")


@app.command()
def validate(
    config_file: Path = typer.Argument(
        ...,
        help="Path to the report settings YAML file",
        exists=True,
        readable=True,
    ),
):
    """
    Validate a report settings file.
    """
    console.print(f"\n📄 Validating: {config_file}")

    settings, validation = load_report_config(config_file)

    if validation.is_valid:
        console.print(f"\n[green]✅ Valid settings[/green]")
        console.print(f"   Format: {settings.report.format.value}")
        console.print(f"   Report file: {settings.report.file_path()}")
        raise typer.Exit(code=0)
    else:
        console.print(f"\n[red]❌ Validation failed:[/red]")
        console.print(str(validation))
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
