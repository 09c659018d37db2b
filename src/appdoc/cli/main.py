"""CLI for appdoc: generate / list commands."""

from __future__ import annotations

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from appdoc.core.config import AppSettings, ObservabilityConfig, StoreConfig, TemplateConfig
from appdoc.core.logging_config import setup_logging
from appdoc.core.startup_checks import validate_settings
from appdoc.exceptions import AppDocError
from appdoc.factory import create_generator
from appdoc.stores import FileApplicationStore

log = logging.getLogger(__name__)

app = typer.Typer(name="appdoc", help="Render application records to PDF documents")
console = Console()


class LogFormat(str, Enum):
    auto = "auto"
    console = "console"
    json = "json"


def _build_settings(
    store: Optional[Path],
    base_uri: Optional[str],
    verbose: bool,
    log_format: Optional[LogFormat] = None,
) -> AppSettings:
    """Build settings, overriding env defaults with CLI flags."""
    overrides: dict = {}
    if store:
        overrides["store"] = StoreConfig(backend="file", store_path=store)
    if base_uri:
        overrides["template"] = TemplateConfig(base_uri=base_uri)
    if verbose or log_format:
        observability: dict = {}
        if verbose:
            observability["log_level"] = "DEBUG"
        if log_format:
            observability["log_format"] = log_format.value
        overrides["observability"] = ObservabilityConfig(**observability)
    return AppSettings(**overrides)


@app.command()
def generate(
    application_id: str = typer.Argument(..., help="Application id (UUID)"),
    store: Optional[Path] = typer.Option(None, help="Directory of <id>.json application records"),
    base_uri: Optional[str] = typer.Option(None, "--base-uri", help="Template base URI"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Output PDF path"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
    log_format: Optional[LogFormat] = typer.Option(None, "--log-format", help="Log renderer"),
) -> None:
    """Render the document for one application."""
    settings = _build_settings(store, base_uri, verbose, log_format)
    setup_logging(settings.observability)

    try:
        validate_settings(settings)
        generator = create_generator(settings)
        pdf = generator.generate(application_id, settings.template.base_uri)
    except AppDocError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=2) from exc

    if pdf is None:
        console.print(f"[yellow]No document generated for {application_id}[/yellow]")
        raise typer.Exit(code=1)

    output = output or Path(f"{application_id}.pdf")
    output.write_bytes(pdf)
    console.print(f"[green]Document saved to {output}[/green] ({len(pdf):,} bytes)")


@app.command("list")
def list_applications(
    store: Path = typer.Argument(..., help="Directory of <id>.json application records"),
) -> None:
    """List the records in a file store with their state."""
    file_store = FileApplicationStore(store)

    table = Table(title=f"Applications in {store}")
    table.add_column("Id", style="cyan")
    table.add_column("Reference", style="green")
    table.add_column("Applicant")
    table.add_column("State")

    unreadable = 0
    for app_id in file_store.list_ids():
        try:
            application = file_store.get(app_id)
        except AppDocError as exc:
            log.warning("Skipping record %s: %s", app_id, exc)
            unreadable += 1
            table.add_row(str(app_id), "", "", "[red]unreadable[/red]")
            continue
        if application is None:
            continue
        table.add_row(
            str(application.id),
            application.reference_number,
            f"{application.person.first_name} {application.person.surname}",
            application.state.description,
        )

    console.print(table)
    if unreadable:
        console.print(f"[red]{unreadable} record(s) could not be read[/red]")
        raise typer.Exit(code=2)


if __name__ == "__main__":
    app()
