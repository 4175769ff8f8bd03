"""CLI principal (Typer).

Cada comando ejecuta un ejemplo de forma aislada; `all` los ejecuta en orden.
Los valores por defecto salen de `AppSettings` y las opciones los sobreescriben.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Optional

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from cli import async_await, factory_method, srp
from cli.ui_components import print_banner
from core.config import AppSettings
from core.logging_setup import configure_logging

app = typer.Typer(
    no_args_is_help=True,
    help="Design-pattern demonstrations: Factory Method, SRP and async/await.",
)

_console = Console()
log = structlog.get_logger(__name__)


def _settings(ctx: typer.Context) -> AppSettings:
    settings = ctx.obj
    if not isinstance(settings, AppSettings):
        settings = AppSettings()
        ctx.obj = settings
    return settings


@app.callback()
def main(
    ctx: typer.Context,
    log_level: Optional[str] = typer.Option(
        None,
        "--log-level",
        help="Log level for diagnostics on stderr (DEBUG, INFO, WARNING, ...).",
    ),
    no_banner: bool = typer.Option(False, "--no-banner", help="Do not print the banner."),
) -> None:
    settings = _settings(ctx)
    if log_level is not None:
        try:
            settings = AppSettings.model_validate({**settings.model_dump(), "log_level": log_level})
        except ValidationError as exc:
            raise typer.BadParameter(
                exc.errors()[0]["msg"], param_hint="--log-level"
            ) from exc
        ctx.obj = settings

    configure_logging(settings.log_level)

    if settings.show_banner and not no_banner:
        print_banner(_console)


@app.command(name="factory")
def factory_command() -> None:
    """Run the Factory Method example."""

    factory_method.run(console=_console)


@app.command(name="srp")
def srp_command(
    ctx: typer.Context,
    data: Optional[str] = typer.Option(None, "--data", help="Input data for the report."),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Report destination (overwritten)."),
) -> None:
    """Run the Single Responsibility example."""

    settings = _settings(ctx)
    _run_srp(
        data=settings.report_sample_data if data is None else data,
        output_path=output or settings.report_output_path,
    )


@app.command(name="async")
def async_command(
    ctx: typer.Context,
    delay: Optional[float] = typer.Option(
        None,
        "--delay",
        min=0.0,
        help="Simulated duration of the long operation (seconds).",
    ),
) -> None:
    """Run the async/await example."""

    settings = _settings(ctx)
    delay_seconds = settings.deferred_delay_seconds if delay is None else delay
    asyncio.run(async_await.run(delay_seconds=delay_seconds, console=_console))


@app.command(name="all")
def all_command(ctx: typer.Context) -> None:
    """Run the three examples in order."""

    settings = _settings(ctx)
    factory_method.run(console=_console)
    _run_srp(data=settings.report_sample_data, output_path=settings.report_output_path)
    asyncio.run(
        async_await.run(delay_seconds=settings.deferred_delay_seconds, console=_console)
    )


def _run_srp(*, data: str, output_path: Path) -> None:
    try:
        srp.run(data=data, output_path=output_path, console=_console)
    except OSError as exc:
        log.error("report_save_failed", path=str(output_path), error=str(exc))
        _console.print(f"[red]Could not save the report:[/red] {escape(str(exc))}", highlight=False)
        raise typer.Exit(code=1) from exc


def run() -> None:
    app()
