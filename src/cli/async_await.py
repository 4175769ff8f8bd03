"""Ejemplo async/await (entrypoint).

Por qué hooks:
- El Core notifica inicio/fin mediante `DeferredHooks`; la narración es de la CLI.
"""

from __future__ import annotations

from rich.console import Console

from cli.ui_components import print_example_footer, print_example_header, say
from core.logging_setup import ensure_logging_configured
from core.services.deferred import (
    DEFAULT_DELAY_SECONDS,
    DeferredHooks,
    long_running_operation,
)


async def run(
    *,
    delay_seconds: float = DEFAULT_DELAY_SECONDS,
    console: Console | None = None,
) -> None:
    """Lanza la operación larga, la espera e informa el resultado."""

    ensure_logging_configured()
    console = console or Console()
    header = print_example_header(console, "Async/Await")

    say(console, "Starting async operation...")
    hooks = DeferredHooks(
        started=lambda: say(console, "LongRunningOperationAsync: Started.", style="dim"),
        finished=lambda: say(console, "LongRunningOperationAsync: Finished.", style="dim"),
    )
    result = await long_running_operation(delay_seconds=delay_seconds, hooks=hooks)
    say(console, f"Async operation completed with result: {result}", style="green")

    print_example_footer(console, header)
