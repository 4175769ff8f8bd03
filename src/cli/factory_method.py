"""Ejemplo Factory Method (entrypoint).

Por qué en la CLI:
- El Core devuelve `DeliveryPlan` y no imprime; aquí se narra cada entrega.
"""

from __future__ import annotations

from rich.console import Console

from cli.ui_components import print_example_footer, print_example_header, say
from core.logging_setup import ensure_logging_configured
from core.services.logistics import LogisticsPlanner


def run(console: Console | None = None) -> None:
    """Planifica una entrega por carretera y otra por mar, narrando cada una."""

    ensure_logging_configured()
    console = console or Console()
    header = print_example_header(console, "Factory Method")

    for planner in (LogisticsPlanner.road(), LogisticsPlanner.sea()):
        plan = planner.plan_delivery()
        say(console, plan.description)

    print_example_footer(console, header)
