"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar la lógica de cada ejemplo con detalles visuales.
- Los tres ejemplos comparten encabezado, cierre y estilo de narración.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.text import Text


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se puede desactivar (`--no-banner`) en modos no interactivos.
    """

    title = Text("PATTERN-DEMOS", style="bold cyan")
    subtitle = Text("Factory Method • SRP • Async/Await", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def say(console: Console, message: str, *, style: str | None = None) -> None:
    """Imprime una línea de narración tal cual (sin markup, resaltado ni wrapping)."""

    console.print(message, style=style, markup=False, highlight=False, soft_wrap=True)


def print_example_header(console: Console, name: str) -> str:
    """Imprime `--- Running <name> Example ---` y devuelve el texto del encabezado."""

    header = f"--- Running {name} Example ---"
    say(console, header, style="bold cyan")
    return header


def print_example_footer(console: Console, header: str) -> None:
    say(console, "-" * len(header), style="cyan")
