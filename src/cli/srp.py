"""Ejemplo de Responsabilidad Única (entrypoint).

Por qué dos colaboradores:
- `ReportGenerator` construye el texto (puro, sin disco).
- Un `ReportWriter` (por defecto `ReportSaver`) lo persiste y puede fallar.
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from rich.console import Console

from adapters.report_saver import ReportSaver
from cli.ui_components import print_example_footer, print_example_header, say
from core.interfaces.report import ReportWriter
from core.logging_setup import ensure_logging_configured
from core.services.reporting import ReportGenerator

DEFAULT_DATA = "Sample Data"
DEFAULT_OUTPUT_PATH = Path("report.txt")


def run(
    *,
    data: str = DEFAULT_DATA,
    output_path: str | PathLike[str] = DEFAULT_OUTPUT_PATH,
    console: Console | None = None,
    generator: ReportGenerator | None = None,
    saver: ReportWriter | None = None,
) -> None:
    """Genera un reporte a partir de `data` y lo guarda en `output_path`.

    Los errores de escritura (`OSError`) se propagan al llamador.
    """

    ensure_logging_configured()
    console = console or Console()
    generator = generator or ReportGenerator()
    saver = saver or ReportSaver()

    header = print_example_header(console, "SRP")

    report = generator.generate_report(data)
    say(console, "SRP Report generated.")

    saver.save_to_file(report, output_path)
    say(console, f"SRP Report saved to {output_path}")

    print_example_footer(console, header)
