"""Persistencia de reportes en disco.

Por qué está en adapters:
- Escribir archivos es un detalle de infraestructura.
- El Core solo genera el texto (`core.services.reporting`).
"""

from __future__ import annotations

from os import PathLike
from pathlib import Path

import structlog

from core.interfaces.report import ReportWriter

log = structlog.get_logger(__name__)


class ReportSaver(ReportWriter):
    """Guarda el texto exacto del reporte en un archivo."""

    def save_to_file(self, report: str, path: str | PathLike[str]) -> None:
        """Sobrescribe `path` con `report` (UTF-8, sin encabezados).

        No crea directorios padre: un destino inválido debe fallar con
        `OSError` en el llamador.
        """

        output_path = Path(path)
        output_path.write_text(report, encoding="utf-8", newline="")
        log.info("report_saved", path=str(output_path), size=len(report))
