"""Generación de reportes.

Por qué solo la generación:
- Guardar es un detalle de infraestructura (`adapters.report_saver`).
- Sin I/O el generador se testea sin tocar el disco.
"""

from __future__ import annotations

REPORT_TEMPLATE = "Report based on: {data}"


class ReportGenerator:
    """Construye el texto del reporte a partir de los datos. Sin estado."""

    def generate_report(self, data: str) -> str:
        """Aplica la plantilla a `data`.

        Total para cualquier string, incluido el vacío.
        """

        return REPORT_TEMPLATE.format(data=data)
