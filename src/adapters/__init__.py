"""Adaptadores de infraestructura.

Por qué un paquete:
- Agrupa los detalles de I/O (archivos) fuera del Core.
- Cada adaptador implementa un contrato de `core.interfaces`.
"""

from adapters.report_saver import ReportSaver

__all__ = [
	"ReportSaver",
]
