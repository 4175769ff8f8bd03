"""Contrato de persistencia de reportes.

Por qué separado del generador:
- Generar un reporte es puro y testeable sin disco.
- Guardarlo es un efecto secundario que puede fallar (permisos, directorios).
"""

from __future__ import annotations

from os import PathLike
from typing import Protocol, runtime_checkable


@runtime_checkable
class ReportWriter(Protocol):
    """Colaborador que persiste el texto de un reporte.

    Reglas de diseño:
    - Sobrescribe el destino completo (no agrega).
    - Los errores de I/O se propagan al llamador sin envolver.
    """

    def save_to_file(self, report: str, path: str | PathLike[str]) -> None:
        ...
