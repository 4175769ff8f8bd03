"""Contrato de transporte (producto del método fábrica).

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- `Truck` y `Ship` son intercambiables para el planificador.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import TransportKind


@runtime_checkable
class Transport(Protocol):
    """Contrato mínimo de un transporte.

    Reglas de diseño:
    - `kind` identifica la variante (etiqueta explícita, no `isinstance`).
    - `deliver` es síncrono y total: no puede fallar.
    """

    kind: TransportKind

    def deliver(self) -> str:
        """Devuelve la descripción legible del modo de entrega."""

        ...
