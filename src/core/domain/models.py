"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Los valores son inmutables (`frozen`): se crean y descartan en una sola llamada.

Nota:
- Estos modelos describen *qué* produce cada ejemplo, no *cómo* se imprime.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class TransportKind(str, Enum):
    """Modo de transporte que realiza una entrega."""

    LAND = "land"
    SEA = "sea"


class PlannerKind(str, Enum):
    """Variantes de planificador logístico.

    Cada variante está atada a un único `TransportKind` (ver
    `core.services.logistics`); no hay configuración que cambie esa relación.
    """

    ROAD = "road"
    SEA = "sea"


class DeliveryPlan(BaseModel):
    """Resultado de `LogisticsPlanner.plan_delivery()`.

    Por qué existe:
    - Expone la descripción de la entrega al llamador en vez de imprimirla
      desde el Core.
    """

    model_config = ConfigDict(frozen=True)

    planner: PlannerKind = Field(
        ...,
        description="Variante de planificador que pidió el transporte.",
    )
    transport: TransportKind = Field(
        ...,
        description="Tipo de transporte creado por el método fábrica.",
    )
    description: str = Field(
        ...,
        min_length=1,
        description="Descripción legible devuelta por `deliver()`.",
    )
