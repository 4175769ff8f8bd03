"""Creación de transportes (Factory Method).

Por qué un registro por etiqueta:
- El planificador fija la secuencia (crear, luego entregar); la variante decide
  *qué* transporte se construye.
- La variante se elige con un `PlannerKind` explícito y una tabla de clases a
  nivel de módulo, no sobreescribiendo métodos en subclases.
"""

from __future__ import annotations

from typing import Callable

import structlog

from core.domain.models import DeliveryPlan, PlannerKind, TransportKind
from core.interfaces.transport import Transport

log = structlog.get_logger(__name__)


class Truck:
    """Transporte terrestre."""

    kind = TransportKind.LAND

    def deliver(self) -> str:
        return "Delivering by land in a truck."


class Ship:
    """Transporte marítimo."""

    kind = TransportKind.SEA

    def deliver(self) -> str:
        return "Delivering by sea in a ship."


_TRANSPORT_BY_PLANNER: dict[PlannerKind, Callable[[], Transport]] = {
    PlannerKind.ROAD: Truck,
    PlannerKind.SEA: Ship,
}


class LogisticsPlanner:
    """Planificador atado a un único `PlannerKind`.

    Reglas de diseño:
    - `create_transport` es el método fábrica: siempre devuelve una instancia
      nueva del transporte asociado a la variante.
    - `plan_delivery` es el algoritmo fijo construido encima.
    """

    def __init__(self, kind: PlannerKind | str) -> None:
        # ValueError si la etiqueta no existe.
        self._kind = PlannerKind(kind)

    @classmethod
    def road(cls) -> "LogisticsPlanner":
        return cls(PlannerKind.ROAD)

    @classmethod
    def sea(cls) -> "LogisticsPlanner":
        return cls(PlannerKind.SEA)

    @property
    def kind(self) -> PlannerKind:
        return self._kind

    def create_transport(self) -> Transport:
        return _TRANSPORT_BY_PLANNER[self._kind]()

    def plan_delivery(self) -> DeliveryPlan:
        transport = self.create_transport()
        description = transport.deliver()
        log.info(
            "delivery_planned",
            planner=self._kind.value,
            transport=transport.kind.value,
            description=description,
        )
        return DeliveryPlan(
            planner=self._kind,
            transport=transport.kind,
            description=description,
        )

    def __repr__(self) -> str:
        return f"LogisticsPlanner(kind={self._kind.value!r})"
