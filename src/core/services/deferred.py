"""Cómputo diferido (async/await).

Por qué async:
- Una única suspensión secuencial: anuncia el inicio, cede el event loop durante
  un intervalo fijo y al reanudar produce el resultado.
- Hay una sola operación en vuelo, esperada de inmediato por su llamador.

Nota: sin cancelación ni timeouts; el sleep siempre se completa.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Callable

import structlog

log = structlog.get_logger(__name__)

DEFAULT_DELAY_SECONDS = 2.0
RESULT = "Success"


@dataclass
class DeferredHooks:
    """Callbacks opcionales para capas de UI (narración)."""

    started: Callable[[], None] | None = None
    finished: Callable[[], None] | None = None


async def long_running_operation(
    *,
    delay_seconds: float = DEFAULT_DELAY_SECONDS,
    hooks: DeferredHooks | None = None,
) -> str:
    """Simula una operación larga y devuelve `"Success"` al reanudar."""

    if delay_seconds < 0:
        raise ValueError("delay_seconds must be >= 0")

    hooks = hooks or DeferredHooks()

    log.info("long_running_operation_started", delay_seconds=delay_seconds)
    if hooks.started:
        hooks.started()

    await asyncio.sleep(delay_seconds)

    log.info("long_running_operation_finished", result=RESULT)
    if hooks.finished:
        hooks.finished()

    return RESULT
