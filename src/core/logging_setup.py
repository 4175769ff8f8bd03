"""Configuración de logging (structlog).

Por qué aquí:
- La narración de los ejemplos va a stdout (Rich); los eventos de diagnóstico
  van a stderr (structlog), así cada flujo se lee por separado.
- Los `run()` de cada ejemplo pueden llamarse sin pasar por la CLI: en ese caso
  se aplica la configuración por defecto (WARNING, stderr).
"""

from __future__ import annotations

import logging
import sys

import structlog


def configure_logging(level: str = "WARNING") -> None:
    """Configura structlog para el proceso.

    Llamarla otra vez reemplaza la configuración previa; la CLI lo usa cuando
    `--log-level` sobreescribe el valor de los settings.
    """

    numeric_level = getattr(logging, level.upper(), logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def ensure_logging_configured() -> None:
    """Aplica `configure_logging()` solo si nadie configuró structlog antes."""

    if not structlog.is_configured():
        configure_logging()
