"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Los ejemplos leen sus valores por defecto (delay, ruta del reporte) de forma
  consistente; las opciones de la CLI solo los sobreescriben.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "pattern-demos"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "pattern-demos"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "pattern-demos"
    return Path.home() / ".config" / "pattern-demos"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI y servicios.
    """

    model_config = SettingsConfigDict(
        env_prefix="PATTERN_DEMOS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    deferred_delay_seconds: float = Field(
        default=2.0,
        ge=0,
        description="Duración simulada de la operación larga del ejemplo async (segundos).",
    )
    report_sample_data: str = Field(
        default="Sample Data",
        description="Datos de entrada usados por el ejemplo SRP.",
    )
    report_output_path: Path = Field(
        default=Path("report.txt"),
        description="Ruta donde el ejemplo SRP guarda el reporte (se sobreescribe).",
    )
    log_level: str = Field(
        default="WARNING",
        description="Nivel mínimo de logging (DEBUG/INFO/WARNING/ERROR/CRITICAL).",
    )
    show_banner: bool = Field(
        default=True,
        description="Mostrar el banner de bienvenida en la CLI.",
    )

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level
