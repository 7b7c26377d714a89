"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Las opciones de línea de comandos tienen prioridad; estas son los defaults.
"""

from __future__ import annotations

import os
import sys
from datetime import timedelta
from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "readtimestamp"
APP_VERSION = "0.1.0"


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / APP_NAME
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / APP_NAME

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core.
    - Un único contrato de configuración para la CLI.
    """

    model_config = SettingsConfigDict(
        env_prefix="READTIMESTAMP_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Nivel de logging (stderr).",
    )
    color: bool = Field(
        default=True,
        description="Colores ANSI en la salida de terminal.",
    )
    show_local: bool = Field(
        default=True,
        description="Mostrar también la hora local junto a UTC.",
    )
    utc_offset_minutes: int | None = Field(
        default=None,
        ge=-24 * 60,
        le=24 * 60,
        description="Offset local fijo en minutos (ignora la zona horaria del sistema).",
    )

    def offset_override(self) -> timedelta | None:
        if self.utc_offset_minutes is None:
            return None
        return timedelta(minutes=self.utc_offset_minutes)
