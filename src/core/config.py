"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- La función de lookup no lee configuración: recibe sus parámetros
  explícitamente. Solo la CLI construye `AppSettings`.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Variables reconocidas (prefijo `NETADDRS_`):
    - NETADDRS_TIMEOUT_SECONDS
    - NETADDRS_QUIET
    - NETADDRS_LOG_PREFIX
    """

    model_config = SettingsConfigDict(
        env_prefix="NETADDRS_",
        extra="ignore",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Límite (segundos) para una resolución completa. None = sin límite.",
    )
    quiet: bool = Field(
        default=False,
        description="Descarta los mensajes de debug (equivalente a `-q`).",
    )
    log_prefix: str = Field(
        default="netaddrs",
        min_length=1,
        max_length=64,
        description="Prefijo para las líneas que la CLI escribe en stderr.",
    )
