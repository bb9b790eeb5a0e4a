"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI.
- Permite que el adaptador de Jinja2 y la CLI lean config de forma consistente.
"""

from __future__ import annotations

import os
import sys
from datetime import datetime, timezone, tzinfo
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


def get_user_config_dir() -> Path:
    """Directorio de configuración por usuario (cross-platform, sin dependencias)."""

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA", str(Path.home())))
        return base / "tmpl-funcs"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support" / "tmpl-funcs"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "tmpl-funcs"
    return Path.home() / ".config" / "tmpl-funcs"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def resolve_timezone(name: str) -> tzinfo:
    """Convierte el nombre configurado en un `tzinfo`.

    - "UTC" (cualquier capitalización) -> `timezone.utc`
    - "local" -> zona del sistema
    - cualquier nombre IANA ("Europe/Madrid") -> `ZoneInfo`

    Levanta `ValueError` si la zona no existe.
    """

    key = name.strip()
    if key.upper() in {"UTC", "Z"}:
        return timezone.utc
    if key.lower() == "local":
        local = datetime.now().astimezone().tzinfo
        return local or timezone.utc
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValueError(f"unknown timezone: {name!r}") from exc


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="TMPL_FUNCS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    timezone: str = Field(
        default="UTC",
        min_length=1,
        description="Zona para dateFormat: 'UTC', 'local' o un nombre IANA.",
    )
    templates_dir: Path | None = Field(
        default=None,
        description="Directorio base de plantillas para `render`.",
    )
    autoescape_extensions: list[str] = Field(
        default_factory=lambda: ["html", "xml"],
        description="Extensiones de plantilla con auto-escape activado.",
    )
    log_level: str = Field(
        default="WARNING",
        min_length=1,
        description="Nivel de logging (DEBUG, INFO, WARNING, ...).",
    )

    def resolved_timezone(self) -> tzinfo:
        return resolve_timezone(self.timezone)
