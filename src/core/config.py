"""Configuración del Core.

Por qué aquí:
- Centraliza variables de entorno (pydantic-settings) sin contaminar la CLI
  ni la capa web.
- Los límites del host (cota máxima, amplitud máxima) viven aquí; el motor
  de primos nunca lee configuración.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.domain.language import Language

APP_NAME = "primos"
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


def _parse_env_lines(text: str) -> dict[str, str]:
    data: dict[str, str] = {}
    for raw_line in text.splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        if "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key:
            data[key] = value
    return data


def write_user_env_vars(values: dict[str, str], *, env_path: Path | None = None) -> Path:
    """Escribe/actualiza variables en el .env global del usuario."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# PRIMOS user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class AppSettings(BaseSettings):
    """Configuración central de la aplicación.

    Por qué pydantic-settings:
    - Tipado + validación en el borde (env vars) sin ensuciar el Core con lógica.
    - Un único contrato de configuración para CLI/web/adapters.
    """

    model_config = SettingsConfigDict(
        env_prefix="PRIMOS_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    max_bound: int = Field(
        default=2**31 - 1,
        ge=1,
        le=2**63 - 1,
        description="Cota superior máxima aceptada desde la entrada del usuario.",
    )
    max_span: int = Field(
        default=1_000_000,
        ge=1,
        description="Cantidad máxima de enteros por consulta (techo de latencia).",
    )
    strategy: Literal["auto", "trial", "sieve", "miller-rabin"] = Field(
        default="auto",
        description="Estrategia del enumerador (todas producen el mismo resultado).",
    )

    session_ttl_seconds: float = Field(
        default=1800.0,
        gt=0,
        description="Vida de un resultado guardado en sesión (segundos).",
    )
    session_max_entries: int = Field(
        default=1000,
        ge=1,
        description="Máximo de sesiones en memoria; se desaloja la más antigua.",
    )
    session_cookie_name: str = Field(
        default="primos_session",
        min_length=1,
        description="Nombre de la cookie con el identificador de sesión.",
    )

    host: str = Field(
        default="127.0.0.1",
        min_length=1,
        description="Interfaz donde escucha el servidor web.",
    )
    port: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Puerto del servidor web.",
    )

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Nivel de logging raíz.",
    )

    default_language: Language = Field(
        default=Language.ENGLISH,
        description="Idioma por defecto para páginas y reportes (en/es).",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value
