"""Configuración del SDK.

Responsabilidad:
- Centraliza variables de entorno (pydantic-settings) para cliente y CLI.
- Permite que adaptadores (HTTP, facades) lean config de forma consistente.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dotenv import dotenv_values
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

APP_NAME = "crmkit"


def get_user_env_file() -> Path:
    """Per-user `.env` written by `crmkit doctor setup`."""

    return Path(typer.get_app_dir(APP_NAME)) / ".env"


def write_user_env_vars(values: dict[str, str | None], *, env_path: Path | None = None) -> Path:
    """Merge `values` into the user .env; `None` values leave a key untouched."""

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = {k: v for k, v in dotenv_values(env_path).items() if v is not None}

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = [f"# {APP_NAME} user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class ClientSettings(BaseSettings):
    """Central settings for the CRM client.

    Values come from `CRMKIT_*` environment variables, the project `.env` and
    then the per-user `.env` written by `crmkit doctor setup`.
    """

    model_config = SettingsConfigDict(
        env_prefix="CRMKIT_",
        extra="ignore",
        case_sensitive=False,
        # Orden: proyecto primero (dev), luego config global de usuario.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default="http://localhost:8000/api/",
        min_length=8,
        description="Base URL of the REST API; resource paths are joined onto it.",
    )
    api_token: str | None = Field(
        default=None,
        description="Bearer token attached to every request when set.",
    )
    http_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        description="Timeout per request (seconds), enforced by the transport.",
    )
    user_agent: str = Field(
        default="crmkit/0.1",
        min_length=1,
        description="User-Agent header for API requests.",
    )
    strict_shapes: bool = Field(
        default=False,
        description="Raise ShapeMismatchError when a body does not match the expected shape.",
    )
    log_level: str = Field(
        default="WARNING",
        description="Root log level used by the CLI (DEBUG, INFO, WARNING, ...).",
    )
