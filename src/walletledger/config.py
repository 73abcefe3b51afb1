from __future__ import annotations

import json
from datetime import tzinfo
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError


class LedgerConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    date_format: Optional[str] = Field(
        None,
        alias="dateFormat",
        description="Formato strftime del título de cada bucket. None => 'March 5 2024'",
    )
    timezone: Optional[str] = Field(None, description="Nombre IANA, p.ej. 'Europe/Madrid'")

    @field_validator("date_format")
    @classmethod
    def _non_empty_format(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("date_format no puede estar vacío")
        return v

    @field_validator("timezone")
    @classmethod
    def _known_zone(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Zona horaria desconocida: {v}") from exc
        return v

    @property
    def zone(self) -> Optional[tzinfo]:
        return ZoneInfo(self.timezone) if self.timezone else None


def load_config(path: str) -> LedgerConfig:
    """
    Lee un JSON tipo {"dateFormat": "%d/%m/%Y", "timezone": "Europe/Madrid"}.
    """
    p = Path(path)
    if not p.exists():
        raise ConfigError(f"No existe el archivo de configuración: {p}")

    try:
        data = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Configuración inválida (JSON): {p}: {exc}") from exc

    try:
        return LedgerConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Configuración inválida: {p}: {exc}") from exc


def merge_overrides(
    config: LedgerConfig,
    date_format: Optional[str] = None,
    timezone: Optional[str] = None,
) -> LedgerConfig:
    """Los flags de CLI pisan lo que venga del archivo."""
    data = config.model_dump()
    if date_format is not None:
        data["date_format"] = date_format
    if timezone is not None:
        data["timezone"] = timezone
    try:
        return LedgerConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Configuración inválida: {exc}") from exc
