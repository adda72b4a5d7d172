from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from mangashelf.index import DEFAULT_DESCRIPTOR_NAME


class LibraryConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    root: str = "."
    descriptor_name: str = DEFAULT_DESCRIPTOR_NAME

    @field_validator("root", "descriptor_name")
    @classmethod
    def validate_non_empty(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("library path fields must not be empty")
        return normalized

    @field_validator("descriptor_name")
    @classmethod
    def validate_descriptor_name(cls, value: str) -> str:
        if "/" in value or "\\" in value:
            raise ValueError("library.descriptor_name must be a bare file name")
        return value


class ServerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)
    asset_dir: str | None = None
    shutdown_timeout_seconds: int = Field(default=30, ge=0)

    @field_validator("host")
    @classmethod
    def validate_host(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError("server.host must not be empty")
        return normalized


class AppConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    library: LibraryConfig = Field(default_factory=LibraryConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    if path is None:
        return AppConfig()

    raw = Path(path).read_text(encoding="utf-8")
    payload = _parse_yaml_or_json(raw)
    try:
        return AppConfig.model_validate(payload)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc


def _parse_yaml_or_json(raw: str) -> dict[str, Any]:
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        parsed = _parse_yaml(raw)
    if not isinstance(parsed, dict):
        raise ValueError("Configuration root must be an object.")
    return parsed


def _parse_yaml(raw: str) -> dict[str, Any]:
    import yaml

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
    if not isinstance(parsed, dict):
        raise ValueError("Configuration root must be an object.")
    return parsed
