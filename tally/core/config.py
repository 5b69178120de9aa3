"""tally.core.config

Three config surfaces:
1) built-in defaults (the service runs with no config at all)
2) environment variables, ``TALLY_`` prefix, ``__`` for nesting
3) `config/user.yaml`, else `config/default.yaml`

Environment variables win over values read from a YAML file.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, EnvSettingsSource

from tally.core.exceptions import ConfigError


def _deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    result: dict[str, Any] = dict(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = _deep_merge(result[k], v)
        else:
            result[k] = v
    return result


class ApiConfig(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=0, le=65535)


class CorsConfig(BaseModel):
    allow_origins: list[str] = ["*"]
    allow_methods: list[str] = ["OPTIONS", "GET", "POST", "PUT"]
    allow_headers: list[str] = ["Accept", "Content-Type"]
    allow_credentials: bool = True

    @field_validator("allow_methods")
    @classmethod
    def methods_are_upper(cls, v: list[str]) -> list[str]:
        return [m.upper() for m in v]


class LoggingConfig(BaseModel):
    level: str = "INFO"
    json_output: bool = False

    @field_validator("level")
    @classmethod
    def level_is_known(cls, v: str) -> str:
        level = v.upper()
        if level not in {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}:
            raise ValueError(f"Unknown log level: {v}")
        return level


class Config(BaseSettings):
    """Root configuration. Single source of truth."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    cors: CorsConfig = Field(default_factory=CorsConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {"env_prefix": "TALLY_", "env_nested_delimiter": "__"}

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        try:
            raw: Any = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Config file is not valid YAML: {path}: {e}") from e
        if not isinstance(raw, dict):
            raise ConfigError(f"Config file must contain a mapping: {path}")

        # File values are passed as init kwargs, which pydantic-settings ranks
        # above the environment, so layer TALLY_* on top here.
        raw = _deep_merge(raw, EnvSettingsSource(cls)())

        try:
            return cls(**raw)
        except ValidationError as e:
            raise ConfigError(f"Invalid config in {path}: {e}") from e


def load_config(repo_root: Path | None = None) -> tuple[Config, Path | None]:
    """Load config from the repo root, returning it with the file it came from."""

    root = repo_root or Path.cwd()
    for candidate in (root / "config" / "user.yaml", root / "config" / "default.yaml"):
        if candidate.exists():
            return Config.from_yaml(candidate), candidate
    return Config(), None
