"""Configuration loading utilities."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .armor import is_single_line
from .paths import runtime_config_dir

LOG_LEVEL_ENV = "MINISIGN_LOG_LEVEL"
_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        if value.upper() not in _LEVELS:
            raise ValueError(f"Unknown log level '{value}'")
        return value

    def normalized_level(self) -> str:
        return self.level.upper()


class SigningConfig(BaseModel):
    default_untrusted_comment: str = Field(
        default="signature from minisign secret key",
        description="Untrusted comment written when the caller supplies none",
    )
    signature_suffix: str = Field(default=".minisig", description="Suffix appended to signed file names")

    @field_validator("default_untrusted_comment")
    @classmethod
    def _validate_comment(cls, value: str) -> str:
        if not value or not is_single_line(value):
            raise ValueError("Default untrusted comment must be a single non-empty line")
        return value

    @field_validator("signature_suffix")
    @classmethod
    def _validate_suffix(cls, value: str) -> str:
        if not value or "/" in value or "\\" in value:
            raise ValueError("Signature suffix must be a non-empty file name suffix")
        return value


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    signing: SigningConfig = Field(default_factory=SigningConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    yield Path.cwd() / ".minisign" / "config.yaml"
    yield runtime_config_dir() / "config.yaml"


def _load_file(path: Optional[Path]) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            try:
                return AppConfig.model_validate(data)
            except ValidationError as exc:
                raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def load_config(path: Optional[Path] = None) -> AppConfig:
    config = _load_file(path)
    override = os.getenv(LOG_LEVEL_ENV)
    if override:
        try:
            logging_config = LoggingConfig(level=override)
        except ValidationError as exc:
            raise ValueError(f"Invalid {LOG_LEVEL_ENV}: {exc}") from exc
        config = config.model_copy(update={"logging": logging_config})
    return config


__all__ = [
    "AppConfig",
    "DEFAULT_CONFIG",
    "LOG_LEVEL_ENV",
    "LoggingConfig",
    "SigningConfig",
    "config_search_paths",
    "load_config",
]
