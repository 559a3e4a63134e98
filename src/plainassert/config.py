from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Literal

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from plainassert import expected
from plainassert.verbose import setup_logger

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def _expand(value: Any, path: str, missing: list[str]) -> Any:
    if isinstance(value, str):
        try:
            return expandvars(value, nounset=True)
        except Exception:
            # Variable is missing and has no default
            missing.append(f"  {path}={value}")
            return value
    if isinstance(value, dict):
        return {k: _expand(v, f"{path}.{k}" if path else str(k), missing) for k, v in value.items()}
    if isinstance(value, list):
        return [_expand(v, f"{path}[{i}]", missing) for i, v in enumerate(value)]
    return value


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["debug", "info", "warning", "error"] = "debug"
    debug_file: str | None = None
    verbose: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @property
    def level_number(self) -> int:
        return _LEVELS[self.level]


class RegisterConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    scope: expected.RegisterScope = "process"


class PlainAssertConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)
    logging: LoggingConfig = LoggingConfig()
    expected_register: RegisterConfig = Field(default_factory=RegisterConfig, alias="register")

    @model_validator(mode="before")
    @classmethod
    def expand_env_variables(cls, data: Any) -> Any:
        """Expand ${VAR} references in every string value.

        Raises ValueError listing every missing variable so the user can fix them
        all at once rather than hitting them one-by-one.
        """
        if not isinstance(data, dict):
            return data

        missing: list[str] = []
        expanded = _expand(data, "", missing)

        if missing:
            details = "\n".join(missing)
            raise ValueError(f"Config has missing environment variables:\n{details}")

        return expanded


def load_config(path: Path) -> PlainAssertConfig:
    """Load and validate a plainassert config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    config = PlainAssertConfig(**(raw or {}))

    # Resolve relative debug_file paths relative to config file location
    debug_file = config.logging.debug_file
    if debug_file and not Path(debug_file).is_absolute():
        config.logging.debug_file = str((config_dir / debug_file).resolve())

    return config


def apply_config(config: PlainAssertConfig) -> logging.Logger:
    """Configure the package logger and the default register scope."""
    debug_file = config.logging.debug_file
    logger = setup_logger(
        Path(debug_file) if debug_file else None,
        verbose=config.logging.verbose,
        level=config.logging.level_number,
    )
    expected.use_scope(config.expected_register.scope)
    logger.debug(
        f"Applied config: level={config.logging.level}, scope={config.expected_register.scope}"
    )
    return logger
