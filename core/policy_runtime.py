"""Configuration loading and validation."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from core.errors import ConfigInvalid

CONFIG_ENV_VAR = "FLOW_WINDOWS_CONFIG"
LOG_LEVEL_ENV_VAR = "FLOW_WINDOWS_LOG_LEVEL"


class LauncherConfig(BaseModel):
    """Identity of the launcher that invokes us."""

    bundle_id: str = "com.runningwithcrayons.Alfred"


class ListerConfig(BaseModel):
    """Window list output settings."""

    fallback_icon: str = "/System/Applications/Finder.app"
    rerun: float | None = Field(default=None, ge=0.1, le=5.0)


class RaiserConfig(BaseModel):
    """Activation wait and raise settings."""

    activation_timeout: float = Field(default=0.5, ge=0.0)
    poll_initial_delay: float = Field(default=0.02, gt=0.0)
    poll_backoff: float = Field(default=2.0, ge=1.0)
    poll_max_delay: float = Field(default=0.1, gt=0.0)
    verify_title: bool = True


class LoggingConfig(BaseModel):
    """Log level for the stderr handler."""

    level: str = "WARNING"

    @field_validator("level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level: {value}")
        return level


class MockAppConfig(BaseModel):
    """One fake running application and its window titles."""

    name: str
    pid: int
    bundle_id: str | None = None
    path: str | None = None
    activation_policy: Literal["regular", "accessory", "prohibited"] = "regular"
    terminated: bool = False
    windows: list[str] = Field(default_factory=list)


class MockBackendConfig(BaseModel):
    """Static registry served by the mock backend."""

    apps: list[MockAppConfig] = Field(default_factory=list)
    menu_bar_pid: int | None = None
    frontmost: int | None = None


class BackendConfig(BaseModel):
    """Which workspace backend to build."""

    type: Literal["macos", "mock"] = "macos"
    mock: MockBackendConfig = Field(default_factory=MockBackendConfig)


class AppConfig(BaseModel):
    """Effective runtime configuration."""

    backend: BackendConfig = Field(default_factory=BackendConfig)
    launcher: LauncherConfig = Field(default_factory=LauncherConfig)
    lister: ListerConfig = Field(default_factory=ListerConfig)
    raiser: RaiserConfig = Field(default_factory=RaiserConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    with path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_effective_config(root: Path, environ: dict[str, str] | None = None) -> AppConfig:
    """Merge the shipped defaults, an optional user file and env overrides.

    Any unreadable or invalid source raises ConfigInvalid.
    """
    try:
        return _load_effective_config(root, os.environ if environ is None else environ)
    except ValidationError as exc:
        first = exc.errors()[0]
        location = ".".join(str(part) for part in first["loc"]) or "config"
        raise ConfigInvalid(f"Invalid configuration: {location}: {first['msg']}") from exc
    except (yaml.YAMLError, ValueError, OSError) as exc:
        raise ConfigInvalid(f"Invalid configuration: {exc}") from exc


def _load_effective_config(root: Path, env: Any) -> AppConfig:
    merged = load_yaml(root / "config" / "default.yaml")

    user_path = env.get(CONFIG_ENV_VAR)
    if user_path:
        merged = merge_dicts(merged, load_yaml(Path(user_path).expanduser()))

    level = env.get(LOG_LEVEL_ENV_VAR)
    if level:
        merged = merge_dicts(merged, {"logging": {"level": level}})

    return AppConfig.model_validate(merged)
