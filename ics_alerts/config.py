from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

ALLOWED_ACTIONS = {"DISPLAY", "AUDIO", "EMAIL"}
ALLOWED_ENVS = {"local", "aws"}
ALLOWED_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# RFC 5545 dur-value, e.g. -PT5M, PT0S, P1DT2H, P1W
_DUR_TIME = r"T(?:\d+H(?:\d+M(?:\d+S)?)?|\d+M(?:\d+S)?|\d+S)"
_DURATION_RE = re.compile(rf"^[+-]?P(?:\d+W|\d+D(?:{_DUR_TIME})?|{_DUR_TIME})$")


class ConfigValidationError(ValueError):
    """Raised when configuration values are invalid."""


def validate_trigger(trigger: Any) -> str:
    """Ensure ``trigger`` is a relative iCalendar duration."""
    if not isinstance(trigger, str):
        raise ConfigValidationError(f"Alert trigger must be a string; got {trigger!r}")
    value = trigger.strip().upper()
    if not _DURATION_RE.match(value):
        raise ConfigValidationError(f"Alert trigger '{trigger}' is not an iCalendar duration")
    return value


def validate_action(action: Any) -> str:
    """Ensure ``action`` is a known VALARM action."""
    value = str(action).strip().upper() if action is not None else ""
    if value not in ALLOWED_ACTIONS:
        raise ConfigValidationError(
            f"Alert action must be one of {sorted(ALLOWED_ACTIONS)}; got '{action}'"
        )
    return value


def validate_log_level(level: Any) -> str:
    """Ensure ``level`` names a standard logging level."""
    value = str(level).strip().upper() if level is not None else ""
    if value not in ALLOWED_LOG_LEVELS:
        raise ConfigValidationError(
            f"Log level must be one of {sorted(ALLOWED_LOG_LEVELS)}; got '{level}'"
        )
    return value


@dataclass
class Config:
    app_env: Optional[str] = None
    alert_trigger: str = "-PT5M"
    alert_action: str = "DISPLAY"
    log_config: Optional[str] = None
    log_level: str = "INFO"
    repo_root: Optional[Path] = None


def _project_config_path() -> Path:
    return Path(__file__).resolve().parents[1] / "config.yaml"


def _flatten_dict(src: Dict[str, Any], dst: Dict[str, Any]) -> None:
    """Flatten one level of ``src`` into ``dst`` prefixing nested keys."""
    for key, value in src.items():
        if isinstance(value, dict):
            for sub_key, sub_val in value.items():
                dst[f"{key}_{sub_key}"] = sub_val
        else:
            dst[key] = value


def _load_config() -> Config:
    """Load configuration from config.yaml with optional env overrides."""
    path = _project_config_path()
    data: Dict[str, Any] = {}

    if path.exists():
        try:
            with path.open("r", encoding="utf-8") as f:
                file_data = yaml.safe_load(f) or {}
                if isinstance(file_data, dict):
                    _flatten_dict(file_data, data)
        except yaml.YAMLError as exc:
            logger.exception("Failed to parse config file %s", path)
            raise ConfigValidationError(f"Error parsing config file '{path}': {exc}") from exc
        except OSError as exc:
            logger.exception("Failed to read config file %s", path)
            raise ConfigValidationError(f"Error reading config file '{path}': {exc}") from exc

    app_env_env = os.getenv("APP_ENV")
    if app_env_env:
        if app_env_env not in ALLOWED_ENVS:
            raise ValueError(f"Unexpected APP_ENV '{app_env_env}'")
        data["app_env"] = app_env_env

    trigger_env = os.getenv("ALERT_TRIGGER")
    if trigger_env is not None:
        data["alert_trigger"] = trigger_env

    action_env = os.getenv("ALERT_ACTION")
    if action_env is not None:
        data["alert_action"] = action_env

    log_config_env = os.getenv("LOG_CONFIG")
    if log_config_env:
        data["log_config"] = log_config_env

    log_level_env = os.getenv("LOG_LEVEL")
    if log_level_env:
        data["log_level"] = log_level_env

    repo_root_raw = data.get("repo_root")
    base_dir = path.parent
    repo_root = (base_dir / repo_root_raw).resolve() if repo_root_raw else base_dir

    return Config(
        app_env=data.get("app_env"),
        alert_trigger=validate_trigger(data.get("alert_trigger", "-PT5M")),
        alert_action=validate_action(data.get("alert_action", "DISPLAY")),
        log_config=data.get("log_config"),
        log_level=validate_log_level(data.get("log_level", "INFO")),
        repo_root=repo_root,
    )


@lru_cache()
def load_config() -> Config:
    """Load configuration and cache the result."""
    return _load_config()

settings = load_config()
config = settings


def reload_config() -> Config:
    """Reload configuration and update module-level ``config``."""
    global config, settings
    load_config.cache_clear()
    new_config = load_config()
    config = settings = new_config
    return new_config


def __getattr__(name: str) -> Any:
    try:
        return getattr(load_config(), name)
    except AttributeError as exc:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from exc
