"""Global configuration management.

Config is loaded at module import time and available globally via:
    from termdash.config import config

Settings are read-only: nothing here ever writes the config file.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv

from termdash.constants import APP_TITLE, DEFAULT_LOG_PATH, NOTIFICATION_DURATION_MS, POLL_INTERVAL_MS, QUIT_GRACE_MS
from termdash.cli.tui.types import ThemeId, ViewId

DEFAULT_CONFIG_PATH = Path("~/.config/termdash/config.yml")


@dataclass
class UIConfig:
    title: str = APP_TITLE
    start_view: ViewId = ViewId.DASHBOARD
    theme: ThemeId = ThemeId.LIGHT
    notification_duration_ms: int = NOTIFICATION_DURATION_MS
    quit_grace_ms: int = QUIT_GRACE_MS
    poll_interval_ms: int = POLL_INTERVAL_MS
    mouse: bool = True


@dataclass
class LoggingConfig:
    """Logging settings.

    Attributes:
        level: Log level name (e.g. "INFO", "DEBUG")
        path: Log file path; "-" logs to stderr
    """

    level: str = "INFO"
    path: str = DEFAULT_LOG_PATH


@dataclass
class Config:
    ui: UIConfig = field(default_factory=UIConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


DEFAULT_CONFIG: dict[str, Any] = {
    "ui": {
        "title": APP_TITLE,
        "start_view": ViewId.DASHBOARD.value,
        "theme": ThemeId.LIGHT.value,
        "notification_duration_ms": NOTIFICATION_DURATION_MS,
        "quit_grace_ms": QUIT_GRACE_MS,
        "poll_interval_ms": POLL_INTERVAL_MS,
        "mouse": True,
    },
    "logging": {
        "level": "INFO",
        "path": DEFAULT_LOG_PATH,
    },
}


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge override dict into base dict.

    Args:
        base: Base dictionary with defaults
        override: Dictionary with overrides from user config

    Returns:
        Merged dictionary
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name)
    if not isinstance(value, dict):
        raise ValueError(f"Config section '{name}' must be a mapping, got {type(value).__name__}")
    return value


def _int(section: dict[str, Any], key: str, path: str, *, minimum: int) -> int:
    value = section.get(key)
    # bool is an int subclass; "true" is not a duration
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Config key '{path}.{key}' must be an integer, got {value!r}")
    if value < minimum:
        raise ValueError(f"Config key '{path}.{key}' must be >= {minimum}, got {value}")
    return value


def _choice(section: dict[str, Any], key: str, path: str, enum_cls: Any) -> Any:
    value = section.get(key)
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise ValueError(f"Config key '{path}.{key}' must be one of: {allowed}; got {value!r}") from None


def _build_config(raw: dict[str, Any]) -> Config:
    """Build typed Config from raw dict with validation."""
    ui_raw = _section(raw, "ui")
    logging_raw = _section(raw, "logging")

    mouse = ui_raw.get("mouse")
    if not isinstance(mouse, bool):
        raise ValueError(f"Config key 'ui.mouse' must be true or false, got {mouse!r}")

    level = os.getenv("TERMDASH_LOG_LEVEL") or logging_raw.get("level")
    if not isinstance(level, str) or not level.strip():
        raise ValueError(f"Config key 'logging.level' must be a level name, got {level!r}")

    log_path = os.getenv("TERMDASH_LOG_PATH") or logging_raw.get("path")
    if not isinstance(log_path, str) or not log_path.strip():
        raise ValueError(f"Config key 'logging.path' must be a path or '-', got {log_path!r}")

    return Config(
        ui=UIConfig(
            title=str(ui_raw.get("title") or APP_TITLE),
            start_view=_choice(ui_raw, "start_view", "ui", ViewId),
            theme=_choice(ui_raw, "theme", "ui", ThemeId),
            notification_duration_ms=_int(ui_raw, "notification_duration_ms", "ui", minimum=1),
            quit_grace_ms=_int(ui_raw, "quit_grace_ms", "ui", minimum=0),
            poll_interval_ms=_int(ui_raw, "poll_interval_ms", "ui", minimum=1),
            mouse=mouse,
        ),
        logging=LoggingConfig(level=level.strip().upper(), path=log_path.strip()),
    )


def config_path() -> Path:
    """Config file location: ``$TERMDASH_CONFIG_PATH`` or the per-user default."""
    env_path = os.getenv("TERMDASH_CONFIG_PATH")
    return Path(env_path).expanduser() if env_path else DEFAULT_CONFIG_PATH.expanduser()


def load_config(path: Optional[Path] = None) -> Config:
    """Load .env, then the YAML config merged over defaults.

    A missing config file means "all defaults".

    Raises:
        ValueError: if the file is not a mapping or holds invalid values
    """
    env_path = os.getenv("TERMDASH_ENV_PATH")
    load_dotenv(Path(env_path).expanduser() if env_path else Path.cwd() / ".env")

    path = path or config_path()
    user_config: Any = {}
    if path.exists():
        with open(path, encoding="utf-8") as f:
            try:
                user_config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid YAML in {path}: {e}") from e
        if user_config is None:
            user_config = {}
        if not isinstance(user_config, dict):
            raise ValueError(f"Config file {path} must contain a mapping at the top level")

    return _build_config(_deep_merge(DEFAULT_CONFIG, user_config))


config = load_config()
