"""
Configuration module for convkit.
Provides settings loading from the environment or files, and typed getters.
"""

import json
import logging
import os
import re
from dataclasses import dataclass, asdict, field
from datetime import timedelta
from pathlib import Path
from typing import Any, Dict, Optional, List

import yaml


ENV_PREFIX = "CONVKIT_"

logger = logging.getLogger(__name__)


def get_config_value(key: str, default: Any = None,
                     cast_type: Optional[type] = None,
                     env_prefix: str = ENV_PREFIX) -> Any:
    """
    Get configuration value from environment or return default.
    Optionally cast to specified type.
    """
    env_key = f"{env_prefix}{key.upper()}"
    value = os.environ.get(env_key, default)

    if value is None or cast_type is None:
        return value

    try:
        if cast_type == bool:
            # Handle boolean conversion specially
            if isinstance(value, str):
                return value.lower() in ('true', '1', 'yes', 'on')
            return bool(value)
        elif cast_type == list:
            if isinstance(value, str):
                return [item.strip() for item in value.split(',') if item.strip()]
            return list(value) if value else []
        else:
            return cast_type(value)
    except (ValueError, TypeError):
        logger.warning(f"Ignoring invalid value for {env_key}: {value!r}")
        return default


def get_bool_config(key: str, default: bool = False,
                    env_prefix: str = ENV_PREFIX) -> bool:
    """Get boolean configuration value."""
    return get_config_value(key, default, bool, env_prefix)


def get_int_config(key: str, default: int = 0,
                   env_prefix: str = ENV_PREFIX) -> int:
    """Get integer configuration value."""
    return get_config_value(key, default, int, env_prefix)


def get_float_config(key: str, default: float = 0.0,
                     env_prefix: str = ENV_PREFIX) -> float:
    """Get float configuration value."""
    return get_config_value(key, default, float, env_prefix)


def get_list_config(key: str, default: Optional[List[str]] = None,
                    env_prefix: str = ENV_PREFIX) -> List[str]:
    """Get list configuration value (comma-separated)."""
    if default is None:
        default = []
    return get_config_value(key, default, list, env_prefix)


def parse_duration_string(duration_str: str) -> timedelta:
    """
    Parse duration string like '30s', '5m', '2h', '1d' into timedelta.
    """
    if not isinstance(duration_str, str):
        raise ValueError("Duration must be a string")

    duration_str = duration_str.strip().lower()

    match = re.match(r'^(\d+(?:\.\d+)?)\s*([smhd])$', duration_str)
    if not match:
        raise ValueError(f"Invalid duration format: {duration_str}")

    value, unit = match.groups()
    value = float(value)

    if unit == 's':
        return timedelta(seconds=value)
    elif unit == 'm':
        return timedelta(minutes=value)
    elif unit == 'h':
        return timedelta(hours=value)
    return timedelta(days=value)


@dataclass
class Settings:
    """Library-wide settings."""
    timezone: str = "GMT"
    log_level: str = "WARNING"
    image_timeout: timedelta = field(default_factory=lambda: timedelta(seconds=30))
    image_max_bytes: int = 10 * 1024 * 1024
    font_prefix: str = "HelveticaNeue"
    localization_path: Optional[str] = None

    @classmethod
    def from_env(cls, env_prefix: str = ENV_PREFIX) -> "Settings":
        """Create settings from environment variables"""
        defaults = cls()
        timeout = get_config_value("image_timeout", None, str, env_prefix)
        return cls(
            timezone=get_config_value("timezone", defaults.timezone, str, env_prefix),
            log_level=get_config_value("log_level", defaults.log_level, str, env_prefix).upper(),
            image_timeout=parse_duration_string(timeout) if timeout else defaults.image_timeout,
            image_max_bytes=get_int_config("image_max_bytes", defaults.image_max_bytes, env_prefix),
            font_prefix=get_config_value("font_prefix", defaults.font_prefix, str, env_prefix),
            localization_path=get_config_value("localization_path", None, str, env_prefix),
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Settings":
        """Create settings from a plain mapping, e.g. a loaded config file."""
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        unknown = set(data) - set(known)
        if unknown:
            logger.warning(f"Ignoring unknown settings: {sorted(unknown)}")
        timeout = known.get("image_timeout")
        if isinstance(timeout, str):
            known["image_timeout"] = parse_duration_string(timeout)
        elif isinstance(timeout, (int, float)):
            known["image_timeout"] = timedelta(seconds=timeout)
        return cls(**known)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["image_timeout"] = f"{self.image_timeout.total_seconds():g}s"
        return data

    def validate(self) -> bool:
        """Validate the settings"""
        if not self.timezone:
            raise ValueError("timezone is required")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        if self.image_timeout.total_seconds() <= 0:
            raise ValueError("image_timeout must be positive")
        if self.image_max_bytes <= 0:
            raise ValueError("image_max_bytes must be positive")
        if not self.font_prefix:
            raise ValueError("font_prefix is required")
        return True


def load_settings_file(file_path: str) -> Settings:
    """Load settings from a file (JSON or YAML)."""
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"Configuration file not found: {file_path}")

    file_ext = Path(file_path).suffix.lower()

    with open(file_path, 'r', encoding='utf-8') as f:
        if file_ext == '.json':
            data = json.load(f)
        elif file_ext in ['.yaml', '.yml']:
            data = yaml.safe_load(f) or {}
        else:
            raise ValueError(f"Unsupported configuration file format: {file_ext}")

    return Settings.from_dict(data)


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Apply the configured level to the convkit logger and return it."""
    settings = settings or Settings.from_env()
    package_logger = logging.getLogger("convkit")
    package_logger.setLevel(settings.log_level)
    return package_logger
