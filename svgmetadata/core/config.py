"""
Configuration for svgmetadata.

A single dataclass with defaults for everything, optionally loaded from a YAML
file and overridden by environment variables.

Configuration precedence: 1. Env vars, 2. YAML file, 3. Defaults

    # svgmetadata.yaml
    strict_validation: true
    fetch_timeout_sec: ${SVGMETADATA_TIMEOUT:15}
    log_level: INFO

Environment Variables
---------------------
    SVGMETADATA_STRICT          true/false
    SVGMETADATA_LANGUAGE        default dc:language for new records
    SVGMETADATA_FETCH_TIMEOUT   seconds, 1-600
    SVGMETADATA_LOG_LEVEL       DEBUG, INFO, WARNING, ERROR, CRITICAL
    SVGMETADATA_LOG_FILE        path of an additional log file

Usage Example
-------------
    config = load_config()
    record = MetadataRecord(strict_validation=config.strict_validation)
"""

import os
import re
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from svgmetadata.core.logging import get_logger

logger = get_logger(__name__)

CONFIG_FILENAMES = ("svgmetadata.yaml", "svgmetadata.yml")
LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
MAX_FETCH_TIMEOUT_SEC = 600


@dataclass
class Config:
    """svgmetadata configuration."""

    strict_validation: bool = False
    default_language: str = "en"
    fetch_timeout_sec: int = 30
    log_level: str = "WARNING"
    log_file: Optional[Path] = None

    def __post_init__(self) -> None:
        """Validate and normalize values."""
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {sorted(LOG_LEVELS)}, got {self.log_level}"
            )
        self.fetch_timeout_sec = int(self.fetch_timeout_sec)
        if not 0 < self.fetch_timeout_sec <= MAX_FETCH_TIMEOUT_SEC:
            raise ValueError(
                f"fetch_timeout_sec must be in 1..{MAX_FETCH_TIMEOUT_SEC}, "
                f"got {self.fetch_timeout_sec}"
            )
        if not self.default_language:
            self.default_language = "en"
        if self.log_file is not None and not isinstance(self.log_file, Path):
            self.log_file = Path(self.log_file)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        """Create Config from dictionary, ignoring unknown keys."""
        data = expand_env_vars(data)
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys", keys=",".join(unknown))
        values = {k: v for k, v in data.items() if k in known}
        if "strict_validation" in values:
            values["strict_validation"] = _as_bool(values["strict_validation"])
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a YAML-friendly dictionary."""
        return {
            "strict_validation": self.strict_validation,
            "default_language": self.default_language,
            "fetch_timeout_sec": self.fetch_timeout_sec,
            "log_level": self.log_level,
            "log_file": str(self.log_file) if self.log_file else None,
        }


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


def expand_env_vars(value: Any) -> Any:
    """Recursively expand ${VAR_NAME} and ${VAR_NAME:default} in config values.

    Args:
        value: Configuration value (string, dict, list, or primitive)

    Returns:
        Value with all environment variables expanded
    """
    if isinstance(value, str):
        pattern = r"\$\{([^}:]+)(?::([^}]*))?\}"

        def replace_env_var(match: re.Match) -> str:
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [expand_env_vars(item) for item in value]
    return value


def _apply_env_overrides(config: Config) -> Config:
    """
    Apply environment variable overrides to configuration.

    Invalid values are ignored with a warning so a typo in the environment
    never prevents startup.
    """
    strict = os.environ.get("SVGMETADATA_STRICT")
    if strict is not None:
        config.strict_validation = _as_bool(strict)

    language = os.environ.get("SVGMETADATA_LANGUAGE")
    if language:
        config.default_language = language

    timeout = os.environ.get("SVGMETADATA_FETCH_TIMEOUT")
    if timeout is not None:
        try:
            value = int(timeout)
        except ValueError:
            value = 0
        if 0 < value <= MAX_FETCH_TIMEOUT_SEC:
            config.fetch_timeout_sec = value
        else:
            logger.warning("Ignoring invalid SVGMETADATA_FETCH_TIMEOUT", value=timeout)

    level = os.environ.get("SVGMETADATA_LOG_LEVEL")
    if level is not None:
        if level.upper() in LOG_LEVELS:
            config.log_level = level.upper()
        else:
            logger.warning("Ignoring invalid SVGMETADATA_LOG_LEVEL", value=level)

    log_file = os.environ.get("SVGMETADATA_LOG_FILE")
    if log_file:
        config.log_file = Path(log_file)

    return config


def load_config(
    config_path: Optional[Path] = None, base_path: Optional[Path] = None
) -> Config:
    """
    Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to config file. Defaults to svgmetadata.yaml in base_path.
        base_path: Directory searched for a config file. Defaults to cwd.

    Returns:
        Config object with all settings.
    """
    base_path = base_path or Path.cwd()

    if config_path is None:
        for filename in CONFIG_FILENAMES:
            candidate = base_path / filename
            if candidate.exists():
                config_path = candidate
                break
        else:
            return _apply_env_overrides(Config())
    if not config_path.exists():
        logger.warning("Config file not found, using defaults", path=config_path)
        return _apply_env_overrides(Config())

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError("top level of the config file must be a mapping")
        config = Config.from_dict(data)
    except (yaml.YAMLError, ValueError, TypeError) as e:
        logger.warning(
            "Could not load config, using defaults", path=config_path, error=e
        )
        config = Config()

    return _apply_env_overrides(config)
