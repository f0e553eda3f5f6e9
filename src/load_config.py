"""Logic for loading and validating the converter configuration."""

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from src.case_style import style_from_name
from src.config_error import ConfigError
from src.deep_merge import deep_merge

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: dict[str, Any] = {
    "conversion": {
        "default_style": "camel",
        "preserve_dot_acronyms": False,
    },
    "logging": {
        "level": "WARNING",
    },
}


def validate_config(config: dict[str, Any]) -> dict[str, Any]:
    """Check value types and names, raising ConfigError on the first problem."""
    conversion = config.get("conversion")
    if not isinstance(conversion, dict):
        msg = "'conversion' must be a mapping"
        raise ConfigError(msg)
    style_from_name(conversion.get("default_style"))
    if not isinstance(conversion.get("preserve_dot_acronyms"), bool):
        msg = "'conversion.preserve_dot_acronyms' must be true or false"
        raise ConfigError(msg)

    log_cfg = config.get("logging")
    if not isinstance(log_cfg, dict):
        msg = "'logging' must be a mapping"
        raise ConfigError(msg)
    level = log_cfg.get("level")
    if not isinstance(level, str) or not isinstance(
        logging.getLevelName(level.upper()), int
    ):
        msg = f"Unknown logging level: {level!r}"
        raise ConfigError(msg)
    return config


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    A missing file falls back to the defaults. A file that is not valid YAML
    or whose top level is not a mapping raises ConfigError.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                msg = f"Could not parse config {p}: {e}"
                raise ConfigError(msg) from e
            if not isinstance(user_config, dict):
                msg = f"Config {p} must contain a mapping at the top level"
                raise ConfigError(msg)
            config = deep_merge(config, user_config)
        else:
            logger.warning("Config file not found: %s. Using defaults.", p)
    return validate_config(config)
