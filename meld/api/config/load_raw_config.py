"""Read a config document from disk without checking its shape."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from .ConfigLoadError import ConfigLoadError
from .get_config_path import get_config_path

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


def load_raw_config(path: Path | str | None = None) -> Any:
    """Load the decoded config document.

    JSON by default; ``.yaml``/``.yml`` files are read with ``yaml.safe_load``.
    The decoded value is returned as-is, even when it is not a mapping.

    Args:
        path: Config file; defaults to ``<MELD_HOME>/config.json``

    Raises:
        ConfigLoadError: If the file is missing, unreadable, or cannot be parsed
    """
    config_path = Path(path).expanduser() if path else get_config_path()

    if not config_path.exists():
        raise ConfigLoadError(f"Configuration file not found at {config_path}")

    try:
        text = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigLoadError(f"Cannot read config file {config_path}: {e}") from e

    if config_path.suffix.lower() in YAML_SUFFIXES:
        try:
            raw = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ConfigLoadError(f"Invalid YAML in config file {config_path}: {e}") from e
    else:
        try:
            raw = json.loads(text)
        except json.JSONDecodeError as e:
            raise ConfigLoadError(f"Invalid JSON in config file {config_path}: {e}") from e

    logger.debug(f"Loaded config document from {config_path}")
    return raw
