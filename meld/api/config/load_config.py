"""Load and validate the meld config document."""

import logging
from pathlib import Path

from ...config_types import MeldConfig
from ...config_validator import ConfigValidationError, validate_and_raise
from .load_raw_config import load_raw_config

logger = logging.getLogger(__name__)


def load_config(path: Path | str | None = None) -> MeldConfig:
    """Load the config document and validate it.

    Raises:
        ConfigLoadError: If the file cannot be read or decoded
        ConfigValidationError: If the document does not match the schema
    """
    raw = load_raw_config(path)
    try:
        config = validate_and_raise(raw)
    except ConfigValidationError as e:
        logger.warning(f"Config validation failed with {len(e.errors)} error(s)")
        raise
    logger.info("Config validated")
    return config
