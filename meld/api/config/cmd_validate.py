"""Validate command - checks a config document and reports every violation."""

import logging
from collections.abc import Iterator
from pathlib import Path

from ...config_validator import ValidationFailure, validate_config
from .._output_schemas.config import ConfigValidateOutput
from ..StageResult import StageResult
from .ConfigLoadError import ConfigLoadError
from .get_config_path import get_config_path
from .load_raw_config import load_raw_config

logger = logging.getLogger(__name__)


def cmd_validate(path: str = "") -> StageResult:
    """Validate a configuration file.

    Args:
        path: Config file to check. Empty string uses ``<MELD_HOME>/config.json``.
    """
    config_path = Path(path).expanduser() if path else get_config_path()

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.3, "Loading configuration...")
        try:
            raw = load_raw_config(config_path)
        except ConfigLoadError as e:
            logger.error(str(e))
            yield (1.0, "Complete")
            result_obj.result = "Configuration could not be loaded"
            result_obj.output = ConfigValidateOutput(
                errors=[str(e)],
                warnings=[],
                config_path=str(config_path),
                valid=False,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.6, "Validating configuration...")
        validation = validate_config(raw)
        errors = validation.errors if isinstance(validation, ValidationFailure) else []

        yield (1.0, "Complete")
        if errors:
            logger.warning(f"{config_path}: {len(errors)} validation error(s)")
            result_obj.result = f"Configuration invalid: {len(errors)} error(s)"
        else:
            result_obj.result = "Configuration is valid"
        result_obj.output = {
            "errors": errors,
            "warnings": [],
            "config_path": str(config_path),
            "valid": not errors,
        }
        result_obj.success = not errors

    return StageResult(announce=f"Validating configuration {config_path}...", progress_callback=do_work)
