"""Show configuration command."""

from collections.abc import Iterator
from pathlib import Path

from ...config_validator import ConfigValidationError
from ...constants import CONFIG_SECTIONS
from .._output_schemas.config import ConfigShowOutput
from ..StageResult import StageResult
from .ConfigLoadError import ConfigLoadError
from .get_config_path import get_config_path
from .load_config import load_config


def cmd_show(section: str, path: str = "") -> StageResult:
    """Show one top-level section of a validated configuration.

    Args:
        section: One of projects, agents, mcp, ide, context.
        path: Config file. Empty string uses ``<MELD_HOME>/config.json``.
    """
    config_path = Path(path).expanduser() if path else get_config_path()

    def _fail(result_obj: StageResult, result: str, errors: list[str]) -> None:
        result_obj.result = result
        result_obj.output = ConfigShowOutput(
            errors=errors,
            warnings=[],
            section=section,
            content=None,
            config_path=str(config_path),
        ).model_dump(mode="python")
        result_obj.success = False

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        if section not in CONFIG_SECTIONS:
            yield (1.0, "Complete")
            _fail(result_obj, f"Section '{section}' not found", [f"Unknown section: {section}"])
            return

        yield (0.3, "Loading configuration...")
        try:
            config = load_config(config_path)
        except ConfigLoadError as e:
            yield (1.0, "Complete")
            _fail(result_obj, "Configuration could not be loaded", [str(e)])
            return
        except ConfigValidationError as e:
            yield (1.0, "Complete")
            _fail(result_obj, f"Configuration invalid: {len(e.errors)} error(s)", e.errors)
            return

        yield (0.6, "Processing sections...")
        if section not in config:
            yield (1.0, "Complete")
            _fail(result_obj, f"Section '{section}' not set", [f"Section not set: {section}"])
            return

        yield (1.0, "Complete")
        result_obj.result = f"Retrieved configuration for '{section}'"
        result_obj.output = {
            "errors": [],
            "warnings": [],
            "section": section,
            "content": config[section],
            "config_path": str(config_path),
        }
        result_obj.success = True

    return StageResult(announce=f"Showing configuration for section '{section}'...", progress_callback=do_work)
