"""Configuration validation for meld."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, List, Literal, Union, cast

from .config_types import MeldConfig
from .constants import REQUIRED_KEYS, VALID_AGENTS, VALID_IDES


class ConfigValidationError(Exception):
    """Raised when configuration is invalid."""

    def __init__(self, errors: List[str]):
        self.errors = list(errors)
        msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in self.errors)
        super().__init__(msg)


@dataclass(frozen=True)
class ValidationSuccess:
    """Accepted document, narrowed to :class:`MeldConfig`."""

    config: MeldConfig
    ok: Literal[True] = True


@dataclass(frozen=True)
class ValidationFailure:
    """Rejected document with every violation found, in check order."""

    errors: List[str] = field(default_factory=list)
    ok: Literal[False] = False


ValidationResult = Union[ValidationSuccess, ValidationFailure]


def _as_mapping(value: Any) -> Mapping:
    """Read a section as a mapping; anything else has no keys."""
    return value if isinstance(value, Mapping) else {}


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def _display_value(value: Any) -> str:
    """Render a decoded JSON value the way a JavaScript template string would."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else _display_value(item) for item in value)
    if isinstance(value, Mapping):
        return "[object Object]"
    return str(value)


def _validate_agents(agents: Any) -> List[str]:
    """Validate agents configuration section."""
    errors = []
    agents = _as_mapping(agents)

    for expected in VALID_AGENTS:
        if expected not in agents:
            errors.append(f"Missing required agent: {expected}")

    for name, agent in agents.items():
        if name not in VALID_AGENTS:
            errors.append(f"Invalid agent name: {name}. Must be one of: {', '.join(VALID_AGENTS)}")
            continue

        agent = _as_mapping(agent)
        if not isinstance(agent.get("enabled"), bool):
            errors.append(f'Agent "{name}" must have an "enabled" boolean')
        overrides = agent.get("overrides")
        if overrides is not None and not isinstance(overrides, Mapping):
            errors.append(f'Agent "{name}" overrides must be an object')

    return errors


def _validate_ide(ide: Any) -> List[str]:
    """Validate ide configuration section."""
    errors = []
    ide = _as_mapping(ide)

    default = ide.get("default")
    if not isinstance(default, str) or default not in VALID_IDES:
        errors.append(f"ide.default must be one of: {', '.join(VALID_IDES)}")
    if not _is_non_empty_string(ide.get("workspaceName")):
        errors.append("ide.workspaceName must be a non-empty string")

    return errors


def _validate_mcp_server(name: str, server: Any) -> List[str]:
    """Validate one MCP server entry (http or stdio variant)."""
    errors = []
    server = _as_mapping(server)

    if server.get("type") == "http":
        if not _is_non_empty_string(server.get("url")):
            errors.append(f'MCP server "{name}" (http) must have a "url" string')
    else:
        if not _is_non_empty_string(server.get("command")):
            errors.append(f'MCP server "{name}" (stdio) must have a "command" string')
        if not isinstance(server.get("args"), (list, tuple)):
            errors.append(f'MCP server "{name}" (stdio) must have an "args" array')

    # A non-list scope is accepted without comment.
    scope = server.get("agents")
    if isinstance(scope, (list, tuple)):
        for agent in scope:
            if agent not in VALID_AGENTS:
                errors.append(f'MCP server "{name}" has invalid agent scope: {_display_value(agent)}')

    return errors


def _validate_mcp(mcp: Any) -> List[str]:
    """Validate mcp configuration section."""
    errors = []
    for name, server in _as_mapping(mcp).items():
        errors.extend(_validate_mcp_server(name, server))
    return errors


def _validate_context(cfg: Mapping) -> List[str]:
    """Validate optional context path."""
    context = cfg.get("context")
    if context is not None and not isinstance(context, str):
        return ["context must be a string path"]
    return []


def validate_config(cfg: Any) -> ValidationResult:
    """
    Validate a decoded meld configuration document.

    Never raises for malformed input; every violation is reported in the
    returned failure. A non-mapping root or a missing top-level key stops
    validation early because nothing below it can be inspected.

    Returns:
        ValidationSuccess carrying ``cfg`` itself, or ValidationFailure
        with the ordered error messages
    """
    if not isinstance(cfg, Mapping):
        return ValidationFailure(["Config must be an object"])

    errors = [f"Missing required key: {key}" for key in REQUIRED_KEYS if key not in cfg]
    if errors:
        return ValidationFailure(errors)

    errors.extend(_validate_agents(cfg["agents"]))
    errors.extend(_validate_ide(cfg["ide"]))
    errors.extend(_validate_mcp(cfg["mcp"]))
    errors.extend(_validate_context(cfg))

    if errors:
        return ValidationFailure(errors)
    return ValidationSuccess(cast(MeldConfig, cfg))


def validate_and_raise(cfg: Any) -> MeldConfig:
    """
    Validate configuration and raise ConfigValidationError if invalid.

    Args:
        cfg: Decoded configuration document

    Returns:
        The same document, typed as MeldConfig

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    result = validate_config(cfg)
    if isinstance(result, ValidationFailure):
        raise ConfigValidationError(result.errors)
    return result.config


__all__ = [
    "ConfigValidationError",
    "ValidationFailure",
    "ValidationResult",
    "ValidationSuccess",
    "validate_and_raise",
    "validate_config",
]
