"""meld - validation of agent, IDE and MCP server configuration documents."""

from .config_validator import (
    ConfigValidationError,
    ValidationFailure,
    ValidationResult,
    ValidationSuccess,
    validate_and_raise,
    validate_config,
)
from .constants import VALID_AGENTS, VALID_IDES

__all__ = [
    "VALID_AGENTS",
    "VALID_IDES",
    "ConfigValidationError",
    "ValidationFailure",
    "ValidationResult",
    "ValidationSuccess",
    "validate_and_raise",
    "validate_config",
]
