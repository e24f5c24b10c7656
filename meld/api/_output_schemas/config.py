"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class ConfigValidateOutput(BaseOutputSchema):
    """Output schema for config validate command.

    Output structure:
    - errors: list[str] - every validation or load error, in check order
    - warnings: list[str] - list of warning messages, empty list if no warnings
    - config_path: str - path to the configuration file
    - valid: bool - True only when errors is empty
    """
    config_path: str = Field(..., description="Path to the configuration file")
    valid: bool = Field(..., description="True when the document passed validation")


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""
    section: str = Field(..., description="Requested top-level section name")
    content: Any = Field(..., description="Section value from the validated config, null on error")
    config_path: str = Field(..., description="Path to the configuration file")


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for config version command."""
    version: str = Field(..., description="Package version string")


schema_registry.register_output_schema("config", "validate", ConfigValidateOutput)
schema_registry.register_output_schema("config", "show", ConfigShowOutput)
schema_registry.register_output_schema("config", "version", ConfigVersionOutput)
