"""Typed shapes of a validated meld configuration.

These are ``TypedDict`` views over the decoded document. A value only takes
one of these types after :func:`meld.config_validator.validate_config` has
accepted it; nothing is copied or normalized on the way.
"""

from typing import Any, Dict, List, Literal, TypedDict, Union

AgentName = Literal["claude-code", "codex-cli", "gemini-cli"]
IdeName = Literal["cursor", "code", "windsurf"]


class _AgentConfigRequired(TypedDict):
    enabled: bool


class AgentConfig(_AgentConfigRequired, total=False):
    """Per-agent switch plus optional agent-specific overrides."""

    overrides: Dict[str, Any]


class IdeConfig(TypedDict):
    default: IdeName
    workspaceName: str


class _McpServerCommon(TypedDict, total=False):
    agents: List[AgentName]


class _HttpMcpServerRequired(TypedDict):
    type: Literal["http"]
    url: str


class HttpMcpServerConfig(_HttpMcpServerRequired, _McpServerCommon, total=False):
    """MCP server reached over HTTP."""


class _StdioMcpServerRequired(TypedDict):
    command: str
    args: List[str]


class StdioMcpServerConfig(_StdioMcpServerRequired, _McpServerCommon, total=False):
    """MCP server spawned as a local process speaking stdio.

    ``type`` is optional; any value other than ``"http"`` selects this variant.
    """

    type: str


McpServerConfig = Union[HttpMcpServerConfig, StdioMcpServerConfig]


class _MeldConfigRequired(TypedDict):
    projects: Any
    agents: Dict[AgentName, AgentConfig]
    mcp: Dict[str, McpServerConfig]
    ide: IdeConfig


class MeldConfig(_MeldConfigRequired, total=False):
    """Root of a validated configuration document."""

    context: str


def is_http_server(server: McpServerConfig) -> bool:
    """Return True when a validated server entry is the HTTP variant."""
    return server.get("type") == "http"


def enabled_agents(config: MeldConfig) -> List[AgentName]:
    """Agent identifiers switched on in a validated config, in document order."""
    return [name for name, agent in config["agents"].items() if agent["enabled"]]


def servers_for_agent(config: MeldConfig, agent: AgentName) -> Dict[str, McpServerConfig]:
    """MCP servers an agent may use.

    A server without an ``agents`` list is available to every agent.
    """
    selected: Dict[str, McpServerConfig] = {}
    for name, server in config["mcp"].items():
        scope = server.get("agents")
        if not isinstance(scope, list) or agent in scope:
            selected[name] = server
    return selected


__all__ = [
    "AgentConfig",
    "AgentName",
    "HttpMcpServerConfig",
    "IdeConfig",
    "IdeName",
    "McpServerConfig",
    "MeldConfig",
    "StdioMcpServerConfig",
    "enabled_agents",
    "is_http_server",
    "servers_for_agent",
]
