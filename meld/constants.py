"""Shared constants for the meld configuration schema and dot-directories."""

MELD_HOME_EXT = ".meld"   # user-level state/config directory suffix

# Fixed enumerations; order is significant for error messages
VALID_AGENTS = ("claude-code", "codex-cli", "gemini-cli")
VALID_IDES = ("cursor", "code", "windsurf")

REQUIRED_KEYS = ("projects", "agents", "mcp", "ide")

# Top-level sections that `config show` can display
CONFIG_SECTIONS = ("projects", "agents", "mcp", "ide", "context")

# Display width constant - standardize to 80 characters max
MAX_DISPLAY_WIDTH = 80
