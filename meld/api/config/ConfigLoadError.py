"""Error raised when a config document cannot be read or decoded."""


class ConfigLoadError(ValueError):
    """Config file missing, unreadable, or not valid JSON/YAML."""
