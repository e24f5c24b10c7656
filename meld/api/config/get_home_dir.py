"""Get meld home directory path or path under it."""

import os
from pathlib import Path

from ...constants import MELD_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get meld home directory path or path under it.

    Checks MELD_HOME environment variable first, defaults to ~/.meld if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to meld home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.meld")
        >>> get_home_dir("config.json")
        Path("/Users/user/.meld/config.json")
    """
    meld_home_env = os.environ.get("MELD_HOME")
    if meld_home_env:
        meld_home = Path(meld_home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        home_env = os.environ.get("HOME")
        if home_env:
            meld_home = Path(home_env) / MELD_HOME_EXT
        else:
            meld_home = Path.home() / MELD_HOME_EXT

    return meld_home / Path(*parts) if parts else meld_home
