"""Config API module: locating, loading and validating the config document."""

from .ConfigLoadError import ConfigLoadError
from .get_config_path import get_config_path
from .get_home_dir import get_home_dir
from .load_config import load_config
from .load_raw_config import load_raw_config

__all__ = [
    "ConfigLoadError",
    "get_config_path",
    "get_home_dir",
    "load_config",
    "load_raw_config",
]
