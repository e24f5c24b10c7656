"""Utility helpers shared across meld."""

from .get_package_version import get_package_version
from .logger import configure_logging

__all__ = ["configure_logging", "get_package_version"]
