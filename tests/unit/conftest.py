"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
"""

# Re-export commonly used helpers from root conftest
from tests.conftest import (
    full_config_dict,
    minimal_config_dict,
    run_cmd,
)

__all__ = [
    "full_config_dict",
    "minimal_config_dict",
    "run_cmd",
]
