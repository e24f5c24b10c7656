"""Shared pytest configuration and fixtures for all tests."""

import copy
import json
from pathlib import Path

import pytest


def pytest_configure(config):
    for name, help_text in (
        ("unit", "fast tests with no external resources"),
        ("config", "configuration loading and validation"),
        ("cli", "command line wiring"),
    ):
        config.addinivalue_line("markers", f"{name}: {help_text}")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal valid meld configuration dict for testing."""
    return {
        "projects": {},
        "agents": {
            "claude-code": {"enabled": True},
            "codex-cli": {"enabled": True},
            "gemini-cli": {"enabled": True},
        },
        "mcp": {},
        "ide": {"default": "code", "workspaceName": "ws"},
    }


def full_config_dict() -> dict:
    """Valid configuration exercising every optional field."""
    return {
        "projects": {"api": {"path": "~/src/api"}},
        "agents": {
            "claude-code": {"enabled": True, "overrides": {"model": "opus"}},
            "codex-cli": {"enabled": False},
            "gemini-cli": {"enabled": True, "overrides": None},
        },
        "mcp": {
            "docs": {"type": "http", "url": "https://docs.example.com/mcp"},
            "fs": {"command": "npx", "args": ["-y", "@mcp/fs"], "agents": ["claude-code"]},
            "git": {"type": "stdio", "command": "mcp-git", "args": [], "agents": ["codex-cli", "gemini-cli"]},
        },
        "ide": {"default": "cursor", "workspaceName": "meld-workspace"},
        "context": "docs/CONTEXT.md",
    }


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a fresh minimal config dict."""
    return minimal_config_dict()


@pytest.fixture(name="full_config_dict")
def full_config_dict_fixture() -> dict:
    """Pytest fixture returning a fresh fully populated config dict."""
    return copy.deepcopy(full_config_dict())


@pytest.fixture
def meld_home(tmp_path: Path, monkeypatch) -> Path:
    """Point MELD_HOME at an empty temporary directory."""
    home = tmp_path / ".meld"
    home.mkdir()
    monkeypatch.setenv("MELD_HOME", str(home))
    return home


@pytest.fixture
def meld_home_with_config(meld_home: Path, full_config_dict: dict) -> Path:
    """MELD_HOME containing a valid config.json.

    Returns:
        Path to the meld home directory
    """
    (meld_home / "config.json").write_text(json.dumps(full_config_dict), encoding="utf-8")
    return meld_home
