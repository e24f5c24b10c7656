"""Unit tests for config cmd_show and cmd_version."""

import json

import pytest

from meld.api.config.cmd_show import cmd_show
from meld.api.config.cmd_version import cmd_version
from meld.api.validate_output import validate_output
from tests.unit.conftest import run_cmd

pytestmark = pytest.mark.config


class TestCmdShow:
    def test_show_section(self, meld_home_with_config, full_config_dict):
        result = run_cmd(cmd_show, "mcp")
        assert result.success
        assert result.output["section"] == "mcp"
        assert result.output["content"] == full_config_dict["mcp"]
        assert result.output["errors"] == []

    def test_show_context(self, meld_home_with_config):
        result = run_cmd(cmd_show, "context")
        assert result.success
        assert result.output["content"] == "docs/CONTEXT.md"

    def test_unknown_section(self, meld_home_with_config):
        result = run_cmd(cmd_show, "invalid_section")
        assert not result.success
        assert result.output["errors"] == ["Unknown section: invalid_section"]
        assert result.output["content"] is None

    def test_unset_optional_section(self, tmp_path, minimal_config_dict):
        path = tmp_path / "config.json"
        path.write_text(json.dumps(minimal_config_dict))
        result = run_cmd(cmd_show, "context", str(path))
        assert not result.success
        assert result.output["errors"] == ["Section not set: context"]

    def test_invalid_config_reports_validation_errors(self, meld_home, minimal_config_dict):
        del minimal_config_dict["agents"]["codex-cli"]
        (meld_home / "config.json").write_text(json.dumps(minimal_config_dict))
        result = run_cmd(cmd_show, "agents")
        assert not result.success
        assert result.output["errors"] == ["Missing required agent: codex-cli"]

    def test_invalid_config_file(self, meld_home):
        (meld_home / "config.json").write_text("{invalid json")
        result = run_cmd(cmd_show, "ide")
        assert result.success is False
        assert result.output["section"] == "ide"
        assert result.output["errors"]

    def test_output_matches_schema(self, meld_home_with_config):
        result = run_cmd(cmd_show, "ide")
        assert validate_output(cmd_show, result.output) == result.output


class TestCmdVersion:
    def test_version(self):
        result = run_cmd(cmd_version)
        assert result.success
        assert result.output["version"]
        assert result.result == f"meld {result.output['version']}"
