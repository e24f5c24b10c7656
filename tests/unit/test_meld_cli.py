"""CLI wiring tests."""

import json

import pytest
from typer.testing import CliRunner

from meld.cli import main
from meld.cli.config import config

pytestmark = pytest.mark.cli

runner = CliRunner()


def test_config_validate_cli_valid(meld_home_with_config):
    result = runner.invoke(config(), ["validate"])
    assert result.exit_code == 0
    # YAML output
    assert "valid: true" in result.stdout


def test_config_validate_cli_invalid(tmp_path, minimal_config_dict):
    minimal_config_dict["mcp"]["remote"] = {"type": "http"}
    path = tmp_path / "meld.json"
    path.write_text(json.dumps(minimal_config_dict))

    result = runner.invoke(config(), ["validate", str(path)])
    assert result.exit_code == 1
    assert "valid: false" in result.stdout
    assert "remote" in result.stdout
    assert "(http) must have a" in result.stdout


def test_config_show_cli(meld_home_with_config):
    result = runner.invoke(config(), ["show", "ide"])
    assert result.exit_code == 0
    assert "workspaceName: meld-workspace" in result.stdout


def test_config_without_subcommand_shows_help():
    result = runner.invoke(config(), [])
    assert result.exit_code == 0
    assert "validate" in result.stdout


def test_main_json_output(meld_home, tmp_path, minimal_config_dict, capsys):
    minimal_config_dict["context"] = 42
    path = tmp_path / "meld.json"
    path.write_text(json.dumps(minimal_config_dict))

    assert main(["--display", "json", "config", "validate", str(path)]) == 1
    captured = capsys.readouterr()
    output = json.loads(captured.out)
    assert output["errors"] == ["context must be a string path"]
    assert output["valid"] is False
    assert "context must be a string path" in captured.err


def test_main_valid_config(meld_home_with_config, capsys):
    assert main(["-d", "json", "config", "validate"]) == 0
    output = json.loads(capsys.readouterr().out)
    assert output["valid"] is True


def test_main_rejects_unknown_display(meld_home):
    assert main(["--display", "xml", "config", "validate"]) == 1


def test_main_version(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.startswith("meld ")


def test_main_stage_messages_are_not_markup(meld_home_with_config, capsys):
    assert main(["-d", "json", "config", "show", "[red]x[/red]"]) == 1
    captured = capsys.readouterr()
    assert "'[red]x[/red]' not found" in captured.err
    assert json.loads(captured.out)["errors"] == ["Unknown section: [red]x[/red]"]
