"""Config Typer app factory."""

import typer

from meld.api.config.cmd_show import cmd_show
from meld.api.config.cmd_validate import cmd_validate
from meld.api.config.cmd_version import cmd_version
from meld.cli._handle_stage_result import _handle_stage_result


def config() -> typer.Typer:
    """Create and configure the config Typer app."""
    app = typer.Typer(
        name="config",
        help="Configuration operations",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def callback(ctx: typer.Context) -> None:
        """Show help when no subcommand is provided."""
        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help(), err=False)
            raise typer.Exit()

    @app.command(name="validate")
    def validate_cmd(
        path: str = typer.Argument("", help="Config file (defaults to ~/.meld/config.json)"),
    ) -> None:
        """Validate a configuration file and list every problem found."""
        _handle_stage_result(cmd_validate)(path)

    @app.command(name="show")
    def show_cmd(
        section: str = typer.Argument(..., help="Section name: projects, agents, mcp, ide or context"),
        path: str = typer.Option("", "--path", "-p", help="Config file (defaults to ~/.meld/config.json)"),
    ) -> None:
        """Show one section of a valid configuration."""
        _handle_stage_result(cmd_show)(section, path)

    @app.command(name="version")
    def version_cmd() -> None:
        """Show meld version information."""
        _handle_stage_result(cmd_version)()

    return app
