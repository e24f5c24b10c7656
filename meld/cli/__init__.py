"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    from meld.cli._create_app import _create_app
    from meld.utils.logger import configure_logging

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        from meld.api.config.cmd_version import cmd_version

        result = cmd_version()
        list(result.progress_callback(result))
        print(result.result)
        return 0 if result.success else 1

    configure_logging()

    app = _create_app()
    try:
        app(argv)
    except SystemExit as e:
        # Typer/Click standalone mode and the stage runner both exit via SystemExit
        if e.code is None:
            return 0
        return e.code if isinstance(e.code, int) else 1
    return 0
