"""Create the main Typer CLI app."""

import typer

from linkinfo.api.config.cmd_version import cmd_version

from ._handle_stage_result import _handle_stage_result
from .link import register_link_commands


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Canonicalize and classify markdown and wiki link paths",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    register_link_commands(app)

    @app.command(name="version")
    def version_cmd() -> None:
        """Show linkinfo version information."""
        _handle_stage_result(cmd_version)()

    return app
