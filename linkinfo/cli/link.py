"""Link Typer commands."""

import typer

from linkinfo.api.link.cmd_append import cmd_append
from linkinfo.api.link.cmd_show import cmd_show
from linkinfo.api.link.cmd_with_ext import cmd_with_ext

from ._handle_stage_result import _handle_stage_result


def register_link_commands(app: typer.Typer) -> None:
    """Register the link commands on the main app."""

    @app.command(name="show")
    def show_cmd(
        path: str = typer.Argument(..., help="Link path as written in a document"),
        kind: str = typer.Option("link", "--kind", "-k", help="Classification policy: link or wiki"),
    ) -> None:
        """Show the canonical form, views and classification of a link."""
        _handle_stage_result(cmd_show)(path=path, kind=kind)

    @app.command(name="append")
    def append_cmd(
        path: str = typer.Argument(..., help="Base link path"),
        parts: list[str] = typer.Argument(..., help="Segments to append; '.' and '..' are resolved"),
    ) -> None:
        """Append path segments to a link."""
        _handle_stage_result(cmd_append)(path=path, parts=parts)

    @app.command(name="with-ext")
    def with_ext_cmd(
        path: str = typer.Argument(..., help="Link path"),
        ext: str = typer.Argument(..., help="New extension, with or without the leading dot"),
    ) -> None:
        """Replace the extension of a link."""
        _handle_stage_result(cmd_with_ext)(path=path, ext=ext)
