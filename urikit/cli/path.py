"""Path Typer app factory - path operations on URIs."""

from typing import Annotated

import typer

from urikit.api.path.cmd_basename import cmd_basename
from urikit.api.path.cmd_dirname import cmd_dirname
from urikit.api.path.cmd_extname import cmd_extname
from urikit.api.path.cmd_join import cmd_join
from urikit.api.path.cmd_resolve import cmd_resolve
from urikit.cli._handle_stage_result import _handle_stage_result


def path() -> typer.Typer:
    """Create and configure the path Typer app."""
    app = typer.Typer(
        name="path",
        help="POSIX-style operations on the path of a URI",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
    )

    @app.command(name="join")
    def join_command(
        ctx: typer.Context,
        uri: Annotated[str, typer.Argument(help="Base URI")],
        segments: Annotated[list[str], typer.Argument(help="Path fragments to append")],
    ) -> None:
        """Join fragments onto the URI path (keeps trailing slashes)."""
        _handle_stage_result(cmd_join, ctx)(uri, segments)

    @app.command(name="resolve")
    def resolve_command(
        ctx: typer.Context,
        uri: Annotated[str, typer.Argument(help="Base URI")],
        segments: Annotated[list[str], typer.Argument(help="Path fragments to resolve")],
    ) -> None:
        """Resolve fragments against the URI path (drops trailing slashes)."""
        _handle_stage_result(cmd_resolve, ctx)(uri, segments)

    @app.command(name="dirname")
    def dirname_command(ctx: typer.Context, uri: Annotated[str, typer.Argument(help="URI")]) -> None:
        """Strip the last segment of the URI path."""
        _handle_stage_result(cmd_dirname, ctx)(uri)

    @app.command(name="basename")
    def basename_command(ctx: typer.Context, uri: Annotated[str, typer.Argument(help="URI")]) -> None:
        """Print the last segment of the URI path."""
        _handle_stage_result(cmd_basename, ctx)(uri)

    @app.command(name="extname")
    def extname_command(ctx: typer.Context, uri: Annotated[str, typer.Argument(help="URI")]) -> None:
        """Print the extension of the URI path."""
        _handle_stage_result(cmd_extname, ctx)(uri)

    return app
