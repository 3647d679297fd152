"""URI Typer app factory - parse, build and file conversion."""

from typing import Annotated

import typer

from urikit.api.uri.cmd_build import cmd_build
from urikit.api.uri.cmd_file import cmd_file
from urikit.api.uri.cmd_parse import cmd_parse
from urikit.cli._handle_stage_result import _handle_stage_result


def uri() -> typer.Typer:
    """Create and configure the uri Typer app."""
    app = typer.Typer(
        name="uri",
        help="Parse, build and convert URIs",
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        context_settings={"help_option_names": ["-h", "--help"]},
    )

    @app.command(name="parse")
    def parse_command(
        ctx: typer.Context,
        value: Annotated[str, typer.Argument(help="URI string to decompose")],
    ) -> None:
        """Decompose a URI into scheme, authority, path, query and fragment."""
        _handle_stage_result(cmd_parse, ctx)(value)

    @app.command(name="file")
    def file_command(
        ctx: typer.Context,
        path: Annotated[str, typer.Argument(help="Filesystem or UNC path (need not exist)")],
    ) -> None:
        """Convert a filesystem path into a file URI."""
        _handle_stage_result(cmd_file, ctx)(path)

    @app.command(name="build")
    def build_command(
        ctx: typer.Context,
        scheme: Annotated[str | None, typer.Option("--scheme", "-s", help="Scheme, e.g. http")] = None,
        authority: Annotated[str | None, typer.Option("--authority", "-a", help="Authority, e.g. host:port")] = None,
        path: Annotated[str | None, typer.Option("--path", "-p", help="Decoded path")] = None,
        query: Annotated[str | None, typer.Option("--query", "-q", help="Decoded query")] = None,
        fragment: Annotated[str | None, typer.Option("--fragment", "-f", help="Decoded fragment")] = None,
    ) -> None:
        """Assemble a URI from decoded components."""
        _handle_stage_result(cmd_build, ctx)(scheme, authority, path, query, fragment)

    return app
