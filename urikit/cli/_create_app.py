"""Create the main Typer CLI app."""

import typer

from urikit.api.config.UrikitConfig import UrikitConfig
from urikit.api.platform.set_platform_config import set_platform_config
from urikit.cli.path import path
from urikit.cli.uri import uri
from urikit.utils.configure_logging import configure_logging
from urikit.utils.get_logger import get_logger

logger = get_logger("cli")


def _create_app() -> typer.Typer:
    """Create and configure the main CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="urikit CLI",
        context_settings={"help_option_names": ["-h", "--help"]},
        invoke_without_command=True,
    )

    app.add_typer(uri(), name="uri")
    app.add_typer(path(), name="path")

    @app.callback(invoke_without_command=True)
    def main_callback(
        ctx: typer.Context,
        display: str = typer.Option("yaml", "--display", "-d", help="Output format: json or yaml"),
    ) -> None:
        if display not in ("json", "yaml"):
            typer.echo(f"Error: --display must be 'json' or 'yaml', got '{display}'", err=True)
            raise typer.Exit(1)

        try:
            config = UrikitConfig.load()
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(2) from e

        configure_logging(config.log)
        set_platform_config(config.platform)
        logger.debug("Loaded configuration %s", config.to_dict())

        ctx.ensure_object(dict)
        ctx.obj["display_format"] = display

        if ctx.invoked_subcommand is None:
            typer.echo(ctx.get_help())
            raise typer.Exit()

    return app
