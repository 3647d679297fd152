"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import typer

    from urikit.cli._create_app import _create_app
    from urikit.utils.get_package_version import get_package_version

    if argv is None:
        argv = sys.argv[1:]

    if "--version" in argv or "-v" in argv:
        print(f"urikit {get_package_version()}")
        return 0

    app = _create_app()
    try:
        app(argv)
        return 0
    except SystemExit as e:
        return e.code if isinstance(e.code, int) else 0
    except Exception as e:
        typer.echo(f"Unhandled error: {e}", err=True)
        return 1
