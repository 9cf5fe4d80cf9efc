"""
adminspec CLI Package.

- config.py: normalize and check backend configuration files
- utils.py: Shared utilities
"""

import sys

import typer

from adminspec.cli.config import check_command, normalize_command
from adminspec.cli.utils import configure_logging, version_callback

app = typer.Typer(
    help="adminspec – admin backend configuration normalizer",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """adminspec CLI main callback for global options."""
    configure_logging(verbose)


app.command(name="normalize")(normalize_command)
app.command(name="check")(check_command)


def main(argv: list[str] | None = None) -> None:
    app(args=argv, standalone_mode=True)


__all__ = ["app", "main"]

if __name__ == "__main__":
    main(sys.argv[1:])
