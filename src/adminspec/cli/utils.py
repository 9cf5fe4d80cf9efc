"""
adminspec CLI Utilities.

Shared utility functions used across CLI modules.
"""

import logging
import os
import platform
from pathlib import Path

import typer

from adminspec._version import get_version


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        try:
            import adminspec

            install_location = Path(adminspec.__file__).parent
        except Exception:
            install_location = Path.cwd()

        typer.echo(f"adminspec version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo(f"  Location:      {install_location}")

        raise typer.Exit()


def configure_logging(verbose: bool = False) -> None:
    """Configure logging from --verbose or the LOG_LEVEL environment variable."""
    if verbose:
        level = logging.DEBUG
    else:
        log_level = os.getenv("LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, log_level, logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("adminspec").setLevel(level)
