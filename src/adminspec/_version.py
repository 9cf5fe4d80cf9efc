"""Version of the installed adminspec distribution."""

import tomllib
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version
from pathlib import Path

_PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def get_version() -> str:
    """Get the installed version, or the one declared in a source checkout's pyproject.toml."""
    try:
        return _metadata_version("adminspec")
    except PackageNotFoundError:
        pass

    if _PYPROJECT.is_file():
        with open(_PYPROJECT, "rb") as f:
            project = tomllib.load(f).get("project", {})
        return str(project.get("version", "0.0.0"))
    return "0.0.0"
