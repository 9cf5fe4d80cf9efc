"""Shared pytest fixtures for adminspec tests."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def raw_entities() -> dict:
    """Return an entities configuration mixing every supported format."""
    return {
        0: "App\\Entity\\Product",
        "Client": "App\\Entity\\User",
        "Invoices": {
            "class": "App\\Entity\\Invoice",
            "list": {"fields": ["id", "number", {"property": "total", "label": "Total"}]},
            "form": {"fields": ["number", "total"]},
        },
        "Authors": {
            "class": "Blog\\Entity\\User",
            "show": {"fields": ["id", "email"]},
        },
    }


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str, str], Path]:
    """Return a helper that writes a YAML configuration file."""

    def _write(content: str, name: str = "admin.yaml") -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write
