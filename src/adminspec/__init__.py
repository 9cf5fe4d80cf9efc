"""
adminspec - Admin backend configuration normalizer.

Turns the shorthand entities configuration of an admin backend into the
fully expanded configuration used to render lists and forms.
"""

from __future__ import annotations

from ._version import get_version

# Re-export commonly used types for convenience
from .core import ir
from .core.adminspec_loader import (
    ADMIN_CONFIG_PARAMETER,
    build_backend_spec,
    load_backend_configuration,
    process_backend_configuration,
)
from .core.errors import (
    AdminConfigError,
    AdminSpecError,
    ConfigurationError,
    InvalidFieldTypeError,
    MissingPropertyError,
)
from .core.normalizer import normalize_entities

__version__ = get_version()

__all__ = [
    "__version__",
    "ir",
    "ADMIN_CONFIG_PARAMETER",
    "normalize_entities",
    "process_backend_configuration",
    "load_backend_configuration",
    "build_backend_spec",
    "AdminSpecError",
    "AdminConfigError",
    "ConfigurationError",
    "MissingPropertyError",
    "InvalidFieldTypeError",
]
