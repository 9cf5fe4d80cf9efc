"""Core adminspec functionality: IR, entities normalizer, backend configuration loader."""

from . import ir
from .adminspec_loader import (
    ADMIN_CONFIG_PARAMETER,
    build_backend_spec,
    load_backend_configuration,
    load_config_files,
    merge_configs,
    process_backend_configuration,
    read_config_file,
)
from .errors import (
    AdminConfigError,
    AdminSpecError,
    ConfigurationError,
    ErrorContext,
    InvalidFieldTypeError,
    MissingPropertyError,
)
from .normalizer import (
    ensure_unique_names,
    expand_entity_actions,
    expand_fields,
    normalize_entities,
    normalize_entity_shapes,
)

__all__ = [
    "ir",
    # Errors
    "AdminSpecError",
    "AdminConfigError",
    "ConfigurationError",
    "MissingPropertyError",
    "InvalidFieldTypeError",
    "ErrorContext",
    # Normalizer
    "normalize_entities",
    "normalize_entity_shapes",
    "expand_entity_actions",
    "expand_fields",
    "ensure_unique_names",
    # Loader
    "ADMIN_CONFIG_PARAMETER",
    "read_config_file",
    "load_config_files",
    "merge_configs",
    "process_backend_configuration",
    "load_backend_configuration",
    "build_backend_spec",
]
