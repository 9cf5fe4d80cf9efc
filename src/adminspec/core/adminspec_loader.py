"""
Backend configuration loading for adminspec.

Reads the admin backend configuration from one or more YAML files, merges
them, validates the top-level options and normalizes the entities. The
processed configuration is published as the 'adminspec.config' parameter
for the collaborators that render the backend.

A configuration file can hold the options at its root or under an
'admin' key:

    admin:
        site_name: 'My Backend'
        entities:
            - App\\Entity\\User
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, MutableMapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .errors import make_config_error
from .ir.admin import BackendConfig, BackendSpec
from .normalizer import normalize_entities

logger = logging.getLogger(__name__)

# Name of the parameter holding the processed configuration
ADMIN_CONFIG_PARAMETER = "adminspec.config"

# Optional root key of configuration files
ROOT_KEY = "admin"


def read_config_file(path: Path) -> dict[str, Any]:
    """Read a raw configuration document from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        Raw configuration options (unwrapped from the 'admin' key if present).

    Raises:
        AdminConfigError: If the file doesn't exist or isn't a valid YAML mapping.
    """
    if not path.exists():
        raise make_config_error(f"Configuration file not found: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise make_config_error(f"Configuration file is not valid UTF-8: {e}", file=path) from e
    except OSError as e:
        raise make_config_error(f"Cannot read configuration file: {e}", file=path) from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise make_config_error(f"Invalid YAML: {e}", file=path) from e

    if data is None:
        logger.warning(f"Empty configuration file at {path}")
        return {}

    if not isinstance(data, dict):
        raise make_config_error("Configuration must be a mapping", file=path)

    if ROOT_KEY in data and len(data) == 1:
        data = data[ROOT_KEY] or {}
        if not isinstance(data, dict):
            raise make_config_error(f"The '{ROOT_KEY}' option must be a mapping", file=path)

    logger.debug(f"Read configuration from {path}")
    return data


def load_config_files(paths: Iterable[Path]) -> list[dict[str, Any]]:
    """Read several configuration files, in order."""
    return [read_config_file(path) for path in paths]


def merge_configs(configs: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Merge several raw configuration documents.

    Later documents override the options of earlier ones. The 'entities'
    option is merged instead: mapping entries are replaced key by key and
    list entries are appended. Mixing both formats keeps the list entries
    under their positional index.

    Args:
        configs: Raw configuration documents.

    Returns:
        The merged configuration.
    """
    merged: dict[str, Any] = {}

    for config in configs:
        for key, value in config.items():
            if key == "entities":
                merged[key] = _merge_entities(merged.get(key), value)
            else:
                merged[key] = value

    return merged


def _merge_entities(current: Any, incoming: Any) -> Any:
    if not current:
        return incoming
    if not incoming:
        return current

    if isinstance(current, list) and isinstance(incoming, list):
        return current + incoming

    merged = _as_mapping(current)
    offset = len(merged)
    if isinstance(incoming, list):
        # keep list entries positional, after the existing ones
        for index, value in enumerate(incoming):
            merged[offset + index] = value
    else:
        merged.update(incoming)
    return merged


def _as_mapping(entities: Any) -> dict[Any, Any]:
    if isinstance(entities, list):
        return dict(enumerate(entities))
    return dict(entities)


def process_backend_configuration(configs: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """Merge, validate and normalize the backend configuration.

    Args:
        configs: Raw configuration documents, in override order.

    Returns:
        The processed configuration with fully normalized entities.

    Raises:
        AdminConfigError: If the top-level options are invalid.
        ConfigurationError: If the entities can't be normalized.
    """
    merged = merge_configs(configs)

    try:
        config = BackendConfig.model_validate(merged)
    except ValidationError as e:
        raise make_config_error(f"Invalid backend configuration: {e}") from e

    processed = config.model_dump()
    processed["entities"] = normalize_entities(config.entities)

    logger.info(f"Processed backend configuration with {len(processed['entities'])} entities")
    return processed


def load_backend_configuration(
    parameters: MutableMapping[str, Any],
    configs: Iterable[Mapping[str, Any]],
) -> dict[str, Any]:
    """Process the backend configuration and publish it as a parameter.

    Args:
        parameters: Parameter store of the hosting application.
        configs: Raw configuration documents, in override order.

    Returns:
        The processed configuration, also stored under ADMIN_CONFIG_PARAMETER.
    """
    processed = process_backend_configuration(configs)
    parameters[ADMIN_CONFIG_PARAMETER] = processed
    return processed


def build_backend_spec(processed: Mapping[str, Any]) -> BackendSpec:
    """Validate a processed configuration into a typed BackendSpec.

    Raises:
        AdminConfigError: If the document isn't a valid processed configuration.
    """
    try:
        return BackendSpec.model_validate(processed)
    except ValidationError as e:
        raise make_config_error(f"Invalid processed configuration: {e}") from e
