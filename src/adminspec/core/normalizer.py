"""
Entities configuration normalizer for adminspec.

Several configuration formats are allowed for the entities managed by the
backend. This module normalizes them all into one fully expanded format:

    # Format #1: no custom entity label
    entities:
        - App\\Entity\\User

    # Format #2: simple config with custom entity label
    entities:
        Client: App\\Entity\\User

    # Format #3: expanded entity configuration with 'class' option
    entities:
        Client:
            class: App\\Entity\\User
            list:
                fields: ['id', 'name', { property: 'email', label: 'Contact' }]

The result is keyed by the unique entity name. Every entity has 'class',
'label', 'name' and the 'list', 'show', 'new' and 'edit' sections, each with
a 'fields' mapping keyed by property.

Entities whose classes share the same short name are all kept, in their
configuration order, and renamed by ensure_unique_names(). Fields are
different: two fields with the same property in one action collapse into
the later definition.

An entity that already looks normalized ('class', 'label', a 'name' equal to
its key and expanded 'fields' mappings in every action) is kept as is, so
normalizing a normalized configuration changes nothing.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from .ir.admin import (
    ACTION_ORDER,
    FORM_ACTIONS,
    OptionsEntry,
    decode_entity_entry,
    decode_field_entry,
)
from .strings import short_class_name, unique_name

logger = logging.getLogger(__name__)

# Appended to repeated entity names until they are unique
NAME_SUFFIX = "_"

# Ordered (entity name, entity configuration) pairs; names may repeat
EntityList = list[tuple[str, dict[str, Any]]]


def normalize_entities(entities: Mapping[Any, Any] | list[Any]) -> dict[str, dict[str, Any]]:
    """
    Process, normalize and initialize the configuration of the entities.

    Args:
        entities: Raw entities configuration (mapping or list)

    Returns:
        The full entities configuration keyed by unique entity name

    Raises:
        MissingPropertyError: If a field mapping doesn't define 'property'
        InvalidFieldTypeError: If a field is neither a string nor a mapping
    """
    if not entities:
        return {}

    shaped = normalize_entity_shapes(entities)
    expanded = expand_entity_actions(shaped)
    configuration = ensure_unique_names(expanded)

    logger.debug(f"Normalized {len(configuration)} entities")
    return configuration


def _raw_items(entities: Mapping[Any, Any] | list[Any]) -> Iterable[tuple[Any, Any]]:
    if isinstance(entities, Mapping):
        return entities.items()
    return enumerate(entities)


def normalize_entity_shapes(entities: Mapping[Any, Any] | list[Any]) -> EntityList:
    """
    Transform the simple entity formats into the expanded format #3.

    The entity name is the short name of its class. Entities configured
    without a custom label (list items) use that name as their label.
    Entities that are already normalized keep their name and label.

    Args:
        entities: Raw entities configuration

    Returns:
        (name, configuration) pairs, each configuration with 'class' and 'label'
    """
    normalized: EntityList = []

    for entity_label, value in _raw_items(entities):
        entry = decode_entity_entry(value)
        config = entry.to_options()

        if isinstance(entry, OptionsEntry) and _is_normalized(entity_label, config):
            normalized.append((entity_label, config))
            continue

        # a missing class falls back to the entity key
        entity_class = config.get("class") or entity_label
        config["class"] = str(entity_class)

        entity_name = short_class_name(config["class"]) or config["class"]

        # config format #1 and empty keys don't define custom labels: use the entity name as label
        if isinstance(entity_label, int) or entity_label in ("", None):
            config["label"] = entity_name
        else:
            config["label"] = str(entity_label)

        normalized.append((entity_name, config))

    return normalized


def _is_normalized(entity_label: Any, config: Mapping[str, Any]) -> bool:
    """Check for an entity produced by a previous normalization.

    Requires 'class', 'label', a 'name' equal to its key and every action
    section with expanded (mapping) fields.
    """
    if not (config.get("class") and config.get("label")) or config.get("name") != entity_label:
        return False
    return all(isinstance(_section_fields(config.get(action)), Mapping) for action in ACTION_ORDER)


def expand_entity_actions(entities: EntityList) -> EntityList:
    """
    Initialize the action sections of every entity and expand their fields.

    If the common 'form' section defines fields, they are copied into the
    'new' and 'edit' sections that don't define their own. No other 'form'
    option is inherited.

    Args:
        entities: Shape-normalized (name, configuration) pairs

    Returns:
        The same pairs with complete 'list', 'show', 'new' and 'edit' sections
    """
    expanded: EntityList = []

    for entity_name, entity_config in entities:
        # copy so that the caller's configuration is never modified
        config = dict(entity_config)
        entity_class = config["class"]

        form_fields = _section_fields(config.get("form"))
        if form_fields is not None:
            for action in FORM_ACTIONS:
                if _section_fields(config.get(action)) is None:
                    section = _section(config.get(action))
                    section["fields"] = form_fields
                    config[action.value] = section

        for action in ACTION_ORDER:
            section = _section(config.get(action))
            fields = section.get("fields")

            if fields:
                section["fields"] = expand_fields(fields, action.value, entity_class)
            else:
                section["fields"] = {}

            config[action.value] = section

        expanded.append((entity_name, config))

    return expanded


def _section(section: Any) -> dict[str, Any]:
    """Copy an action section; undefined or malformed sections become empty."""
    if isinstance(section, Mapping):
        return dict(section)
    return {}


def _section_fields(section: Any) -> Any:
    """Get the 'fields' option of a section, None when undefined."""
    if isinstance(section, Mapping):
        return section.get("fields")
    return None


def expand_fields(fields: Any, action: str, entity_class: str) -> dict[str, dict[str, Any]]:
    """
    Expand the fields of an action into field configurations keyed by property.

    Fields can be defined with two formats:

        # Format #1: simple configuration
        fields: ['id', 'name', 'email']

        # Format #2: extended configuration
        fields: ['id', 'name', { property: 'email', label: 'Contact' }]

    Args:
        fields: Raw fields (an already expanded mapping is iterated by value)
        action: The current action (needed to create good error messages)
        entity_class: The class of the current entity (needed to create good error messages)

    Returns:
        Ordered mapping of property name to field configuration

    Raises:
        MissingPropertyError: If a field mapping doesn't define 'property'
        InvalidFieldTypeError: If a field is neither a string nor a mapping
    """
    if isinstance(fields, Mapping):
        fields = list(fields.values())
    elif isinstance(fields, str) or not isinstance(fields, Iterable):
        fields = [fields]

    expanded: dict[str, dict[str, Any]] = {}
    for value in fields:
        field = decode_field_entry(value, action, entity_class)
        expanded[field.name] = field.to_config()

    return expanded


def ensure_unique_names(entities: EntityList) -> dict[str, dict[str, Any]]:
    """
    Make every entity name unique by appending a suffix to repeated names.

    The entity name is used in the URLs of the backend to identify entities,
    so it must be unique. Entities are visited in order: the first one keeps
    the short name and later ones get suffixed.

    Args:
        entities: Expanded (name, configuration) pairs

    Returns:
        Entities keyed by unique name, with that name stored under 'name'
    """
    configuration: dict[str, dict[str, Any]] = {}
    taken: set[str] = set()

    for entity_name, entity_config in entities:
        name = unique_name(entity_name, taken, NAME_SUFFIX)
        if name != entity_name:
            logger.debug(f"Entity '{entity_name}' ({entity_config['class']}) renamed to '{name}'")
        taken.add(name)

        configuration[name] = dict(entity_config)
        configuration[name]["name"] = name

    return configuration
