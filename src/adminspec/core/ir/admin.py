"""
Admin backend types for adminspec IR.

This module contains the raw-entry decoding types used at the boundary of
the normalizer, the top-level backend configuration schema, and the
canonical (normalized) entity, action and field specifications.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..errors import make_invalid_field_type_error, make_missing_property_error


class AdminAction(StrEnum):
    """Lifecycle views available for every entity."""

    LIST = "list"
    SHOW = "show"
    NEW = "new"
    EDIT = "edit"


# Actions in the order they are initialized by the normalizer
ACTION_ORDER: tuple[AdminAction, ...] = (
    AdminAction.EDIT,
    AdminAction.LIST,
    AdminAction.NEW,
    AdminAction.SHOW,
)

# Actions that inherit 'form.fields' when they define no fields of their own
FORM_ACTIONS: tuple[AdminAction, ...] = (AdminAction.EDIT, AdminAction.NEW)


# =============================================================================
# Raw entries
# =============================================================================


class ClassNameEntry(BaseModel):
    """
    Entity given as a bare class name.

    Example:
        entities:
            - App\\Entity\\User
    """

    class_name: str

    model_config = ConfigDict(frozen=True)

    def to_options(self) -> dict[str, Any]:
        return {"class": self.class_name}


class OptionsEntry(BaseModel):
    """
    Entity given as a mapping of options.

    Example:
        entities:
            Client:
                class: App\\Entity\\User
                list:
                    fields: ['id', 'email']
    """

    options: dict[Any, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    def to_options(self) -> dict[str, Any]:
        return dict(self.options)


RawEntityEntry = ClassNameEntry | OptionsEntry


def decode_entity_entry(value: Any) -> RawEntityEntry:
    """Decode a raw entity value into a ClassNameEntry or an OptionsEntry."""
    if isinstance(value, Mapping):
        return OptionsEntry(options=dict(value))
    return ClassNameEntry(class_name="" if value is None else str(value))


class PropertyName(BaseModel):
    """Field given as the bare name of the entity property."""

    name: str

    model_config = ConfigDict(frozen=True)

    def to_config(self) -> dict[str, Any]:
        return {"property": self.name}


class FieldOptions(BaseModel):
    """Field given as a mapping of options; 'property' is always present."""

    options: dict[Any, Any]

    model_config = ConfigDict(frozen=True)

    @property
    def name(self) -> str:
        return self.options["property"]

    def to_config(self) -> dict[str, Any]:
        return dict(self.options)


RawFieldEntry = PropertyName | FieldOptions


def decode_field_entry(value: Any, action: str, entity_class: str) -> RawFieldEntry:
    """
    Decode a raw field value into a PropertyName or a FieldOptions.

    Args:
        value: Raw field entry from the configuration
        action: Action whose fields are being decoded (used in error messages)
        entity_class: Class of the entity being decoded (used in error messages)

    Raises:
        MissingPropertyError: If a mapping entry doesn't define 'property'
        InvalidFieldTypeError: If the entry is neither a string nor a mapping
    """
    if isinstance(value, str):
        return PropertyName(name=value)
    if isinstance(value, Mapping):
        if "property" not in value:
            raise make_missing_property_error(action, entity_class)
        return FieldOptions(options=dict(value))
    raise make_invalid_field_type_error(action, entity_class)


# =============================================================================
# Backend configuration (input schema)
# =============================================================================


class BackendConfig(BaseModel):
    """
    Top-level options of the admin backend configuration.

    Attributes:
        site_name: Name displayed in the backend header
        list_max_results: Number of items per page in 'list' views
        list_actions: Actions displayed for each row of 'list' views
        entities: Raw entities configuration, in any of the supported formats
    """

    site_name: str = "ACME Backend"
    list_max_results: int = Field(default=15, ge=1)
    list_actions: list[str] = Field(default_factory=lambda: ["edit"])
    entities: dict[Any, Any] | list[Any] = Field(default_factory=dict)

    model_config = ConfigDict(extra="forbid")

    @field_validator("entities", mode="before")
    @classmethod
    def _empty_entities(cls, value: Any) -> Any:
        return {} if value is None else value


# =============================================================================
# Canonical specifications (output)
# =============================================================================


class FieldSpec(BaseModel):
    """
    Normalized field of an entity action.

    Extra display options (label, type, ...) are kept as extra attributes.
    """

    property_name: str = Field(alias="property", min_length=1)

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)


class ActionSpec(BaseModel):
    """Normalized action section with its fields keyed by property."""

    fields: dict[str, FieldSpec] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True, extra="allow")

    @model_validator(mode="after")
    def _keys_match_properties(self) -> ActionSpec:
        for key, field in self.fields.items():
            if key != field.property_name:
                raise ValueError(f"Field key '{key}' doesn't match property '{field.property_name}'")
        return self


class EntitySpec(BaseModel):
    """
    Normalized entity configuration.

    Attributes:
        entity_class: Fully-qualified class of the entity ('class' option)
        label: Human-readable name of the entity
        name: Unique name used to identify the entity in URLs
        list_action, show_action, new_action, edit_action: Action sections
    """

    entity_class: str = Field(alias="class", min_length=1)
    label: str = Field(min_length=1)
    name: str = Field(min_length=1)
    list_action: ActionSpec = Field(alias="list")
    show_action: ActionSpec = Field(alias="show")
    new_action: ActionSpec = Field(alias="new")
    edit_action: ActionSpec = Field(alias="edit")

    model_config = ConfigDict(frozen=True, extra="allow", populate_by_name=True)

    def action(self, action: AdminAction | str) -> ActionSpec:
        """Get the section of the given action."""
        return getattr(self, f"{AdminAction(action).value}_action")


class BackendSpec(BaseModel):
    """Normalized admin backend configuration."""

    site_name: str
    list_max_results: int
    list_actions: list[str]
    entities: dict[str, EntitySpec] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _keys_match_names(self) -> BackendSpec:
        for key, entity in self.entities.items():
            if key != entity.name:
                raise ValueError(f"Entity key '{key}' doesn't match name '{entity.name}'")
        return self

    def get_entity(self, name: str) -> EntitySpec | None:
        return self.entities.get(name)
