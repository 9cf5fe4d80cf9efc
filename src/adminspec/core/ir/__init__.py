"""
adminspec Intermediate Representation (IR) types.

All types are re-exported from this package.
"""

from .admin import (
    ACTION_ORDER,
    FORM_ACTIONS,
    ActionSpec,
    AdminAction,
    BackendConfig,
    BackendSpec,
    ClassNameEntry,
    EntitySpec,
    FieldOptions,
    FieldSpec,
    OptionsEntry,
    PropertyName,
    RawEntityEntry,
    RawFieldEntry,
    decode_entity_entry,
    decode_field_entry,
)

__all__ = [
    "ACTION_ORDER",
    "FORM_ACTIONS",
    "AdminAction",
    # Raw entries
    "ClassNameEntry",
    "OptionsEntry",
    "RawEntityEntry",
    "PropertyName",
    "FieldOptions",
    "RawFieldEntry",
    "decode_entity_entry",
    "decode_field_entry",
    # Configuration
    "BackendConfig",
    # Canonical specs
    "FieldSpec",
    "ActionSpec",
    "EntitySpec",
    "BackendSpec",
]
