"""
Error types for adminspec configuration loading and normalization.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


class AdminSpecError(Exception):
    """Base exception for all adminspec errors."""

    def __init__(self, message: str, context: Optional["ErrorContext"] = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ConfigurationError(AdminSpecError):
    """
    Raised when the entities configuration cannot be normalized.

    Attributes:
        action: The action ('list', 'show', 'new', 'edit') being processed
        entity_class: Fully-qualified class of the entity being processed
    """

    def __init__(
        self,
        message: str,
        action: str,
        entity_class: str,
        context: Optional["ErrorContext"] = None,
    ):
        self.action = action
        self.entity_class = entity_class
        super().__init__(message, context)


class MissingPropertyError(ConfigurationError):
    """
    Raised when a mapping-shaped field entry does not define 'property'.

    Example:
        list:
            fields: [{ label: 'Email' }]
    """

    pass


class InvalidFieldTypeError(ConfigurationError):
    """
    Raised when a field entry is neither a string nor a mapping.

    Example:
        list:
            fields: ['id', 42]
    """

    pass


class AdminConfigError(AdminSpecError):
    """
    Raised when the backend configuration document cannot be loaded.

    Examples:
    - Configuration file not found
    - Invalid YAML
    - Unknown or mistyped top-level options
    """

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error.

    Attributes:
        file: Path to the configuration file being processed
        entity: Optional entity name the error relates to
    """

    file: Path
    entity: str | None = None

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "admin.yaml in entity User"
        """
        location = str(self.file)
        if self.entity:
            location += f" in entity {self.entity}"
        return location


def make_missing_property_error(action: str, entity_class: str) -> MissingPropertyError:
    """
    Helper to create a MissingPropertyError with the standard message.

    Args:
        action: The action whose fields are being processed
        entity_class: The class of the entity being processed

    Returns:
        MissingPropertyError naming the action and the entity class
    """
    message = (
        f'One of the values of the "fields" option for the "{action}" action '
        f'of the "{entity_class}" entity does not define the "property" option.'
    )
    return MissingPropertyError(message, action=action, entity_class=entity_class)


def make_invalid_field_type_error(action: str, entity_class: str) -> InvalidFieldTypeError:
    """
    Helper to create an InvalidFieldTypeError with the standard message.

    Args:
        action: The action whose fields are being processed
        entity_class: The class of the entity being processed

    Returns:
        InvalidFieldTypeError naming the action and the entity class
    """
    message = (
        f'The values of the "fields" option for the "{action}" action '
        f'of the "{entity_class}" entity can only be strings or mappings.'
    )
    return InvalidFieldTypeError(message, action=action, entity_class=entity_class)


def make_config_error(
    message: str,
    file: Path | None = None,
    entity: str | None = None,
) -> AdminConfigError:
    """
    Helper to create an AdminConfigError with optional context.

    Args:
        message: Error description
        file: Optional configuration file path
        entity: Optional entity name

    Returns:
        AdminConfigError with context if a file is provided
    """
    if file:
        return AdminConfigError(message, ErrorContext(file=file, entity=entity))
    return AdminConfigError(message)
