"""
String utility functions for adminspec.

Provides the class-name transformations used by the normalizer.
"""

from __future__ import annotations

import re

# PHP-style (App\Entity\User), dotted (app.models.User) and slashed paths
_NAMESPACE_SEPARATORS = re.compile(r"[\\./]")


def short_class_name(class_name: str) -> str:
    """
    Get the last segment of a fully-qualified class name.

    Args:
        class_name: Fully-qualified class name

    Returns:
        Class name without its namespace

    Examples:
        >>> short_class_name("App\\\\Entity\\\\User")
        'User'
        >>> short_class_name("app.models.Invoice")
        'Invoice'
        >>> short_class_name("Client")
        'Client'
    """
    return _NAMESPACE_SEPARATORS.split(class_name)[-1]


def unique_name(name: str, taken: set[str], suffix: str = "_") -> str:
    """
    Append suffix to name until it is not in taken.

    Examples:
        >>> unique_name("User", {"User", "User_"})
        'User__'
        >>> unique_name("Client", {"User"})
        'Client'
    """
    while name in taken:
        name += suffix
    return name
