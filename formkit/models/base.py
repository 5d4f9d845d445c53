"""
Base types for formkit models.

This module provides the field kind enumeration, the emptiness rule shared by
every field, and the conditional link between two fields.
"""

from __future__ import annotations

import enum
import uuid
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .field import Field

EMPTY_VALUE_MESSAGE = "value cannot be empty"


class FieldKind(str, enum.Enum):
    """Enumeration of the supported field variants."""

    TEXT = "text"
    EMAIL = "email"
    BOOLEAN = "boolean"
    SINGLE_SELECT = "single_select"
    FILE = "file"


def generate_id() -> str:
    """Generate an opaque identifier for a form or field."""
    return str(uuid.uuid4())


def is_empty_value(value: Any) -> bool:
    """Check whether a value counts as empty for the required rule.

    Only an unset value, an empty string, or an empty collection is empty.
    ``False`` and ``0`` are values.

    Examples:
        >>> is_empty_value(None), is_empty_value(""), is_empty_value([])
        (True, True, True)
        >>> is_empty_value(False), is_empty_value(0)
        (False, False)
    """
    if value is None:
        return True
    if isinstance(value, str | list | tuple | set | frozenset | dict):
        return len(value) == 0
    return False


@dataclass(frozen=True, slots=True)
class ConditionalLink:
    """Visibility condition of a field: visible while ``field.value == expected_value``.

    Attributes:
        field: The field whose live value is compared
        expected_value: Value the other field must hold
    """

    field: Field
    expected_value: Any

    @property
    def field_id(self) -> str:
        return self.field.field_id

    def is_satisfied(self) -> bool:
        return bool(self.field.value == self.expected_value)

    def __repr__(self) -> str:
        return f"ConditionalLink({self.field_id} == {self.expected_value!r})"
