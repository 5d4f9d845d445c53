"""
Domain exceptions for formkit.

Validation failures are never raised; they are collected as messages on each
field. These exceptions represent caller programming errors only.
"""

from typing import Self


class FormkitError(Exception):
    """Base exception for all formkit-specific errors."""

    def with_context(self, detail: str) -> Self:
        """Add context information to the exception.

        Args:
            detail: Additional details about the error

        Returns:
            Self with updated message
        """
        self.args = (detail,)
        return self


class FieldIndexError(FormkitError, IndexError):
    """Raised when a field is inserted at a position outside the form."""

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Field index {index} out of range (expected 0 <= index <= {size})")


class FieldAlreadyAttachedError(FormkitError):
    """Raised when a field that already belongs to a form is attached again."""

    def __init__(self, field_id: str, form_id: str):
        self.field_id = field_id
        self.form_id = form_id
        super().__init__(f"Field '{field_id}' is already attached to form '{form_id}'")


class DuplicateFieldIdError(FormkitError):
    """Raised when a form already holds a field with the same identifier."""

    def __init__(self, field_id: str, form_id: str):
        self.field_id = field_id
        self.form_id = form_id
        super().__init__(f"Form '{form_id}' already has a field with ID '{field_id}'")


class FieldNotFoundError(FormkitError):
    """Raised when a field identifier is not present in a form."""

    def __init__(self, field_id: str | None = None):
        self.field_id = field_id
        if field_id:
            super().__init__(f"Field with ID '{field_id}' not found")
        else:
            super().__init__("Field not found")


class UnknownFieldKindError(FormkitError):
    """Raised when a field is requested for a kind with no registered variant."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unknown field kind '{kind}'")
