"""
Exceptions for formkit.

This package re-exports the domain exceptions so callers can write
``from formkit.exceptions import FieldIndexError``.
"""

from .domain import (
    DuplicateFieldIdError,
    FieldAlreadyAttachedError,
    FieldIndexError,
    FieldNotFoundError,
    FormkitError,
    UnknownFieldKindError,
)

__all__ = [
    "DuplicateFieldIdError",
    "FieldAlreadyAttachedError",
    "FieldIndexError",
    "FieldNotFoundError",
    "FormkitError",
    "UnknownFieldKindError",
]
