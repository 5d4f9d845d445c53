"""
formkit data models.

This package contains the form aggregate and the field variants it holds.
Importing it registers every variant for ``create_field``.
"""

# Base types
from .base import EMPTY_VALUE_MESSAGE, ConditionalLink, FieldKind, is_empty_value

# Fields
from .boolean import BooleanField
from .field import FIELD_REGISTRY, Field, create_field
from .file import FileField
from .select import SingleSelectField
from .text import EmailField, PlainTextField
from .upload import UploadedFile

# Form
from .form import Form, FormValidationResult

__all__ = [
    "EMPTY_VALUE_MESSAGE",
    "FIELD_REGISTRY",
    "BooleanField",
    "ConditionalLink",
    "EmailField",
    "Field",
    "FieldKind",
    "FileField",
    "Form",
    "FormValidationResult",
    "PlainTextField",
    "SingleSelectField",
    "UploadedFile",
    "create_field",
    "is_empty_value",
]
