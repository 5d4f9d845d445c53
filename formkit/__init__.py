"""
formkit: typed form definitions with field validation and conditional visibility.
"""

from .exceptions import (
    DuplicateFieldIdError,
    FieldAlreadyAttachedError,
    FieldIndexError,
    FieldNotFoundError,
    FormkitError,
    UnknownFieldKindError,
)
from .models import (
    BooleanField,
    ConditionalLink,
    EmailField,
    Field,
    FieldKind,
    FileField,
    Form,
    FormValidationResult,
    PlainTextField,
    SingleSelectField,
    UploadedFile,
    create_field,
)
from .utils.logger import logger

__version__ = "0.1.0"

# Library code stays silent until the host enables it
logger.disable("formkit")

__all__ = [
    "BooleanField",
    "ConditionalLink",
    "DuplicateFieldIdError",
    "EmailField",
    "Field",
    "FieldAlreadyAttachedError",
    "FieldIndexError",
    "FieldKind",
    "FieldNotFoundError",
    "FileField",
    "Form",
    "FormValidationResult",
    "FormkitError",
    "PlainTextField",
    "SingleSelectField",
    "UnknownFieldKindError",
    "UploadedFile",
    "create_field",
]
