"""
Form model for formkit.

This module provides the Form aggregate, which owns an ordered sequence of
fields, and the result object returned by a whole-form validation run.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from ..exceptions import DuplicateFieldIdError, FieldIndexError, FieldNotFoundError
from ..utils.logger import logger
from .base import generate_id
from .field import Field


@dataclass
class FormValidationResult:
    """Result of form validation.

    Attributes:
        valid: True if every field passed validation
        errors: Dict mapping field IDs to their error messages (failing fields only)
    """

    valid: bool
    errors: dict[str, list[str]] = field(default_factory=dict)


class Form:
    """
    An ordered collection of fields with a title and description.

    Fields are attached with ``add_field`` or ``add_field_at_index`` and are
    never removed. Validation and visibility are independent: hidden fields
    are still validated and still count towards ``is_valid``.

    Args:
        title: Form title
        description: Optional longer description
        form_id: Identifier supplied by the host; generated when omitted

    Examples:
        >>> form = Form("Sign up")
        >>> email = form.add_field(EmailField("Email", required=True))
        >>> form.validate().valid
        False
    """

    def __init__(self, title: str, description: str | None = None, form_id: str | None = None):
        self._form_id = form_id or generate_id()
        self.title = title
        self.description = description
        self._fields: list[Field] = []

    @property
    def form_id(self) -> str:
        return self._form_id

    @property
    def fields(self) -> tuple[Field, ...]:
        return tuple(self._fields)

    def add_field(self, field: Field) -> Field:
        """Append a field and link it back to this form.

        Field IDs must be unique within a form.

        Returns:
            The attached field, for chaining
        """
        self._check_field_id(field)
        field.attach(self)
        self._fields.append(field)
        logger.debug(f"Form '{self.title}': added field '{field.label}' at {len(self._fields) - 1}")
        return field

    def add_field_at_index(self, index: int, field: Field) -> Field:
        """Insert a field at ``index``, shifting the fields after it.

        Args:
            index: Position in ``0 .. len(fields)`` inclusive
            field: Field to insert

        Returns:
            The attached field, for chaining

        Raises:
            FieldIndexError: If the index is out of range
            FieldAlreadyAttachedError: If the field already belongs to a form
            DuplicateFieldIdError: If another field in the form has the same ID
        """
        if not 0 <= index <= len(self._fields):
            raise FieldIndexError(index, len(self._fields))
        self._check_field_id(field)
        field.attach(self)
        self._fields.insert(index, field)
        logger.debug(f"Form '{self.title}': inserted field '{field.label}' at {index}")
        return field

    def _check_field_id(self, field: Field) -> None:
        if field.form is not None:
            return
        if any(existing.field_id == field.field_id for existing in self._fields):
            raise DuplicateFieldIdError(field.field_id, self.form_id)

    def get_field(self, field_id: str) -> Field:
        """Look up an attached field by its identifier.

        Raises:
            FieldNotFoundError: If no attached field has this identifier
        """
        for field in self._fields:
            if field.field_id == field_id:
                return field
        raise FieldNotFoundError(field_id)

    def visible_fields(self) -> list[Field]:
        return [field for field in self._fields if field.visible]

    def validate(self) -> FormValidationResult:
        """Validate every field in order.

        Returns:
            FormValidationResult with the overall status and per-field errors
        """
        errors: dict[str, list[str]] = {}
        for field in self._fields:
            field_errors = field.validate()
            if field_errors:
                errors[field.field_id] = field_errors

        logger.debug(
            f"Form '{self.title}' validated: {len(errors)} of {len(self._fields)} fields invalid"
        )
        return FormValidationResult(valid=not errors, errors=errors)

    @property
    def is_valid(self) -> bool:
        """True if no field has errors from its latest validation."""
        return all(field.is_valid for field in self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[Field]:
        return iter(self._fields)

    def __contains__(self, field: object) -> bool:
        return any(existing is field for existing in self._fields)

    def __repr__(self) -> str:
        return f"Form(title={self.title!r}, {len(self._fields)} fields)"
