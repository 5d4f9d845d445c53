"""
Field base model for formkit.

This module provides the Field class shared by every field variant: common
state, the validation contract, and conditional visibility. Variants register
themselves by kind and can be built from a kind tag with ``create_field``.
"""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from ..exceptions import FieldAlreadyAttachedError, UnknownFieldKindError
from ..utils.logger import logger
from .base import EMPTY_VALUE_MESSAGE, ConditionalLink, FieldKind, generate_id, is_empty_value

if TYPE_CHECKING:
    from .form import Form

FIELD_REGISTRY: dict[FieldKind, type[Field]] = {}


class Field(ABC):
    """
    A single typed input slot within a form.

    Subclasses set ``kind`` and implement ``validate_value``, which is only
    called when the field holds a value.

    Args:
        label: Human-readable label
        value: Initial value
        required: Whether an empty value is a validation error
        field_id: Identifier supplied by the host; generated when omitted
    """

    kind: ClassVar[FieldKind]

    def __init__(
        self,
        label: str,
        value: Any = None,
        *,
        required: bool = False,
        field_id: str | None = None,
    ):
        self._field_id = field_id or generate_id()
        self.label = label
        self.value = value
        self.required = required
        self.errors: list[str] = []
        self.conditional: ConditionalLink | None = None
        self._form_ref: weakref.ref[Form] | None = None

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        kind = cls.__dict__.get("kind")
        if kind is None:
            return
        if kind in FIELD_REGISTRY:
            raise TypeError(f"Field kind '{kind.value}' is already registered")
        FIELD_REGISTRY[kind] = cls

    @property
    def field_id(self) -> str:
        return self._field_id

    @property
    def form(self) -> Form | None:
        """The form this field is attached to, if any."""
        if self._form_ref is None:
            return None
        return self._form_ref()

    def attach(self, form: Form) -> None:
        """Set the back-reference to the owning form.

        Called by ``Form.add_field`` and ``Form.add_field_at_index``; a field
        can only be attached once.

        Raises:
            FieldAlreadyAttachedError: If the field already belongs to a form
        """
        current = self.form
        if current is not None:
            raise FieldAlreadyAttachedError(self.field_id, current.form_id)
        self._form_ref = weakref.ref(form)

    @property
    def order(self) -> int | None:
        """Position of the field within its form, or None if detached."""
        form = self.form
        if form is None:
            return None
        for index, field in enumerate(form.fields):
            if field is self:
                return index
        return None

    def is_empty(self) -> bool:
        return is_empty_value(self.value)

    @abstractmethod
    def validate_value(self, value: Any) -> list[str]:
        """Run the variant rules against a non-empty value.

        Args:
            value: The current field value, known to be non-empty

        Returns:
            List of error messages (empty if the value is acceptable)
        """

    def validate(self) -> list[str]:
        """Recompute the error list for the current value.

        The previous errors are replaced, never extended.

        Returns:
            The new error list, also stored in ``errors``
        """
        errors: list[str] = []
        if self.is_empty():
            if self.required:
                errors.append(EMPTY_VALUE_MESSAGE)
        else:
            errors.extend(self.validate_value(self.value))
        self.errors = errors
        return errors

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_conditional(self, field: Field, expected_value: Any) -> None:
        """Make this field visible only while ``field.value == expected_value``.

        Replaces any existing condition. The other field may belong to any
        form; cycles are not detected.
        """
        self.conditional = ConditionalLink(field, expected_value)
        logger.debug(f"Field '{self.label}' visible when '{field.label}' == {expected_value!r}")

    def remove_conditional(self) -> None:
        self.conditional = None

    @property
    def visible(self) -> bool:
        """Whether the field should be shown, evaluated on every read."""
        if self.conditional is None:
            return True
        return self.conditional.is_satisfied()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(label={self.label!r}, value={self.value!r})"


def create_field(kind: FieldKind | str, *args: Any, **kwargs: Any) -> Field:
    """Build a field variant from its kind tag.

    Args:
        kind: Field kind or its string value, e.g. ``"email"``
        *args: Positional arguments for the variant constructor
        **kwargs: Keyword arguments for the variant constructor

    Returns:
        New field instance

    Raises:
        UnknownFieldKindError: If no variant is registered for the kind

    Examples:
        >>> field = create_field("email", "Contact", required=True)
        >>> field.kind
        <FieldKind.EMAIL: 'email'>
    """
    try:
        field_cls = FIELD_REGISTRY[FieldKind(kind)]
    except (ValueError, KeyError):
        raise UnknownFieldKindError(str(kind)) from None
    return field_cls(*args, **kwargs)
