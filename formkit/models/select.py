"""
Single-select field variant.
"""

from collections.abc import Iterable
from typing import Generic, TypeVar

from .base import FieldKind
from .field import Field

T = TypeVar("T")


class SingleSelectField(Field, Generic[T]):
    """
    Field whose value must be one of a fixed, ordered list of options.

    Args:
        label: Human-readable label
        options: Allowed values, in display order
        value: Initial value; falls back to ``default`` when omitted
        default: Option selected by default
        required: Whether an empty value is a validation error
        field_id: Identifier supplied by the host; generated when omitted
    """

    kind = FieldKind.SINGLE_SELECT

    def __init__(
        self,
        label: str,
        options: Iterable[T],
        value: T | None = None,
        *,
        default: T | None = None,
        required: bool = False,
        field_id: str | None = None,
    ):
        super().__init__(
            label,
            value if value is not None else default,
            required=required,
            field_id=field_id,
        )
        self.options: list[T] = list(options)
        self.default = default

    def validate_value(self, value: T) -> list[str]:
        if value not in self.options:
            return ["value not in allowed choices"]
        return []
