"""
Text field variants: plain text and email.
"""

from __future__ import annotations

import re

from ..settings import settings
from ..utils.patterns import PatternLike, compile_pattern, matches
from .base import FieldKind
from .field import Field


class PlainTextField(Field):
    """
    Free text field with optional length bounds and a format pattern.

    Length and pattern checks are independent: one value can fail several of
    them in the same validation run. Patterns must match the whole value.

    Args:
        label: Human-readable label
        value: Initial text
        required: Whether an empty value is a validation error
        min_length: Minimum number of characters
        max_length: Maximum number of characters
        pattern: Regular expression the value must match
        field_id: Identifier supplied by the host; generated when omitted
    """

    kind = FieldKind.TEXT

    def __init__(
        self,
        label: str,
        value: str | None = None,
        *,
        required: bool = False,
        min_length: int | None = None,
        max_length: int | None = None,
        pattern: PatternLike | None = None,
        field_id: str | None = None,
    ):
        super().__init__(label, value, required=required, field_id=field_id)
        self.min_length = min_length
        self.max_length = max_length
        self.pattern = pattern

    @property
    def pattern(self) -> re.Pattern[str] | None:
        return self._pattern

    @pattern.setter
    def pattern(self, pattern: PatternLike | None) -> None:
        self._pattern = compile_pattern(pattern)

    def validate_value(self, value: str) -> list[str]:
        errors: list[str] = []
        if self.min_length is not None and len(value) < self.min_length:
            errors.append(f"value must be at least {self.min_length} characters")
        if self.max_length is not None and len(value) > self.max_length:
            errors.append(f"value must be at most {self.max_length} characters")
        if self.pattern is not None and not matches(self.pattern, value):
            errors.append("invalid format")
        return errors


class EmailField(PlainTextField):
    """Text field whose pattern defaults to an email address shape."""

    kind = FieldKind.EMAIL

    def __init__(
        self,
        label: str,
        value: str | None = None,
        *,
        required: bool = False,
        min_length: int | None = None,
        max_length: int | None = None,
        pattern: PatternLike | None = None,
        field_id: str | None = None,
    ):
        super().__init__(
            label,
            value,
            required=required,
            min_length=min_length,
            max_length=max_length,
            pattern=pattern if pattern is not None else settings.email_pattern,
            field_id=field_id,
        )
