"""
Boolean field variant.
"""

from .base import FieldKind
from .field import Field


class BooleanField(Field):
    """Yes/no field.

    The value defaults to False, which counts as a value: a required boolean
    field is only empty when its value is explicitly set to None.
    """

    kind = FieldKind.BOOLEAN

    def __init__(
        self,
        label: str,
        value: bool | None = False,
        *,
        required: bool = False,
        field_id: str | None = None,
    ):
        super().__init__(label, value, required=required, field_id=field_id)

    def validate_value(self, value: bool) -> list[str]:  # noqa: ARG002
        return []
