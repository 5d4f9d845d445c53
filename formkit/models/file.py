"""
File field variant.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from ..settings import settings
from ..utils.patterns import (
    PatternLike,
    compile_pattern,
    has_extension,
    matches,
    normalize_extension,
)
from .base import FieldKind
from .field import Field
from .upload import UploadedFile


class FileField(Field):
    """
    Field holding an uploaded file's metadata.

    Allowed extensions are collected with ``add_allowed_extension`` and are
    only checked when ``enforce_extensions`` is on (the default comes from
    ``settings.enforce_file_extensions``).

    Args:
        label: Human-readable label
        value: Uploaded file metadata
        required: Whether a missing file is a validation error
        max_size: Maximum file size in bytes
        file_name_regex: Regular expression the file name must match
        allowed_extensions: Initial allowed extensions, e.g. ``["pdf", ".png"]``
        enforce_extensions: Whether to reject files with other extensions
        field_id: Identifier supplied by the host; generated when omitted
    """

    kind = FieldKind.FILE

    def __init__(
        self,
        label: str,
        value: UploadedFile | None = None,
        *,
        required: bool = False,
        max_size: int | None = None,
        file_name_regex: PatternLike | None = None,
        allowed_extensions: Iterable[str] = (),
        enforce_extensions: bool | None = None,
        field_id: str | None = None,
    ):
        super().__init__(label, value, required=required, field_id=field_id)
        self.max_size = max_size
        self.file_name_regex = file_name_regex
        self._allowed_extensions: list[str] = []
        for extension in allowed_extensions:
            self.add_allowed_extension(extension)
        if enforce_extensions is None:
            enforce_extensions = settings.enforce_file_extensions
        self.enforce_extensions = enforce_extensions

    @property
    def file_name_regex(self) -> re.Pattern[str] | None:
        return self._file_name_regex

    @file_name_regex.setter
    def file_name_regex(self, pattern: PatternLike | None) -> None:
        self._file_name_regex = compile_pattern(pattern)

    @property
    def allowed_extensions(self) -> tuple[str, ...]:
        return tuple(self._allowed_extensions)

    def add_allowed_extension(self, extension: str) -> None:
        """Append an allowed extension; case and a leading dot are ignored."""
        extension = normalize_extension(extension)
        if extension and extension not in self._allowed_extensions:
            self._allowed_extensions.append(extension)

    def validate_value(self, value: UploadedFile) -> list[str]:
        errors: list[str] = []
        if self.file_name_regex is not None and not matches(self.file_name_regex, value.name):
            errors.append("invalid file name")
        if self.max_size is not None and value.size > self.max_size:
            errors.append(f"file size must not exceed {self.max_size} bytes")
        if (
            self.enforce_extensions
            and self._allowed_extensions
            and not has_extension(value.name, self._allowed_extensions)
        ):
            errors.append("file extension not allowed")
        return errors
