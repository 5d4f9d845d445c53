"""
Uploaded file model.

The host application is responsible for receiving and storing file content;
formkit only sees the metadata it needs for validation.
"""

from pydantic import BaseModel, ConfigDict, Field


class UploadedFile(BaseModel):
    """Metadata of a file submitted to a file field.

    Attributes:
        name: Original file name as supplied by the client
        size: Size in bytes
        content_type: Optional MIME type reported by the client
    """

    model_config = ConfigDict(frozen=True)

    name: str
    size: int = Field(ge=0)
    content_type: str | None = None
