"""Pydantic schemas for the JSON upload endpoint.

The wire format uses camelCase keys (``fileId``, ``fileData``, ``fileName``,
``contentType``); the models expose snake_case attributes with aliases.
"""
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator


def _js_string(value: Any) -> Any:
    """Render JSON scalars the way they appear when interpolated into a name."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return value


class UploadRequest(BaseModel):
    """Body of ``POST /upload``.

    Every field is optional here. The router decides which ones are required
    so that a missing field maps to a 400 rather than a validation error.
    Falsy JSON values (``""``, ``0``, ``false``, ``null``) count as missing.
    ``file_name`` is advisory: any JSON value is accepted and it is never
    used to build the storage path.
    """
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    file_id: Optional[str] = Field(None, alias="fileId")
    file_data: Optional[str] = Field(None, alias="fileData")
    file_name: Any = Field(None, alias="fileName")
    content_type: Optional[str] = Field(None, alias="contentType")

    @field_validator("file_id", "file_data", "content_type", mode="before")
    @classmethod
    def _falsy_is_missing(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None or value is False or value == 0 or value == "":
            return None
        # Only the file id is interpolated into the stored name.
        if info.field_name == "file_id":
            return _js_string(value)
        return value

    def has_required_fields(self) -> bool:
        return bool(self.file_id and self.file_data and self.content_type)


class UploadResponse(BaseModel):
    """Returned after the payload has been written to disk."""
    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    file_path: str = Field(..., alias="filePath", description="Public path, e.g. /data/abc.png")
    file_url: str = Field(..., alias="fileUrl", description="Host header joined with file_path")


class UploadError(BaseModel):
    success: bool = False
    error: str


MISSING_FIELDS = "Missing required fields"
SAVE_FAILED = "File save failed"
INTERNAL_ERROR = "Internal server error"
