"""JSON upload module for Datadrop.

Clients POST ``{fileId, fileData, fileName, contentType}`` where ``fileData``
is base64, optionally wrapped in a data URI. The decoded bytes are written to
``<uploads dir>/<fileId>.<subtype>`` and served back by the static module
under ``/data/``.
"""

from .schemas import UploadError, UploadRequest, UploadResponse
from .service import UploadStorageService, decode_base64, extension_for, strip_data_uri
from .router import create_router

__all__ = [
    "UploadError",
    "UploadRequest",
    "UploadResponse",
    "UploadStorageService",
    "create_router",
    "decode_base64",
    "extension_for",
    "strip_data_uri",
]
