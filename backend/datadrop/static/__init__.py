"""Static file module for Datadrop."""
from .mime import DEFAULT_CONTENT_TYPE, MIME_TYPES, content_type_for
from .service import StaticFile, StaticFileService, errno_name
from .router import router

__all__ = [
    "DEFAULT_CONTENT_TYPE",
    "MIME_TYPES",
    "StaticFile",
    "StaticFileService",
    "content_type_for",
    "errno_name",
    "router",
]
