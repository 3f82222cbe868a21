"""Extension to content-type lookup for served files.

Only the extensions below are recognized. No content sniffing is done.
"""
from pathlib import PurePosixPath

DEFAULT_CONTENT_TYPE = "application/octet-stream"

MIME_TYPES = {
    "html": "text/html",
    "js": "text/javascript",
    "css": "text/css",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "webp": "image/webp",
    "mp4": "video/mp4",
    "webm": "video/webm",
    "json": "application/json",
    "txt": "text/plain",
}


def content_type_for(path: str) -> str:
    """Return the content type for ``path`` based on its last suffix.

    Examples:
        >>> content_type_for("/data/photo.PNG")
        'image/png'
        >>> content_type_for("/data/abc.plain")
        'application/octet-stream'
    """
    extension = PurePosixPath(path).suffix.lower().lstrip(".")
    return MIME_TYPES.get(extension, DEFAULT_CONTENT_TYPE)
