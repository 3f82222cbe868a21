"""Upload storage service for Datadrop.

Uploads are stored flat in a single directory as ``{file_id}.{extension}``.
There is no metadata store and no locking: a repeated name overwrites the
previous file, and concurrent writers to the same name race.
"""
import base64
import logging
import re
from pathlib import Path
from typing import Union

from starlette.concurrency import run_in_threadpool

logger = logging.getLogger(__name__)

# Same character class the upload clients emit: letters, '-', '+', '/'.
DATA_URI_PREFIX = re.compile(r"^data:([A-Za-z\-+/]+);base64,")

_NOT_BASE64 = re.compile(r"[^A-Za-z0-9+/]")


def strip_data_uri(file_data: str) -> str:
    """Remove a leading ``data:<mime>;base64,`` prefix if there is one."""
    return DATA_URI_PREFIX.sub("", file_data, count=1)


def decode_base64(payload: str) -> bytes:
    """Decode base64 without rejecting sloppy input.

    URL-safe characters are accepted, anything else outside the alphabet is
    dropped, decoding stops at the first ``=``, and missing padding is
    tolerated. Never raises on malformed text.
    """
    payload = payload.split("=", 1)[0]
    payload = payload.replace("-", "+").replace("_", "/")
    payload = _NOT_BASE64.sub("", payload)
    # A single dangling sextet carries no full byte.
    if len(payload) % 4 == 1:
        payload = payload[:-1]
    payload += "=" * (-len(payload) % 4)
    return base64.b64decode(payload)


def extension_for(content_type: str) -> str:
    """Return the subtype of ``type/subtype`` to use as the file extension.

    Raises:
        ValueError: If the content type has no subtype.
    """
    parts = content_type.split("/")
    if len(parts) < 2:
        raise ValueError(f"Content type has no subtype: {content_type!r}")
    return parts[1]


class UploadStorageService:
    """Writes decoded uploads into the uploads directory."""

    def __init__(self, upload_dir: Union[str, Path], public_prefix: str = "/data/"):
        self._upload_dir = Path(upload_dir)
        self._public_prefix = public_prefix

    @property
    def upload_dir(self) -> Path:
        return self._upload_dir

    def ensure_upload_dir(self) -> None:
        """Create the uploads directory if it does not exist yet."""
        if not self._upload_dir.exists():
            self._upload_dir.mkdir(parents=True, exist_ok=True)
            logger.info("Created uploads directory: %s", self._upload_dir)

    def stored_filename(self, file_id: str, content_type: str) -> str:
        return f"{file_id}.{extension_for(content_type)}"

    def public_path(self, stored_filename: str) -> str:
        return f"{self._public_prefix}{stored_filename}"

    async def save(self, stored_filename: str, file_data: str) -> Path:
        """Decode ``file_data`` and write it to ``stored_filename``.

        The write happens in the threadpool so the event loop keeps serving
        other requests.

        Raises:
            OSError: If the file cannot be written.
        """
        content = decode_base64(strip_data_uri(file_data))
        file_path = self._upload_dir / stored_filename
        await run_in_threadpool(file_path.write_bytes, content)
        logger.info("Saved upload: %s (%d bytes)", file_path, len(content))
        return file_path
