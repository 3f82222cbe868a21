"""Static file resolution and reading.

Request paths map onto the server root with a plain join. Backslashes are
turned into forward slashes first; ``..`` segments are left alone.
"""
import errno
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from starlette.concurrency import run_in_threadpool

from .mime import content_type_for

logger = logging.getLogger(__name__)


@dataclass
class StaticFile:
    path: Path
    content: bytes
    content_type: str


def errno_name(exc: OSError) -> str:
    """Symbolic name for the errno carried by ``exc`` (e.g. ``EACCES``)."""
    if exc.errno is None:
        return type(exc).__name__
    return errno.errorcode.get(exc.errno, str(exc.errno))


class StaticFileService:
    """Maps request paths to files under the server root and reads them."""

    def __init__(
        self,
        root_dir: Union[str, Path],
        index_document: str = "index.html",
        uploads_prefix: str = "/data/",
    ):
        self._root_dir = Path(root_dir)
        self._index_document = index_document
        self._uploads_prefix = uploads_prefix

    @property
    def root_dir(self) -> Path:
        return self._root_dir

    def _join(self, relative: str) -> Path:
        # Concatenate before normalizing so a leading "/" stays under the root.
        return Path(os.path.normpath(f"{self._root_dir}/{relative}"))

    def resolve(self, request_path: str) -> Path:
        """Map a URL path to a filesystem path beneath the server root."""
        request_path = request_path.replace("\\", "/")

        if request_path == "/":
            return self._root_dir / self._index_document
        if request_path.startswith(self._uploads_prefix):
            return self._join(request_path)
        return self._join(request_path[1:])

    async def read(self, request_path: str) -> StaticFile:
        """Read the file behind ``request_path`` in full.

        Raises:
            FileNotFoundError: If nothing exists at the resolved path.
            OSError: For any other read failure (permissions, directories).
        """
        file_path = self.resolve(request_path)
        content = await run_in_threadpool(file_path.read_bytes)
        return StaticFile(
            path=file_path,
            content=content,
            content_type=content_type_for(str(file_path)),
        )
