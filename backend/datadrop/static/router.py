"""Catch-all router serving files from the server root.

Registered last so it only sees requests no other route fully matched. It
answers every method the same way, so ``POST /index.html`` or ``GET /upload``
are plain file lookups.

Paths are looked up as sent, without percent-decoding: ``/a%20b.png`` names
the file ``a%20b.png``, not ``a b.png``.
"""
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, Response

from .service import StaticFileService, errno_name

logger = logging.getLogger(__name__)

router = APIRouter(tags=["static"])

ALL_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def get_static_service(request: Request) -> StaticFileService:
    return request.app.state.static_service


def undecoded_path(request: Request) -> str:
    """Request path exactly as it appeared on the request line."""
    raw_path = request.scope.get("raw_path")
    if raw_path is None:
        return request.scope["path"]
    return raw_path.decode("utf-8", "replace")


@router.api_route("/{file_path:path}", methods=ALL_METHODS, include_in_schema=False)
async def serve_file(
    request: Request,
    service: StaticFileService = Depends(get_static_service),
) -> Response:
    """Return the file behind the request path.

    Returns:
        200 with the file bytes, 404 ``File not found``, or 500
        ``Error: <errno name>`` for any other read failure.
    """
    request_path = undecoded_path(request)
    try:
        static_file = await service.read(request_path)
    except FileNotFoundError:
        return PlainTextResponse("File not found", status_code=404)
    except OSError as e:
        logger.warning("Failed to read %s: %s", request_path, e)
        return PlainTextResponse(f"Error: {errno_name(e)}", status_code=500)

    # Set the header directly; media_type would append a charset to text/*.
    return Response(
        content=static_file.content,
        headers={"Content-Type": static_file.content_type},
    )
