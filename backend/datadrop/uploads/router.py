"""FastAPI router for the JSON upload endpoint.

The body is buffered in full before parsing. Status mapping:

- 200: payload written, returns ``filePath`` and ``fileUrl``
- 400: ``fileId``, ``fileData`` or ``contentType`` missing or empty; a JSON
  body that is not an object (array, string, number) has no fields at all
- 500: body is not JSON or is ``null``, ``contentType`` has no ``/subtype``
  (no extension can be derived), the write failed, or anything unexpected
"""
import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from .schemas import (
    INTERNAL_ERROR,
    MISSING_FIELDS,
    SAVE_FAILED,
    UploadError,
    UploadRequest,
    UploadResponse,
)
from .service import UploadStorageService

logger = logging.getLogger(__name__)

UPLOAD_PATH = "/upload"


def get_upload_service(request: Request) -> UploadStorageService:
    return request.app.state.upload_service


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(UploadError(error=message).model_dump(), status_code=status_code)


async def upload_file(
    request: Request,
    service: UploadStorageService = Depends(get_upload_service),
) -> JSONResponse:
    """Store a base64 payload as ``<fileId>.<subtype>`` in the uploads directory.

    Malformed JSON is reported as a 500, not a 400; clients already depend on
    that mapping.
    """
    try:
        body = await request.body()
        data = json.loads(body)
        if data is None:
            raise TypeError("Upload body is JSON null")
        if not isinstance(data, dict):
            data = {}
        upload = UploadRequest.model_validate(data)

        if not upload.has_required_fields():
            return _error(400, MISSING_FIELDS)

        stored_filename = service.stored_filename(upload.file_id, upload.content_type)

        try:
            await service.save(stored_filename, upload.file_data)
        except OSError as e:
            logger.error("File write error: %s", e)
            return _error(500, SAVE_FAILED)

        public_path = service.public_path(stored_filename)
        host = request.headers.get("host", "")
        response = UploadResponse(file_path=public_path, file_url=f"{host}{public_path}")
        return JSONResponse(response.model_dump(by_alias=True))

    except Exception as e:
        logger.error("Upload error: %s", e)
        return _error(500, INTERNAL_ERROR)


def create_router(upload_path: str = UPLOAD_PATH) -> APIRouter:
    """Build the upload router, mounted at ``upload_path`` for POST only."""
    router = APIRouter(tags=["uploads"])
    router.add_api_route(upload_path, upload_file, methods=["POST"])
    return router
