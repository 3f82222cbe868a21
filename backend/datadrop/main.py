"""Datadrop Application.

Entry point for the Datadrop service: a small HTTP server that serves files
from a root directory and accepts base64 JSON uploads into ``<root>/data``.

Modules:
    - uploads: POST /upload, decodes and stores payloads
    - static: every other request, served from the root directory

Run with ``python -m datadrop`` or ``uvicorn --factory datadrop.main:create_app``.
"""
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI

from datadrop.config import AppConfig, get_config
from datadrop.static.router import router as static_router
from datadrop.static.service import StaticFileService
from datadrop.uploads.router import create_router as create_upload_router
from datadrop.uploads.service import UploadStorageService

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)

logger = logging.getLogger(__name__)


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    """Build the application for ``config`` (the process config by default)."""
    if config is None:
        config = get_config()
    storage = config.storage

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan manager for startup/shutdown events."""
        configured_level = getattr(logging, config.logging.level.upper(), None)
        if configured_level is not None:
            logging.getLogger().setLevel(configured_level)
            logger.info("Root logger level set to %s", config.logging.level.upper())

        # Uploads directory must exist before the first request is accepted.
        app.state.upload_service.ensure_upload_dir()

        logger.info(
            "Server running at http://%s:%s/ (root=%s, uploads=%s)",
            config.server.host,
            config.server.port,
            storage.root_path,
            storage.uploads_path,
        )

        yield  # Application runs here

        logger.info("Application shutdown complete")

    app = FastAPI(
        title="Datadrop",
        description="Static file server with base64 JSON uploads",
        version="0.1.0",
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.state.config = config
    app.state.upload_service = UploadStorageService(
        upload_dir=storage.uploads_path,
        public_prefix=storage.uploads_url_prefix,
    )
    app.state.static_service = StaticFileService(
        root_dir=storage.root_path,
        index_document=storage.index_document,
        uploads_prefix=storage.uploads_url_prefix,
    )

    # Order matters: the static router matches every path.
    app.include_router(create_upload_router(storage.upload_path))
    app.include_router(static_router)

    return app
