"""Datadrop application configuration.

Settings come from a single YAML file, ``datadrop.settings.yaml`` in the
working directory unless ``DATADROP_SETTINGS`` points elsewhere. Every key is
optional; a missing file yields the defaults below.

The ``PORT`` environment variable, when set, wins over ``server.port``.
"""
from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

logger = logging.getLogger(__name__)

SETTINGS_FILE = Path("datadrop.settings.yaml")
SETTINGS_ENV_VAR = "DATADROP_SETTINGS"
PORT_ENV_VAR = "PORT"


def _load_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        logger.warning("Config file not found: %s", path)
        return {}
    with path.open(encoding="utf-8") as fh:
        return yaml.safe_load(fh) or {}


# ---------------------------------------------------------------------------
# Settings models
# ---------------------------------------------------------------------------


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 5000


class StorageSettings(BaseModel):
    """Where static files are served from and uploads are written to."""
    root_dir:         str = "."
    uploads_dir_name: str = "data"
    index_document:   str = "index.html"
    upload_path:      str = "/upload"

    @field_validator("upload_path")
    @classmethod
    def _leading_slash(cls, value: str) -> str:
        return value if value.startswith("/") else "/" + value

    @property
    def root_path(self) -> Path:
        return Path(self.root_dir)

    @property
    def uploads_path(self) -> Path:
        return self.root_path / self.uploads_dir_name

    @property
    def uploads_url_prefix(self) -> str:
        return f"/{self.uploads_dir_name}/"


class LoggingSettings(BaseModel):
    level: str = "info"


class AppConfig(BaseModel):
    server:  ServerSettings  = Field(default_factory=ServerSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# ---------------------------------------------------------------------------
# Public loader
# ---------------------------------------------------------------------------


def _resolve_root_dir(storage: StorageSettings, base_dir: Path) -> None:
    root = Path(storage.root_dir).expanduser()
    if not root.is_absolute():
        root = base_dir / root
    storage.root_dir = str(root.resolve())


def load_config(settings_path: Optional[Path] = None) -> AppConfig:
    """Load settings from YAML and apply environment overrides.

    Relative ``storage.root_dir`` values resolve against the directory that
    holds the settings file, so a checkout can be started from anywhere.
    """
    if settings_path is None:
        settings_path = Path(os.environ.get(SETTINGS_ENV_VAR, SETTINGS_FILE))
    settings_path = Path(settings_path)

    config = AppConfig(**_load_yaml(settings_path))

    port = os.environ.get(PORT_ENV_VAR)
    if port:
        config.server.port = int(port)

    base_dir = settings_path.parent if settings_path.exists() else Path.cwd()
    _resolve_root_dir(config.storage, base_dir.resolve())

    logger.info(
        "Settings loaded (server=%s:%s, root_dir=%s)",
        config.server.host,
        config.server.port,
        config.storage.root_dir,
    )
    return config


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Return the process-wide configuration, loading it on first use."""
    return load_config()
