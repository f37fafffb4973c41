"""Where doijournal keeps its SQLite files.

The data dir comes from ``DOIJOURNAL_DATA_DIR`` or the platform data home. The
journal database lives there unless ``DATABASE_URI`` points elsewhere; the
Crossref response cache always does.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Final

DATA_DIR_ENV_VAR: Final[str] = "DOIJOURNAL_DATA_DIR"
DATABASE_FILENAME: Final[str] = "doijournal.db"
HTTP_CACHE_FILENAME: Final[str] = "http_cache.db"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    data_dir: Path

    def _file(self, name: str) -> Path:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        return self.data_dir / name

    def http_cache_path(self) -> Path:
        return self._file(HTTP_CACHE_FILENAME)

    def database_uri(self) -> str:
        return f"sqlite+pysqlite:///{self._file(DATABASE_FILENAME)}"


@dataclass(frozen=True, slots=True)
class DatabaseConfig:
    uri: str


def _platform_data_home() -> Path:
    if os.name == "nt":
        base = os.getenv("LOCALAPPDATA")
        return Path(base) if base else Path.home() / "AppData" / "Local"
    base = os.getenv("XDG_DATA_HOME")
    return Path(base) if base else Path.home() / ".local" / "share"


def get_storage_config() -> StorageConfig:
    env_dir = os.getenv(DATA_DIR_ENV_VAR)
    data_dir = Path(env_dir) if env_dir else _platform_data_home() / "doijournal"
    return StorageConfig(data_dir=data_dir.expanduser().resolve())


def get_database_config(*, storage: StorageConfig | None = None) -> DatabaseConfig:
    env_uri = os.getenv("DATABASE_URI")
    if env_uri:
        return DatabaseConfig(uri=env_uri)
    return DatabaseConfig(uri=(storage or get_storage_config()).database_uri())
