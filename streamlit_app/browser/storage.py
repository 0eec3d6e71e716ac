"""
Durable key-value storage for browser state.

The favorites list lives in one named slot holding a JSON string, much like a
browser's localStorage. Two durable backends are available:

- SqlStorage: a `kv_store` table via SQLAlchemy, used when DATABASE_URL is set
- JsonFileStorage: one `<slot>.json` file per key under FAVORITES_DIR

MemoryStorage keeps everything in a dict, for tests and throwaway sessions.

All backends raise StorageError on failure. Callers decide how to degrade;
the favorites store keeps its in-memory state authoritative.
"""

import logging
import os
import tempfile
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from sqlalchemy import Column, DateTime, String, Text, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.sql import func

from .errors import StorageError

logger = logging.getLogger(__name__)

VALID_KEY = re.compile(r"^[A-Za-z0-9_\-]+$")


def _check_key(key: str) -> None:
    if not VALID_KEY.match(key or ""):
        raise ValueError(f"Invalid storage key: {key!r}")


class KeyValueStorage(ABC):
    """String values stored under simple string keys."""

    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """
        Read the value stored under `key`.

        Returns:
            Stored string, or None if the key has never been written

        Raises:
            StorageError: If the backend can't be read
        """
        pass

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        """
        Store `value` under `key`, replacing any previous value.

        Raises:
            StorageError: If the backend can't be written
        """
        pass


class MemoryStorage(KeyValueStorage):
    """Process-local storage, lost when the process exits."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._data: Dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        _check_key(key)
        return self._data.get(key)

    def write(self, key: str, value: str) -> None:
        _check_key(key)
        self._data[key] = value


class JsonFileStorage(KeyValueStorage):
    """
    One file per key under a directory.

    Writes go to a uniquely named temporary file first and are then renamed
    into place, so a crash mid-write leaves the previous value intact and
    concurrent writers never share a temporary file.
    """

    def __init__(self, directory: Union[str, Path]) -> None:
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        _check_key(key)
        return self.directory / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise StorageError(f"Failed to read {path}: {e}") from e

    def write(self, key: str, value: str) -> None:
        path = self.path_for(key)
        tmp_path = None
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w", encoding="utf-8", dir=self.directory, prefix=f".{key}-", suffix=".tmp", delete=False
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(value)
            os.replace(tmp_path, path)
        except OSError as e:
            if tmp_path is not None:
                tmp_path.unlink(missing_ok=True)
            raise StorageError(f"Failed to write {path}: {e}") from e


Base = declarative_base()


class KeyValueRow(Base):
    """Key-value table - one row per storage slot."""
    __tablename__ = "kv_store"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now(), nullable=False)


class SqlStorage(KeyValueStorage):
    """Storage backed by a `kv_store` table in any SQLAlchemy-supported database."""

    def __init__(self, database_url: str) -> None:
        try:
            self.engine = create_engine(database_url, pool_pre_ping=True, echo=False)
            self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
            Base.metadata.create_all(bind=self.engine)
        except (SQLAlchemyError, ImportError) as e:
            raise StorageError(f"Failed to initialize database storage: {e}") from e

    def read(self, key: str) -> Optional[str]:
        _check_key(key)
        try:
            with self.SessionLocal() as session:
                row = session.get(KeyValueRow, key)
                return row.value if row is not None else None
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read key {key!r} from database: {e}") from e

    def write(self, key: str, value: str) -> None:
        _check_key(key)
        try:
            with self.SessionLocal() as session:
                row = session.get(KeyValueRow, key)
                if row is None:
                    session.add(KeyValueRow(key=key, value=value))
                else:
                    row.value = value
                session.commit()
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to write key {key!r} to database: {e}") from e

    def dispose(self) -> None:
        self.engine.dispose()


def get_storage(
    database_url: Optional[str] = None,
    directory: Optional[Union[str, Path]] = None,
) -> KeyValueStorage:
    """
    Pick the durable storage backend.

    Uses the database if a URL is given and it can be initialized, otherwise
    falls back to JSON files under `directory` (default ./data).

    Args:
        database_url: SQLAlchemy database URL (optional)
        directory: Directory for file storage (optional)

    Returns:
        KeyValueStorage instance
    """
    if database_url:
        try:
            storage = SqlStorage(database_url)
            logger.info("Favorites storage: database")
            return storage
        except StorageError as e:
            logger.warning("Database storage unavailable, using file storage: %s", e)

    directory = Path(directory) if directory is not None else Path("data")
    logger.info("Favorites storage: files under %s", directory)
    return JsonFileStorage(directory)
