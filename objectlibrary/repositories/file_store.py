"""
File-based implementation of StoreProtocol.
One JSON file per record under a single directory: {directory}/{id}.{file_type}.
File existence is the only index. There is no locking; the last writer wins.
"""

import logging
from contextlib import suppress
from pathlib import Path
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, ValidationError

from objectlibrary.config import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


def directory(base_dir: Path, name: str) -> Path:
    """Return {base_dir}/{name}, creating it (and its parents) when missing."""
    path = Path(base_dir) / name
    path.mkdir(parents=True, exist_ok=True)
    return path


def directory_in_user_library(name: str) -> Path:
    """Return a named directory under the configured user-data root."""
    return directory(get_settings().DATA_DIR, name)


class FileStore(Generic[T]):
    """Directory-scoped JSON store for records of one pydantic model type."""

    def __init__(self, directory: Path, record_type: type[T], file_type: str = "json"):
        self._directory = Path(directory)
        self.record_type = record_type
        self.file_type = file_type.lstrip(".")

    @property
    def directory(self) -> Path:
        """The store's directory, created on first access."""
        self._directory.mkdir(parents=True, exist_ok=True)
        return self._directory

    @property
    def files(self) -> list[Path]:
        """Paths of the stored files matching this store's extension."""
        if not self._directory.is_dir():
            return []
        try:
            return [
                p for p in self._directory.iterdir()
                if p.is_file() and p.suffix == f".{self.file_type}"
            ]
        except OSError as e:
            logger.warning("Could not list %s: %s", self._directory, e)
            return []

    def file_path(self, id: str) -> Path:
        return self._directory / f"{id}.{self.file_type}"

    @staticmethod
    def file_name(path: Path) -> str:
        """Return the id of a stored file (its name without the extension)."""
        return Path(path).stem

    def save(self, record: T, id: str) -> bool:
        """Write record to {id}.{file_type} atomically. Returns False on any failure."""
        if not _is_valid_id(id):
            logger.warning("Refusing to save record with invalid id %r", id)
            return False
        if not isinstance(record, self.record_type):
            logger.warning(
                "Refusing to save %s into a store of %s",
                type(record).__name__,
                self.record_type.__name__,
            )
            return False
        path = self.file_path(id)
        tmp = path.with_name(f"{path.name}.tmp")
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            tmp.write_text(record.model_dump_json(by_alias=True), encoding="utf-8")
            tmp.replace(path)
        except (OSError, ValueError) as e:
            logger.warning("Could not save %s: %s", path, e)
            with suppress(OSError):
                tmp.unlink(missing_ok=True)
            return False
        return True

    def read(self, id: str) -> Optional[T]:
        """Return the record stored under id, or None when missing or unreadable."""
        if not _is_valid_id(id):
            return None
        return self.read_file(self.file_path(id))

    def read_file(self, path: Path) -> Optional[T]:
        try:
            raw = Path(path).read_text(encoding="utf-8")
            return self.record_type.model_validate_json(raw)
        except FileNotFoundError:
            return None
        except (OSError, ValueError, ValidationError) as e:
            logger.warning("Could not read %s: %s", path, e)
            return None

    def remove(self, id: str) -> bool:
        """Delete the file stored under id. Returns False if it could not be deleted."""
        if not _is_valid_id(id):
            return False
        try:
            self.file_path(id).unlink()
        except (OSError, ValueError) as e:
            logger.debug("Could not remove %s: %s", id, e)
            return False
        return True

    def list(self) -> list[str]:
        """Ids of every stored record, in filesystem order."""
        return [self.file_name(p) for p in self.files]


def _is_valid_id(id: str) -> bool:
    return (
        isinstance(id, str)
        and id not in ("", ".", "..")
        and "/" not in id
        and "\\" not in id
        and "\x00" not in id
    )
