from __future__ import annotations

import logging
from pathlib import Path

from .interfaces import Adapter, Record
from .json_store import atomic_write_json, read_json
from .paths import file_path_exists_or_create

logger = logging.getLogger(__name__)


class JSONFileAdapter(Adapter):
    """
    Stores the sequence as a single JSON array on disk at a fixed path.

    - Returns None on a missing or empty file.
    - Malformed JSON, or a document that is not an array, raises.
    - Writes atomically.
    """

    def __init__(self, path: Path | str, *, indent: int | None = 2, sort_keys: bool = False):
        self._path = Path(path)
        self._indent = indent
        self._sort_keys = sort_keys
        file_path_exists_or_create(self._path)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> list[Record] | None:
        raw = read_json(self._path)
        if raw is None:
            logger.debug("JSON FILE READ: nothing persisted at %s", self._path)
            return None
        if not isinstance(raw, list):
            raise TypeError(f"{self._path} must contain a JSON array, got {type(raw).__name__}")
        return raw

    def write(self, data: list[Record]) -> None:
        atomic_write_json(self._path, data, indent=self._indent, sort_keys=self._sort_keys)
        logger.debug("JSON FILE WRITE: %d records to %s", len(data), self._path)

    def __repr__(self) -> str:
        return f"JSONFileAdapter({str(self.path)!r})"
