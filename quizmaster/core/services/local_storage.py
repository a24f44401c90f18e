"""File-backed string key-value store, the desktop analogue of ``localStorage``."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from threading import Lock

logger = logging.getLogger(__name__)


class LocalStorage:
    """Maps string keys to string values inside a single JSON document.

    Every write rewrites the whole document through a temporary file and
    ``os.replace`` so a crash never leaves a half-written store behind.
    Reads propagate ``OSError`` and ``ValueError`` (corrupt document); writes
    replace a corrupt document with an empty one.
    """

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = Lock()

    @property
    def file_path(self) -> Path:
        return self._file_path

    def get_item(self, key: str) -> str | None:
        with self._lock:
            return self._read().get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            data = self._read_for_write()
            data[key] = value
            self._write(data)

    def remove_item(self, key: str) -> None:
        with self._lock:
            data = self._read_for_write()
            if key in data:
                del data[key]
                self._write(data)

    def _read(self) -> dict[str, str]:
        if not self._file_path.exists():
            return {}
        document = json.loads(self._file_path.read_text(encoding="utf-8"))
        if not isinstance(document, dict):
            raise ValueError(f"Storage file {self._file_path} does not contain an object.")
        return {str(key): str(value) for key, value in document.items()}

    def _read_for_write(self) -> dict[str, str]:
        try:
            return self._read()
        except ValueError:
            logger.warning("Storage file %s is corrupt; starting a fresh store", self._file_path)
            self._write({})
            return {}

    def _write(self, data: dict[str, str]) -> None:
        self._file_path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self._file_path.with_name(self._file_path.name + ".tmp")
        temp_path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        os.replace(temp_path, self._file_path)
