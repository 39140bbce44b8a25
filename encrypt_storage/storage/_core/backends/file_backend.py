"""
encrypt_storage.storage._core.backends.file_backend
===================================================
Persistent backend: one JSON document on disk holding every record.

The whole document is rewritten on each mutation through a temporary
file in the same directory followed by os.replace(), so a crash never
leaves a half-written store behind. Records are kept in memory between
writes; another process writing the same file is not picked up until
reload() is called (last write wins).
"""

from __future__ import annotations

import json
import os
import tempfile
from typing import Dict, List, Optional

from encrypt_storage.core.exceptions import BackendError
from encrypt_storage.storage._core.backends.base_backend import BaseStorageBackend


class FileBackend(BaseStorageBackend):
    """
    JSON-file backend. Enumeration follows insertion order, which JSON
    objects preserve through json.load / json.dump.

    Parameters
    ----------
    path : str or os.PathLike
        Location of the JSON document. Parent directories are created
        on the first write. A missing file is an empty store.
    """

    def __init__(self, path):
        self.path = os.fspath(path)
        self._store: Dict[str, str] = {}
        self.reload()

    def reload(self) -> None:
        """Re-read the document from disk, discarding the in-memory copy."""
        if not os.path.isfile(self.path):
            self._store = {}
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            raise BackendError(
                f"Failed to read storage file: {self.path!r}",
                details={"error": str(exc)},
            ) from exc

        if not isinstance(data, dict) or not all(
            isinstance(v, str) for v in data.values()
        ):
            raise BackendError(
                f"Storage file is not a string-to-string JSON object: {self.path!r}",
                details={"path": self.path},
            )
        self._store = data

    def get_item(self, key: str) -> Optional[str]:
        return self._store.get(key)

    def set_item(self, key: str, value: str) -> None:
        updated = dict(self._store)
        updated[key] = value
        self._commit(updated)

    def remove_item(self, key: str) -> None:
        if key in self._store:
            updated = dict(self._store)
            del updated[key]
            self._commit(updated)

    def clear(self) -> None:
        self._commit({})

    def keys(self) -> List[str]:
        return list(self._store)

    @property
    def length(self) -> int:
        return len(self._store)

    def _commit(self, updated: Dict[str, str]) -> None:
        """Write `updated` to disk, then adopt it. A failed write leaves the store untouched."""
        self._flush(updated)
        self._store = updated

    def _flush(self, data: Dict[str, str]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        tmp_path = None
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except OSError as exc:
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise BackendError(
                f"Failed to write storage file: {self.path!r}",
                details={"error": str(exc)},
            ) from exc

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"FileBackend(path={self.path!r}, entries={len(self._store)})"
