"""
encrypt_storage.storage._core.backends.memory_backend
=====================================================
In-memory backend. Records live in a dict and are lost when the
process exits, which is what the session scope wants.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from encrypt_storage.storage._core.backends.base_backend import BaseStorageBackend


class MemoryBackend(BaseStorageBackend):
    """
    Dict-based backend. Enumeration follows insertion order; replacing a
    value keeps the key's original position.

    Thread-safety: not thread-safe. For concurrent use, wrap in a threading.Lock.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._store: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._store.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._store[key] = value

    def remove_item(self, key: str) -> None:
        self._store.pop(key, None)

    def clear(self) -> None:
        self._store.clear()

    def keys(self) -> List[str]:
        return list(self._store)

    @property
    def length(self) -> int:
        return len(self._store)

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"MemoryBackend(entries={len(self._store)})"
