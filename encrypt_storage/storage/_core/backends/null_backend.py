"""Null-object backend used when no storage context is available."""
from __future__ import annotations

from typing import List, Optional

from encrypt_storage.storage._core.backends.base_backend import BaseStorageBackend


class NullBackend(BaseStorageBackend):
    """
    Stores nothing. Reads return None, writes are dropped, length is 0.

    Lets EncryptStorage run outside a host that provides storage
    (scripts, tests, server-side rendering) without branching on every call.
    """

    def get_item(self, key: str) -> Optional[str]:
        return None

    def set_item(self, key: str, value: str) -> None:
        pass

    def remove_item(self, key: str) -> None:
        pass

    def clear(self) -> None:
        pass

    def keys(self) -> List[str]:
        return []

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NullBackend()"
