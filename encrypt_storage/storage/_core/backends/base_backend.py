"""Abstract physical store interface."""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List, Optional


class BaseStorageBackend(ABC):
    """
    Abstract interface that every physical key-value store must implement.

    A backend is a plain string → string map with an enumeration order
    (typically insertion order). It never sees plaintext when encryption
    is on: encryption/decryption is handled by the caller (EncryptStorage).

    Keys passed in are physical keys, already namespaced by the caller.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored string, or None if the key is absent."""
        ...

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Create or replace the record at key."""
        ...

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete the record at key. No-op if absent."""
        ...

    @abstractmethod
    def clear(self) -> None:
        """Delete every record."""
        ...

    @abstractmethod
    def keys(self) -> List[str]:
        """Return a snapshot of all keys in enumeration order."""
        ...

    @property
    def length(self) -> int:
        return len(self.keys())

    def key(self, index: int) -> Optional[str]:
        """Return the key at `index` in enumeration order, or None if out of range."""
        keys = self.keys()
        if 0 <= index < len(keys):
            return keys[index]
        return None

    def close(self) -> None:
        """Optional: release any resources (file handles, connections)."""
        pass
