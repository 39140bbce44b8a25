"""
encrypt_storage.storage._core.backends.context
==============================================
Host storage context: the pair of stores (local, session) that a
facade picks from by its configured storage_type.

A process may install one default context. Facades built without an
explicit context use it; when none is installed they fall back to
NullBackend and every operation becomes a no-op.
"""

from __future__ import annotations

import os
from typing import Optional

from encrypt_storage.core.data_types import StorageType
from encrypt_storage.core.exceptions import ConfigError
from encrypt_storage.storage._core.backends.base_backend import BaseStorageBackend
from encrypt_storage.storage._core.backends.file_backend import FileBackend
from encrypt_storage.storage._core.backends.memory_backend import MemoryBackend
from encrypt_storage.storage._core.backends.null_backend import NullBackend


LOCAL_STORE_FILENAME = "local_storage.json"


class StorageContext:
    """
    Holds one backend per storage scope.

    Usage
    -----
    ctx = StorageContext.from_directory("~/.myapp")   # local on disk
    ctx = StorageContext.in_memory()                  # both in memory
    storage = EncryptStorage("a-long-secret", context=ctx)
    """

    def __init__(
        self,
        local: Optional[BaseStorageBackend] = None,
        session: Optional[BaseStorageBackend] = None,
    ):
        self.local   = local if local is not None else MemoryBackend()
        self.session = session if session is not None else MemoryBackend()

    @classmethod
    def in_memory(cls) -> "StorageContext":
        return cls(local=MemoryBackend(), session=MemoryBackend())

    @classmethod
    def from_directory(cls, directory) -> "StorageContext":
        """Local scope persisted as JSON under `directory`; session scope in memory."""
        directory = os.path.expanduser(os.fspath(directory))
        return cls(
            local=FileBackend(os.path.join(directory, LOCAL_STORE_FILENAME)),
            session=MemoryBackend(),
        )

    def get(self, storage_type: str) -> BaseStorageBackend:
        """Return the backend for a scope name (aliases accepted)."""
        scope = StorageType.normalize(storage_type)
        if scope == StorageType.LOCAL:
            return self.local
        if scope == StorageType.SESSION:
            return self.session
        raise ConfigError(
            f"Invalid storage_type: {storage_type!r}",
            details={"valid": list(StorageType.ALL)},
        )

    def __repr__(self) -> str:
        return f"StorageContext(local={self.local!r}, session={self.session!r})"


_default_context: Optional[StorageContext] = None


def set_default_context(context: Optional[StorageContext]) -> None:
    """Install (or with None, remove) the process-wide default context."""
    global _default_context
    _default_context = context


def get_default_context() -> Optional[StorageContext]:
    return _default_context


def resolve_backend(
    storage_type: str,
    context: Optional[StorageContext] = None,
) -> BaseStorageBackend:
    """
    Pick the physical store for a facade.
    Explicit context first, then the installed default, then NullBackend.
    """
    ctx = context if context is not None else _default_context
    if ctx is None:
        return NullBackend()
    return ctx.get(storage_type)
