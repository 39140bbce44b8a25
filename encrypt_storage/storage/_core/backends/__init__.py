"""Storage backends package."""
from encrypt_storage.storage._core.backends.base_backend   import BaseStorageBackend
from encrypt_storage.storage._core.backends.memory_backend import MemoryBackend
from encrypt_storage.storage._core.backends.file_backend   import FileBackend
from encrypt_storage.storage._core.backends.null_backend   import NullBackend
from encrypt_storage.storage._core.backends.context import (
    StorageContext, get_default_context, resolve_backend, set_default_context
)

__all__ = [
    "BaseStorageBackend",
    "MemoryBackend",
    "FileBackend",
    "NullBackend",
    "StorageContext",
    "get_default_context",
    "resolve_backend",
    "set_default_context",
]
