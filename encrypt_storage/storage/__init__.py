"""
encrypt_storage.storage — THE BOUNDARY FILE
===========================================
Package boundary. Exports the public API only.
Everything inside _core/ is private and should NOT be imported directly.

PUBLIC API:
  EncryptStorage         — the encrypted key-value facade
  StorageConfig          — frozen config (preset / YAML / dict)
  StorageContext         — local + session stores of the host
  set_default_context    — install the process-wide StorageContext
  get_default_context    — read it back
  BaseStorageBackend     — base class for custom physical stores
  MemoryBackend          — in-memory store
  FileBackend            — JSON file store
  Encryptation           — base class for custom encryption capabilities
  register_encryptation  — make a custom capability selectable by name
  EventType              — notification event type tags
  InvalidSecretKeyError  — secret shorter than 10 characters
  DecryptionError        — ciphertext could not be opened
  ConfigError            — invalid configuration
"""

from encrypt_storage.storage.encrypt_storage import EncryptStorage
from encrypt_storage.storage.config.storage_config import StorageConfig
from encrypt_storage.storage._core.backends import (
    BaseStorageBackend,
    FileBackend,
    MemoryBackend,
    StorageContext,
    get_default_context,
    set_default_context,
)
from encrypt_storage.storage._core.crypto import (
    Encryptation,
    available_algorithms,
    register_encryptation,
)
from encrypt_storage.core.data_types import EventType, StorageType
from encrypt_storage.core.exceptions import (
    ConfigError,
    DecryptionError,
    InvalidSecretKeyError,
)


# ── Public exports ────────────────────────────────────────────────────────────

__all__ = [
    "EncryptStorage",
    "StorageConfig",
    "StorageContext",
    "set_default_context",
    "get_default_context",
    "BaseStorageBackend",
    "MemoryBackend",
    "FileBackend",
    "Encryptation",
    "available_algorithms",
    "register_encryptation",
    "EventType",
    "StorageType",
    "ConfigError",
    "DecryptionError",
    "InvalidSecretKeyError",
]
