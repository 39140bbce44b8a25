"""encrypt_storage.core — Foundation layer shared by all storage modules."""

from encrypt_storage.core.data_types import EventType, StorageType
from encrypt_storage.core.exceptions import (
    EncryptStorageError,
    ConfigError,
    InvalidSecretKeyError,
    UnsupportedAlgorithmError,
    DecryptionError,
    BackendError,
)
from encrypt_storage.core.config_loader import load_config
from encrypt_storage.core.logger import StructuredLogger

__all__ = [
    "EventType",
    "StorageType",
    "EncryptStorageError",
    "ConfigError",
    "InvalidSecretKeyError",
    "UnsupportedAlgorithmError",
    "DecryptionError",
    "BackendError",
    "load_config",
    "StructuredLogger",
]
