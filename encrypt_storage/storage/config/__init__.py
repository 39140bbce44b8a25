"""Config package init."""
from encrypt_storage.storage.config.storage_config import StorageConfig
from encrypt_storage.storage.config.validator import ConfigValidator
__all__ = ["StorageConfig", "ConfigValidator"]
