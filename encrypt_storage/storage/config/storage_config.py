"""
encrypt_storage.storage.config.storage_config
=============================================
StorageConfig: the immutable settings of one EncryptStorage instance.
Can be built from:
  - A preset name string ("default", "session")
  - A YAML file path
  - A raw dict
plus keyword overrides applied on top.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Optional, Union

from encrypt_storage.core.config_loader import load_config
from encrypt_storage.core.data_types import StorageType
from encrypt_storage.storage._core.notifier import NotifyHandler
from encrypt_storage.storage.config.validator import ConfigValidator


@dataclass(frozen=True)
class StorageConfig:
    """
    Typed, frozen configuration for EncryptStorage.

    Attributes:
        storage_type         : "local" or "session" (browser aliases
                               "localStorage"/"sessionStorage" accepted).
        prefix               : Namespace prepended to every key as "{prefix}:".
        state_management_use : Return decrypted strings without JSON parsing.
        algorithm            : Name of the encryption capability.
        skip_encryption      : Store and read plaintext for every call.
        notify_handler       : Optional callback(event_dict) for every access.

    Usage
    -----
    cfg = StorageConfig.load("session")
    cfg = StorageConfig.load({"prefix": "app"}, notify_handler=print)
    cfg = StorageConfig.load("/etc/myapp/storage.yaml")
    """

    storage_type:         str  = StorageType.LOCAL
    prefix:               str  = ""
    state_management_use: bool = False
    algorithm:            str  = "AES"
    skip_encryption:      bool = False
    notify_handler:       Optional[NotifyHandler] = None

    def __post_init__(self):
        object.__setattr__(self, "storage_type", StorageType.normalize(self.storage_type))
        object.__setattr__(self, "prefix", self.prefix or "")
        ConfigValidator.validate(self.to_dict())

    @classmethod
    def load(
        cls,
        source: Union["StorageConfig", str, Dict[str, Any], None] = None,
        **overrides: Any,
    ) -> "StorageConfig":
        """
        Resolve `source` to a StorageConfig and apply keyword overrides.

        Raises
        ------
        ConfigError
            If the source cannot be loaded or a value is invalid.
        """
        if isinstance(source, cls):
            if not overrides:
                return source
            ConfigValidator.validate(overrides)
            return replace(source, **overrides)

        raw = dict(load_config(source))
        raw.update(overrides)
        ConfigValidator.validate(raw)
        return cls(**raw)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def __repr__(self) -> str:
        return (
            f"StorageConfig(storage_type={self.storage_type!r}, "
            f"prefix={self.prefix!r}, algorithm={self.algorithm!r}, "
            f"state_management_use={self.state_management_use}, "
            f"skip_encryption={self.skip_encryption})"
        )
