"""
encrypt_storage.storage.config.validator
========================================
Config validation. Raises ConfigError with descriptive messages
when a value has the wrong type or an unsupported value.
"""

from __future__ import annotations

from typing import Any, Dict

import regex

from encrypt_storage.core.data_types import StorageType
from encrypt_storage.core.exceptions import ConfigError


_KNOWN_FIELDS = {
    "storage_type", "prefix", "state_management_use",
    "algorithm", "skip_encryption", "notify_handler",
}
_BOOL_FIELDS = ("state_management_use", "skip_encryption")

# No whitespace, control characters or the namespace separator
_PREFIX_RE    = regex.compile(r"[^\s:\p{Cc}]*")
_ALGORITHM_RE = regex.compile(r"[A-Za-z][A-Za-z0-9_\-]*")


class ConfigValidator:
    """
    Validates a storage config dict.
    All fields are optional (defaults are applied in StorageConfig).
    """

    @staticmethod
    def validate(config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Validate the config dict. Returns the same dict if valid.
        Raises ConfigError if any value is invalid.
        """
        if not isinstance(config, dict):
            raise ConfigError(
                f"Config must be a dict, got {type(config).__name__}",
                details={"type": type(config).__name__},
            )

        unknown = set(config) - _KNOWN_FIELDS
        if unknown:
            raise ConfigError(
                f"Unknown config field(s): {sorted(unknown)}",
                details={"valid": sorted(_KNOWN_FIELDS)},
            )

        if "storage_type" in config:
            st = config["storage_type"]
            if not isinstance(st, str) or StorageType.normalize(st) not in StorageType.ALL:
                raise ConfigError(
                    f"Invalid storage_type: {st!r}",
                    details={"valid": list(StorageType.ALL) + sorted(StorageType.ALIASES)},
                )

        if "prefix" in config:
            p = config["prefix"]
            if p is not None:
                if not isinstance(p, str):
                    raise ConfigError(
                        f"prefix must be a string, got {type(p).__name__}"
                    )
                if not _PREFIX_RE.fullmatch(p):
                    raise ConfigError(
                        f"prefix may not contain whitespace, control characters or ':': {p!r}"
                    )

        if "algorithm" in config:
            a = config["algorithm"]
            if not isinstance(a, str) or not _ALGORITHM_RE.fullmatch(a):
                raise ConfigError(
                    f"Invalid algorithm name: {a!r}",
                    details={"expected": "letters, digits, '_' or '-', starting with a letter"},
                )

        for name in _BOOL_FIELDS:
            if name in config and not isinstance(config[name], bool):
                raise ConfigError(f"{name} must be a bool, got {config[name]!r}")

        handler = config.get("notify_handler")
        if handler is not None and not callable(handler):
            raise ConfigError(
                f"notify_handler must be callable, got {type(handler).__name__}"
            )

        return config
