"""
encrypt_storage.storage._core.namespacer
========================================
Maps logical keys to physical keys and back.

  physical = "{prefix}:{logical}"   when a prefix is configured
  physical = logical                otherwise

For a fixed prefix the mapping is injective, so several facades with
different prefixes can share one physical store.
"""

from __future__ import annotations


SEPARATOR = ":"


class KeyNamespacer:
    """Pure logical ↔ physical key mapping for one prefix."""

    def __init__(self, prefix: str = ""):
        self.prefix = prefix or ""
        self._marker = f"{self.prefix}{SEPARATOR}" if self.prefix else ""

    def to_physical_key(self, key: str) -> str:
        return f"{self._marker}{key}" if self.prefix else key

    @property
    def marker(self) -> str:
        """The "{prefix}:" string leading every key of this namespace, or "" without a prefix."""
        return self._marker

    def from_physical_key(self, physical_key: str) -> str:
        """Strip the leading "{prefix}:" marker. Keys without it are returned unchanged."""
        if self.prefix and physical_key.startswith(self._marker):
            return physical_key[len(self._marker):]
        return physical_key

    def __repr__(self) -> str:
        return f"KeyNamespacer(prefix={self.prefix!r})"
