"""
encrypt_storage.core.logger
===========================
Structured operation logger for the storage layer.
Entries are JSON-style dicts with a timestamp, the logger name,
a level and the operation performed.

Values, ciphertexts and secrets are never passed to this logger;
callers log keys and counts only.
"""

from __future__ import annotations

import json
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class StructuredLogger:
    """
    Records storage operations as structured dicts.

    Two output modes:
      console: also prints one formatted line per entry to stderr
      silent:  keeps entries in memory only (default)

    Usage
    -----
    logger = StructuredLogger(name="encrypt_storage", console=True)
    logger.log("set_item", key="user", encrypted=True)
    entries = logger.get_entries(operation="set_item")
    """

    def __init__(
        self,
        name: str = "encrypt_storage",
        console: bool = False,
        max_entries: int = 10_000,
    ):
        self.name        = name
        self.console     = console
        self.max_entries = max_entries
        self._entries: List[Dict[str, Any]] = []

    def log(
        self,
        operation: str,
        level: str = "INFO",
        **kwargs: Any,
    ) -> Dict[str, Any]:
        """
        Record a structured log entry.

        Parameters
        ----------
        operation : str
            Operation name (e.g. "set_item", "clear").
        level : str
            One of DEBUG / INFO / WARNING / ERROR.
        **kwargs
            Extra fields for the entry. Must not carry stored values.

        Returns
        -------
        dict
            The entry that was recorded.
        """
        if level not in _LEVELS:
            level = "INFO"

        entry = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "logger":    self.name,
            "level":     level,
            "operation": operation,
            **kwargs,
        }

        # Keep the newest half once the cap is hit
        if len(self._entries) >= self.max_entries:
            self._entries = self._entries[-(self.max_entries // 2):]

        self._entries.append(entry)

        if self.console:
            self._print_entry(entry)

        return entry

    def debug(self, operation: str, **kwargs: Any) -> Dict[str, Any]:
        return self.log(operation, level="DEBUG", **kwargs)

    def warn(self, operation: str, **kwargs: Any) -> Dict[str, Any]:
        return self.log(operation, level="WARNING", **kwargs)

    def error(self, operation: str, **kwargs: Any) -> Dict[str, Any]:
        return self.log(operation, level="ERROR", **kwargs)

    def get_entries(
        self,
        operation: Optional[str] = None,
        level: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """Return recorded entries, optionally filtered by operation and level."""
        entries = self._entries
        if operation:
            entries = [e for e in entries if e.get("operation") == operation]
        if level:
            entries = [e for e in entries if e.get("level") == level]
        return list(entries)

    def clear(self) -> None:
        self._entries.clear()

    def _print_entry(self, entry: Dict[str, Any]) -> None:
        ts  = entry.get("timestamp", "")[:19]
        lvl = entry.get("level", "INFO").ljust(7)
        op  = entry.get("operation", "")
        extras = {
            k: v for k, v in entry.items()
            if k not in ("timestamp", "logger", "level", "operation")
        }
        extra_str = " " + json.dumps(extras, default=str) if extras else ""
        print(
            f"[{ts}] {lvl} [{self.name}] {op}{extra_str}",
            file=sys.stderr,
            flush=True,
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return (
            f"StructuredLogger(name={self.name!r}, "
            f"entries={len(self._entries)}, "
            f"console={self.console})"
        )
