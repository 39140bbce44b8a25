"""
encrypt_storage.storage._core.notifier
======================================
Reports every storage access as an event dict to an optional handler.

Event shape:
  {"type": "length" | "set" | "get" | "remove" | "clear" | "key",
   "key"?:   str | list[str],
   "value"?: Any,
   "index"?: int}

Events are delivered synchronously and are never stored. With no
handler they are dropped. The handler must not call back into the
facade that is notifying it.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from encrypt_storage.core.data_types import EventType


NotifyHandler = Callable[[Dict[str, Any]], None]

_UNSET = object()


class Notifier:
    """
    Stateless dispatcher around an optional handler.

    Usage
    -----
    notifier = Notifier(print)
    notifier.emit(EventType.SET, key="user", value='{"id":1}')
    """

    def __init__(self, handler: Optional[NotifyHandler] = None):
        if handler is not None and not callable(handler):
            raise TypeError(f"notify_handler must be callable, got {type(handler).__name__}")
        self._handler = handler

    @property
    def enabled(self) -> bool:
        return self._handler is not None

    def emit(
        self,
        event_type: str,
        key: Any = _UNSET,
        value: Any = _UNSET,
        index: Any = _UNSET,
    ) -> None:
        """
        Build the event dict and hand it to the handler.
        Fields left unset are omitted from the event; an explicit None is kept.
        """
        if self._handler is None:
            return

        event: Dict[str, Any] = {"type": event_type}
        if key is not _UNSET:
            event["key"] = key
        if value is not _UNSET:
            event["value"] = value
        if index is not _UNSET:
            event["index"] = index

        self._handler(event)


__all__ = ["EventType", "Notifier", "NotifyHandler"]
