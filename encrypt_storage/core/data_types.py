"""
encrypt_storage.core.data_types
===============================
Constants shared across the storage layer.
"""

from __future__ import annotations


# ── Enums (as string constants for simplicity / no extra import) ──────────────

class EventType:
    """Tag carried in the "type" field of every notification event."""
    LENGTH = "length"
    SET    = "set"
    GET    = "get"
    REMOVE = "remove"
    CLEAR  = "clear"
    KEY    = "key"

    ALL = (LENGTH, SET, GET, REMOVE, CLEAR, KEY)


class StorageType:
    """Scope of the physical store a facade writes to."""
    LOCAL   = "local"
    SESSION = "session"

    ALL = (LOCAL, SESSION)

    # Browser-style names accepted in config files
    ALIASES = {
        "localStorage":   LOCAL,
        "sessionStorage": SESSION,
    }

    @classmethod
    def normalize(cls, name: str) -> str:
        """Map an alias to its canonical scope name. Unknown names pass through."""
        return cls.ALIASES.get(name, name)
