"""
encrypt_storage
===============
Encrypted key-value storage with local and session scopes.

Values are encrypted before they reach the underlying store and
decrypted on the way back out, behind an interface that keeps the
store's own semantics (length, key enumeration, clear).
"""

__version__ = "1.0.0"
__author__ = "encrypt_storage contributors"

# Lazy import to avoid circular dependencies
def __getattr__(name):
    if name == "EncryptStorage":
        from encrypt_storage.storage import EncryptStorage
        return EncryptStorage
    raise AttributeError(f"module 'encrypt_storage' has no attribute {name!r}")


__all__ = [
    "__version__",
]
