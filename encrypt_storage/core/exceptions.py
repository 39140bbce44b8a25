"""
encrypt_storage.core.exceptions
===============================
All custom exceptions for the encrypt_storage package.
"""


class EncryptStorageError(Exception):
    """Base class for all encrypt_storage exceptions."""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} [{detail_str}]"
        return self.message


class ConfigError(EncryptStorageError):
    """
    Raised when a configuration is invalid, missing required fields,
    or contains unsupported values.
    """
    pass


class InvalidSecretKeyError(ConfigError):
    """
    Raised at construction when the secret key is too short.
    Nothing is built and no store is touched before this check.
    """
    def __init__(self, message: str = None, details: dict = None):
        super().__init__(
            message or "Invalid secret key: must contain at least 10 characters",
            details,
        )


class UnsupportedAlgorithmError(ConfigError):
    """Raised when no encryption capability is registered under a name."""
    pass


class DecryptionError(EncryptStorageError):
    """
    Raised when a ciphertext cannot be opened.

    Causes:
      - The value was encrypted with a different secret or algorithm
      - The stored record was tampered with
      - The stored record is not a ciphertext at all (e.g. written with
        encryption skipped, then read without skipping decryption)
    """
    pass


class BackendError(EncryptStorageError):
    """Raised when a storage backend cannot read or write its data."""
    pass
