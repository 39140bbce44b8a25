"""
encrypt_storage.storage._core.crypto.registry
=============================================
Selects an encryption capability by algorithm name.
Names are matched case-insensitively.
"""

from __future__ import annotations

from typing import Dict, List, Type

from encrypt_storage.core.exceptions import UnsupportedAlgorithmError
from encrypt_storage.storage._core.crypto.base_cipher import Encryptation
from encrypt_storage.storage._core.crypto.aead_ciphers import (
    AESEncryptation, ChaCha20Encryptation
)
from encrypt_storage.storage._core.crypto.fernet_cipher import FernetEncryptation


_REGISTRY: Dict[str, Type[Encryptation]] = {
    "aes":      AESEncryptation,
    "chacha20": ChaCha20Encryptation,
    "fernet":   FernetEncryptation,
}


def register_encryptation(name: str, cls: Type[Encryptation]) -> None:
    """
    Make a custom capability selectable through config.algorithm.
    Registering an existing name replaces it.
    """
    if not (isinstance(cls, type) and issubclass(cls, Encryptation)):
        raise TypeError(f"{cls!r} is not an Encryptation subclass")
    _REGISTRY[name.lower()] = cls


def available_algorithms() -> List[str]:
    return sorted(_REGISTRY)


def get_encryptation(algorithm: str, secret: str) -> Encryptation:
    """
    Instantiate the capability registered under `algorithm`, bound to `secret`.

    Raises
    ------
    UnsupportedAlgorithmError
        If no capability is registered under that name.
    """
    cls = _REGISTRY.get(algorithm.lower())
    if cls is None:
        raise UnsupportedAlgorithmError(
            f"Unsupported encryption algorithm: {algorithm!r}",
            details={"valid": available_algorithms()},
        )
    return cls(secret)
