"""Encryption capabilities package."""
from encrypt_storage.storage._core.crypto.base_cipher import Encryptation
from encrypt_storage.storage._core.crypto.registry import (
    available_algorithms, get_encryptation, register_encryptation
)

__all__ = [
    "Encryptation",
    "available_algorithms",
    "get_encryptation",
    "register_encryptation",
]
