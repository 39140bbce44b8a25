"""Abstract encryption capability interface."""
from __future__ import annotations

import hashlib
from abc import ABC, abstractmethod


# PBKDF2 parameters shared by the bundled capabilities
KDF_ITERATIONS = 100_000
KEY_LENGTH     = 32


def derive_key(secret: str, salt: bytes) -> bytes:
    """
    Derive a 32-byte symmetric key from the secret with PBKDF2-HMAC-SHA256.
    Deterministic for a given (secret, salt): two instances built from the
    same secret can read each other's records.
    """
    return hashlib.pbkdf2_hmac(
        hash_name  = "sha256",
        password   = secret.encode("utf-8"),
        salt       = salt,
        iterations = KDF_ITERATIONS,
        dklen      = KEY_LENGTH,
    )


class Encryptation(ABC):
    """
    Symmetric string encryption bound to one secret.

    Implementations receive the secret once in __init__ and must not
    keep it around after deriving their key material.

    Both methods work on text: ciphertexts are ASCII strings so they can
    be written to any string-valued store.
    """

    #: Registry name, set by subclasses
    algorithm: str = ""

    @abstractmethod
    def __init__(self, secret: str) -> None:
        ...

    @abstractmethod
    def encrypt(self, plaintext: str) -> str:
        """Return the ciphertext for plaintext."""
        ...

    @abstractmethod
    def decrypt(self, ciphertext: str) -> str:
        """
        Return the plaintext for ciphertext.

        Raises
        ------
        DecryptionError
            If the ciphertext was not produced with this secret and algorithm.
        """
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}(algorithm={self.algorithm!r})"
