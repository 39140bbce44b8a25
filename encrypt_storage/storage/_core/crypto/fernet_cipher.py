"""Fernet capability (AES-128-CBC + HMAC-SHA256, timestamped tokens)."""
from __future__ import annotations

import base64

from cryptography.fernet import Fernet, InvalidToken

from encrypt_storage.core.exceptions import DecryptionError
from encrypt_storage.storage._core.crypto.base_cipher import Encryptation, derive_key


class FernetEncryptation(Encryptation):
    algorithm = "Fernet"
    _salt     = b"encrypt_storage/fernet"

    def __init__(self, secret: str) -> None:
        self._fernet = Fernet(base64.urlsafe_b64encode(derive_key(secret, self._salt)))

    def encrypt(self, plaintext: str) -> str:
        return self._fernet.encrypt(plaintext.encode("utf-8")).decode("ascii")

    def decrypt(self, ciphertext: str) -> str:
        try:
            return self._fernet.decrypt(ciphertext.encode("utf-8")).decode("utf-8")
        except (InvalidToken, ValueError) as exc:
            raise DecryptionError(
                "Fernet decryption failed",
                details={"reason": type(exc).__name__},
            ) from exc
