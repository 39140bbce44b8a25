"""
encrypt_storage.storage._core.crypto.aead_ciphers
=================================================
AEAD capabilities from the `cryptography` package.

Ciphertext format: base64( nonce (12 bytes) + ciphertext + tag )
A fresh random nonce is drawn for every encrypt() call, so encrypting
the same plaintext twice yields different ciphertexts.
"""

from __future__ import annotations

import base64
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM, ChaCha20Poly1305

from encrypt_storage.core.exceptions import DecryptionError
from encrypt_storage.storage._core.crypto.base_cipher import Encryptation, derive_key


_NONCE_SIZE = 12


class _AeadEncryptation(Encryptation):
    """Shared framing for the 96-bit nonce AEAD ciphers."""

    _aead_class = None
    _salt: bytes = b""

    def __init__(self, secret: str) -> None:
        self._aead = self._aead_class(derive_key(secret, self._salt))

    def encrypt(self, plaintext: str) -> str:
        nonce = os.urandom(_NONCE_SIZE)
        ct    = self._aead.encrypt(nonce, plaintext.encode("utf-8"), None)
        return base64.b64encode(nonce + ct).decode("ascii")

    def decrypt(self, ciphertext: str) -> str:
        try:
            raw = base64.b64decode(ciphertext, validate=True)
            nonce, ct = raw[:_NONCE_SIZE], raw[_NONCE_SIZE:]
            return self._aead.decrypt(nonce, ct, None).decode("utf-8")
        except (InvalidTag, ValueError) as exc:
            raise DecryptionError(
                f"{self.algorithm} decryption failed",
                details={"reason": type(exc).__name__},
            ) from exc


class AESEncryptation(_AeadEncryptation):
    """AES-256-GCM. Default capability."""
    algorithm   = "AES"
    _aead_class = AESGCM
    _salt       = b"encrypt_storage/aes-256-gcm"


class ChaCha20Encryptation(_AeadEncryptation):
    """ChaCha20-Poly1305."""
    algorithm   = "ChaCha20"
    _aead_class = ChaCha20Poly1305
    _salt       = b"encrypt_storage/chacha20-poly1305"
