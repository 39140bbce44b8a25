"""
encrypt_storage.storage.encrypt_storage
=======================================
EncryptStorage — the encrypted key-value facade.
Wires together the key namespacer, value codec, encryption capability,
physical store and notifier.

Every public call:
  1. resolves the physical key ("{prefix}:{key}")
  2. encodes + encrypts (write) or decrypts + decodes (read)
  3. delegates to the physical store
  4. emits one notification describing the logical operation

Public API:
  set_item(key, value, skip_encryption)                       → None
  get_item(key, skip_decryption)                              → value | None
  remove_item(key)                                            → None
  remove_item_from_pattern(pattern, exact)                    → None
  get_item_from_pattern(pattern, multiple, exact, skip_decryption)
                                                              → value | dict | None
  clear()                                                     → None
  key(index)                                                  → str | None
  length                                                      → int
  encrypt_string / decrypt_string / encrypt_value / decrypt_value
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from encrypt_storage.core.data_types import EventType
from encrypt_storage.core.exceptions import InvalidSecretKeyError
from encrypt_storage.core.logger import StructuredLogger
from encrypt_storage.storage._core import value_codec
from encrypt_storage.storage._core.backends.base_backend import BaseStorageBackend
from encrypt_storage.storage._core.backends.context import StorageContext, resolve_backend
from encrypt_storage.storage._core.crypto import Encryptation, get_encryptation
from encrypt_storage.storage._core.namespacer import KeyNamespacer
from encrypt_storage.storage._core.notifier import Notifier
from encrypt_storage.storage._core.pattern_matcher import match_keys
from encrypt_storage.storage.config.storage_config import StorageConfig


MIN_SECRET_LENGTH = 10


class EncryptStorage:
    """
    Encrypted wrapper around a local or session key-value store.

    Values are encrypted before they are written and decrypted when read.
    The interface follows the store's own: length, key(index), clear().

    Parameters
    ----------
    secret_key : str
        At least 10 characters. Handed to the encryption capability once;
        this object never keeps it.
    config : StorageConfig, dict, str, or None
        str  → preset name ("default", "session") or YAML file path
        dict → raw config dict
        None → defaults (local scope, no prefix, AES)
    context : StorageContext or None
        Stores to use. None → the installed default context, or no
        storage at all (every operation is a no-op returning defaults).
    console : bool
        Echo operation log entries to stderr.
    **overrides
        Config fields applied on top of `config`
        (prefix=, storage_type=, notify_handler=, ...).

    Usage
    -----
    storage = EncryptStorage("my-very-long-secret", prefix="app",
                             context=StorageContext.in_memory())
    storage.set_item("user", {"id": 1})
    storage.get_item("user")        # → {"id": 1}
    """

    def __init__(
        self,
        secret_key: str,
        config: Union[StorageConfig, str, Dict[str, Any], None] = None,
        *,
        context: Optional[StorageContext] = None,
        console: bool = False,
        **overrides: Any,
    ):
        if not isinstance(secret_key, str) or len(secret_key) < MIN_SECRET_LENGTH:
            raise InvalidSecretKeyError(
                details={"min_length": MIN_SECRET_LENGTH},
            )

        self._cfg = StorageConfig.load(config, **overrides)

        self._encryptation: Encryptation = get_encryptation(self._cfg.algorithm, secret_key)
        self._namespacer = KeyNamespacer(self._cfg.prefix)
        self._notifier   = Notifier(self._cfg.notify_handler)
        self._storage: BaseStorageBackend = resolve_backend(self._cfg.storage_type, context)
        self.logger      = StructuredLogger(name="encrypt_storage", console=console)

        self.logger.debug(
            "init",
            storage_type = self._cfg.storage_type,
            prefix       = self._cfg.prefix,
            algorithm    = self._encryptation.algorithm,
            backend      = type(self._storage).__name__,
        )

    @property
    def config(self) -> StorageConfig:
        return self._cfg

    @property
    def storage(self) -> BaseStorageBackend:
        """The physical store in use (NullBackend when no context is available)."""
        return self._storage

    # ── Store-compatible API ──────────────────────────────────────────────────

    @property
    def length(self) -> int:
        """Number of records in the physical store (all prefixes)."""
        value = self._storage.length
        self._notifier.emit(EventType.LENGTH, value=value)
        return value

    def __len__(self) -> int:
        return self.length

    def set_item(self, key: str, value: Any, skip_encryption: bool = False) -> None:
        """
        Encode, encrypt and store `value` under `key`.

        Parameters
        ----------
        key             : Logical key.
        value           : Any value; containers and scalars are stored as JSON.
        skip_encryption : Store the encoded value as plaintext for this call.
        """
        bypass = self._cfg.skip_encryption or skip_encryption
        encoded = value_codec.encode(value)
        record = encoded if bypass else self._encryptation.encrypt(encoded)

        self._storage.set_item(self._namespacer.to_physical_key(key), record)

        self.logger.log("set_item", key=key, encrypted=not bypass)
        self._notifier.emit(EventType.SET, key=key, value=encoded)

    def get_item(self, key: str, skip_decryption: bool = False) -> Any:
        """
        Read, decrypt and decode the value stored under `key`.

        Returns
        -------
        Any
            The decoded value; the decrypted string itself in state-management
            mode or when it is not JSON; None when the key is absent.

        Raises
        ------
        DecryptionError
            If the stored record cannot be decrypted with this secret.
        """
        bypass = self._cfg.skip_encryption or skip_decryption
        record = self._storage.get_item(self._namespacer.to_physical_key(key))

        if record is None:
            self.logger.debug("get_item", key=key, found=False)
            self._notifier.emit(EventType.GET, key=key, value=None)
            return None

        plaintext = record if bypass else self._encryptation.decrypt(record)
        value = value_codec.decode(plaintext, self._cfg.state_management_use)

        self.logger.debug("get_item", key=key, found=True, decrypted=not bypass)
        self._notifier.emit(EventType.GET, key=key, value=value)
        return value

    def remove_item(self, key: str) -> None:
        """Delete `key`. Absent keys are ignored."""
        self._storage.remove_item(self._namespacer.to_physical_key(key))
        self.logger.log("remove_item", key=key)
        self._notifier.emit(EventType.REMOVE, key=key)

    def clear(self) -> None:
        """Delete every record in the physical store, across all prefixes."""
        self._storage.clear()
        self.logger.log("clear")
        self._notifier.emit(EventType.CLEAR)

    def key(self, index: int) -> Optional[str]:
        """
        Return the physical (prefixed) key at `index` in store order,
        or None if out of range.
        """
        value = self._storage.key(index)
        self._notifier.emit(EventType.KEY, index=index, value=value)
        return value

    # ── Pattern operations ────────────────────────────────────────────────────

    def remove_item_from_pattern(self, pattern: str, *, exact: bool = False) -> None:
        """
        Delete every record whose key matches `pattern`.

        exact=False → substring match (restricted to this prefix, if any)
        exact=True  → only the record for logical key `pattern`

        One `remove` event lists the logical keys before deletion.
        Nothing is emitted when no key matches.
        """
        matched = match_keys(self._storage.keys(), pattern, self._namespacer, exact)
        if not matched:
            self.logger.debug("remove_item_from_pattern", pattern=pattern, count=0)
            return

        logical_keys = [self._namespacer.from_physical_key(k) for k in matched]
        self._notifier.emit(EventType.REMOVE, key=logical_keys)

        for physical_key in matched:
            self._storage.remove_item(physical_key)

        self.logger.log("remove_item_from_pattern", pattern=pattern, count=len(matched))

    def get_item_from_pattern(
        self,
        pattern: str,
        *,
        multiple: bool = True,
        exact: bool = False,
        skip_decryption: bool = False,
    ) -> Any:
        """
        Read the records whose keys match `pattern`.

        Parameters
        ----------
        pattern         : Substring (or logical key with exact=True).
        multiple        : Return {logical_key: value} for every match.
                          False → value of the first match in store order.
        exact           : Equality instead of substring matching.
        skip_decryption : Read the matched records as plaintext.

        Returns
        -------
        dict, value, or None
            None when no key matches.
        """
        matched = match_keys(self._storage.keys(), pattern, self._namespacer, exact)
        if not matched:
            self.logger.debug("get_item_from_pattern", pattern=pattern, count=0)
            return None

        if not multiple:
            return self.get_item(
                self._namespacer.from_physical_key(matched[0]), skip_decryption
            )

        bypass = self._cfg.skip_encryption or skip_decryption
        values: Dict[str, Any] = {}
        for physical_key in matched:
            logical_key = self._namespacer.from_physical_key(physical_key)
            values[logical_key] = self._read(physical_key, bypass)

        self.logger.debug("get_item_from_pattern", pattern=pattern, count=len(values))
        self._notifier.emit(EventType.GET, key=list(values), value=values)
        return values

    # ── Out-of-band crypto helpers ────────────────────────────────────────────

    def encrypt_string(self, value: str) -> str:
        """Encrypt a raw string. No storage access, no notification."""
        return self._encryptation.encrypt(value)

    def decrypt_string(self, value: str) -> str:
        """Decrypt a string produced by encrypt_string()."""
        return self._encryptation.decrypt(value)

    def encrypt_value(self, value: Any) -> str:
        """JSON-serialize, then encrypt."""
        return self._encryptation.encrypt(value_codec.to_json(value))

    def decrypt_value(self, value: str) -> Any:
        """
        Decrypt, then JSON-parse.

        Raises
        ------
        DecryptionError
            If the ciphertext cannot be decrypted.
        ValueError
            If the plaintext is not JSON.
        """
        return value_codec.from_json(self._encryptation.decrypt(value))

    # ── Internals ─────────────────────────────────────────────────────────────

    def _read(self, physical_key: str, bypass: bool) -> Any:
        """get_item() without namespacing or notification."""
        record = self._storage.get_item(physical_key)
        if record is None:
            return None
        plaintext = record if bypass else self._encryptation.decrypt(record)
        return value_codec.decode(plaintext, self._cfg.state_management_use)

    def __repr__(self) -> str:
        return (
            f"EncryptStorage(storage_type={self._cfg.storage_type!r}, "
            f"prefix={self._cfg.prefix!r}, "
            f"algorithm={self._encryptation.algorithm!r}, "
            f"backend={type(self._storage).__name__})"
        )
