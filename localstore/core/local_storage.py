"""
File-backed key-value store with optional AES encryption.

The whole store lives in memory and is written to, or read from, a
single file on demand. Values are JSON-encoded on the way in and
decoded into the caller's requested type on the way out.
"""

import logging
import threading
from typing import Any, Callable

from ..config.settings import LocalStorageConfiguration
from ..utils.file_helpers import (
    get_local_store_file_path, atomic_write_text, read_text, delete_file,
)
from .codec import JsonCodec
from .crypto_engine import PasswordCipher
from .errors import (
    ConfigError, ValidationError, ReadOnlyError, NotFoundError, ErrorMessages,
)
from .query import filter_collection
from .store import Store

logger = logging.getLogger("LocalStore.Storage")

_DEFAULT = object()


class LocalStorage:
    """
    A simple and lightweight store for persisting data in Python apps.

    Use it as a context manager so the latest state is persisted on
    exit when ``auto_persist`` is enabled::

        with LocalStorage() as storage:
            storage.store("greeting", "hello")

    Store/remove/clear are not synchronised; share an instance between
    threads only behind your own lock. persist() and unpersist() are
    serialised per instance.
    """

    def __init__(self, config: LocalStorageConfiguration | None = _DEFAULT,
                 password: str = ""):
        if config is _DEFAULT:
            config = LocalStorageConfiguration()
        if not isinstance(config, LocalStorageConfiguration):
            raise ConfigError(ErrorMessages.MISSING_CONFIG.value)

        self._config = config
        self._cipher: PasswordCipher | None = None
        if config.enable_encryption:
            if not password:
                raise ConfigError(ErrorMessages.MISSING_PASSWORD.value)
            if not config.encryption_salt:
                raise ConfigError("encryption_salt must not be empty")
            self._cipher = PasswordCipher(password, config.encryption_salt)

        self._codec     = JsonCodec(config.serializer_settings)
        self._storage   = Store()
        self._file_lock = threading.Lock()
        self._closed    = False

        if config.auto_unpersist:
            self.unpersist()

    # ── properties ───────────────────────────────────────────────
    @property
    def config(self) -> LocalStorageConfiguration:
        return self._config

    @property
    def count(self) -> int:
        return self._storage.count()

    @property
    def filepath(self) -> str:
        return get_local_store_file_path(
            self._config.filename, self._config.directory
        )

    def __len__(self) -> int:
        return self._storage.count()

    # ── in-memory operations ─────────────────────────────────────
    def store(self, key: str, value: Any):
        """Serialize *value* and keep it under *key*, replacing any previous value."""
        if not isinstance(key, str) or not key:
            raise ValidationError("key must be a non-empty string")
        try:
            key.encode("utf-8")
        except UnicodeEncodeError as exc:
            raise ValidationError("key must be encodable as UTF-8") from exc
        if value is None:
            raise ValidationError("value must not be None")
        if self._config.read_only_mode:
            raise ReadOnlyError(ErrorMessages.STORE_READ_ONLY.value)

        raw = self._codec.encode(value)
        if self._cipher is not None:
            raw = self._cipher.encrypt(raw)
        self._storage.set(key, raw)

    def load(self, key: str, type_: Any = Any) -> Any:
        """
        Return the value stored under *key*, decoded as *type_*.

        Raises NotFoundError when the key is absent and
        DeserializationError when the stored text does not fit *type_*.
        """
        return self._codec.decode(self._read_raw(key), type_)

    def load_untyped(self, key: str) -> Any:
        """Return the value under *key* as plain JSON data (dict, list, str …)."""
        return self._codec.decode_untyped(self._read_raw(key))

    def query(self, key: str, item_type: Any = Any,
              predicate: Callable[[Any], bool] | None = None) -> list:
        """Load the collection under *key* and keep the items matching *predicate*."""
        collection = self.load(key, list[item_type])
        return filter_collection(collection, predicate)

    def exists(self, key: str) -> bool:
        return self._storage.contains(key)

    def remove(self, key: str):
        self._storage.remove(key)

    def clear(self):
        """Empty the in-memory store; the file on disk is left alone."""
        self._storage.clear()

    def keys(self) -> list[str]:
        return self._storage.keys()

    def _read_raw(self, key: str) -> str:
        raw = self._storage.get(key)
        if raw is None:
            raise NotFoundError(key)
        if self._cipher is not None:
            raw = self._cipher.decrypt(raw)
        return raw

    # ── file lifecycle ───────────────────────────────────────────
    def persist(self):
        """Write the entire store to the backing file."""
        if self._config.read_only_mode:
            raise ReadOnlyError(ErrorMessages.PERSIST_READ_ONLY.value)

        document = self._codec.encode_document(self._storage.to_dict())
        path     = self.filepath
        with self._file_lock:
            atomic_write_text(path, document)
        logger.debug("Persisted %d keys to %s", self.count, path)

    def unpersist(self):
        """
        Replace the in-memory store with the backing file's contents.

        Does nothing when the file is missing or blank.
        """
        path = self.filepath
        with self._file_lock:
            content = read_text(path)

        if content is None or not content.strip():
            logger.debug("Nothing to load from %s", path)
            return

        self._storage = Store.from_dict(self._codec.decode_document(content))
        logger.debug("Loaded %d keys from %s", self.count, path)

    def destroy(self):
        """Delete the backing file, keeping the in-memory store intact."""
        path = self.filepath
        with self._file_lock:
            deleted = delete_file(path)
        if deleted:
            logger.info("Deleted %s", path)

    # ── teardown ─────────────────────────────────────────────────
    def close(self):
        """
        Persist once when auto_persist is enabled; later calls do nothing.

        A read-only instance never writes, so it deliberately skips the
        final persist instead of raising ReadOnlyError the way persist()
        does; raising here would mask any exception leaving a `with` block.
        """
        if self._closed:
            return
        self._closed = True
        if self._config.auto_persist and not self._config.read_only_mode:
            self.persist()

    def __enter__(self) -> "LocalStorage":
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
