"""
Exception taxonomy raised by LocalStore.
"""

from enum import Enum


class ErrorMessages(str, Enum):
    """Fixed messages callers can assert on."""

    STORE_READ_ONLY   = ("Cannot execute Store because ReadOnly mode "
                         "is explicitly enabled.")
    PERSIST_READ_ONLY = ("Cannot execute Persist because ReadOnly mode "
                         "is explicitly enabled.")
    MISSING_CONFIG    = "A LocalStorageConfiguration is required."
    MISSING_PASSWORD  = ("When enable_encryption is enabled, a password is "
                         "required when initializing the LocalStorage.")


class LocalStorageError(Exception):
    """Base class for every error raised by LocalStore."""


class ConfigError(LocalStorageError):
    """Missing/invalid configuration, or encryption without a password."""


class ValidationError(LocalStorageError):
    """Empty key or absent value passed to store()."""


class ReadOnlyError(LocalStorageError):
    """A write was attempted while read-only mode is enabled."""


class NotFoundError(LocalStorageError):
    """The requested key is not in the store."""

    def __init__(self, key: str):
        super().__init__(f"Could not find key '{key}' in the LocalStorage.")
        self.key = key


class DeserializationError(LocalStorageError):
    """Stored text could not be decoded into the requested type."""


class CryptoError(LocalStorageError):
    """Malformed ciphertext, or key-derivation/cipher failure."""
